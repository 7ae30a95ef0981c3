"""
Record (dict) transformation functions.

Every function returns a new dict; the input record is never mutated, so
the same record can be fed through several pipelines.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from transproc.functions import Functions


class Records(Functions):
    def rename_keys(record: Mapping, mapping: Mapping[Hashable, Hashable]) -> dict:
        """Rename keys present in ``mapping``; other keys are kept as-is.

        Example: ``rename_keys({"id": 1}, {"id": "user_id"})`` ->
        ``{"user_id": 1}``
        """
        return {mapping.get(key, key): value for key, value in record.items()}

    def accept_keys(record: Mapping, keys: Iterable[Hashable]) -> dict:
        """Keep only ``keys``."""
        wanted = set(keys)
        return {key: value for key, value in record.items() if key in wanted}

    def reject_keys(record: Mapping, keys: Iterable[Hashable]) -> dict:
        """Drop ``keys``."""
        unwanted = set(keys)
        return {key: value for key, value in record.items() if key not in unwanted}

    def map_value(record: Mapping, key: Hashable, fn: Callable[[Any], Any]) -> dict:
        """Apply ``fn`` to the value under ``key``. A missing key is left missing."""
        result = dict(record)
        if key in result:
            result[key] = fn(result[key])
        return result

    def nest(record: Mapping, root: Hashable, keys: Iterable[Hashable]) -> dict:
        """Move ``keys`` into a nested dict stored under ``root``.

        Example: ``nest({"a": 1, "b": 2, "c": 3}, "inner", ["b", "c"])`` ->
        ``{"a": 1, "inner": {"b": 2, "c": 3}}``

        Keys not present in the record are skipped. The nested dict is
        always created, even when empty.
        """
        keys = list(keys)
        result = {key: value for key, value in record.items() if key not in keys}
        result[root] = {key: record[key] for key in keys if key in record}
        return result

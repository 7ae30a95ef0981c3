"""
Sequence transformation functions.

The function arguments (``fn``) are usually other transproc units, which
is how pipelines nest::

    t("map_array", t("to_integer") >> t("to_float"))
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from transproc.functions import Functions


class Arrays(Functions):
    def map_array(array: Iterable[Any], fn: Callable[[Any], Any]) -> list[Any]:
        """Apply ``fn`` to every element, returning a new list."""
        return [fn(item) for item in array]

    def extract_key(array: Iterable[dict], key: Hashable) -> list[Any]:
        """Pull ``key`` out of every record. Missing keys yield ``None``."""
        return [item.get(key) for item in array]

"""
DataFrame transformation functions.

Column-level cleaning steps for tabular data, meant to be chained like any
other transproc unit::

    clean = (
        t("parse_numbers", ["code", "name"])
        >> t("rename_columns", {"close": "price"})
        >> t("drop_empty_entities", "code")
    )
    df = clean(raw_df)

Every function works on a copy; the input DataFrame is never modified.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pandas as pd

from transproc.functions import Functions


class Frames(Functions):
    def parse_numbers(df: pd.DataFrame, key_columns: Iterable[str] = ()) -> pd.DataFrame:
        """Parse numeric strings in every non-key column.

        Applies three cleaning steps to each value column:
        1. Strip leading/trailing whitespace.
        2. Remove comma thousand separators (``"25,200"`` -> ``"25200"``).
        3. Coerce via ``pd.to_numeric(errors="coerce")``.

        Empty strings and non-numeric junk become ``NaN``. Key columns
        (identifiers, names, dates) are left as-is. Columns that are
        already numeric are coerced without string cleaning.

        Args:
            df: Input DataFrame, typically all strings as read from CSV.
            key_columns: Column names to skip.

        Returns:
            DataFrame with value columns coerced to numeric dtypes.
        """
        df = df.copy()
        key_set = set(key_columns)
        for col in [c for c in df.columns if c not in key_set]:
            series = df[col]
            if pd.api.types.is_object_dtype(series) or pd.api.types.is_string_dtype(series):
                series = series.astype(str).str.strip().str.replace(",", "", regex=False)
            df[col] = pd.to_numeric(series, errors="coerce")
        return df

    def rename_columns(df: pd.DataFrame, mapping: Mapping[str, str]) -> pd.DataFrame:
        """Rename columns present in ``mapping``; unknown names are ignored."""
        return df.rename(columns=dict(mapping))

    def accept_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
        """Keep only ``columns``, in the given order.

        Raises:
            KeyError: If a requested column does not exist.
        """
        return df[list(columns)].copy()

    def map_column(df: pd.DataFrame, column: str, fn: Callable[[Any], Any]) -> pd.DataFrame:
        """Apply ``fn`` to every cell of ``column``."""
        df = df.copy()
        df[column] = df[column].map(fn)
        return df

    def drop_empty_entities(
        df: pd.DataFrame,
        entity_column: str,
        value_columns: Iterable[str] | None = None,
    ) -> pd.DataFrame:
        """Drop entities whose value columns are ``NaN`` on every row.

        Entities are identified by ``entity_column``. An entity is kept if
        any cell in any value column is non-null across all of its rows. Rows
        with a missing entity value form one entity of their own.

        Args:
            df: Input DataFrame (after number parsing).
            entity_column: Column identifying the entity.
            value_columns: Columns to check. Defaults to all numeric columns
                other than ``entity_column``.

        Returns:
            DataFrame without the empty entities, with a fresh index when
            rows were dropped. Returned unchanged if ``entity_column`` is
            absent or there are no value columns.
        """
        if entity_column not in df.columns:
            return df.copy()

        if value_columns is None:
            value_columns = [
                c for c in df.select_dtypes(include="number").columns if c != entity_column
            ]
        else:
            value_columns = list(value_columns)
        if not value_columns:
            return df.copy()

        row_has_data = df[value_columns].notna().any(axis=1)
        keep = row_has_data.groupby(df[entity_column], dropna=False).transform("any")
        if keep.all():
            return df.copy()
        return df[keep.astype(bool)].reset_index(drop=True)

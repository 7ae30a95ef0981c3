"""
Unit tests for DataFrame functions (transproc.transforms.frames).

Uses small synthetic DataFrames; every function must leave its input
unchanged.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

import transproc.transforms  # noqa: F401
from transproc import t
from transproc.transforms.frames import Frames


def _make_string_df() -> pd.DataFrame:
    """Wide price table as read from CSV (all dtypes are str)."""
    return pd.DataFrame({
        "code": ["A001", "A001", "A002", "A002", "A003", "A003"],
        "name": ["Alpha", "Alpha", "Beta", "Beta", "Ghost", "Ghost"],
        "date": ["2024-01-01", "2024-01-02"] * 3,
        "open": ["25,200", "25,400", "100,000", "101,000", "", ""],
        "volume": ["306,939", "310,000", "50,000", "51,000", "", ""],
    }).astype(str)


class TestParseNumbers:
    """Tests for parse_numbers()."""

    def test_comma_separated_integers(self):
        result = Frames.parse_numbers(_make_string_df(), ["code", "name", "date"])
        assert result["open"].iloc[0] == 25200
        assert result["volume"].iloc[2] == 50000

    def test_whitespace_and_decimals(self):
        df = pd.DataFrame({"code": ["A001"], "ratio": ["  0.62 "]})
        result = Frames.parse_numbers(df, ["code"])
        assert result["ratio"].iloc[0] == pytest.approx(0.62)

    def test_negative_numbers(self):
        df = pd.DataFrame({"code": ["A001"], "value": ["-1,234"]})
        assert Frames.parse_numbers(df, ["code"])["value"].iloc[0] == -1234

    @pytest.mark.parametrize("raw", ["", "   ", "N/A"])
    def test_junk_becomes_nan(self, raw):
        df = pd.DataFrame({"code": ["A001"], "value": [raw]})
        assert pd.isna(Frames.parse_numbers(df, ["code"])["value"].iloc[0])

    def test_key_columns_preserved(self):
        result = Frames.parse_numbers(_make_string_df(), ["code", "name", "date"])
        assert result["code"].iloc[0] == "A001"
        assert result["date"].iloc[0] == "2024-01-01"
        assert pd.api.types.is_string_dtype(result["code"])

    def test_numeric_columns_pass_through(self):
        df = pd.DataFrame({"code": ["A001"], "value": [3.5]})
        assert Frames.parse_numbers(df, ["code"])["value"].iloc[0] == 3.5

    def test_no_key_columns(self):
        df = pd.DataFrame({"a": ["1,000"], "b": ["2"]})
        result = Frames.parse_numbers(df)
        assert result["a"].iloc[0] == 1000
        assert result["b"].iloc[0] == 2

    def test_does_not_mutate_input(self):
        df = _make_string_df()
        Frames.parse_numbers(df, ["code", "name", "date"])
        assert df["open"].iloc[0] == "25,200"


class TestColumnFunctions:
    """Tests for rename_columns(), accept_columns() and map_column()."""

    def test_rename_columns(self):
        df = _make_string_df()
        result = Frames.rename_columns(df, {"open": "price", "missing": "x"})
        assert "price" in result.columns
        assert "open" not in result.columns
        assert "open" in df.columns

    def test_accept_columns_in_order(self):
        result = Frames.accept_columns(_make_string_df(), ["volume", "code"])
        assert list(result.columns) == ["volume", "code"]

    def test_accept_unknown_column_raises(self):
        with pytest.raises(KeyError):
            Frames.accept_columns(_make_string_df(), ["nope"])

    def test_map_column(self):
        df = _make_string_df()
        result = Frames.map_column(df, "name", str.upper)
        assert result["name"].iloc[0] == "ALPHA"
        assert df["name"].iloc[0] == "Alpha"

    def test_map_column_with_unit(self):
        """A transproc unit can be used as the mapping function."""
        df = pd.DataFrame({"flag": ["yes", "no"]})
        result = Frames.map_column(df, "flag", t("to_boolean"))
        assert result["flag"].tolist() == [True, False]


class TestDropEmptyEntities:
    """Tests for drop_empty_entities()."""

    def test_entity_with_all_nan_is_dropped(self):
        df = pd.DataFrame({
            "code": ["A001", "A001", "A002", "A002"],
            "price": [100.0, 200.0, np.nan, np.nan],
            "volume": [10.0, 20.0, np.nan, np.nan],
        })
        result = Frames.drop_empty_entities(df, "code")
        assert set(result["code"].unique()) == {"A001"}
        assert list(result.index) == [0, 1]

    def test_entity_with_some_data_is_kept(self):
        df = pd.DataFrame({
            "code": ["A001", "A001", "A002", "A002"],
            "price": [100.0, np.nan, np.nan, 50.0],
            "volume": [np.nan, np.nan, np.nan, np.nan],
        })
        result = Frames.drop_empty_entities(df, "code")
        assert set(result["code"].unique()) == {"A001", "A002"}

    def test_all_entities_empty(self):
        df = pd.DataFrame({"code": ["A001", "A002"], "price": [np.nan, np.nan]})
        assert len(Frames.drop_empty_entities(df, "code")) == 0

    def test_explicit_value_columns(self):
        df = pd.DataFrame({
            "code": ["A001", "A002"],
            "price": [np.nan, 1.0],
            "volume": [5.0, np.nan],
        })
        result = Frames.drop_empty_entities(df, "code", ["price"])
        assert result["code"].tolist() == ["A002"]

    def test_missing_entity_column_returns_copy(self):
        df = pd.DataFrame({"price": [np.nan]})
        result = Frames.drop_empty_entities(df, "code")
        assert result.equals(df)
        assert result is not df

    def test_numeric_entity_ids_not_treated_as_values(self):
        """Integer ids are excluded from the default value columns."""
        df = pd.DataFrame({"id": [1, 1, 2, 2], "price": [1.0, 2.0, np.nan, np.nan]})
        result = Frames.drop_empty_entities(df, "id")
        assert result["id"].tolist() == [1, 1]

    def test_missing_entity_rows_kept_when_others_dropped(self):
        """Rows without an entity value are kept if they carry data."""
        df = pd.DataFrame({
            "code": ["A001", None, "A002"],
            "price": [1.0, 2.0, np.nan],
        })
        result = Frames.drop_empty_entities(df, "code")
        assert result["price"].tolist() == [1.0, 2.0]

    def test_missing_entity_rows_dropped_when_empty(self):
        df = pd.DataFrame({
            "code": ["A001", None],
            "price": [1.0, np.nan],
        })
        result = Frames.drop_empty_entities(df, "code")
        assert result["code"].tolist() == ["A001"]

    def test_no_numeric_columns(self):
        df = pd.DataFrame({"code": ["A001"], "name": ["x"]})
        assert len(Frames.drop_empty_entities(df, "code")) == 1


class TestFramePipeline:
    """Frame functions chained by name."""

    def test_clean_prices(self):
        pipeline = (
            t("parse_numbers", ["code", "name", "date"])
            >> t("rename_columns", {"open": "price"})
            >> t("drop_empty_entities", "code")
            >> t("accept_columns", ["code", "date", "price"])
        )
        result = pipeline(_make_string_df())
        assert list(result.columns) == ["code", "date", "price"]
        assert set(result["code"].unique()) == {"A001", "A002"}
        assert result.loc[result["code"] == "A001", "price"].iloc[0] == 25200.0

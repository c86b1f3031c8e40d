"""Unit tests for grouped series extraction and per-category summaries."""

import math

import numpy as np
import pandas as pd
import pytest

from monsterstats.errors import InvalidArgumentError, TypeConversionError
from monsterstats.grouped_series import CategorySeries, category_summary, extract_grouped_series
from monsterstats.table import MonsterTable


def test_missing_value_dropped_not_zero_filled():
    table = MonsterTable.from_records([
        {"size": "Large", "hp": 15},
        {"size": "Large", "hp": None},
        {"size": "Medium", "hp": 40},
    ])
    out = extract_grouped_series(table, "size", ["hp"])
    assert out == {"hp": [CategorySeries("Large", (15.0,)), CategorySeries("Medium", (40.0,))]}


def test_category_series_values_normalized_to_float_tuple():
    s = CategorySeries("Large", [15, 20])
    assert s.values == (15.0, 20.0)
    assert s == CategorySeries("Large", (15.0, 20.0))


def test_categories_in_first_appearance_order(monster_table):
    out = extract_grouped_series(monster_table, "size", ["strength"])
    assert [s.category for s in out["strength"]] == ["Small", "Large", "Medium", "Huge"]
    small = out["strength"][0]
    assert small.values == (8.0, 7.0)  # original row order


def test_category_without_values_is_omitted():
    """A category whose values are all missing contributes no series."""
    table = MonsterTable.from_records([
        {"size": "Tiny", "hp": None},
        {"size": "Large", "hp": 30},
        {"size": "Tiny", "hp": None},
    ])
    out = extract_grouped_series(table, "size", ["hp"])
    assert [s.category for s in out["hp"]] == ["Large"]


def test_partition_order_uses_full_table():
    """A category whose first row is missing still keeps its partition position."""
    table = MonsterTable.from_records([
        {"size": "Large", "hp": None},
        {"size": "Medium", "hp": 40},
        {"size": "Large", "hp": 15},
    ])
    out = extract_grouped_series(table, "size", ["hp"])
    assert [s.category for s in out["hp"]] == ["Large", "Medium"]


def test_multiple_numeric_columns_keyed_in_request_order(monster_table):
    out = extract_grouped_series(monster_table, "monster_type", ["ac", "hp"])
    assert list(out.keys()) == ["ac", "hp"]
    # Hill Giant has no ac, Kobold has no hp
    giant_ac = next(s for s in out["ac"] if s.category == "giant")
    assert giant_ac.values == (11.0,)
    humanoid_hp = next(s for s in out["hp"] if s.category == "humanoid")
    assert humanoid_hp.values == (7.0, 11.0)


def test_total_retained_equals_non_missing_count(monster_df):
    table = MonsterTable.from_dataframe(monster_df)
    out = extract_grouped_series(table, "size", ["hp", "ac", "strength"])
    for col, series in out.items():
        retained = [v for s in series for v in s.values]
        assert len(retained) == int(monster_df[col].notna().sum())
        assert not any(math.isnan(v) for v in retained)


def test_missing_category_rows_belong_to_no_category():
    table = MonsterTable.from_records([
        {"size": None, "hp": 10},
        {"size": "Small", "hp": 5},
    ])
    out = extract_grouped_series(table, "size", ["hp"])
    assert out["hp"] == [CategorySeries("Small", (5.0,))]


def test_unknown_category_column_raises(monster_table):
    with pytest.raises(InvalidArgumentError):
        extract_grouped_series(monster_table, "alignment", ["hp"])


def test_unknown_numeric_column_raises(monster_table):
    with pytest.raises(InvalidArgumentError) as exc_info:
        extract_grouped_series(monster_table, "size", ["hp", "speed"])
    assert "speed" in str(exc_info.value)


def test_malformed_value_fails_whole_call():
    table = MonsterTable.from_records([
        {"size": "Medium", "hp": 10, "speed": "30"},
        {"size": "Large", "hp": 20, "speed": "30 ft., fly 60 ft."},
    ])
    with pytest.raises(TypeConversionError) as exc_info:
        extract_grouped_series(table, "size", ["hp", "speed"])
    assert exc_info.value.column == "speed"
    assert exc_info.value.row == 1


def test_bool_values_are_not_read_as_numbers():
    table = MonsterTable.from_records([
        {"size": "Medium", "hp": True},
        {"size": "Medium", "hp": False},
    ])
    with pytest.raises(TypeConversionError) as exc_info:
        extract_grouped_series(table, "size", ["hp"])
    assert exc_info.value.column == "hp"
    assert exc_info.value.row == 0


def test_category_summary(monster_table):
    summary = category_summary(monster_table, "monster_type", "hp")
    assert summary.index.tolist() == ["humanoid", "giant", "dragon"]
    assert summary.index.name == "monster_type"
    assert summary.loc["humanoid", "count"] == 2
    assert summary.loc["giant", "mean"] == pytest.approx(82.0)
    assert summary.loc["giant", "median"] == pytest.approx(82.0)
    assert summary.loc["giant", "min"] == 59.0
    assert summary.loc["giant", "max"] == 105.0
    assert summary.loc["giant", "std"] == pytest.approx(np.std([59.0, 105.0], ddof=1))
    # single value: no spread
    assert math.isnan(summary.loc["dragon", "std"])
    assert math.isnan(summary.loc["dragon", "sem"])


def test_category_summary_matches_pandas_groupby(monster_df):
    """First principles: same numbers as a plain pandas groupby on non-missing rows."""
    table = MonsterTable.from_dataframe(monster_df)
    summary = category_summary(table, "size", "strength")
    expected = monster_df.groupby("size", sort=False)["strength"].mean()
    pd.testing.assert_series_equal(
        summary["mean"],
        expected.astype(float).rename("mean"),
        check_names=False,
        check_index_type=False,
    )

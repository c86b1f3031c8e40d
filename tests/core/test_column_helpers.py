"""Unit tests for numeric/categorical column detection."""

import pandas as pd

from monsterstats.column_helpers import categorical_candidates, numeric_columns
from monsterstats.table import MonsterTable


def test_numeric_columns(monster_table):
    assert numeric_columns(monster_table) == ["hp", "strength", "ac"]


def test_categorical_candidates_low_cardinality_text(monster_table):
    # name has 6 distinct values, still under the limit of 20
    assert categorical_candidates(monster_table) == ["name", "size", "monster_type"]


def test_categorical_candidates_excludes_high_cardinality_text():
    df = pd.DataFrame({
        "name": [f"monster {i}" for i in range(100)],
        "size": ["Small", "Medium", "Large", "Huge"] * 25,
        "hp": range(100),
    })
    table = MonsterTable.from_dataframe(df)
    assert categorical_candidates(table) == ["size"]
    assert numeric_columns(table) == ["hp"]

"""Unit tests for d20 hit chance (boundaries, monotonicity, per-row column)."""

import math

import numpy as np
import pytest

from monsterstats.errors import InvalidArgumentError, TypeConversionError
from monsterstats.hit_chance import hit_chance_column, probability
from monsterstats.table import MonsterTable


@pytest.mark.parametrize("threshold, modifier, expected", [
    (15, 0, 0.30),
    (15, 5, 0.55),
    (8, 0, 0.65),
    (25, 0, 0.05),
    (1, 0, 0.95),
    (21, 0, 0.05),
    (20, 0, 0.05),
    (2, 0, 0.95),
    (10, 12, 0.95),
    (30, -5, 0.05),
])
def test_probability_examples(threshold, modifier, expected):
    assert probability(threshold, modifier) == pytest.approx(expected)


def test_probability_boundaries_exact():
    """Clamped branches return exactly 0.05 / 0.95."""
    for effective in range(21, 40):
        assert probability(effective, 0) == 0.05
    for effective in range(-10, 2):
        assert probability(effective, 0) == 0.95
    for effective in range(2, 21):
        assert probability(effective, 0) == (21 - effective) / 20.0


def test_probability_depends_only_on_effective_threshold():
    assert probability(18, 3) == probability(15, 0) == probability(20, 5)


def test_probability_monotone_in_modifier():
    for threshold in range(-5, 30):
        values = [probability(threshold, m) for m in range(-10, 25)]
        assert values == sorted(values)
        assert all(0.05 <= v <= 0.95 for v in values)


@pytest.mark.parametrize("threshold, modifier", [
    (15.0, 0),
    (15, 2.5),
    ("15", 0),
    (True, 0),
    (15, None),
])
def test_probability_rejects_non_integers(threshold, modifier):
    with pytest.raises(InvalidArgumentError):
        probability(threshold, modifier)


def test_probability_accepts_numpy_integers():
    assert probability(np.int64(15), np.int32(0)) == pytest.approx(0.30)


def test_hit_chance_column_per_row():
    table = MonsterTable.from_records([{"ac": 15}, {"ac": None}, {"ac": 8}])
    chances = hit_chance_column(table, 0)
    assert chances.name == "hit_chance"
    assert chances.iloc[0] == pytest.approx(0.30)
    assert math.isnan(chances.iloc[1])
    assert chances.iloc[2] == pytest.approx(0.65)


def test_hit_chance_column_does_not_modify_table(monster_table):
    before = monster_table.column_names
    hit_chance_column(monster_table, 4)
    assert monster_table.column_names == before
    assert "hit_chance" not in monster_table.column_names


def test_hit_chance_column_custom_threshold_column():
    table = MonsterTable.from_records([{"dc": 12}, {"dc": 22}])
    chances = hit_chance_column(table, 2, threshold_column="dc")
    assert chances.tolist() == [pytest.approx(0.55), pytest.approx(0.05)]


def test_hit_chance_column_fractional_threshold_raises():
    table = MonsterTable.from_records([{"ac": 13.5}])
    with pytest.raises(InvalidArgumentError):
        hit_chance_column(table, 0)


def test_hit_chance_column_malformed_threshold_raises():
    table = MonsterTable.from_records([{"ac": "14 (natural armor)"}])
    with pytest.raises(TypeConversionError):
        hit_chance_column(table, 0)


def test_hit_chance_column_unknown_column(monster_table):
    with pytest.raises(InvalidArgumentError):
        hit_chance_column(monster_table, 0, threshold_column="armor")

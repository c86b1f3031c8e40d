"""d20 hit chance.

A roll succeeds when the die face is at least ``threshold - modifier``,
except that a natural 20 always hits and a natural 1 always misses.
"""

from __future__ import annotations

import numbers

import numpy as np
import pandas as pd

from monsterstats.errors import InvalidArgumentError
from monsterstats.table import MonsterTable

DIE_FACES = 20
MIN_PROBABILITY = 0.05  # natural 20 only
MAX_PROBABILITY = 0.95  # everything but a natural 1


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def probability(threshold: int, modifier: int) -> float:
    """Probability that d20 + modifier meets threshold.

    Args:
        threshold: Target number (e.g. armor class).
        modifier: Attack bonus added to the roll.

    Returns:
        0.05 if the effective threshold is above 20, 0.95 if it is 1 or
        below, else (21 - effective) / 20.

    Raises:
        InvalidArgumentError: If either argument is not an integer.
    """
    effective = _require_int("threshold", threshold) - _require_int("modifier", modifier)
    if effective > DIE_FACES:
        return MIN_PROBABILITY
    if effective <= 1:
        return MAX_PROBABILITY
    return (DIE_FACES + 1 - effective) / float(DIE_FACES)


def hit_chance_column(
    table: MonsterTable,
    modifier: int,
    threshold_column: str = "ac",
) -> pd.Series:
    """Hit probability for every row, NaN where the threshold is missing.

    Raises:
        InvalidArgumentError: Unknown column, non-integer modifier, or a
            threshold value with a fractional part.
        TypeConversionError: A threshold cell that is not a number.
    """
    modifier = _require_int("modifier", modifier)
    thresholds = table.numeric_column(threshold_column)

    out = []
    for pos, t in enumerate(thresholds):
        if np.isnan(t):
            out.append(np.nan)
            continue
        if not float(t).is_integer():
            raise InvalidArgumentError(f"{threshold_column} at row {pos} is not an integer: {t!r}")
        out.append(probability(int(t), modifier))
    return pd.Series(out, index=thresholds.index, dtype=float, name="hit_chance")

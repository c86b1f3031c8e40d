"""Frequency tabulation of categorical values (bar and pie chart data)."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import pandas as pd

from monsterstats.errors import InvalidArgumentError
from monsterstats.table import MonsterTable, category_label, is_missing_value
from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FrequencyEntry:
    """One category label and how often it occurs."""
    category: str
    count: int


def tabulate(
    labels: Iterable[Any],
    order: Optional[Sequence[int]] = None,
) -> list[FrequencyEntry]:
    """Count occurrences of each label.

    Default order is descending count, ties in order of first appearance.

    If order is given it is a permutation applied to that default list:
    ``order[i]`` is the index (in the count-sorted list) of the entry to place
    at position i. It is not a mapping from category names, so callers need
    to know the count-sorted order to build it.

    Args:
        labels: Category labels. Non-string labels are converted with
            category_label() (str(), with 2.0 rendered as "2").
        order: Optional permutation of ``range(number_of_distinct_labels)``.

    Returns:
        List of FrequencyEntry; counts sum to the number of labels.

    Raises:
        InvalidArgumentError: If a label is missing, if order has the wrong
            length, or if order is not a permutation.
    """
    values = list(labels)
    for i, v in enumerate(values):
        if is_missing_value(v):
            raise InvalidArgumentError(f"Label at position {i} is missing")

    s = pd.Series([category_label(v) for v in values], dtype=object)
    # value_counts does not promise encounter order; reindex by first appearance
    counts = s.value_counts(sort=False).reindex(pd.unique(s))
    counts = counts.sort_values(ascending=False, kind="stable")
    entries = [FrequencyEntry(category=str(c), count=int(n)) for c, n in counts.items()]

    if order is None:
        return entries
    return _apply_order(entries, order)


def _apply_order(entries: list[FrequencyEntry], order: Sequence[int]) -> list[FrequencyEntry]:
    k = len(entries)
    if len(order) != k:
        raise InvalidArgumentError(
            f"Explicit order has length {len(order)}, expected {k} (one index per distinct category)"
        )
    if not all(isinstance(i, numbers.Integral) and not isinstance(i, bool) for i in order):
        raise InvalidArgumentError(f"Explicit order must contain integer indices, got {list(order)}")
    idx = [int(i) for i in order]
    if sorted(idx) != list(range(k)):
        raise InvalidArgumentError(f"Explicit order {idx} is not a permutation of 0..{k - 1}")
    return [entries[i] for i in idx]


def tabulate_column(
    table: MonsterTable,
    column: str,
    order: Optional[Sequence[int]] = None,
) -> list[FrequencyEntry]:
    """Tabulate a categorical table column, skipping missing cells.

    Raises:
        InvalidArgumentError: If column is unknown, or for a bad order (see tabulate).
    """
    s = table.categorical_column(column)
    present = s.dropna()
    skipped = len(s) - len(present)
    if skipped:
        logger.debug(f"tabulate_column({column!r}): skipped {skipped} missing cells")
    return tabulate(present.tolist(), order)

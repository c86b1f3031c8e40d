"""
Grouped series extraction: reshape a table into per-category value lists.

Used for box and violin plots. For each requested numeric column the
steps are:

  1. Read the category column as strings (missing cells belong to no category).
  2. Read the numeric column as floats. Missing cells become NaN; any present
     value that is not a number fails the whole call with TypeConversionError.
  3. Partition rows by category, in order of first appearance in the table.
  4. Drop NaN values inside each partition, keep row order, and omit
     categories left with no values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from monsterstats.table import MonsterTable
from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CategorySeries:
    """Values of one numeric column for one category, in row order."""
    category: str
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))


def _category_order(g: pd.Series) -> list[str]:
    """Distinct non-missing categories in order of first appearance."""
    return [str(c) for c in pd.unique(g.dropna())]


def _group_frame(g: pd.Series, y: pd.Series) -> pd.DataFrame:
    tmp = pd.DataFrame({"group": g, "y": y})
    kept = tmp.dropna(subset=["group", "y"])
    dropped = len(tmp) - len(kept)
    if dropped:
        logger.debug(f"{y.name}: dropped {dropped} rows with missing category or value")
    return kept


def extract_grouped_series(
    table: MonsterTable,
    category_column: str,
    numeric_columns: Sequence[str],
) -> dict[str, list[CategorySeries]]:
    """Partition table by category_column and flatten each numeric column.

    Args:
        table: Source table.
        category_column: Column whose distinct values define the partitions.
        numeric_columns: Columns to extract, in output order.

    Returns:
        Dict mapping each numeric column to a list of CategorySeries, one per
        category that has at least one non-missing value.

    Raises:
        InvalidArgumentError: If any column does not exist.
        TypeConversionError: If a present value in a numeric column is not a number.
    """
    numeric_columns = list(numeric_columns)
    table.require_columns([category_column, *numeric_columns])

    g = table.categorical_column(category_column)
    categories = _category_order(g)
    # convert every column up front so a malformed value never yields a partial result
    ys = {col: table.numeric_column(col) for col in numeric_columns}

    out: dict[str, list[CategorySeries]] = {}
    for col, y in ys.items():
        tmp = _group_frame(g, y)
        by_cat = {str(k): sub["y"].tolist() for k, sub in tmp.groupby("group", sort=False)}
        out[col] = [CategorySeries(cat, by_cat[cat]) for cat in categories if cat in by_cat]
    return out


def category_summary(
    table: MonsterTable,
    category_column: str,
    numeric_column: str,
) -> pd.DataFrame:
    """Summary statistics of numeric_column per category.

    Same partitioning and missing-value rules as extract_grouped_series.
    std and sem use ddof=1 and are NaN for single-value categories.

    Returns:
        DataFrame indexed by category with columns
        count, min, max, mean, median, std, sem.
    """
    table.require_columns([category_column, numeric_column])
    g = table.categorical_column(category_column)
    y = table.numeric_column(numeric_column)
    tmp = _group_frame(g, y)

    grp = tmp.groupby("group", sort=False)["y"]
    out = pd.DataFrame({
        "count": grp.count(),
        "min": grp.min(),
        "max": grp.max(),
        "mean": grp.mean(),
        "median": grp.median(),
        "std": grp.std(ddof=1),
        "sem": grp.sem(ddof=1),
    })
    out = out.reindex([c for c in _category_order(g) if c in out.index])
    out.index.name = category_column
    return out


"""Column detection helpers for choosing chart inputs."""

from __future__ import annotations

import pandas as pd

from monsterstats.table import MonsterTable

_NUMERIC_KINDS = {"i", "u", "f"}  # int, unsigned, float (pandas dtype.kind)


def numeric_columns(table: MonsterTable) -> list[str]:
    """Names of columns whose dtype is numeric (int, unsigned, float)."""
    df = table.to_dataframe()
    return [str(c) for c in df.columns if getattr(df[c].dtype, "kind", None) in _NUMERIC_KINDS]


def categorical_candidates(table: MonsterTable, *, max_unique: int = 20) -> list[str]:
    """Heuristic: object/category/bool columns with low-ish cardinality.

    A column qualifies when it is non-numeric (or bool/category dtype) and has
    at most ``max(max_unique, 5% of rows)`` distinct non-missing values, so
    free-text columns such as ``name`` are left out.

    Args:
        table: Table to analyze.
        max_unique: Minimum cardinality limit.

    Returns:
        List of column names that are good grouping candidates.
    """
    df = table.to_dataframe()
    n = len(df)
    limit = max(max_unique, int(0.05 * n))
    out: list[str] = []
    for c in df.columns:
        s = df[c]
        kind = getattr(s.dtype, "kind", None)
        if kind in {"O", "b"} or isinstance(s.dtype, pd.CategoricalDtype) or pd.api.types.is_string_dtype(s):
            if s.nunique(dropna=True) <= limit:
                out.append(str(c))
    return out

"""Typed table access for monster statistics.

This module provides MonsterTable, a thin wrapper over a pandas DataFrame
that exposes typed column accessors and classifies every cell as present,
missing or malformed instead of coercing values silently.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from monsterstats.errors import InvalidArgumentError, TypeConversionError
from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)


class CellState(Enum):
    """State of a single table cell."""
    PRESENT = "present"
    MISSING = "missing"
    MALFORMED = "malformed"  # present but not a number (numeric access only)


def is_missing_value(value: Any) -> bool:
    """True for None, NaN/NA and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like values are never "missing"
        return False


def category_label(value: Any) -> str:
    """String label for a category value.

    Integral floats drop the trailing ".0": pandas stores an integer column
    with a missing cell as float, and 2.0 should still read "2".
    """
    if isinstance(value, (float, np.floating)) and np.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _missing_mask(s: pd.Series) -> pd.Series:
    mask = s.isna()
    if not pd.api.types.is_numeric_dtype(s):
        blank = s.map(lambda v: isinstance(v, str) and v.strip() == "").astype(bool)
        mask = mask | blank
    return mask


def _coerce_numeric(s: pd.Series, missing: pd.Series) -> pd.Series:
    """Numeric view of s; NaN where missing or not convertible.

    Booleans are not numbers here, so True/False cells come out as NaN.
    """
    if pd.api.types.is_bool_dtype(s):
        return pd.Series(np.nan, index=s.index, dtype=float)
    if pd.api.types.is_numeric_dtype(s):
        return s.astype(float)
    stripped = s.where(~missing).map(
        lambda v: np.nan if isinstance(v, (bool, np.bool_)) else (v.strip() if isinstance(v, str) else v)
    )
    return pd.to_numeric(stripped, errors="coerce").astype(float)


class MonsterTable:
    """An ordered table of rows sharing one column set.

    Attributes:
        column_names: Ordered list of column names.
    """

    def __init__(self, df: pd.DataFrame) -> None:
        """Wrap df. Rows are re-indexed 0..n-1 so row positions are stable.

        Raises:
            InvalidArgumentError: If df has duplicate column names.
        """
        dupes = df.columns[df.columns.duplicated()].tolist()
        if dupes:
            raise InvalidArgumentError(f"Duplicate column names: {dupes}")
        self._df = df.reset_index(drop=True)

    @classmethod
    def from_csv(cls, path: Union[str, Path], **read_csv_kwargs: Any) -> "MonsterTable":
        """Load a delimited file with pandas.read_csv."""
        path = Path(path)
        df = pd.read_csv(path, **read_csv_kwargs)
        logger.info(f"Loaded {path.name}: {len(df)} rows, {len(df.columns)} columns")
        return cls(df)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "MonsterTable":
        return cls(df.copy())

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        *,
        columns: Optional[Sequence[str]] = None,
    ) -> "MonsterTable":
        """Build a table from row mappings.

        Args:
            records: One mapping per row; all must have the same keys.
            columns: Column order. Defaults to the key order of the first record.

        Raises:
            InvalidArgumentError: If the records do not share one column set.
        """
        rows = [dict(r) for r in records]
        if columns is None:
            columns = list(rows[0].keys()) if rows else []
        expected = set(columns)
        for i, row in enumerate(rows):
            if set(row.keys()) != expected:
                raise InvalidArgumentError(
                    f"Record {i} has columns {sorted(row.keys())}, expected {sorted(expected)}"
                )
        return cls(pd.DataFrame(rows, columns=list(columns)))

    def __len__(self) -> int:
        return len(self._df)

    @property
    def column_names(self) -> list[str]:
        return [str(c) for c in self._df.columns]

    def has_column(self, name: str) -> bool:
        return name in self._df.columns

    def require_columns(self, names: Iterable[str]) -> None:
        """Raise InvalidArgumentError listing every name that is not a column."""
        missing = [n for n in names if not self.has_column(n)]
        if missing:
            raise InvalidArgumentError(f"Unknown column(s) {missing}; table has {self.column_names}")

    def _column(self, name: str) -> pd.Series:
        self.require_columns([name])
        return self._df[name]

    def to_dataframe(self) -> pd.DataFrame:
        return self._df.copy()

    # ------------------------------------------------------------------
    # Typed column access
    # ------------------------------------------------------------------

    def cell_states(self, column: str, *, numeric: bool = False) -> list[CellState]:
        """Classify every cell of a column.

        Args:
            column: Column name.
            numeric: If True, present values that are not numbers are MALFORMED.

        Returns:
            One CellState per row, in row order.
        """
        s = self._column(column)
        missing = _missing_mask(s)
        states = [CellState.MISSING if m else CellState.PRESENT for m in missing]
        if numeric:
            coerced = _coerce_numeric(s, missing)
            bad = (~missing & coerced.isna()).to_numpy()
            for pos in np.flatnonzero(bad):
                states[pos] = CellState.MALFORMED
        return states

    def cell_state(self, row: int, column: str, *, numeric: bool = False) -> CellState:
        if not 0 <= row < len(self):
            raise InvalidArgumentError(f"Row {row} out of range for table with {len(self)} rows")
        return self.cell_states(column, numeric=numeric)[row]

    def numeric_column(self, name: str) -> pd.Series:
        """Column as float, NaN where missing.

        Raises:
            InvalidArgumentError: If the column does not exist.
            TypeConversionError: If any present value is not a number.
        """
        s = self._column(name)
        missing = _missing_mask(s)
        coerced = _coerce_numeric(s, missing)
        bad = (~missing & coerced.isna()).to_numpy()
        if bad.any():
            pos = int(np.flatnonzero(bad)[0])
            raise TypeConversionError(name, s.iloc[pos], row=pos)
        return coerced.rename(name)

    def categorical_column(self, name: str) -> pd.Series:
        """Column as strings, NaN where missing."""
        s = self._column(name)
        missing = _missing_mask(s)
        return s.astype(object).map(category_label).where(~missing, np.nan).rename(name)

    # ------------------------------------------------------------------
    # Row access and queries
    # ------------------------------------------------------------------

    def iter_rows(self) -> Iterator[dict[str, Any]]:
        """Yield each row as a dict; missing cells are None."""
        for record in self._df.to_dict(orient="records"):
            yield {str(k): (None if is_missing_value(v) else v) for k, v in record.items()}

    def filter_rows(self, predicate: Callable[[dict[str, Any]], Any]) -> "MonsterTable":
        """Keep rows for which predicate(row) is truthy."""
        mask = pd.Series([bool(predicate(row)) for row in self.iter_rows()], index=self._df.index, dtype=bool)
        out = MonsterTable(self._df[mask])
        logger.debug(f"filter_rows kept {len(out)}/{len(self)} rows")
        return out

    def filter_regex(self, column: str, pattern: str, *, case: bool = False) -> "MonsterTable":
        """Keep rows whose value in column matches pattern (re.search semantics).

        Missing cells never match.

        Raises:
            InvalidArgumentError: If column is unknown or pattern does not compile.
        """
        try:
            compiled = re.compile(pattern, 0 if case else re.IGNORECASE)
        except re.error as e:
            raise InvalidArgumentError(f"Invalid regular expression {pattern!r}: {e}") from e
        s = self.categorical_column(column)
        mask = s.map(lambda v: isinstance(v, str) and compiled.search(v) is not None).astype(bool)
        out = MonsterTable(self._df[mask])
        logger.debug(f"filter_regex {column}~{pattern!r} kept {len(out)}/{len(self)} rows")
        return out

    def sample_row(self, seed: Optional[int] = None) -> dict[str, Any]:
        """Return one row chosen uniformly at random.

        Raises:
            InvalidArgumentError: If the table is empty.
        """
        if len(self) == 0:
            raise InvalidArgumentError("Cannot sample a row from an empty table")
        rng = np.random.default_rng(seed=seed)
        pos = int(rng.integers(len(self)))
        record = self._df.iloc[[pos]].to_dict(orient="records")[0]
        return {str(k): (None if is_missing_value(v) else v) for k, v in record.items()}

"""Exception types raised by monsterstats."""

from __future__ import annotations

from typing import Any, Optional


class MonsterStatsError(Exception):
    """Base class for all monsterstats errors."""


class InvalidArgumentError(MonsterStatsError, ValueError):
    """The caller supplied a structurally wrong request.

    Examples: an explicit order of the wrong length, an unknown column name,
    a non-integer threshold.
    """


class TypeConversionError(MonsterStatsError, TypeError):
    """A present value could not be interpreted as a number.

    Attributes:
        column: Column holding the offending value.
        row: Row position (0-based) of the offending value.
        value: The raw value.
    """

    def __init__(
        self,
        column: str,
        value: Any,
        row: Optional[int] = None,
    ) -> None:
        self.column = column
        self.value = value
        self.row = row
        where = f" at row {row}" if row is not None else ""
        super().__init__(f"Column {column!r}{where}: cannot convert {value!r} to a number")

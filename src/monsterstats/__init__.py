"""
monsterstats: exploration helpers for tabletop-game monster statistics.

This package provides:
- MonsterTable: typed table access with explicit missing/malformed cells
- tabulate / tabulate_column: category counts for bar and pie charts
- extract_grouped_series: per-category value lists for box and violin charts
- probability / hit_chance_column: d20 hit chance
- plotting: Plotly figures driven by an explicit PlotStyle

For logging configuration in standalone scripts:
    ```python
    from monsterstats.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from monsterstats.errors import InvalidArgumentError, MonsterStatsError, TypeConversionError
from monsterstats.frequency import FrequencyEntry, tabulate, tabulate_column
from monsterstats.grouped_series import CategorySeries, category_summary, extract_grouped_series
from monsterstats.hit_chance import hit_chance_column, probability
from monsterstats.table import CellState, MonsterTable
from monsterstats.utils.logging import configure_logging, get_logger

# NullHandler so library logs don't reach the root logger until an
# application calls configure_logging().
_logger = logging.getLogger("monsterstats")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "CategorySeries",
    "CellState",
    "FrequencyEntry",
    "InvalidArgumentError",
    "MonsterStatsError",
    "MonsterTable",
    "TypeConversionError",
    "category_summary",
    "configure_logging",
    "extract_grouped_series",
    "get_logger",
    "hit_chance_column",
    "probability",
    "tabulate",
    "tabulate_column",
]

__version__ = "0.1.0"

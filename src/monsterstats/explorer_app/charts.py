"""Chart and table builders used by the explorer page.

No NiceGUI imports here, so these can be used from scripts and tests.
"""

from __future__ import annotations

from typing import Any, Union

import pandas as pd

from monsterstats.errors import InvalidArgumentError
from monsterstats.frequency import tabulate_column
from monsterstats.grouped_series import extract_grouped_series
from monsterstats.hit_chance import hit_chance_column
from monsterstats.plotting.figure_generator import make_figure
from monsterstats.plotting.plot_style import PlotStyle, PlotType
from monsterstats.table import MonsterTable

COUNT_PLOT_TYPES = (PlotType.BAR, PlotType.PIE)
DISTRIBUTION_PLOT_TYPES = (PlotType.BOX, PlotType.VIOLIN)


def _plot_type(value: Union[PlotType, str]) -> PlotType:
    try:
        return PlotType(value)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown plot type {value!r}") from e


def count_chart(
    table: MonsterTable,
    column: str,
    plot_type: Union[PlotType, str],
    style: PlotStyle,
) -> dict:
    """Bar or pie figure of the value counts of a categorical column."""
    plot_type = _plot_type(plot_type)
    if plot_type not in COUNT_PLOT_TYPES:
        raise InvalidArgumentError(f"Count charts support bar/pie, got {plot_type.value!r}")
    entries = tabulate_column(table, column)
    kwargs: dict[str, Any] = {"title": f"Monsters by {column}"}
    if plot_type == PlotType.BAR:
        kwargs["axis_title"] = column
    return make_figure(plot_type, entries, style, **kwargs)


def distribution_chart(
    table: MonsterTable,
    category_column: str,
    numeric_column: str,
    plot_type: Union[PlotType, str],
    style: PlotStyle,
) -> dict:
    """Box or violin figure of numeric_column split by category_column."""
    plot_type = _plot_type(plot_type)
    if plot_type not in DISTRIBUTION_PLOT_TYPES:
        raise InvalidArgumentError(f"Distribution charts support box/violin, got {plot_type.value!r}")
    series = extract_grouped_series(table, category_column, [numeric_column])[numeric_column]
    return make_figure(
        plot_type,
        series,
        style,
        title=f"{numeric_column} by {category_column}",
        value_title=numeric_column,
    )


def hit_chance_table(
    table: MonsterTable,
    modifier: int,
    *,
    name_column: str = "name",
    threshold_column: str = "ac",
) -> pd.DataFrame:
    """Name, threshold and hit chance per row, for a given attack modifier."""
    table.require_columns([name_column, threshold_column])
    return pd.DataFrame({
        name_column: table.categorical_column(name_column),
        threshold_column: table.numeric_column(threshold_column),
        "hit_chance": hit_chance_column(table, modifier, threshold_column),
    })


def to_ui_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    """DataFrame rows as dicts with NaN replaced by None (JSON-safe)."""
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")

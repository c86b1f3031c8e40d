"""Plotly figure generation for monster statistics.

Builds Plotly figure dictionaries from FrequencyEntry lists (bar, pie) and
CategorySeries lists (box, violin). Every function takes the PlotStyle to
use as an argument; nothing here reads global plotting state.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import plotly.graph_objects as go

from monsterstats.errors import InvalidArgumentError
from monsterstats.frequency import FrequencyEntry
from monsterstats.grouped_series import CategorySeries
from monsterstats.plotting.plot_style import PlotStyle, PlotType
from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)


def _apply_layout(
    fig: go.Figure,
    style: PlotStyle,
    *,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> None:
    layout_updates: dict[str, Any] = {
        "template": style.template,
        "width": style.width,
        "height": style.height,
        "showlegend": style.show_legend,
        "margin": dict(l=40, r=20, t=60 if title else 40, b=40),
    }
    if title:
        layout_updates["title"] = dict(text=title, font=dict(size=style.title_font_size))
    if xaxis_title is not None:
        layout_updates["xaxis_title"] = xaxis_title
    if yaxis_title is not None:
        layout_updates["yaxis_title"] = yaxis_title
    fig.update_layout(**layout_updates)


def bar_figure(
    entries: Sequence[FrequencyEntry],
    style: PlotStyle,
    *,
    title: Optional[str] = None,
    axis_title: Optional[str] = None,
) -> dict:
    """Bar chart of category counts, bars in the order of entries.

    Args:
        entries: Output of tabulate()/tabulate_column().
        style: Style to render with.
        title: Figure title.
        axis_title: Label for the category axis (e.g. the column name).
    """
    cats = [e.category for e in entries]
    counts = [e.count for e in entries]

    fig = go.Figure()
    if style.bar_orientation == "h":
        fig.add_trace(go.Bar(x=counts, y=cats, orientation="h", name="count", marker_color=style.color_for(0)))
        _apply_layout(fig, style, title=title, xaxis_title="count", yaxis_title=axis_title)
        # first entry on top
        fig.update_yaxes(categoryorder="array", categoryarray=cats, autorange="reversed")
    else:
        fig.add_trace(go.Bar(x=cats, y=counts, name="count", marker_color=style.color_for(0)))
        _apply_layout(fig, style, title=title, xaxis_title=axis_title, yaxis_title="count")
        fig.update_xaxes(categoryorder="array", categoryarray=cats)
    return fig.to_dict()


def pie_figure(
    entries: Sequence[FrequencyEntry],
    style: PlotStyle,
    *,
    title: Optional[str] = None,
) -> dict:
    """Pie (or donut, if style.pie_hole > 0) chart of category counts."""
    fig = go.Figure(go.Pie(
        labels=[e.category for e in entries],
        values=[e.count for e in entries],
        hole=style.pie_hole,
        sort=False,
        direction="clockwise",
        marker=dict(colors=[style.color_for(i) for i in range(len(entries))]),
    ))
    _apply_layout(fig, style, title=title)
    return fig.to_dict()


def box_figure(
    series: Sequence[CategorySeries],
    style: PlotStyle,
    *,
    title: Optional[str] = None,
    value_title: Optional[str] = None,
) -> dict:
    """Box plot with one trace per CategorySeries."""
    fig = go.Figure()
    for i, s in enumerate(series):
        fig.add_trace(go.Box(
            y=list(s.values),
            name=s.category,
            boxpoints=style.box_points,
            marker_color=style.color_for(i),
        ))
    _apply_layout(fig, style, title=title, yaxis_title=value_title)
    return fig.to_dict()


def violin_figure(
    series: Sequence[CategorySeries],
    style: PlotStyle,
    *,
    title: Optional[str] = None,
    value_title: Optional[str] = None,
) -> dict:
    """Violin plot with one trace per CategorySeries."""
    fig = go.Figure()
    for i, s in enumerate(series):
        fig.add_trace(go.Violin(
            y=list(s.values),
            name=s.category,
            points=style.box_points,
            box_visible=style.violin_show_box,
            line_color=style.color_for(i),
        ))
    _apply_layout(fig, style, title=title, yaxis_title=value_title)
    return fig.to_dict()


def make_figure(
    plot_type: Union[PlotType, str],
    data: Sequence[Union[FrequencyEntry, CategorySeries]],
    style: PlotStyle,
    **kwargs: Any,
) -> dict:
    """Dispatch to the figure function for plot_type.

    Args:
        plot_type: PlotType or its string value ("bar", "pie", "box", "violin").
        data: FrequencyEntry list for bar/pie, CategorySeries list for box/violin.
        style: Style to render with.
        **kwargs: Passed through (title, axis_title, value_title).

    Raises:
        InvalidArgumentError: If plot_type is not a known PlotType.
    """
    try:
        plot_type = PlotType(plot_type)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown plot type {plot_type!r}") from e

    logger.info(f"make_figure: plot_type={plot_type.value}, items={len(data)}")

    if plot_type == PlotType.BAR:
        result = bar_figure(data, style, **kwargs)
    elif plot_type == PlotType.PIE:
        result = pie_figure(data, style, **kwargs)
    elif plot_type == PlotType.BOX:
        result = box_figure(data, style, **kwargs)
    else:
        result = violin_figure(data, style, **kwargs)

    logger.debug(f"Figure generated: {len(result.get('data', []))} traces")
    return result

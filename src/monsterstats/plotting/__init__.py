"""Chart rendering for monsterstats data structures (Plotly)."""

from monsterstats.plotting.figure_generator import (
    bar_figure,
    box_figure,
    make_figure,
    pie_figure,
    violin_figure,
)
from monsterstats.plotting.plot_style import PlotStyle, PlotType
from monsterstats.plotting.style_config import StyleConfig

__all__ = [
    "PlotStyle",
    "PlotType",
    "StyleConfig",
    "bar_figure",
    "box_figure",
    "make_figure",
    "pie_figure",
    "violin_figure",
]

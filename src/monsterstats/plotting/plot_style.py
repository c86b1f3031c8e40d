"""Plot types and the immutable style value passed to every figure call.

There is no module-level plotting default: callers build a PlotStyle (or
load one with StyleConfig) and pass it explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Union

from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)


class PlotType(Enum):
    """Enumeration of available chart types."""
    BAR = "bar"
    PIE = "pie"
    BOX = "box"
    VIOLIN = "violin"


BAR_ORIENTATIONS = ("v", "h")
BOX_POINTS = ("outliers", "all", "suspectedoutliers", False)

# plotly "Plotly" qualitative palette
DEFAULT_COLORS = (
    "#636EFA", "#EF553B", "#00CC96", "#AB63FA", "#FFA15A",
    "#19D3F3", "#FF6692", "#B6E880", "#FF97FF", "#FECB52",
)


@dataclass(frozen=True)
class PlotStyle:
    """Visual options for a chart. Use dataclasses.replace() to derive variants."""
    template: str = "plotly_white"
    color_sequence: tuple[str, ...] = DEFAULT_COLORS
    width: int = 800
    height: int = 500
    show_legend: bool = True
    title_font_size: int = 18
    bar_orientation: str = "v"         # "v" categories on x, "h" categories on y
    pie_hole: float = 0.0              # 0 = pie, > 0 = donut
    box_points: Union[str, bool] = "outliers"  # box/violin point display
    violin_show_box: bool = True       # draw a mini box inside each violin

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_sequence", tuple(self.color_sequence))
        if self.bar_orientation not in BAR_ORIENTATIONS:
            raise ValueError(f"bar_orientation must be one of {BAR_ORIENTATIONS}, got {self.bar_orientation!r}")
        if self.box_points not in BOX_POINTS:
            raise ValueError(f"box_points must be one of {BOX_POINTS}, got {self.box_points!r}")
        if not 0.0 <= self.pie_hole < 1.0:
            raise ValueError(f"pie_hole must be in [0, 1), got {self.pie_hole!r}")
        if not self.color_sequence:
            raise ValueError("color_sequence must not be empty")

    def color_for(self, i: int) -> str:
        """Color of the i-th trace, cycling through color_sequence."""
        return self.color_sequence[i % len(self.color_sequence)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize PlotStyle to a JSON-friendly dictionary."""
        return {
            "template": self.template,
            "color_sequence": list(self.color_sequence),
            "width": self.width,
            "height": self.height,
            "show_legend": self.show_legend,
            "title_font_size": self.title_font_size,
            "bar_orientation": self.bar_orientation,
            "pie_hole": self.pie_hole,
            "box_points": self.box_points,
            "violin_show_box": self.violin_show_box,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlotStyle":
        """Deserialize PlotStyle; unknown keys are ignored, missing keys defaulted.

        Raises:
            ValueError: If a value is out of range (see __post_init__).
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Unknown PlotStyle key {key!r}, ignoring")
        d = cls()
        return cls(
            template=str(data.get("template", d.template)),
            color_sequence=tuple(str(c) for c in data.get("color_sequence", d.color_sequence)),
            width=int(data.get("width", d.width)),
            height=int(data.get("height", d.height)),
            show_legend=bool(data.get("show_legend", d.show_legend)),
            title_font_size=int(data.get("title_font_size", d.title_font_size)),
            bar_orientation=str(data.get("bar_orientation", d.bar_orientation)),
            pie_hole=float(data.get("pie_hole", d.pie_hole)),
            box_points=data.get("box_points", d.box_points),
            violin_show_box=bool(data.get("violin_show_box", d.violin_show_box)),
        )

"""UtilizationGauge widget - terminal rendition of the utilization donut.

The ring is drawn as a row of cells: the track alone when no ratio is
defined, a single dot when the ratio is exactly zero, and a filled arc
proportional to the clamped ratio otherwise.

CSS Classes: widget-utilization-gauge
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.text import Text
from textual.reactive import reactive

from kubefinops.constants.values import TRACK_COLOR
from kubefinops.screens.finops.presenter import GaugeView
from kubefinops.widgets._base import BaseWidget

ARC_WIDTH = 24
_FILLED = "█"
_TRACK = "░"
_DOT = "●"


def render_arc(ring_ratio: float | None, color: str, width: int = ARC_WIDTH) -> Text:
    """Render the gauge arc as a styled row of ``width`` cells."""
    arc = Text()
    if ring_ratio is None:
        arc.append(_TRACK * width, style=TRACK_COLOR)
        return arc

    ratio = max(0.0, min(1.0, ring_ratio))
    if ratio == 0:
        arc.append(_DOT, style=f"bold {color}")
        arc.append(_TRACK * (width - 1), style=TRACK_COLOR)
        return arc

    # Any non-zero ratio shows at least one filled cell.
    filled = max(1, round(ratio * width))
    arc.append(_FILLED * filled, style=color)
    arc.append(_TRACK * (width - filled), style=TRACK_COLOR)
    return arc


def render_gauge(view: GaugeView, width: int = ARC_WIDTH) -> RenderableType:
    """Render a full gauge: title, value, badge, arc and detail lines."""
    title = Text(view.title, style="bold dim", justify="center")
    center = Text(view.center_value, style="bold", justify="center")
    badge = Text(justify="center")
    badge.append("[", style=view.badge_border_color)
    badge.append(f" {view.badge_text} ", style="bold")
    badge.append("]", style=view.badge_border_color)
    arc = render_arc(view.ring_ratio, view.ring_color, width)
    arc.justify = "center"

    lines = []
    for line in view.bottom_lines:
        text = Text(justify="center")
        text.append(f"{line.label}: ", style="dim")
        text.append(line.value, style="bold")
        lines.append(text)
    return Group(title, center, badge, arc, *lines)


class UtilizationGauge(BaseWidget):
    """Gauge for one resource of one container.

    CSS Classes: widget-utilization-gauge
    """

    DEFAULT_CSS = """
    UtilizationGauge {
        height: auto;
        width: 1fr;
        padding: 0 1;
    }
    """
    _id_pattern = "utilization-gauge-{uuid}"
    _default_classes = "widget-utilization-gauge"

    view: reactive[GaugeView | None] = reactive(None, layout=True)

    def __init__(
        self,
        view: GaugeView | None = None,
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.set_reactive(UtilizationGauge.view, view)

    def render(self) -> RenderableType:
        if self.view is None:
            return render_arc(None, TRACK_COLOR)
        return render_gauge(self.view)

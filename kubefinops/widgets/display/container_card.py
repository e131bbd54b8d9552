"""ContainerCard widget - memory and CPU gauges for one container.

CSS Classes: widget-container-card
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widgets import Static

from kubefinops.screens.finops.config import SECTION_CPU, SECTION_MEMORY
from kubefinops.screens.finops.presenter import ContainerCardView
from kubefinops.widgets._base import BaseWidget
from kubefinops.widgets.display.utilization_gauge import UtilizationGauge


class ContainerCard(BaseWidget):
    """Bordered card holding both gauges of one container."""

    DEFAULT_CSS = """
    ContainerCard {
        height: auto;
        width: 44;
        margin: 0 1 1 0;
        padding: 0 1;
        border: round $surface-lighten-2;
        background: $surface;
    }
    ContainerCard > .card-title {
        text-style: bold;
        margin-bottom: 1;
    }
    ContainerCard > .card-section {
        text-style: bold;
        color: $secondary;
    }
    """
    _default_classes = "widget-container-card"

    def __init__(self, card: ContainerCardView, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._card = card

    @property
    def card(self) -> ContainerCardView:
        return self._card

    def compose(self) -> ComposeResult:
        yield Static(f"Container: {self._card.container}", classes="card-title", markup=False)
        yield Static(SECTION_MEMORY, classes="card-section")
        yield UtilizationGauge(self._card.memory, classes="gauge-memory")
        yield Static(SECTION_CPU, classes="card-section")
        yield UtilizationGauge(self._card.cpu, classes="gauge-cpu")

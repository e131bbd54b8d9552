"""Display widgets: utilization gauges and container cards."""

from kubefinops.widgets.display.container_card import ContainerCard
from kubefinops.widgets.display.utilization_gauge import (
    UtilizationGauge,
    render_arc,
    render_gauge,
)

__all__ = ["ContainerCard", "UtilizationGauge", "render_arc", "render_gauge"]

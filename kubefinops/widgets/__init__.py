"""Widgets module for KubeFinOps.

- _base: BaseWidget with ID pattern and CSS class helpers
- display: UtilizationGauge, ContainerCard
"""

from kubefinops.widgets._base import BaseWidget
from kubefinops.widgets.display import ContainerCard, UtilizationGauge

__all__ = ["BaseWidget", "ContainerCard", "UtilizationGauge"]

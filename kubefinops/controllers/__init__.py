"""Controllers module for KubeFinOps.

This module provides controllers for fetching workload metrics from
Prometheus and turning them into utilization reports.
"""

from __future__ import annotations

# Base classes
from kubefinops.controllers.base import BaseController

# Utilization domain
from kubefinops.controllers.utilization.controller import UtilizationController

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "UtilizationController",
]

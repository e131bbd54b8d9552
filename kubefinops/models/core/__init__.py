"""Core domain models: scopes, metric points, reconciled records, statuses."""

from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.metric_point import MetricPoint
from kubefinops.models.core.utilization_report import (
    ContainerReport,
    FetchStatusInfo,
    ResourceUtilization,
    UtilizationReport,
)
from kubefinops.models.core.utilization_status import UtilizationStatus
from kubefinops.models.core.workload_scope import WorkloadScope

__all__ = [
    "ContainerReport",
    "ContainerUtilization",
    "FetchStatusInfo",
    "MetricPoint",
    "ResourceUtilization",
    "UtilizationReport",
    "UtilizationStatus",
    "WorkloadScope",
]

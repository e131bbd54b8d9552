"""Scalar constants for KubeFinOps.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeFinOps"

# ============================================================================
# Metric labels and names
# ============================================================================

INFRA_CONTAINER_SENTINEL: Final = "POD"

LABEL_CONTAINER: Final = "container"
LABEL_POD: Final = "pod"
LABEL_WORKLOAD: Final = "workload"
LABEL_WORKLOAD_TYPE: Final = "workload_type"

METRIC_MEMORY_WORKING_SET: Final = "container_memory_working_set_bytes"
METRIC_CPU_USAGE_RATE: Final = (
    "node_namespace_pod_container:container_cpu_usage_seconds_total:sum_irate"
)
METRIC_RESOURCE_REQUESTS: Final = "kube_pod_container_resource_requests"
METRIC_RESOURCE_LIMITS: Final = "kube_pod_container_resource_limits"
METRIC_POD_OWNER: Final = "namespace_workload_pod:kube_pod_owner:relabel"

# ============================================================================
# Units
# ============================================================================

BYTES_PER_GIB: Final = 1024**3
MILLICORES_PER_CORE: Final = 1000

# ============================================================================
# Display text
# ============================================================================

NOT_AVAILABLE: Final = "N/A"
NO_REQUEST_TEXT: Final = "No request"
NO_LIMIT_TEXT: Final = "No limit"
TRACK_COLOR: Final = "#8A8D90"

__all__ = [
    "APP_TITLE",
    "BYTES_PER_GIB",
    "INFRA_CONTAINER_SENTINEL",
    "LABEL_CONTAINER",
    "LABEL_POD",
    "LABEL_WORKLOAD",
    "LABEL_WORKLOAD_TYPE",
    "METRIC_CPU_USAGE_RATE",
    "METRIC_MEMORY_WORKING_SET",
    "METRIC_POD_OWNER",
    "METRIC_RESOURCE_LIMITS",
    "METRIC_RESOURCE_REQUESTS",
    "MILLICORES_PER_CORE",
    "NOT_AVAILABLE",
    "NO_LIMIT_TEXT",
    "NO_REQUEST_TEXT",
    "TRACK_COLOR",
]

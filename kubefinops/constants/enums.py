"""All enum definitions for KubeFinOps.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Metric Enums
# =============================================================================


class ResourceKind(Enum):
    """Tracked container resources."""

    MEMORY = "memory"
    CPU = "cpu"


class MetricKind(Enum):
    """Per-container series queried for each resource."""

    REQUEST = "request"
    LIMIT = "limit"
    CURRENT = "current"
    PEAK = "peak"


class WorkloadKind(Enum):
    """Workload kinds understood by the query builder."""

    DEPLOYMENT = "deployment"
    STATEFULSET = "statefulset"
    DAEMONSET = "daemonset"
    WORKLOAD = "workload"

    @classmethod
    def from_kind(cls, kind: str | None) -> "WorkloadKind":
        """Normalize a Kubernetes kind string (e.g. ``StatefulSet``)."""
        normalized = str(kind or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.WORKLOAD


# =============================================================================
# Strategy Enums
# =============================================================================


class ScopingStrategy(Enum):
    """How query selectors narrow container series down to one workload."""

    POD_PREFIX = "pod_prefix"
    OWNER_REFERENCE = "owner_reference"


class BaselineField(Enum):
    """Which configured allocation usage is compared against."""

    REQUEST = "request"
    LIMIT = "limit"


class StatusPolicy(Enum):
    """Threshold policy used to classify a utilization ratio."""

    FIXED_BOUNDARY = "fixed_boundary"
    INVERTED = "inverted"


# =============================================================================
# Status Enums
# =============================================================================


class StatusTier(Enum):
    """Derived utilization status tiers."""

    # Fixed-boundary policy
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"

    # Inverted policy
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    # Shared non-ratio states
    NO_BASELINE = "no_baseline"
    NO_DATA = "no_data"


class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "BaselineField",
    "FetchState",
    "MetricKind",
    "ResourceKind",
    "ScopingStrategy",
    "StatusPolicy",
    "StatusTier",
    "WorkloadKind",
]

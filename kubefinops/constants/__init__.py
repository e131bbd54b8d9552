"""Constants module for KubeFinOps.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (metric names, labels, units, display text)
- timeouts.py: Timeout values (seconds)
- limits.py: Validation ranges
- defaults.py: Default values for settings
- patterns.py: Regex patterns
"""

from kubefinops.constants.defaults import (
    COLOR_GREEN_DEFAULT,
    COLOR_RED_DEFAULT,
    COLOR_YELLOW_DEFAULT,
    RED_BELOW_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    YELLOW_BELOW_DEFAULT,
)
from kubefinops.constants.enums import (
    BaselineField,
    FetchState,
    MetricKind,
    ResourceKind,
    ScopingStrategy,
    StatusPolicy,
    StatusTier,
    WorkloadKind,
)
from kubefinops.constants.patterns import PROMQL_DURATION_PATTERN
from kubefinops.constants.limits import (
    RATIO_THRESHOLD_MAX,
    RATIO_THRESHOLD_MIN,
    REFRESH_INTERVAL_MIN,
)
from kubefinops.constants.timeouts import (
    PROMETHEUS_CHECK_TIMEOUT,
    PROMETHEUS_REQUEST_TIMEOUT,
    PROMETHEUS_RETRY_TIMEOUT,
)
from kubefinops.constants.values import (
    APP_TITLE,
    BYTES_PER_GIB,
    INFRA_CONTAINER_SENTINEL,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Units
    "BYTES_PER_GIB",
    # Colors
    "COLOR_GREEN_DEFAULT",
    "COLOR_RED_DEFAULT",
    "COLOR_YELLOW_DEFAULT",
    "INFRA_CONTAINER_SENTINEL",
    # Timeouts
    # Patterns
    "PROMQL_DURATION_PATTERN",
    "PROMETHEUS_CHECK_TIMEOUT",
    "PROMETHEUS_REQUEST_TIMEOUT",
    "PROMETHEUS_RETRY_TIMEOUT",
    "RATIO_THRESHOLD_MAX",
    "RATIO_THRESHOLD_MIN",
    # Thresholds
    "RED_BELOW_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "YELLOW_BELOW_DEFAULT",
    # Enums
    "BaselineField",
    "FetchState",
    "MetricKind",
    "ResourceKind",
    "ScopingStrategy",
    "StatusPolicy",
    "StatusTier",
    "WorkloadKind",
]

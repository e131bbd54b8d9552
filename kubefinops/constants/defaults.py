"""Default values for settings.

All default values used in FinOpsSettings and validation fallback values.
"""

from typing import Final

# ============================================================================
# Threshold color defaults
# ============================================================================

ENABLE_THRESHOLD_COLORS_DEFAULT: Final = True
RED_BELOW_DEFAULT: Final = 0.10
YELLOW_BELOW_DEFAULT: Final = 0.50
WARNING_AT_DEFAULT: Final = 0.70
CRITICAL_AT_DEFAULT: Final = 0.90

COLOR_GREEN_DEFAULT: Final = "#3E8635"
COLOR_YELLOW_DEFAULT: Final = "#F0AB00"
COLOR_RED_DEFAULT: Final = "#C9190B"

# ============================================================================
# Strategy defaults
# ============================================================================

STATUS_POLICY_DEFAULT: Final = "inverted"
BASELINE_FIELD_DEFAULT: Final = "request"
SCOPING_STRATEGY_DEFAULT: Final = "pod_prefix"

# ============================================================================
# Polling / backend defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 60
PROMETHEUS_URL_DEFAULT: Final = "http://localhost:9090"
PEAK_WINDOW_DEFAULT: Final = "7d"

__all__ = [
    "BASELINE_FIELD_DEFAULT",
    "COLOR_GREEN_DEFAULT",
    "COLOR_RED_DEFAULT",
    "COLOR_YELLOW_DEFAULT",
    "CRITICAL_AT_DEFAULT",
    "ENABLE_THRESHOLD_COLORS_DEFAULT",
    "PEAK_WINDOW_DEFAULT",
    "PROMETHEUS_URL_DEFAULT",
    "RED_BELOW_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SCOPING_STRATEGY_DEFAULT",
    "STATUS_POLICY_DEFAULT",
    "WARNING_AT_DEFAULT",
    "YELLOW_BELOW_DEFAULT",
]

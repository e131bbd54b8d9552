"""Limit and threshold constants for KubeFinOps.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
RATIO_THRESHOLD_MIN: Final = 0.0
RATIO_THRESHOLD_MAX: Final = 1.0

__all__ = [
    "RATIO_THRESHOLD_MAX",
    "RATIO_THRESHOLD_MIN",
    "REFRESH_INTERVAL_MIN",
]

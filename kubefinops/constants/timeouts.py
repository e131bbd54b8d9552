"""Timeout constants for KubeFinOps.

All timeout and interval values for Prometheus requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# Prometheus timeouts (seconds)
# ============================================================================

PROMETHEUS_REQUEST_TIMEOUT: Final = 20.0
PROMETHEUS_RETRY_TIMEOUT: Final = 45.0
PROMETHEUS_CHECK_TIMEOUT: Final = 5.0

__all__ = [
    "PROMETHEUS_CHECK_TIMEOUT",
    "PROMETHEUS_REQUEST_TIMEOUT",
    "PROMETHEUS_RETRY_TIMEOUT",
]

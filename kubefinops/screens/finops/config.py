"""FinOps screen configuration - titles, labels and status messages."""

from typing import Final

# ============================================================================
# Worker / polling
# ============================================================================

POLL_WORKER_GROUP: Final = "finops-poll"

# ============================================================================
# Headline messages
# ============================================================================

MESSAGE_LOADING: Final = "Loading…"
MESSAGE_QUERY_ERROR: Final = "Prometheus query error"
MESSAGE_PARTIAL_ERROR: Final = "Some metrics could not be loaded"
MESSAGE_NO_DATA: Final = "No data available for this workload"
MESSAGE_UNEXPECTED_ERROR: Final = "Unable to load utilization data"

# ============================================================================
# Gauge titles and labels
# ============================================================================

SECTION_MEMORY: Final = "Memory (RAM)"
SECTION_CPU: Final = "CPU"

TITLE_MEMORY_PEAK: Final = "Max memory used ({window})"
TITLE_CPU_PEAK: Final = "Max CPU used ({window})"

LABEL_CURRENT: Final = "Current"
LABEL_CURRENT_CPU: Final = "Current CPU"
LABEL_OVER_RESERVED: Final = "Over-reserved"
LABEL_REQUEST: Final = "Request"
LABEL_LIMIT: Final = "Limit"
LABEL_CPU_REQUEST: Final = "CPU request"
LABEL_CPU_LIMIT: Final = "CPU limit"

__all__ = [
    "LABEL_CPU_LIMIT",
    "LABEL_CPU_REQUEST",
    "LABEL_CURRENT",
    "LABEL_CURRENT_CPU",
    "LABEL_LIMIT",
    "LABEL_OVER_RESERVED",
    "LABEL_REQUEST",
    "MESSAGE_LOADING",
    "MESSAGE_NO_DATA",
    "MESSAGE_PARTIAL_ERROR",
    "MESSAGE_QUERY_ERROR",
    "MESSAGE_UNEXPECTED_ERROR",
    "POLL_WORKER_GROUP",
    "SECTION_CPU",
    "SECTION_MEMORY",
    "TITLE_CPU_PEAK",
    "TITLE_MEMORY_PEAK",
]

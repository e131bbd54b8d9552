"""Formatting utilities for resource values and ratios.

Memory values are bytes and CPU values are cores throughout; these helpers
turn them into the short strings shown next to the gauges:
- Memory: "0.19 GiB"
- CPU: "250m" below one core, "1.5" above
- Ratios: "44%"
"""

import math

from kubefinops.constants.values import BYTES_PER_GIB, MILLICORES_PER_CORE, NOT_AVAILABLE


def clamp01(value: float) -> float:
    """Clamp a ratio into [0, 1]."""
    return max(0.0, min(1.0, value))


def pct(ratio: float) -> int:
    """Convert a ratio to a whole percentage, rounding halves up."""
    return math.floor(ratio * 100 + 0.5)


def format_percent(ratio: float | None) -> str:
    """Format a ratio as ``"44%"``, or N/A when undefined."""
    if ratio is None or not math.isfinite(ratio):
        return NOT_AVAILABLE
    return f"{pct(ratio)}%"


def bytes_to_gib(value: float | None) -> float | None:
    if value is None:
        return None
    return value / BYTES_PER_GIB


def format_gib(value_bytes: float | None) -> str:
    """Format a byte count as GiB with two decimals.

    Args:
        value_bytes: Memory value in bytes, or None when absent.

    Returns:
        String like ``"0.19 GiB"``, or N/A when absent or non-finite.
    """
    gib = bytes_to_gib(value_bytes)
    if gib is None or not math.isfinite(gib):
        return NOT_AVAILABLE
    return f"{gib:.2f} GiB"


def format_cpu_cores(cores: float | None) -> str:
    """Format a CPU amount in cores.

    Handles two display forms:
    - Below one core: millicores, e.g. 0.25 -> "250m"
    - One core or more: cores rounded to two decimals, e.g. 1.5 -> "1.5"

    Args:
        cores: CPU value in cores, or None when absent.

    Returns:
        Display string, or N/A when absent or non-finite.
    """
    if cores is None or not math.isfinite(cores):
        return NOT_AVAILABLE
    if cores < 1:
        return f"{math.floor(cores * MILLICORES_PER_CORE + 0.5)}m"
    rounded = math.floor(cores * 100 + 0.5) / 100
    return f"{rounded:g}"

"""Utility helpers for KubeFinOps."""

from kubefinops.utils.resource_formatter import (
    bytes_to_gib,
    clamp01,
    format_cpu_cores,
    format_gib,
    format_percent,
    pct,
)

__all__ = [
    "bytes_to_gib",
    "clamp01",
    "format_cpu_cores",
    "format_gib",
    "format_percent",
    "pct",
]

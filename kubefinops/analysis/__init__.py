"""Utilization analysis: ratio, clamping and status derivation."""

from kubefinops.analysis.utilization_model import (
    UtilizationModelBuilder,
    classify_ratio,
    compute_ratio,
    derive,
)

__all__ = [
    "UtilizationModelBuilder",
    "classify_ratio",
    "compute_ratio",
    "derive",
]

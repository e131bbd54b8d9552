"""Reconcilers for the utilization controller."""

from kubefinops.controllers.utilization.reconcilers.series_reconciler import (
    SeriesReconciler,
    reconcile,
)

__all__ = ["SeriesReconciler", "reconcile"]

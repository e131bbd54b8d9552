"""Utilization domain: queries, fetchers, parsers, reconcilers, controller."""

from kubefinops.controllers.utilization.controller import (
    UtilizationController,
    source_name,
)
from kubefinops.controllers.utilization.fetchers import (
    PrometheusClient,
    PrometheusFetcher,
    PrometheusQueryError,
)
from kubefinops.controllers.utilization.parsers import (
    SeriesParser,
    SeriesPayloadError,
)
from kubefinops.controllers.utilization.queries import QueryBuilder, ResourceQueries
from kubefinops.controllers.utilization.reconcilers import SeriesReconciler

__all__ = [
    "PrometheusClient",
    "PrometheusFetcher",
    "PrometheusQueryError",
    "QueryBuilder",
    "ResourceQueries",
    "SeriesParser",
    "SeriesPayloadError",
    "SeriesReconciler",
    "UtilizationController",
    "source_name",
]

"""Fetchers for the utilization controller."""

from kubefinops.controllers.utilization.fetchers.prometheus_fetcher import (
    PrometheusClient,
    PrometheusFetcher,
    PrometheusQueryError,
)

__all__ = ["PrometheusClient", "PrometheusFetcher", "PrometheusQueryError"]

"""Utilization controller for workload FinOps data.

This module serves as the per-tick orchestrator: it builds the metric queries
for a workload, fetches every sibling series concurrently, and turns the
payloads into a reconciled, display-ready UtilizationReport.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from kubefinops.analysis.utilization_model import UtilizationModelBuilder
from kubefinops.constants.enums import FetchState, MetricKind, ResourceKind
from kubefinops.constants.timeouts import PROMETHEUS_CHECK_TIMEOUT
from kubefinops.controllers.base import BaseController
from kubefinops.controllers.utilization.fetchers import (
    PrometheusClient,
    PrometheusFetcher,
)
from kubefinops.controllers.utilization.fetchers.prometheus_fetcher import RunQueryFunc
from kubefinops.controllers.utilization.parsers import (
    SeriesParser,
    SeriesPayloadError,
)
from kubefinops.controllers.utilization.queries import QueryBuilder, ResourceQueries
from kubefinops.controllers.utilization.reconcilers import SeriesReconciler
from kubefinops.models.core.metric_point import MetricPoint
from kubefinops.models.core.utilization_report import (
    ContainerReport,
    FetchStatusInfo,
    ResourceUtilization,
    UtilizationReport,
)
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.models.state.finops_settings import FinOpsSettings

logger = logging.getLogger(__name__)

SeriesBySource = dict[ResourceKind, dict[MetricKind, list[MetricPoint] | None]]


def source_name(resource_kind: ResourceKind, metric_kind: MetricKind) -> str:
    """Stable identifier for one query series, e.g. ``memory_peak``."""
    return f"{resource_kind.value}_{metric_kind.value}"


class UtilizationController(BaseController):
    """Workload utilization operations with parallel fetching.

    This class delegates to specialized helpers:
    - QueryBuilder: PromQL expressions for the workload scope
    - PrometheusFetcher: raw payload fetching with timeout retries
    - SeriesParser: payload -> MetricPoint lists
    - SeriesReconciler: per-container join of request/limit/current/peak
    - UtilizationModelBuilder: ratio and status derivation
    """

    _CONNECTION_CHECK_QUERY = "vector(1)"

    def __init__(
        self,
        settings: FinOpsSettings | None = None,
        run_query_func: RunQueryFunc | None = None,
    ) -> None:
        self._settings = settings or FinOpsSettings()
        self._client: PrometheusClient | None = None
        if run_query_func is None:
            self._client = PrometheusClient(self._settings.prometheus)
            run_query_func = self._client.run_query
        self._fetcher = PrometheusFetcher(run_query_func)
        self._query_builder = QueryBuilder(
            strategy=self._settings.scoping_strategy,
            peak_window=self._settings.peak_window,
        )
        self._parser = SeriesParser()
        self._reconciler = SeriesReconciler()
        self._model_builder = UtilizationModelBuilder(self._settings)

    @property
    def settings(self) -> FinOpsSettings:
        return self._settings

    def build_queries(self, scope: WorkloadScope) -> dict[ResourceKind, ResourceQueries]:
        return self._query_builder.build(scope)

    async def check_connection(self) -> bool:
        """Return True when Prometheus answers a trivial query."""
        try:
            payload = await self._fetcher.fetch_series(
                self._CONNECTION_CHECK_QUERY, timeout=PROMETHEUS_CHECK_TIMEOUT
            )
            self._parser.parse(payload)
        except Exception as exc:
            logger.warning(f"Prometheus connection check failed: {exc}")
            return False
        return True

    async def fetch_all(self, scope: WorkloadScope) -> UtilizationReport:
        """Fetch, parse, reconcile and derive one tick for a workload.

        Backend and payload failures never raise: each failing series is
        recorded as an ERROR source and reconciliation proceeds with the
        series that succeeded.
        """
        start = time.monotonic()
        queries = self.build_queries(scope)
        jobs: list[tuple[ResourceKind, MetricKind, str]] = [
            (resource_kind, metric_kind, expr)
            for resource_kind, resource_queries in queries.items()
            for metric_kind, expr in resource_queries.items()
        ]

        timeout = self._settings.prometheus.timeout_seconds
        results = await asyncio.gather(
            *(self._fetcher.fetch_series(expr, timeout=timeout) for _, _, expr in jobs),
            return_exceptions=True,
        )

        series: SeriesBySource = {resource_kind: {} for resource_kind in ResourceKind}
        sources: dict[str, FetchStatusInfo] = {}
        for (resource_kind, metric_kind, _), result in zip(jobs, results):
            name = source_name(resource_kind, metric_kind)
            points, status = self._parse_result(name, result)
            series[resource_kind][metric_kind] = points
            sources[name] = status

        report = self.build_report(scope, series, sources)
        logger.debug(
            "Utilization tick for %s/%s: %s container(s), %s failed source(s) in %.0fms",
            scope.namespace,
            scope.workload_name,
            len(report.containers),
            len(report.failed_sources),
            (time.monotonic() - start) * 1000,
        )
        return report

    def _parse_result(
        self, name: str, result: Any
    ) -> tuple[list[MetricPoint] | None, FetchStatusInfo]:
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.warning(f"Query {name} failed: {result}")
            return None, FetchStatusInfo(
                source_name=name, state=FetchState.ERROR, error_message=str(result)
            )
        try:
            points = self._parser.parse(result)
        except SeriesPayloadError as exc:
            logger.warning(f"Query {name} returned an unusable payload: {exc}")
            return None, FetchStatusInfo(
                source_name=name, state=FetchState.ERROR, error_message=str(exc)
            )
        return points, FetchStatusInfo(source_name=name)

    def build_report(
        self,
        scope: WorkloadScope,
        series: SeriesBySource,
        sources: dict[str, FetchStatusInfo] | None = None,
    ) -> UtilizationReport:
        """Reconcile parsed series and derive statuses for every container."""
        by_resource = {
            resource_kind: self._reconciler.reconcile(
                request_series=series.get(resource_kind, {}).get(MetricKind.REQUEST),
                limit_series=series.get(resource_kind, {}).get(MetricKind.LIMIT),
                current_series=series.get(resource_kind, {}).get(MetricKind.CURRENT),
                peak_series=series.get(resource_kind, {}).get(MetricKind.PEAK),
                resource_kind=resource_kind,
                scope=scope,
            )
            for resource_kind in ResourceKind
        }

        containers = [
            ContainerReport(
                container=container,
                resources={
                    resource_kind: ResourceUtilization(
                        record=record,
                        status=self._model_builder.derive(record),
                    )
                    for resource_kind, record in records.items()
                },
            )
            for container, records in self._reconciler.merge_resources(by_resource).items()
        ]
        return UtilizationReport(scope=scope, containers=containers, sources=sources or {})

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

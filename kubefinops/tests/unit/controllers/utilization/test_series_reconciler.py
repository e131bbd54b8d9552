"""Tests for series reconciler."""

from __future__ import annotations

import pytest

from kubefinops.constants.enums import ResourceKind, WorkloadKind
from kubefinops.controllers.utilization.reconcilers.series_reconciler import (
    SeriesReconciler,
    reconcile,
)
from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.metric_point import MetricPoint
from kubefinops.models.core.workload_scope import WorkloadScope


def _points(**values: float) -> list[MetricPoint]:
    return [MetricPoint(container=name, value=value) for name, value in values.items()]


class TestSeriesReconciler:
    """Tests for SeriesReconciler class."""

    @pytest.fixture
    def reconciler(self) -> SeriesReconciler:
        return SeriesReconciler()

    def test_joins_all_series(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(
            request_series=_points(app=4.0),
            limit_series=_points(app=8.0),
            current_series=_points(app=2.0),
            peak_series=_points(app=3.5),
        )

        record = records["app"]
        assert record.request_value == 4.0
        assert record.limit_value == 8.0
        assert record.current_value == 2.0
        assert record.peak_value == 3.5
        assert record.resource_kind is ResourceKind.MEMORY

    def test_idle_container_with_zero_current_is_visible(
        self, reconciler: SeriesReconciler
    ) -> None:
        records = reconciler.reconcile(None, None, _points(sidecar=0.0), None)
        assert list(records) == ["sidecar"]
        assert records["sidecar"].current_value == 0.0

    def test_zero_peak_only_is_hidden(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(
            _points(ghost=1.0), None, _points(app=1.0), _points(app=2.0, ghost=0.0)
        )
        assert list(records) == ["app"]

    def test_positive_peak_only_is_visible(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(None, None, [], _points(old=5.0))
        assert records["old"].current_value is None
        assert records["old"].peak_value == 5.0

    def test_request_only_container_is_hidden(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(_points(app=1.0), _points(app=2.0), None, None)
        assert records == {}

    def test_absent_values_stay_none(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(None, None, _points(app=1.0), None)
        record = records["app"]
        assert record.request_value is None
        assert record.limit_value is None
        assert record.peak_value is None

    def test_measured_zero_is_not_absent(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(_points(app=0.0), None, _points(app=0.0), None)
        assert records["app"].request_value == 0.0

    def test_last_point_wins(self, reconciler: SeriesReconciler) -> None:
        current = [
            MetricPoint(container="app", value=1.0),
            MetricPoint(container="app", value=7.0),
        ]
        records = reconciler.reconcile(None, None, current, None)
        assert records["app"].current_value == 7.0

    def test_sorted_by_container(self, reconciler: SeriesReconciler) -> None:
        records = reconciler.reconcile(None, None, _points(zeta=1.0, alpha=1.0), None)
        assert list(records) == ["alpha", "zeta"]

    def test_records_carry_ownership(self, reconciler: SeriesReconciler) -> None:
        current = [
            MetricPoint(
                container="app", value=1.0, workload="api", workload_kind="deployment"
            )
        ]
        records = reconciler.reconcile(None, None, current, None)
        assert records["app"].workload == "api"
        assert records["app"].workload_kind == "deployment"

    def test_scope_filters_foreign_workloads(self, reconciler: SeriesReconciler) -> None:
        scope = WorkloadScope(
            namespace="ns", workload_name="api", workload_kind=WorkloadKind.DEPLOYMENT
        )
        current = [
            MetricPoint(container="app", value=1.0, workload="api", workload_kind="Deployment"),
            MetricPoint(container="gw", value=1.0, workload="api-gateway"),
            MetricPoint(container="job", value=1.0, workload="api", workload_kind="job"),
            MetricPoint(container="plain", value=1.0),
        ]
        records = reconciler.reconcile(None, None, current, None, scope=scope)
        assert list(records) == ["app", "plain"]

    def test_generic_scope_ignores_kind(self, reconciler: SeriesReconciler) -> None:
        scope = WorkloadScope(namespace="ns", workload_name="api")
        current = [MetricPoint(container="app", value=1.0, workload="api", workload_kind="job")]
        records = reconciler.reconcile(None, None, current, None, scope=scope)
        assert list(records) == ["app"]

    def test_merge_resources_fills_missing(self) -> None:
        memory = reconcile(None, None, _points(app=1.0), None, resource_kind=ResourceKind.MEMORY)
        cpu = reconcile(None, None, _points(worker=0.5), None, resource_kind=ResourceKind.CPU)

        merged = SeriesReconciler.merge_resources(
            {ResourceKind.MEMORY: memory, ResourceKind.CPU: cpu}
        )

        assert list(merged) == ["app", "worker"]
        filler = merged["app"][ResourceKind.CPU]
        assert isinstance(filler, ContainerUtilization)
        assert filler.resource_kind is ResourceKind.CPU
        assert filler.request_value is None
        assert filler.current_value is None
        assert filler.peak_value is None
        assert merged["worker"][ResourceKind.CPU].current_value == 0.5

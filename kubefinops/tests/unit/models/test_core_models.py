"""Tests for core domain models."""

from __future__ import annotations

from kubefinops.constants.enums import BaselineField, FetchState, ResourceKind, WorkloadKind
from kubefinops.models.core import (
    ContainerReport,
    ContainerUtilization,
    FetchStatusInfo,
    UtilizationReport,
    WorkloadScope,
)


class TestWorkloadScope:
    """Tests for WorkloadScope."""

    def test_from_object(self) -> None:
        scope = WorkloadScope.from_object(
            {"kind": "StatefulSet", "metadata": {"name": "db", "namespace": "data"}}
        )
        assert scope.namespace == "data"
        assert scope.workload_name == "db"
        assert scope.workload_kind is WorkloadKind.STATEFULSET

    def test_from_empty_object(self) -> None:
        scope = WorkloadScope.from_object(None)
        assert scope.namespace == ""
        assert scope.workload_name == ""
        assert scope.workload_kind is WorkloadKind.WORKLOAD


class TestContainerUtilization:
    """Tests for ContainerUtilization."""

    def test_baseline_value(self) -> None:
        record = ContainerUtilization(
            container="app",
            resource_kind=ResourceKind.CPU,
            request_value=0.5,
            limit_value=1.0,
        )
        assert record.baseline_value(BaselineField.REQUEST) == 0.5
        assert record.baseline_value(BaselineField.LIMIT) == 1.0


class TestUtilizationReport:
    """Tests for UtilizationReport."""

    def _report(self, sources: dict, containers: list | None = None) -> UtilizationReport:
        return UtilizationReport(
            scope=WorkloadScope(namespace="ns", workload_name="api"),
            containers=containers or [],
            sources=sources,
        )

    def test_all_success(self) -> None:
        report = self._report({"memory_peak": FetchStatusInfo(source_name="memory_peak")})
        assert report.has_errors is False
        assert report.error_message is None

    def test_error_message_lists_details(self) -> None:
        report = self._report(
            {
                "memory_peak": FetchStatusInfo(
                    source_name="memory_peak", state=FetchState.ERROR, error_message="boom"
                ),
                "cpu_limit": FetchStatusInfo(
                    source_name="cpu_limit", state=FetchState.ERROR, error_message="down"
                ),
            }
        )
        assert report.failed_sources == ["cpu_limit", "memory_peak"]
        assert report.error_message == "cpu_limit: down; memory_peak: boom"

    def test_error_message_without_details(self) -> None:
        report = self._report(
            {"cpu_peak": FetchStatusInfo(source_name="cpu_peak", state=FetchState.ERROR)}
        )
        assert report.error_message == "Failed queries: cpu_peak"

    def test_is_empty(self) -> None:
        assert self._report({}).is_empty is True
        report = self._report({}, [ContainerReport(container="app")])
        assert report.is_empty is False
        assert report.containers[0].memory is None

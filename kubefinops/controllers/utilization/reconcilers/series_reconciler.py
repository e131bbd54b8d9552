"""Series reconciler for utilization controller - joins parsed series by container."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kubefinops.constants.enums import ResourceKind, WorkloadKind
from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.metric_point import MetricPoint
from kubefinops.models.core.workload_scope import WorkloadScope

logger = logging.getLogger(__name__)


class SeriesReconciler:
    """Joins request/limit/current/peak series into per-container records.

    Visible containers are every container in the current series (including
    idle ones reporting exactly zero) plus every container whose peak is
    strictly positive. A container that only shows up with a zero peak is
    treated as never observed.
    """

    def __init__(self) -> None:
        """Initialize series reconciler."""
        pass

    @staticmethod
    def _matches_scope(point: MetricPoint, scope: WorkloadScope | None) -> bool:
        """Return False when a point's ownership labels contradict the scope."""
        if scope is None:
            return True
        if point.workload is not None and point.workload != scope.workload_name:
            return False
        if (
            point.workload_kind is not None
            and scope.workload_kind is not WorkloadKind.WORKLOAD
            and point.workload_kind.lower() != scope.workload_kind.value
        ):
            return False
        return True

    def index_by_container(
        self,
        series: Iterable[MetricPoint] | None,
        scope: WorkloadScope | None = None,
    ) -> dict[str, MetricPoint]:
        """Build a container lookup; the last point for a container wins."""
        table: dict[str, MetricPoint] = {}
        for point in series or ():
            if not self._matches_scope(point, scope):
                logger.debug(
                    "Ignoring %s sample owned by %s/%s",
                    point.container,
                    point.workload_kind,
                    point.workload,
                )
                continue
            table[point.container] = point
        return table

    @staticmethod
    def visible_containers(
        current_by: dict[str, MetricPoint],
        peak_by: dict[str, MetricPoint],
    ) -> list[str]:
        """Containers to display, sorted by name."""
        visible = set(current_by)
        visible.update(name for name, point in peak_by.items() if point.value > 0)
        return sorted(visible)

    def reconcile(
        self,
        request_series: Iterable[MetricPoint] | None,
        limit_series: Iterable[MetricPoint] | None,
        current_series: Iterable[MetricPoint] | None,
        peak_series: Iterable[MetricPoint] | None,
        resource_kind: ResourceKind = ResourceKind.MEMORY,
        scope: WorkloadScope | None = None,
    ) -> dict[str, ContainerUtilization]:
        """Join one resource's series into records keyed by container name.

        A series that is missing (``None``) or lacks a container leaves the
        matching field as ``None``, never ``0.0``.
        """
        request_by = self.index_by_container(request_series, scope)
        limit_by = self.index_by_container(limit_series, scope)
        current_by = self.index_by_container(current_series, scope)
        peak_by = self.index_by_container(peak_series, scope)

        records: dict[str, ContainerUtilization] = {}
        for container in self.visible_containers(current_by, peak_by):
            points = [
                by.get(container) for by in (current_by, peak_by, request_by, limit_by)
            ]
            workload = next((p.workload for p in points if p and p.workload), None)
            workload_kind = next(
                (p.workload_kind for p in points if p and p.workload_kind), None
            )
            records[container] = ContainerUtilization(
                container=container,
                resource_kind=resource_kind,
                request_value=self._value(request_by, container),
                limit_value=self._value(limit_by, container),
                current_value=self._value(current_by, container),
                peak_value=self._value(peak_by, container),
                workload=workload,
                workload_kind=workload_kind,
            )
        return records

    @staticmethod
    def _value(table: dict[str, MetricPoint], container: str) -> float | None:
        point = table.get(container)
        return point.value if point is not None else None

    @staticmethod
    def merge_resources(
        by_resource: dict[ResourceKind, dict[str, ContainerUtilization]],
    ) -> dict[str, dict[ResourceKind, ContainerUtilization]]:
        """Group per-resource records by container.

        A container visible for one resource gets an all-absent record for
        every other resource.
        """
        containers = sorted({name for records in by_resource.values() for name in records})
        merged: dict[str, dict[ResourceKind, ContainerUtilization]] = {}
        for container in containers:
            merged[container] = {
                resource_kind: by_resource.get(resource_kind, {}).get(container)
                or ContainerUtilization(container=container, resource_kind=resource_kind)
                for resource_kind in ResourceKind
            }
        return merged


def reconcile(
    request_series: Iterable[MetricPoint] | None,
    limit_series: Iterable[MetricPoint] | None,
    current_series: Iterable[MetricPoint] | None,
    peak_series: Iterable[MetricPoint] | None,
    resource_kind: ResourceKind = ResourceKind.MEMORY,
    scope: WorkloadScope | None = None,
) -> dict[str, ContainerUtilization]:
    """Join one resource's series with a default SeriesReconciler."""
    return SeriesReconciler().reconcile(
        request_series,
        limit_series,
        current_series,
        peak_series,
        resource_kind=resource_kind,
        scope=scope,
    )

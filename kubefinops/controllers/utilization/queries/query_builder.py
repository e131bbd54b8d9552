"""Query builder for utilization controller - builds PromQL expressions per workload."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from kubefinops.constants.defaults import PEAK_WINDOW_DEFAULT
from kubefinops.constants.enums import (
    MetricKind,
    ResourceKind,
    ScopingStrategy,
    WorkloadKind,
)
from kubefinops.constants.patterns import (
    PROMQL_DURATION_PATTERN,
    REGEX_METACHAR_PATTERN,
)
from kubefinops.constants.values import (
    INFRA_CONTAINER_SENTINEL,
    LABEL_CONTAINER,
    LABEL_WORKLOAD,
    LABEL_WORKLOAD_TYPE,
    METRIC_CPU_USAGE_RATE,
    METRIC_MEMORY_WORKING_SET,
    METRIC_POD_OWNER,
    METRIC_RESOURCE_LIMITS,
    METRIC_RESOURCE_REQUESTS,
)
from kubefinops.models.core.workload_scope import WorkloadScope


def escape_regex(value: str) -> str:
    """Escape regex metacharacters so ``value`` matches literally."""
    return REGEX_METACHAR_PATTERN.sub(r"\\\g<0>", value)


def escape_label_value(value: str) -> str:
    """Escape a value for use inside a double-quoted PromQL string."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )


@dataclass(frozen=True)
class ResourceQueries:
    """The four query expressions tracked for one resource."""

    request: str
    limit: str
    current: str
    peak: str

    def for_metric(self, metric_kind: MetricKind) -> str:
        return getattr(self, metric_kind.value)

    def items(self) -> Iterator[tuple[MetricKind, str]]:
        for metric_kind in MetricKind:
            yield metric_kind, self.for_metric(metric_kind)


class QueryBuilder:
    """Builds request/limit/current/peak expressions for memory and CPU.

    Two scoping strategies are supported:

    - ``POD_PREFIX`` matches pods named ``<workload>-.*``. StatefulSet
      ordinals and DaemonSet hash suffixes both match this pattern.
    - ``OWNER_REFERENCE`` joins container series with the pod ownership
      recording rule on ``(namespace, pod)``, which avoids prefix collisions
      between workloads such as ``api`` and ``api-gateway``.

    Building never raises; empty scope values produce valid expressions that
    simply match nothing.
    """

    _USAGE_METRICS = {
        ResourceKind.MEMORY: METRIC_MEMORY_WORKING_SET,
        ResourceKind.CPU: METRIC_CPU_USAGE_RATE,
    }
    _ALLOCATION_METRICS = {
        MetricKind.REQUEST: METRIC_RESOURCE_REQUESTS,
        MetricKind.LIMIT: METRIC_RESOURCE_LIMITS,
    }

    def __init__(
        self,
        strategy: ScopingStrategy = ScopingStrategy.POD_PREFIX,
        peak_window: str = PEAK_WINDOW_DEFAULT,
    ) -> None:
        self.strategy = strategy
        self.peak_window = (
            peak_window
            if PROMQL_DURATION_PATTERN.match(peak_window or "")
            else PEAK_WINDOW_DEFAULT
        )

    def build(self, scope: WorkloadScope) -> dict[ResourceKind, ResourceQueries]:
        """Build all expressions for a workload scope."""
        return {
            resource_kind: ResourceQueries(
                request=self._allocation_query(scope, resource_kind, MetricKind.REQUEST),
                limit=self._allocation_query(scope, resource_kind, MetricKind.LIMIT),
                current=self._usage_query(scope, resource_kind, peak=False),
                peak=self._usage_query(scope, resource_kind, peak=True),
            )
            for resource_kind in ResourceKind
        }

    # ------------------------------------------------------------------
    # Selectors
    # ------------------------------------------------------------------

    @staticmethod
    def _selector(matchers: list[str]) -> str:
        return "{" + ", ".join(matchers) + "}"

    def _container_matchers(
        self, scope: WorkloadScope, resource_kind: ResourceKind | None = None
    ) -> list[str]:
        matchers = [f'namespace="{escape_label_value(scope.namespace)}"']
        if self.strategy is ScopingStrategy.POD_PREFIX:
            pod_regex = f"{escape_regex(scope.workload_name)}-.*"
            matchers.append(f'pod=~"{escape_label_value(pod_regex)}"')
        if resource_kind is not None:
            matchers.append(f'resource="{resource_kind.value}"')
        matchers.append(f'{LABEL_CONTAINER}!=""')
        matchers.append(f'{LABEL_CONTAINER}!="{INFRA_CONTAINER_SENTINEL}"')
        return matchers

    def _owner_selector(self, scope: WorkloadScope) -> str:
        matchers = [
            f'namespace="{escape_label_value(scope.namespace)}"',
            f'{LABEL_WORKLOAD}="{escape_label_value(scope.workload_name)}"',
        ]
        if scope.workload_kind is not WorkloadKind.WORKLOAD:
            matchers.append(f'{LABEL_WORKLOAD_TYPE}="{scope.workload_kind.value}"')
        return METRIC_POD_OWNER + self._selector(matchers)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _aggregate(self, inner: str) -> str:
        if self.strategy is ScopingStrategy.OWNER_REFERENCE:
            labels = f"{LABEL_CONTAINER}, {LABEL_WORKLOAD}, {LABEL_WORKLOAD_TYPE}"
        else:
            labels = LABEL_CONTAINER
        return f"max by ({labels}) ({inner})"

    def _join_owner(self, series: str, owner: str) -> str:
        return (
            f"{series} * on (namespace, pod) "
            f"group_left ({LABEL_WORKLOAD}, {LABEL_WORKLOAD_TYPE}) {owner}"
        )

    def _usage_query(
        self, scope: WorkloadScope, resource_kind: ResourceKind, *, peak: bool
    ) -> str:
        series = self._USAGE_METRICS[resource_kind] + self._selector(
            self._container_matchers(scope)
        )
        owner = self._owner_selector(scope)
        if peak:
            series = f"max_over_time({series}[{self.peak_window}])"
            # Pods replaced during the window still belong to the workload.
            owner = f"max_over_time({owner}[{self.peak_window}])"
        if self.strategy is ScopingStrategy.OWNER_REFERENCE:
            series = self._join_owner(series, owner)
        return self._aggregate(series)

    def _allocation_query(
        self, scope: WorkloadScope, resource_kind: ResourceKind, metric_kind: MetricKind
    ) -> str:
        series = self._ALLOCATION_METRICS[metric_kind] + self._selector(
            self._container_matchers(scope, resource_kind)
        )
        if self.strategy is ScopingStrategy.OWNER_REFERENCE:
            series = self._join_owner(series, self._owner_selector(scope))
        return self._aggregate(series)


def build_queries(
    namespace: str,
    workload_name: str,
    workload_kind: WorkloadKind | str,
    strategy: ScopingStrategy = ScopingStrategy.POD_PREFIX,
    peak_window: str = PEAK_WINDOW_DEFAULT,
) -> dict[ResourceKind, ResourceQueries]:
    """Build request/limit/current/peak expressions for memory and CPU."""
    if not isinstance(workload_kind, WorkloadKind):
        workload_kind = WorkloadKind.from_kind(workload_kind)
    scope = WorkloadScope(
        namespace=namespace or "",
        workload_name=workload_name or "",
        workload_kind=workload_kind,
    )
    return QueryBuilder(strategy=strategy, peak_window=peak_window).build(scope)

"""FinOps screen presenter - turns utilization reports into gauge view models."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kubefinops.analysis.utilization_model import derive
from kubefinops.constants.enums import (
    BaselineField,
    FetchState,
    ResourceKind,
    StatusPolicy,
)
from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.utilization_report import (
    ContainerReport,
    ResourceUtilization,
    UtilizationReport,
)
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.models.state.finops_settings import FinOpsSettings
from kubefinops.screens.finops.config import (
    LABEL_CPU_LIMIT,
    LABEL_CPU_REQUEST,
    LABEL_CURRENT,
    LABEL_CURRENT_CPU,
    LABEL_LIMIT,
    LABEL_OVER_RESERVED,
    LABEL_REQUEST,
    MESSAGE_LOADING,
    MESSAGE_NO_DATA,
    MESSAGE_PARTIAL_ERROR,
    MESSAGE_QUERY_ERROR,
    TITLE_CPU_PEAK,
    TITLE_MEMORY_PEAK,
)
from kubefinops.utils.resource_formatter import format_cpu_cores, format_gib

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GaugeLine:
    """One ``label: value`` line rendered under a gauge."""

    label: str
    value: str


@dataclass(frozen=True)
class GaugeView:
    """Display-ready state for one gauge.

    ``ring_ratio`` is None when no progress arc must be drawn (track only).
    """

    title: str
    center_value: str
    badge_text: str
    badge_border_color: str
    ring_ratio: float | None
    ring_color: str
    bottom_lines: tuple[GaugeLine, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ContainerCardView:
    """Both gauges for one container."""

    container: str
    memory: GaugeView
    cpu: GaugeView


class FinOpsPresenter:
    """Presenter for FinOpsScreen text and gauge formatting."""

    def __init__(self, settings: FinOpsSettings | None = None) -> None:
        self._settings = settings or FinOpsSettings()
        self._report: UtilizationReport | None = None
        self._state = FetchState.LOADING
        self._failure_message = ""

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is FetchState.LOADING

    @property
    def report(self) -> UtilizationReport | None:
        return self._report

    @property
    def error_message(self) -> str:
        """Unexpected failure of the last poll, else the report's query errors."""
        if self._failure_message:
            return self._failure_message
        if self._report is not None:
            return self._report.error_message or ""
        return ""

    def start_loading(self) -> None:
        self._state = FetchState.LOADING

    def set_report(self, report: UtilizationReport) -> None:
        self._report = report
        self._failure_message = ""
        self._state = FetchState.ERROR if report.has_errors else FetchState.SUCCESS

    def set_error(self, error: str) -> None:
        """Record an unexpected failure; the previous report stays visible."""
        self._state = FetchState.ERROR
        self._failure_message = error

    # ------------------------------------------------------------------
    # Headline
    # ------------------------------------------------------------------

    @staticmethod
    def scope_line(scope: WorkloadScope, kind_label: str | None = None) -> str:
        kind = kind_label or scope.workload_kind.value.capitalize()
        return (
            f"{kind} [b]{scope.workload_name or '-'}[/b] "
            f"in namespace [b]{scope.namespace or '-'}[/b]"
        )

    def headline(self) -> str | None:
        """Status line shown above the cards, or None when nothing to say."""
        if self._failure_message:
            return self._failure_message
        report = self._report
        if report is None:
            return MESSAGE_LOADING
        if report.has_errors and report.is_empty:
            return MESSAGE_QUERY_ERROR
        if report.is_empty:
            return MESSAGE_NO_DATA
        if report.has_errors:
            return MESSAGE_PARTIAL_ERROR
        return None

    # ------------------------------------------------------------------
    # Gauges
    # ------------------------------------------------------------------

    def _show_over_reserved(self) -> bool:
        return self._settings.status_policy is StatusPolicy.INVERTED

    def _window(self) -> str:
        return self._settings.peak_window

    def memory_gauge(self, utilization: ResourceUtilization) -> GaugeView:
        record, status = utilization.record, utilization.status
        baseline_label = (
            LABEL_LIMIT if status.baseline_field is BaselineField.LIMIT else LABEL_REQUEST
        )
        lines = [
            GaugeLine(baseline_label, format_gib(record.baseline_value(status.baseline_field))),
            GaugeLine(LABEL_CURRENT, format_gib(record.current_value)),
        ]
        if self._show_over_reserved():
            lines.append(GaugeLine(LABEL_OVER_RESERVED, status.over_reserved_text))
        return GaugeView(
            title=TITLE_MEMORY_PEAK.format(window=self._window()),
            center_value=format_gib(record.peak_value),
            badge_text=status.badge_text,
            badge_border_color=status.color,
            ring_ratio=status.clamped_ratio,
            ring_color=status.color,
            bottom_lines=tuple(lines),
        )

    def cpu_gauge(self, utilization: ResourceUtilization) -> GaugeView:
        record, status = utilization.record, utilization.status
        baseline_label = (
            LABEL_CPU_LIMIT if status.baseline_field is BaselineField.LIMIT else LABEL_CPU_REQUEST
        )
        lines = [
            GaugeLine(
                baseline_label, format_cpu_cores(record.baseline_value(status.baseline_field))
            ),
            GaugeLine(LABEL_CURRENT_CPU, format_cpu_cores(record.current_value)),
        ]
        if self._show_over_reserved():
            lines.append(GaugeLine(LABEL_OVER_RESERVED, status.over_reserved_text))
        return GaugeView(
            title=TITLE_CPU_PEAK.format(window=self._window()),
            center_value=status.percent_text,
            badge_text=status.badge_text,
            badge_border_color=status.color,
            ring_ratio=status.clamped_ratio,
            ring_color=status.color,
            bottom_lines=tuple(lines),
        )

    def _resource(
        self, container: ContainerReport, resource_kind: ResourceKind
    ) -> ResourceUtilization:
        utilization = container.resources.get(resource_kind)
        if utilization is not None:
            return utilization
        # Reports always carry both resources; this only guards hand-built ones.
        record = ContainerUtilization(container=container.container, resource_kind=resource_kind)
        return ResourceUtilization(record=record, status=derive(record, self._settings))

    def container_card(self, container: ContainerReport) -> ContainerCardView:
        return ContainerCardView(
            container=container.container,
            memory=self.memory_gauge(self._resource(container, ResourceKind.MEMORY)),
            cpu=self.cpu_gauge(self._resource(container, ResourceKind.CPU)),
        )

    def container_cards(self) -> list[ContainerCardView]:
        if self._report is None:
            return []
        return [self.container_card(container) for container in self._report.containers]

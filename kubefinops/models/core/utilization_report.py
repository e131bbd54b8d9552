"""Per-tick utilization report returned to the host view."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kubefinops.constants.enums import FetchState, ResourceKind
from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.utilization_status import UtilizationStatus
from kubefinops.models.core.workload_scope import WorkloadScope


class FetchStatusInfo(BaseModel):
    """Outcome of fetching and parsing one query series."""

    source_name: str
    state: FetchState = FetchState.SUCCESS
    error_message: str | None = None


class ResourceUtilization(BaseModel):
    """Reconciled record plus its derived status."""

    record: ContainerUtilization
    status: UtilizationStatus


class ContainerReport(BaseModel):
    """All tracked resources for one container."""

    container: str
    resources: dict[ResourceKind, ResourceUtilization] = Field(default_factory=dict)

    @property
    def memory(self) -> ResourceUtilization | None:
        return self.resources.get(ResourceKind.MEMORY)

    @property
    def cpu(self) -> ResourceUtilization | None:
        return self.resources.get(ResourceKind.CPU)


class UtilizationReport(BaseModel):
    """Reconciled, display-ready utilization model for one workload."""

    scope: WorkloadScope
    containers: list[ContainerReport] = Field(default_factory=list)
    sources: dict[str, FetchStatusInfo] = Field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return any(s.state is FetchState.ERROR for s in self.sources.values())

    @property
    def is_empty(self) -> bool:
        return not self.containers

    @property
    def failed_sources(self) -> list[str]:
        return sorted(
            name for name, s in self.sources.items() if s.state is FetchState.ERROR
        )

    @property
    def error_message(self) -> str | None:
        """Aggregate error text, or None when every source succeeded."""
        failed = self.failed_sources
        if not failed:
            return None
        details = [
            f"{name}: {self.sources[name].error_message}"
            for name in failed
            if self.sources[name].error_message
        ]
        if details:
            return "; ".join(details)
        return f"Failed queries: {', '.join(failed)}"

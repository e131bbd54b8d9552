"""Reconciled per-container record for one resource kind."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kubefinops.constants.enums import BaselineField, ResourceKind


class ContainerUtilization(BaseModel):
    """Request/limit/current/peak values joined by container name.

    ``None`` means the series had no sample for this container; ``0.0`` means
    the backend measured zero.
    """

    model_config = ConfigDict(frozen=True)

    container: str
    resource_kind: ResourceKind
    request_value: float | None = None
    limit_value: float | None = None
    current_value: float | None = None
    peak_value: float | None = None
    workload: str | None = None
    workload_kind: str | None = None

    def baseline_value(self, baseline_field: BaselineField) -> float | None:
        """Return the allocation acting as baseline."""
        if baseline_field is BaselineField.LIMIT:
            return self.limit_value
        return self.request_value


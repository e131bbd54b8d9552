"""Workload scope descriptor supplied by the host view."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kubefinops.constants.enums import WorkloadKind


class WorkloadScope(BaseModel):
    """Namespace, name and kind of the workload being inspected."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    workload_name: str = ""
    workload_kind: WorkloadKind = WorkloadKind.WORKLOAD

    @classmethod
    def from_object(cls, obj: dict | None) -> WorkloadScope:
        """Build a scope from a Kubernetes object dict (``kind`` + ``metadata``)."""
        obj = obj or {}
        metadata = obj.get("metadata") or {}
        return cls(
            namespace=str(metadata.get("namespace") or ""),
            workload_name=str(metadata.get("name") or ""),
            workload_kind=WorkloadKind.from_kind(obj.get("kind")),
        )

"""Single parsed sample from a metric query result."""

from pydantic import BaseModel, ConfigDict


class MetricPoint(BaseModel):
    """One (container, value) observation.

    Memory values are bytes, CPU values are cores.
    """

    model_config = ConfigDict(frozen=True)

    container: str
    value: float
    pod: str | None = None
    workload: str | None = None
    workload_kind: str | None = None

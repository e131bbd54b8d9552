"""Derived utilization status for one reconciled record."""

from pydantic import BaseModel, ConfigDict

from kubefinops.constants.enums import BaselineField, StatusPolicy, StatusTier


class UtilizationStatus(BaseModel):
    """Ratio, gauge ratio, tier and color derived from a record.

    ``ratio`` is unclamped (may exceed 1.0); ``clamped_ratio`` only drives
    the gauge arc.
    """

    model_config = ConfigDict(frozen=True)

    tier: StatusTier
    color: str
    policy: StatusPolicy
    baseline_field: BaselineField
    ratio: float | None = None
    clamped_ratio: float | None = None
    over_reserved_fraction: float | None = None
    has_baseline: bool = False
    percent_text: str = "N/A"
    over_reserved_text: str = "N/A"
    badge_text: str = "N/A"

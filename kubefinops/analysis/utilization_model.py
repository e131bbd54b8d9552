"""Utilization model builder - derives ratio, gauge ratio and status tier."""

from __future__ import annotations

import math

from kubefinops.constants.enums import BaselineField, StatusPolicy, StatusTier
from kubefinops.constants.values import (
    NO_LIMIT_TEXT,
    NO_REQUEST_TEXT,
    NOT_AVAILABLE,
    TRACK_COLOR,
)
from kubefinops.models.core.container_utilization import ContainerUtilization
from kubefinops.models.core.utilization_status import UtilizationStatus
from kubefinops.models.state.finops_settings import (
    ColorSettings,
    FinOpsSettings,
    ThresholdSettings,
)
from kubefinops.utils.resource_formatter import clamp01, format_percent

_GOOD_TIER = {
    StatusPolicy.FIXED_BOUNDARY: StatusTier.OK,
    StatusPolicy.INVERTED: StatusTier.GREEN,
}


def compute_ratio(peak: float | None, baseline: float | None) -> float | None:
    """Return peak / baseline, or None when either side is unusable."""
    if baseline is None or not math.isfinite(baseline) or baseline <= 0:
        return None
    if peak is None or not math.isfinite(peak):
        return None
    return peak / baseline


def classify_ratio(
    ratio: float,
    policy: StatusPolicy,
    thresholds: ThresholdSettings,
) -> StatusTier:
    """Map a defined ratio onto a status tier.

    Fixed-boundary (safety framing): high usage is bad.
    Inverted (cost framing): low usage is bad; there is no upper bound on
    the good tier.
    """
    if policy is StatusPolicy.FIXED_BOUNDARY:
        if ratio >= thresholds.critical_at:
            return StatusTier.CRITICAL
        if ratio >= thresholds.warning_at:
            return StatusTier.WARNING
        return StatusTier.OK

    if ratio < thresholds.red_below:
        return StatusTier.RED
    if ratio < thresholds.yellow_below:
        return StatusTier.YELLOW
    return StatusTier.GREEN


def tier_color(tier: StatusTier, colors: ColorSettings) -> str:
    """Resolve the configured color for a tier."""
    if tier in (StatusTier.OK, StatusTier.GREEN):
        return colors.green
    if tier in (StatusTier.WARNING, StatusTier.YELLOW):
        return colors.yellow
    if tier in (StatusTier.CRITICAL, StatusTier.RED):
        return colors.red
    return TRACK_COLOR


class UtilizationModelBuilder:
    """Derives UtilizationStatus values from reconciled records.

    The builder holds the read-only settings it was created with and keeps
    no other state, so ``derive`` is a pure function of its input.
    """

    def __init__(self, settings: FinOpsSettings | None = None) -> None:
        self._settings = settings or FinOpsSettings()

    @property
    def settings(self) -> FinOpsSettings:
        return self._settings

    def derive(self, record: ContainerUtilization) -> UtilizationStatus:
        """Derive the display status for one record."""
        settings = self._settings
        policy = settings.status_policy
        baseline_field = settings.baseline
        baseline = record.baseline_value(baseline_field)
        has_baseline = (
            baseline is not None and math.isfinite(baseline) and baseline > 0
        )

        if not has_baseline:
            no_baseline_text = (
                NO_LIMIT_TEXT if baseline_field is BaselineField.LIMIT else NO_REQUEST_TEXT
            )
            return UtilizationStatus(
                tier=StatusTier.NO_BASELINE,
                color=TRACK_COLOR,
                policy=policy,
                baseline_field=baseline_field,
                has_baseline=False,
                badge_text=no_baseline_text,
            )

        ratio = compute_ratio(record.peak_value, baseline)
        if ratio is None:
            return UtilizationStatus(
                tier=StatusTier.NO_DATA,
                color=TRACK_COLOR,
                policy=policy,
                baseline_field=baseline_field,
                has_baseline=True,
                badge_text=NOT_AVAILABLE,
            )

        if settings.enable_threshold_colors:
            tier = classify_ratio(ratio, policy, settings.thresholds)
        else:
            tier = _GOOD_TIER[policy]

        over_reserved = max(0.0, 1.0 - ratio)
        percent_text = format_percent(ratio)
        return UtilizationStatus(
            tier=tier,
            color=tier_color(tier, settings.colors),
            policy=policy,
            baseline_field=baseline_field,
            ratio=ratio,
            clamped_ratio=clamp01(ratio),
            over_reserved_fraction=over_reserved,
            has_baseline=True,
            percent_text=percent_text,
            over_reserved_text=format_percent(over_reserved),
            badge_text=f"{percent_text} used",
        )


def derive(
    record: ContainerUtilization, settings: FinOpsSettings | None = None
) -> UtilizationStatus:
    """Derive the display status for one record with the given settings."""
    return UtilizationModelBuilder(settings).derive(record)

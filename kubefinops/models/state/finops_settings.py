"""FinOps settings models.

The settings document uses camelCase keys (``enableThresholdColors``,
``thresholds.redBelow`` ...). Field aliases map them onto snake_case
attributes; missing fields fall back to the defaults in
``kubefinops.constants.defaults``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kubefinops.constants.defaults import (
    BASELINE_FIELD_DEFAULT,
    COLOR_GREEN_DEFAULT,
    COLOR_RED_DEFAULT,
    COLOR_YELLOW_DEFAULT,
    CRITICAL_AT_DEFAULT,
    ENABLE_THRESHOLD_COLORS_DEFAULT,
    PEAK_WINDOW_DEFAULT,
    PROMETHEUS_URL_DEFAULT,
    RED_BELOW_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SCOPING_STRATEGY_DEFAULT,
    STATUS_POLICY_DEFAULT,
    WARNING_AT_DEFAULT,
    YELLOW_BELOW_DEFAULT,
)
from kubefinops.constants.enums import BaselineField, ScopingStrategy, StatusPolicy
from kubefinops.constants.patterns import PROMQL_DURATION_PATTERN
from kubefinops.constants.limits import (
    RATIO_THRESHOLD_MAX,
    RATIO_THRESHOLD_MIN,
    REFRESH_INTERVAL_MIN,
)
from kubefinops.constants.timeouts import PROMETHEUS_REQUEST_TIMEOUT


class ThresholdSettings(BaseModel):
    """Ratio boundaries for both status policies."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Inverted (cost) policy
    red_below: float = Field(
        default=RED_BELOW_DEFAULT,
        alias="redBelow",
        ge=RATIO_THRESHOLD_MIN,
        le=RATIO_THRESHOLD_MAX,
    )
    yellow_below: float = Field(
        default=YELLOW_BELOW_DEFAULT,
        alias="yellowBelow",
        ge=RATIO_THRESHOLD_MIN,
        le=RATIO_THRESHOLD_MAX,
    )

    # Fixed-boundary (safety) policy
    warning_at: float = Field(
        default=WARNING_AT_DEFAULT,
        alias="warningAt",
        ge=RATIO_THRESHOLD_MIN,
        le=RATIO_THRESHOLD_MAX,
    )
    critical_at: float = Field(
        default=CRITICAL_AT_DEFAULT,
        alias="criticalAt",
        ge=RATIO_THRESHOLD_MIN,
        le=RATIO_THRESHOLD_MAX,
    )

    @model_validator(mode="after")
    def _check_ordering(self) -> "ThresholdSettings":
        if self.red_below > self.yellow_below:
            raise ValueError("redBelow must not exceed yellowBelow")
        if self.warning_at > self.critical_at:
            raise ValueError("warningAt must not exceed criticalAt")
        return self


class ColorSettings(BaseModel):
    """Colors used for the three status tiers."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    green: str = COLOR_GREEN_DEFAULT
    yellow: str = COLOR_YELLOW_DEFAULT
    red: str = COLOR_RED_DEFAULT


class PrometheusSettings(BaseModel):
    """Connection settings for the Prometheus HTTP API."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str = PROMETHEUS_URL_DEFAULT
    token: str = ""
    verify_tls: bool = Field(default=True, alias="verifyTls")
    timeout_seconds: float = Field(
        default=PROMETHEUS_REQUEST_TIMEOUT, alias="timeoutSeconds", gt=0
    )


class FinOpsSettings(BaseModel):
    """Process-wide, read-only settings document."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    enable_threshold_colors: bool = Field(
        default=ENABLE_THRESHOLD_COLORS_DEFAULT, alias="enableThresholdColors"
    )
    thresholds: ThresholdSettings = Field(default_factory=ThresholdSettings)
    colors: ColorSettings = Field(default_factory=ColorSettings)

    status_policy: StatusPolicy = Field(
        default=StatusPolicy(STATUS_POLICY_DEFAULT), alias="statusPolicy"
    )
    baseline: BaselineField = BaselineField(BASELINE_FIELD_DEFAULT)
    scoping_strategy: ScopingStrategy = Field(
        default=ScopingStrategy(SCOPING_STRATEGY_DEFAULT), alias="scopingStrategy"
    )
    peak_window: str = Field(default=PEAK_WINDOW_DEFAULT, alias="peakWindow")

    refresh_interval: int = Field(
        default=REFRESH_INTERVAL_DEFAULT,
        alias="refreshInterval",
        ge=REFRESH_INTERVAL_MIN,
    )  # seconds
    prometheus: PrometheusSettings = Field(default_factory=PrometheusSettings)

    @field_validator("peak_window", mode="before")
    @classmethod
    def _normalize_peak_window(cls, value: Any) -> str:
        """Fall back to the default window when the value is not a PromQL duration."""
        window = str(value or "").strip()
        if PROMQL_DURATION_PATTERN.match(window):
            return window
        return PEAK_WINDOW_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""

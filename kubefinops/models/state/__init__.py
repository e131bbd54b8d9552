"""Settings and configuration state."""

from kubefinops.models.state.config_manager import ConfigManager
from kubefinops.models.state.finops_settings import (
    ColorSettings,
    ConfigError,
    ConfigLoadError,
    FinOpsSettings,
    PrometheusSettings,
    ThresholdSettings,
)

__all__ = [
    "ColorSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "FinOpsSettings",
    "PrometheusSettings",
    "ThresholdSettings",
]

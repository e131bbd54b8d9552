"""Main application class for KubeFinOps."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kubefinops.constants import APP_TITLE
from kubefinops.controllers import UtilizationController
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.models.state.config_manager import ConfigManager
from kubefinops.models.state.finops_settings import ConfigLoadError, FinOpsSettings
from kubefinops.screens.finops.finops_screen import FinOpsScreen

logger = logging.getLogger(__name__)


class FinOpsApp(App[None]):
    """Terminal host for the workload utilization view."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = [Binding("q", "quit", "Quit")]

    settings: FinOpsSettings

    def __init__(
        self,
        scope: WorkloadScope,
        settings_path: Path | None = None,
        prometheus_url: str | None = None,
        kind_label: str | None = None,
        controller: UtilizationController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.scope = scope
        self.settings_path = settings_path
        self.kind_label = kind_label
        self._load_settings(prometheus_url)
        self.controller = controller or UtilizationController(self.settings)

    def _load_settings(self, prometheus_url: str | None) -> None:
        """Load the settings document once at startup."""
        try:
            self.settings = ConfigManager.load(self.settings_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning(f"{exc}; falling back to default settings")
            self.settings = FinOpsSettings()

        # Apply CLI overrides if provided
        if prometheus_url:
            prometheus = self.settings.prometheus.model_copy(update={"url": prometheus_url})
            self.settings = self.settings.model_copy(update={"prometheus": prometheus})

    def on_mount(self) -> None:
        self.sub_title = f"{self.scope.namespace}/{self.scope.workload_name}"
        self.push_screen(
            FinOpsScreen(self.scope, self.controller, kind_label=self.kind_label)
        )

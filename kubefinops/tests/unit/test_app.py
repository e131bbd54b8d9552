"""Unit tests for FinOpsApp and the command line entry point.

Tests avoid running the Textual event loop; they cover construction,
settings loading and argument parsing.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from textual.app import App

from kubefinops.__main__ import build_parser, main
from kubefinops.app import FinOpsApp
from kubefinops.constants.enums import StatusPolicy, WorkloadKind
from kubefinops.controllers import UtilizationController
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.models.state.config_manager import ConfigManager
from kubefinops.models.state.finops_settings import FinOpsSettings

SCOPE = WorkloadScope(namespace="shop", workload_name="api", workload_kind=WorkloadKind.DEPLOYMENT)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.delenv(ConfigManager.ENV_SETTINGS_PATH, raising=False)
    monkeypatch.chdir(tmp_path)
    ConfigManager.reset()
    yield
    ConfigManager.reset()


class TestFinOpsApp:
    """Tests for FinOpsApp construction."""

    def test_is_textual_app(self) -> None:
        assert issubclass(FinOpsApp, App)

    def test_title(self) -> None:
        assert FinOpsApp.TITLE == "KubeFinOps"

    def test_default_settings(self) -> None:
        app = FinOpsApp(SCOPE, controller=UtilizationController(run_query_func=AsyncMock()))
        assert app.settings == FinOpsSettings()
        assert app.scope is SCOPE

    def test_loads_settings_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"statusPolicy": "fixed_boundary"}')

        app = FinOpsApp(SCOPE, settings_path=path)

        assert app.settings.status_policy is StatusPolicy.FIXED_BOUNDARY
        assert app.controller.settings is app.settings
        app.controller.close()

    def test_invalid_settings_fall_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"thresholds": {"redBelow": 5}}')

        app = FinOpsApp(SCOPE, settings_path=path)

        assert app.settings == FinOpsSettings()
        app.controller.close()

    def test_prometheus_url_override(self) -> None:
        app = FinOpsApp(SCOPE, prometheus_url="http://prom:9090")
        assert app.settings.prometheus.url == "http://prom:9090"
        assert app.settings.peak_window == "7d"
        app.controller.close()

    def test_injected_controller(self) -> None:
        controller = UtilizationController(run_query_func=AsyncMock())
        app = FinOpsApp(SCOPE, controller=controller)
        assert app.controller is controller


class TestCommandLine:
    """Tests for argument parsing and main()."""

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["-n", "shop", "-w", "api"])
        assert args.namespace == "shop"
        assert args.workload == "api"
        assert args.kind == "Deployment"
        assert args.prometheus_url is None
        assert args.settings is None
        assert args.debug is False

    def test_parser_requires_scope(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-n", "shop"])

    def test_main_runs_app_and_closes_controller(self) -> None:
        app = MagicMock()
        with patch("kubefinops.__main__.FinOpsApp", return_value=app) as app_cls:
            main(["-n", "shop", "-w", "db", "-k", "StatefulSet"])

        scope = app_cls.call_args.args[0]
        assert scope.namespace == "shop"
        assert scope.workload_name == "db"
        assert scope.workload_kind is WorkloadKind.STATEFULSET
        assert app_cls.call_args.kwargs["kind_label"] == "StatefulSet"
        app.run.assert_called_once()
        app.controller.close.assert_called_once()

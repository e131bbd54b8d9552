"""Smoke tests for FinOpsScreen - class attributes and construction.

Tests avoid app.run_test() and focus on construction and wiring.
"""

from __future__ import annotations

import inspect
from unittest.mock import AsyncMock

from kubefinops.controllers import UtilizationController
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.models.state.finops_settings import FinOpsSettings
from kubefinops.screens.finops.config import POLL_WORKER_GROUP
from kubefinops.screens.finops.finops_screen import FinOpsScreen


class TestFinOpsScreen:
    """Test FinOpsScreen wiring."""

    def _screen(self) -> FinOpsScreen:
        controller = UtilizationController(
            FinOpsSettings(peak_window="1d"), run_query_func=AsyncMock()
        )
        return FinOpsScreen(WorkloadScope(namespace="ns", workload_name="api"), controller)

    def test_has_refresh_binding(self) -> None:
        keys = [binding[0] for binding in FinOpsScreen.BINDINGS]
        assert "r" in keys

    def test_presenter_uses_controller_settings(self) -> None:
        screen = self._screen()
        assert screen.presenter._settings.peak_window == "1d"
        assert screen.presenter.report is None

    def test_polling_uses_exclusive_worker_group(self) -> None:
        source = inspect.getsource(FinOpsScreen._schedule_refresh)
        assert "exclusive=True" in source
        assert "POLL_WORKER_GROUP" in source
        assert POLL_WORKER_GROUP == "finops-poll"

    def test_unmount_cancels_polling(self) -> None:
        source = inspect.getsource(FinOpsScreen.on_unmount)
        assert "cancel_group" in source
        assert "stop()" in source

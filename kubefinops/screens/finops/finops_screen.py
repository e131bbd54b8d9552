"""FinOps screen - polls utilization for one workload and renders gauge cards."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from kubefinops.controllers import UtilizationController
from kubefinops.models.core.utilization_report import UtilizationReport
from kubefinops.models.core.workload_scope import WorkloadScope
from kubefinops.screens.finops.config import (
    MESSAGE_UNEXPECTED_ERROR,
    POLL_WORKER_GROUP,
)
from kubefinops.screens.finops.presenter import FinOpsPresenter
from kubefinops.widgets.display import ContainerCard

logger = logging.getLogger(__name__)


class FinOpsScreen(Screen[None]):
    """Workload utilization screen refreshed on a fixed interval."""

    BINDINGS = [("r", "refresh", "Refresh")]

    DEFAULT_CSS = """
    FinOpsScreen #finops-scope {
        margin: 1 2 0 2;
        color: $text-muted;
    }
    FinOpsScreen #finops-headline {
        margin: 0 2;
        color: $text-muted;
    }
    FinOpsScreen #finops-headline.loading {
        text-style: italic;
    }
    FinOpsScreen #finops-headline.error {
        color: $error;
    }
    FinOpsScreen #finops-cards {
        layout: grid;
        grid-size: 3;
        grid-gutter: 1 2;
        height: auto;
        padding: 1 2;
    }
    """

    def __init__(
        self,
        scope: WorkloadScope,
        controller: UtilizationController,
        *,
        kind_label: str | None = None,
    ) -> None:
        super().__init__()
        self.scope = scope
        self._controller = controller
        self._kind_label = kind_label
        self.presenter = FinOpsPresenter(controller.settings)
        self._poll_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            FinOpsPresenter.scope_line(self.scope, self._kind_label), id="finops-scope"
        )
        yield Static("", id="finops-headline")
        with VerticalScroll():
            yield Container(id="finops-cards")
        yield Footer()

    def on_mount(self) -> None:
        interval = self._controller.settings.refresh_interval
        self._poll_timer = self.set_interval(interval, self._schedule_refresh)
        self._schedule_refresh()

    def on_unmount(self) -> None:
        if self._poll_timer is not None:
            self._poll_timer.stop()
            self._poll_timer = None
        # In-flight fetches are simply discarded.
        self.workers.cancel_group(self, POLL_WORKER_GROUP)

    def action_refresh(self) -> None:
        self._schedule_refresh()

    def _schedule_refresh(self) -> None:
        self.presenter.start_loading()
        self._update_headline()
        self.run_worker(
            self._load_report(),
            name="finops-load",
            group=POLL_WORKER_GROUP,
            exclusive=True,
        )

    async def _load_report(self) -> None:
        try:
            report = await self._controller.fetch_all(self.scope)
        except Exception as exc:
            logger.exception("Unexpected failure while loading utilization")
            self.presenter.set_error(f"{MESSAGE_UNEXPECTED_ERROR}: {exc}")
            self._update_headline()
            return
        await self._apply_report(report)

    async def _apply_report(self, report: UtilizationReport) -> None:
        self.presenter.set_report(report)
        self._update_headline()
        cards = self.query_one("#finops-cards", Container)
        await cards.remove_children()
        await cards.mount_all(
            ContainerCard(card) for card in self.presenter.container_cards()
        )

    def _update_headline(self) -> None:
        headline = self.query_one("#finops-headline", Static)
        text = self.presenter.headline()
        headline.update(text or "")
        headline.display = bool(text)
        headline.set_class(bool(self.presenter.error_message), "error")
        headline.set_class(self.presenter.is_loading, "loading")

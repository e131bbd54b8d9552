"""Prometheus fetcher for utilization controller - runs instant queries."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import requests

from kubefinops.constants.timeouts import (
    PROMETHEUS_REQUEST_TIMEOUT,
    PROMETHEUS_RETRY_TIMEOUT,
)
from kubefinops.models.state.finops_settings import PrometheusSettings

logger = logging.getLogger(__name__)

RunQueryFunc = Callable[[str, float], Awaitable[Any]]


class PrometheusQueryError(RuntimeError):
    """Raised when the Prometheus HTTP API cannot answer a query."""


class PrometheusClient:
    """Minimal Prometheus HTTP API client (instant queries only)."""

    QUERY_PATH = "/api/v1/query"

    def __init__(
        self,
        settings: PrometheusSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or PrometheusSettings()
        self._session = session or requests.Session()
        if self._settings.token:
            self._session.headers["Authorization"] = f"Bearer {self._settings.token}"

    @property
    def query_url(self) -> str:
        return self._settings.url.rstrip("/") + self.QUERY_PATH

    def _run_query_sync(self, query: str, timeout: float) -> Any:
        """Run one instant query synchronously (thread-safe wrapper target)."""
        try:
            response = self._session.get(
                self.query_url,
                params={"query": query},
                timeout=timeout,
                verify=self._settings.verify_tls,
            )
        except requests.Timeout as exc:
            raise PrometheusQueryError(f"Prometheus request timed out: {exc}") from exc
        except requests.RequestException as exc:
            raise PrometheusQueryError(f"Prometheus request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise PrometheusQueryError(
                f"Prometheus returned non-JSON response (HTTP {response.status_code})"
            ) from exc

        # API errors carry a JSON body with status=error; the parser reports those.
        if response.status_code >= 400 and not (
            isinstance(payload, dict) and "status" in payload
        ):
            raise PrometheusQueryError(f"Prometheus HTTP {response.status_code}")
        return payload

    async def run_query(self, query: str, timeout: float = PROMETHEUS_REQUEST_TIMEOUT) -> Any:
        return await asyncio.to_thread(self._run_query_sync, query, timeout)

    def close(self) -> None:
        self._session.close()


class PrometheusFetcher:
    """Fetches raw query payloads from Prometheus."""

    _QUERY_TIMEOUT = PROMETHEUS_REQUEST_TIMEOUT
    _RETRY_QUERY_TIMEOUT = PROMETHEUS_RETRY_TIMEOUT
    _TIMEOUT_ERROR_TOKENS = (
        "timed out",
        "timeout",
        "deadline exceeded",
        "context deadline exceeded",
    )

    def __init__(self, run_query_func: RunQueryFunc) -> None:
        """Initialize with query runner function.

        Args:
            run_query_func: Async function taking (query, timeout_seconds) and
                returning the decoded JSON payload (or its text)
        """
        self._run_query = run_query_func

    @classmethod
    def _is_timeout_error(cls, error: Exception) -> bool:
        """Return True when error indicates timeout-like failure."""
        message = str(error).lower()
        return any(token in message for token in cls._TIMEOUT_ERROR_TOKENS)

    def _timeout_plan(self, timeout: float | None) -> list[float]:
        plan: list[float] = []
        for value in (timeout or self._QUERY_TIMEOUT, self._RETRY_QUERY_TIMEOUT):
            if value not in plan:
                plan.append(value)
        return plan

    async def fetch_series(self, query: str, *, timeout: float | None = None) -> Any:
        """Fetch one decoded query payload, retrying timeout-like failures."""
        plan = self._timeout_plan(timeout)
        output: Any = None
        for attempt, attempt_timeout in enumerate(plan, start=1):
            try:
                output = await self._run_query(query, attempt_timeout)
                break
            except Exception as exc:
                is_retryable = self._is_timeout_error(exc)
                has_next_attempt = attempt < len(plan)
                if is_retryable and has_next_attempt:
                    logger.warning(
                        "Prometheus query timed out (attempt %s/%s with %ss), retrying",
                        attempt,
                        len(plan),
                        attempt_timeout,
                    )
                    continue
                raise

        if isinstance(output, (str, bytes)):
            if not output:
                return None
            try:
                return json.loads(output)
            except json.JSONDecodeError as exc:
                logger.exception("Error parsing Prometheus JSON")
                raise PrometheusQueryError("Prometheus returned invalid JSON") from exc
        return output

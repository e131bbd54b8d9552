"""Series parser for utilization controller - parses Prometheus query results."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from kubefinops.constants.values import (
    INFRA_CONTAINER_SENTINEL,
    LABEL_CONTAINER,
    LABEL_POD,
    LABEL_WORKLOAD,
    LABEL_WORKLOAD_TYPE,
)
from kubefinops.models.core.metric_point import MetricPoint

logger = logging.getLogger(__name__)


class SeriesPayloadError(ValueError):
    """Raised when a query payload is not a Prometheus result at all."""


class SeriesParser:
    """Parses instant-query payloads into flat lists of MetricPoint."""

    def __init__(self) -> None:
        """Initialize series parser."""
        pass

    def parse(self, payload: Any) -> list[MetricPoint]:
        """Parse one raw payload.

        Accepts a full API response (``{"status", "data": {...}}``), a bare
        ``data`` object or a bare result list. ``None`` means no payload has
        arrived yet and yields an empty list.

        Entries with a non-finite value, an empty container label or the
        ``POD`` infra container are dropped.

        Raises:
            SeriesPayloadError: The payload has an unusable shape or reports
                a backend error.
        """
        results = self._extract_results(payload)
        points: list[MetricPoint] = []
        dropped = 0
        for entry in results:
            point = self.parse_entry(entry)
            if point is None:
                dropped += 1
                continue
            points.append(point)
        if dropped:
            logger.debug("Dropped %s malformed sample(s) from payload", dropped)
        return points

    @staticmethod
    def _extract_results(payload: Any) -> Sequence[Any]:
        if payload is None:
            return []
        if isinstance(payload, list):
            return payload
        if not isinstance(payload, Mapping):
            raise SeriesPayloadError(
                f"Unexpected payload type: {type(payload).__name__}"
            )

        if payload.get("status") == "error":
            error_type = payload.get("errorType") or "error"
            error = payload.get("error") or "query failed"
            raise SeriesPayloadError(f"{error_type}: {error}")

        data = payload.get("data", payload)
        if not isinstance(data, Mapping):
            raise SeriesPayloadError(
                f"Unexpected data type: {type(data).__name__}"
            )

        results = data.get("result")
        if results is None:
            return []
        if not isinstance(results, list):
            raise SeriesPayloadError(
                f"Unexpected result type: {type(results).__name__}"
            )
        return results

    @staticmethod
    def parse_value(entry: Mapping[str, Any]) -> float | None:
        """Read the sample value (``value[1]``) as a finite float."""
        sample = entry.get("value")
        if not isinstance(sample, (list, tuple)) or len(sample) < 2:
            return None
        try:
            value = float(sample[1])
        except (TypeError, ValueError):
            return None
        if not math.isfinite(value):
            return None
        return value

    def parse_entry(self, entry: Any) -> MetricPoint | None:
        """Parse one result entry, or return None when it must be dropped."""
        if not isinstance(entry, Mapping):
            return None

        value = self.parse_value(entry)
        if value is None:
            return None

        labels = entry.get("metric")
        if not isinstance(labels, Mapping):
            return None

        container = str(labels.get(LABEL_CONTAINER) or "")
        if not container or container == INFRA_CONTAINER_SENTINEL:
            return None

        return MetricPoint(
            container=container,
            value=value,
            pod=self._optional_label(labels, LABEL_POD),
            workload=self._optional_label(labels, LABEL_WORKLOAD),
            workload_kind=self._optional_label(labels, LABEL_WORKLOAD_TYPE),
        )

    @staticmethod
    def _optional_label(labels: Mapping[str, Any], key: str) -> str | None:
        value = labels.get(key)
        if value is None or value == "":
            return None
        return str(value)


def parse(payload: Any) -> list[MetricPoint]:
    """Parse one raw payload with a default SeriesParser."""
    return SeriesParser().parse(payload)

"""Parsers for the utilization controller."""

from kubefinops.controllers.utilization.parsers.series_parser import (
    SeriesParser,
    SeriesPayloadError,
    parse,
)

__all__ = ["SeriesParser", "SeriesPayloadError", "parse"]

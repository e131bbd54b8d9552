"""Tests for resource formatting helpers."""

from __future__ import annotations

import pytest

from kubefinops.constants.values import BYTES_PER_GIB
from kubefinops.utils.resource_formatter import (
    bytes_to_gib,
    clamp01,
    format_cpu_cores,
    format_gib,
    format_percent,
    pct,
)


class TestClamp01:
    """Tests for clamp01."""

    @pytest.mark.parametrize(
        ("value", "expected"), [(-0.5, 0.0), (0.0, 0.0), (0.4, 0.4), (1.0, 1.0), (1.5, 1.0)]
    )
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp01(value) == expected


class TestPercent:
    """Tests for pct and format_percent."""

    def test_rounds_half_up(self) -> None:
        assert pct(0.125) == 13
        assert pct(0.875) == 88
        assert pct(0.444) == 44

    def test_unclamped(self) -> None:
        assert pct(1.5) == 150

    def test_format_percent(self) -> None:
        assert format_percent(0.44) == "44%"
        assert format_percent(0.0) == "0%"

    @pytest.mark.parametrize("ratio", [None, float("nan"), float("inf")])
    def test_format_percent_undefined(self, ratio: float | None) -> None:
        assert format_percent(ratio) == "N/A"


class TestFormatGib:
    """Tests for memory formatting."""

    def test_bytes_to_gib(self) -> None:
        assert bytes_to_gib(2 * BYTES_PER_GIB) == 2.0
        assert bytes_to_gib(None) is None

    def test_format_gib(self) -> None:
        assert format_gib(3.5 * BYTES_PER_GIB) == "3.50 GiB"
        assert format_gib(200 * 1024 * 1024) == "0.20 GiB"
        assert format_gib(0) == "0.00 GiB"

    def test_format_gib_absent(self) -> None:
        assert format_gib(None) == "N/A"
        assert format_gib(float("nan")) == "N/A"


class TestFormatCpuCores:
    """Tests for CPU formatting."""

    def test_millicores(self) -> None:
        assert format_cpu_cores(0.25) == "250m"
        assert format_cpu_cores(0) == "0m"

    def test_cores(self) -> None:
        assert format_cpu_cores(1) == "1"
        assert format_cpu_cores(1.5) == "1.5"
        assert format_cpu_cores(2.346) == "2.35"

    def test_absent(self) -> None:
        assert format_cpu_cores(None) == "N/A"

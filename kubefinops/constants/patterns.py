"""Regex patterns for query construction and settings validation."""

import re

PROMQL_DURATION_PATTERN = re.compile(r"^\d+(ms|s|m|h|d|w|y)$")
REGEX_METACHAR_PATTERN = re.compile(r"[.*+?^${}()|\[\]\\]")

__all__ = [
    "PROMQL_DURATION_PATTERN",
    "REGEX_METACHAR_PATTERN",
]

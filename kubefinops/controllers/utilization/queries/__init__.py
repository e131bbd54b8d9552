"""Query builders for the utilization controller."""

from kubefinops.controllers.utilization.queries.query_builder import (
    QueryBuilder,
    ResourceQueries,
    build_queries,
    escape_label_value,
    escape_regex,
)

__all__ = [
    "QueryBuilder",
    "ResourceQueries",
    "build_queries",
    "escape_label_value",
    "escape_regex",
]

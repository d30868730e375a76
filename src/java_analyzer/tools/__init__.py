"""
Analysis queries for Java Analyzer.

Modules:
- constructors: many-constructors (mc) and many-constructor-parameters (mcp)
- singleton: singleton type detection (st)
"""

from .constructors import many_constructor_parameters, many_constructors
from .report import QueryFunction, ReportLine, iter_classes, iter_types
from .singleton import singleton_kind, singleton_types

# Query names accepted by the CLI and the MCP server
QUERIES: dict[str, QueryFunction] = {
    "mc": many_constructors,
    "mcp": many_constructor_parameters,
    "st": singleton_types,
}

QUERY_DESCRIPTIONS = {
    "mc": "many constructors",
    "mcp": "many constructor parameters",
    "st": "singleton type",
}


def get_query(name: str | None) -> QueryFunction | None:
    """Look up a query by its short name."""
    if name is None:
        return None
    return QUERIES.get(name)


__all__ = [
    "QUERIES",
    "QUERY_DESCRIPTIONS",
    "QueryFunction",
    "ReportLine",
    "get_query",
    "iter_classes",
    "iter_types",
    "many_constructors",
    "many_constructor_parameters",
    "singleton_kind",
    "singleton_types",
]

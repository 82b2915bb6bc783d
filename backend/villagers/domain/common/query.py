"""Backend-agnostic query tree, sort and aggregation specifications.

These types express search intent in domain terms, independent of
any search engine.  Adapters translate them into Elasticsearch DSL,
in-memory predicates, or whatever the infra layer requires.
Every node is frozen; a compiled tree is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ---------------------------------------------------------------------------
# Query nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MatchAll:
    """Matches every document."""


@dataclass(frozen=True)
class Match:
    """Leaf: ``field`` matches ``value``.

    ``fuzziness`` is passed through to engines that support approximate
    matching (``"auto"`` lets the engine pick an edit distance).
    """

    field: str
    value: str
    fuzziness: str | None = None


@dataclass(frozen=True)
class AllOf:
    """Composite requiring every clause to match (AND)."""

    clauses: tuple[QueryNode, ...]


@dataclass(frozen=True)
class AnyOf:
    """Composite requiring at least one clause to match (OR)."""

    clauses: tuple[QueryNode, ...]


QueryNode = Union[MatchAll, Match, AllOf, AnyOf]


# ---------------------------------------------------------------------------
# Sort / aggregation specifications
# ---------------------------------------------------------------------------

# Pseudo-field understood by relevance-ranking engines.
SCORE_FIELD = "_score"


@dataclass(frozen=True)
class SortSpec:
    """Single sort directive."""

    field: str
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class AggregationRequest:
    """Ask for the ``size`` most frequent distinct values of ``field``."""

    field: str
    size: int


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "SortOrder",
    "MatchAll",
    "Match",
    "AllOf",
    "AnyOf",
    "QueryNode",
    "SCORE_FIELD",
    "SortSpec",
    "AggregationRequest",
]

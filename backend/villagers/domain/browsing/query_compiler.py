"""Compile applied filters and free-text search into a query tree.

Each applied filter becomes an OR over its selected values; the filters
are ANDed together.  Search text adds an OR of a name match and a fuzzy
phrase match in front of the filter clauses.

Aggregations for every catalog field are attached to the same compiled
query, applied fields included.  Buckets for an unapplied field therefore
reflect the narrowing from all other filters plus the search text; the
facet builder ignores the buckets of applied fields.
"""

from __future__ import annotations

from ..common.errors import InvalidInputError
from ..common.query import (
    SCORE_FIELD,
    AggregationRequest,
    AllOf,
    AnyOf,
    Match,
    MatchAll,
    QueryNode,
    SortOrder,
    SortSpec,
)
from .catalog import VILLAGER_FILTERS, FilterCatalog
from .filters import AppliedFilters
from .models import CompiledQuery

MAX_SEARCH_LENGTH = 64

NAME_FIELD = "name"
PHRASE_FIELD = "phrase"
# Sortable keyword copy of the villager name.
SORT_KEY_FIELD = "keyword"

BROWSE_SORT = (SortSpec(field=SORT_KEY_FIELD, order=SortOrder.ASC),)
SEARCH_SORT = (
    SortSpec(field=SCORE_FIELD, order=SortOrder.DESC),
    SortSpec(field=SORT_KEY_FIELD, order=SortOrder.ASC),
)


def normalize_search_text(raw: str | None) -> str | None:
    """Trim *raw*; return None for no search, raise if it is too long."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    if len(text) > MAX_SEARCH_LENGTH:
        raise InvalidInputError(
            f"Search query too long ({len(text)} > {MAX_SEARCH_LENGTH} characters)"
        )
    return text


def build_facet_clauses(applied: AppliedFilters) -> tuple[QueryNode, ...]:
    """One OR-node per applied filter, in catalog order."""
    return tuple(
        AnyOf(tuple(Match(field=key.value, value=value) for value in values))
        for key, values in applied.items()
    )


def build_text_clause(text: str) -> QueryNode:
    return AnyOf((
        Match(field=NAME_FIELD, value=text),
        Match(field=PHRASE_FIELD, value=text, fuzziness="auto"),
    ))


def build_aggregations(catalog: FilterCatalog = VILLAGER_FILTERS) -> tuple[AggregationRequest, ...]:
    return tuple(
        AggregationRequest(field=d.key.value, size=d.aggregation_size)
        for d in catalog
    )


def compile_query(
    applied: AppliedFilters,
    search_text: str | None = None,
    catalog: FilterCatalog = VILLAGER_FILTERS,
) -> CompiledQuery:
    """Build the query envelope for a listing or search request."""
    text = normalize_search_text(search_text)
    facet_clauses = build_facet_clauses(applied)

    if text is None:
        query: QueryNode = AllOf(facet_clauses) if facet_clauses else MatchAll()
        sort = BROWSE_SORT
    else:
        text_clause = build_text_clause(text)
        query = AllOf((text_clause, AllOf(facet_clauses))) if facet_clauses else text_clause
        sort = SEARCH_SORT

    return CompiledQuery(
        query=query,
        aggregations=build_aggregations(catalog),
        sort=sort,
        is_search=text is not None,
        search_text=text,
    )


__all__ = [
    "MAX_SEARCH_LENGTH",
    "BROWSE_SORT",
    "SEARCH_SORT",
    "normalize_search_text",
    "build_facet_clauses",
    "build_text_clause",
    "build_aggregations",
    "compile_query",
]

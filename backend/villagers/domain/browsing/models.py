"""Domain models for villager browsing.

Pure value objects exchanged between the compiler, the search backend
port, the facet builder and the listing use case.  All dataclasses use
frozen=True for immutability.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.query import AggregationRequest, QueryNode, SortSpec
from .catalog import FilterKey, FilterValue


# ---------------------------------------------------------------------------
# Query envelope
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompiledQuery:
    """Query tree plus the aggregations and sort that travel with it."""

    query: QueryNode
    aggregations: tuple[AggregationRequest, ...]
    sort: tuple[SortSpec, ...]
    is_search: bool = False
    # Trimmed search text; None in browse mode.
    search_text: str | None = None


@dataclass(frozen=True)
class SearchRequest:
    """One page of hits plus aggregations for a compiled query."""

    query: QueryNode
    aggregations: tuple[AggregationRequest, ...]
    sort: tuple[SortSpec, ...]
    offset: int
    size: int


# ---------------------------------------------------------------------------
# Backend results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AggregationBucket:
    """Count of matching documents sharing ``key`` for one field."""

    key: str
    count: int


@dataclass(frozen=True)
class SearchHit:
    id: str
    score: float | None = None


@dataclass(frozen=True)
class SearchPage:
    """Ordered hits and per-field bucket lists returned by the backend.

    ``aggregations`` is keyed by field name; a field the backend did not
    report is treated as having no buckets.
    """

    hits: tuple[SearchHit, ...]
    aggregations: dict[str, tuple[AggregationBucket, ...]] = field(default_factory=dict)

    def buckets_for(self, field_name: str) -> tuple[AggregationBucket, ...]:
        return self.aggregations.get(field_name, ())


# ---------------------------------------------------------------------------
# Listing outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AvailableFilter:
    """Values the UI may offer for one filter on the next request."""

    key: FilterKey
    display_name: str
    values: tuple[FilterValue, ...]


@dataclass(frozen=True)
class PageDescriptor:
    """Pagination window for a result count.

    ``start_index``/``end_index`` are 1-based inclusive bounds; when
    ``total_count`` is 0 the range is empty (``end_index < start_index``).
    """

    total_count: int
    total_pages: int
    current_page: int
    start_index: int
    end_index: int
    page_size: int

    @property
    def offset(self) -> int:
        return self.page_size * (self.current_page - 1)


@dataclass(frozen=True)
class VillagerSummary:
    """Display-ready listing row."""

    id: str
    name: str


__all__ = [
    "CompiledQuery",
    "SearchRequest",
    "AggregationBucket",
    "SearchHit",
    "SearchPage",
    "AvailableFilter",
    "PageDescriptor",
    "VillagerSummary",
]

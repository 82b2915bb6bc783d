"""ListVillagersUseCase: paginated, filterable, searchable villager listing.

This use case owns the request pipeline:
  1. Validate the search text and parse filter parameters
  2. Compile the query tree (+ aggregations and sort)
  3. Count matching documents
  4. Compute the page window from the count
  5. If anything matched: fetch that page's hits plus aggregations,
     derive the available filters and resolve hits to stored records

External calls run one at a time, each depending on the previous one.
The use case depends ONLY on domain ports, never on Elasticsearch,
SQLAlchemy, FastAPI, or any other infrastructure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import quote

from villagers.domain.browsing.catalog import VILLAGER_FILTERS, FilterCatalog
from villagers.domain.browsing.facets import build_available_filters
from villagers.domain.browsing.filters import AppliedFilters, parse_applied_filters
from villagers.domain.browsing.models import (
    AvailableFilter,
    PageDescriptor,
    SearchHit,
    SearchRequest,
    VillagerSummary,
)
from villagers.domain.browsing.pagination import PAGE_SIZE, compute_page
from villagers.domain.browsing.ports import SearchBackend
from villagers.domain.browsing.query_compiler import compile_query
from villagers.domain.common.uow import UnitOfWork

logger = logging.getLogger(__name__)

BROWSE_URL_PREFIX = "/villagers/page/"
SEARCH_URL_PREFIX = "/villagers/search/page/"

# Left unescaped in searchQueryString, matching encodeURIComponent.
QUERY_STRING_SAFE = "-_.!~*'()"


# ── Query (input) ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class ListVillagersQuery:
    """Immutable value object describing what the caller wants to read.

    ``page`` is already normalized by the boundary layer (a positive
    integer); ``params`` holds the raw request parameters, filter keys
    among them.
    """

    page: int = 1
    search_text: str | None = None
    params: Mapping[str, str] = field(default_factory=dict)


# ── Result (output) ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class ListVillagersResult:
    """What the use case returns to the caller."""

    applied_filters: AppliedFilters
    page_url_prefix: str
    is_search: bool
    page: PageDescriptor
    results: tuple[VillagerSummary, ...] = ()
    available_filters: tuple[AvailableFilter, ...] | None = None
    search_query: str | None = None
    search_query_string: str | None = None


# ── Use Case ────────────────────────────────────────────────────────────


class ListVillagersUseCase:
    """Compile, count, page, fetch and resolve one villager listing."""

    def __init__(
        self,
        search: SearchBackend,
        catalog: FilterCatalog = VILLAGER_FILTERS,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self._search = search
        self._catalog = catalog
        self._page_size = page_size

    def execute(self, uow: UnitOfWork, query: ListVillagersQuery) -> ListVillagersResult:
        # Fail fast, before any backend is contacted.
        applied = parse_applied_filters(query.params, self._catalog)
        compiled = compile_query(applied, query.search_text, self._catalog)
        search_text = compiled.search_text

        logger.debug(
            "Listing villagers: page=%d search=%r filters=%s",
            query.page,
            search_text,
            applied.as_dict(),
        )

        total_count = self._search.count(compiled.query)
        page = compute_page(query.page, total_count, self._page_size)

        common = dict(
            applied_filters=applied,
            page_url_prefix=SEARCH_URL_PREFIX if compiled.is_search else BROWSE_URL_PREFIX,
            is_search=compiled.is_search,
            page=page,
            search_query=search_text,
            search_query_string=quote(search_text, safe=QUERY_STRING_SAFE) if search_text else None,
        )

        if total_count == 0:
            logger.debug("No villagers matched; skipping page fetch")
            return ListVillagersResult(**common)

        search_page = self._search.search(
            SearchRequest(
                query=compiled.query,
                aggregations=compiled.aggregations,
                sort=compiled.sort,
                offset=page.offset,
                size=self._page_size,
            )
        )
        available = build_available_filters(applied, search_page, self._catalog)

        with uow:
            results = self._resolve_hits(uow, search_page.hits)

        return ListVillagersResult(
            results=results,
            available_filters=available,
            **common,
        )

    @staticmethod
    def _resolve_hits(
        uow: UnitOfWork, hits: tuple[SearchHit, ...]
    ) -> tuple[VillagerSummary, ...]:
        """Look up stored records for *hits*, keeping the search order."""
        if not hits:
            return ()
        ids = [hit.id for hit in hits]
        records = {record.id: record for record in uow.villagers.get_by_ids(ids)}

        results: list[VillagerSummary] = []
        for villager_id in ids:
            record = records.get(villager_id)
            if record is None:
                logger.warning("Search hit %s missing from the villager store", villager_id)
                continue
            results.append(VillagerSummary(id=record.id, name=record.name))
        return tuple(results)

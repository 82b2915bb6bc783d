"""Villager listing, search and autocomplete endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ...domain.common.errors import BackendError, BackendUnavailableError, InvalidInputError
from ...domain.common.uow import UnitOfWork
from ...schemas.villagers import (
    AvailableFilterResponse,
    VillagerListResponse,
    VillagerSummaryResponse,
)
from ...use_cases.browsing.autocomplete_villagers import (
    AutocompleteQuery,
    AutocompleteVillagersUseCase,
)
from ...use_cases.browsing.list_villagers import (
    ListVillagersQuery,
    ListVillagersResult,
    ListVillagersUseCase,
)
from ...wiring.bootstrap import (
    get_autocomplete_villagers_use_case,
    get_list_villagers_use_case,
    get_uow,
)
from .villager_params import build_listing_query

logger = logging.getLogger(__name__)
router = APIRouter()


def _result_to_response(result: ListVillagersResult) -> VillagerListResponse:
    """Map a listing result to the HTTP response model."""
    page = result.page
    available = None
    if result.available_filters is not None:
        available = {
            f.key.value: AvailableFilterResponse(
                name=f.display_name,
                values={v.key: v.label for v in f.values},
            )
            for f in result.available_filters
        }
    return VillagerListResponse(
        applied_filters=result.applied_filters.as_dict(),
        page_url_prefix=result.page_url_prefix,
        is_search=result.is_search,
        search_query=result.search_query,
        search_query_string=result.search_query_string,
        total_count=page.total_count,
        total_pages=page.total_pages,
        current_page=page.current_page,
        start_index=page.start_index,
        end_index=page.end_index,
        page_size=page.page_size,
        available_filters=available,
        results=[VillagerSummaryResponse(id=r.id, name=r.name) for r in result.results],
    )


def _run_listing(
    use_case: ListVillagersUseCase,
    uow: UnitOfWork,
    query: ListVillagersQuery,
) -> VillagerListResponse:
    try:
        result = use_case.execute(uow, query)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUnavailableError as e:
        logger.error(f"Backend unavailable while listing villagers: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail="Search temporarily unavailable")
    except BackendError as e:
        logger.error(f"Backend error while listing villagers: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail="Error querying villagers")
    return _result_to_response(result)


@router.get("/", response_model=VillagerListResponse)
async def list_villagers(
    request: Request,
    q: Optional[str] = Query(None, description="Free-text search (max 64 characters)"),
    uow: UnitOfWork = Depends(get_uow),
    use_case: ListVillagersUseCase = Depends(get_list_villagers_use_case),
):
    """First page of the villager listing, optionally searched and filtered.

    Any query parameter named after a catalog filter (``gender``, ``game``,
    ``personality``, ``species``) is applied; its value is a
    comma-separated list of value keys.
    """
    return _run_listing(use_case, uow, build_listing_query(request, 1, q))


@router.get("/page/{page_number}", response_model=VillagerListResponse)
async def list_villagers_page(
    request: Request,
    page_number: str,
    q: Optional[str] = Query(None, description="Free-text search (max 64 characters)"),
    uow: UnitOfWork = Depends(get_uow),
    use_case: ListVillagersUseCase = Depends(get_list_villagers_use_case),
):
    """A given page of the villager listing; invalid page numbers mean page 1."""
    return _run_listing(use_case, uow, build_listing_query(request, page_number, q))


@router.get("/search/page/{page_number}", response_model=VillagerListResponse)
async def search_villagers_page(
    request: Request,
    page_number: str,
    q: Optional[str] = Query(None, description="Free-text search (max 64 characters)"),
    uow: UnitOfWork = Depends(get_uow),
    use_case: ListVillagersUseCase = Depends(get_list_villagers_use_case),
):
    """Page links emitted in search mode; same listing, same parameters."""
    return _run_listing(use_case, uow, build_listing_query(request, page_number, q))


@router.get("/autocomplete", response_model=list[str])
async def autocomplete(
    q: Optional[str] = Query(None, description="Name prefix (max 64 characters)"),
    use_case: AutocompleteVillagersUseCase = Depends(get_autocomplete_villagers_use_case),
):
    """Villager name completions for the search box."""
    try:
        result = use_case.execute(AutocompleteQuery(prefix=q))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUnavailableError as e:
        logger.error(f"Backend unavailable during autocomplete: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail="Search temporarily unavailable")
    except BackendError as e:
        logger.error(f"Backend error during autocomplete: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail="Error querying suggestions")
    return list(result.suggestions)

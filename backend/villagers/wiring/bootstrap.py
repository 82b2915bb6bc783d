"""Dependency injection bootstrap: the single place that binds ports to adapters.

Every factory function here can be used as a FastAPI ``Depends()`` target.
Routers never import concrete implementations directly; they depend on
the abstractions returned by these factories.

Example usage in a router::

    from villagers.wiring.bootstrap import get_uow, get_list_villagers_use_case

    @router.get("/villagers")
    async def list_villagers(
        uow: UnitOfWork = Depends(get_uow),
        use_case: ListVillagersUseCase = Depends(get_list_villagers_use_case),
    ):
        result = use_case.execute(uow, query)
"""

from __future__ import annotations

import logging
from typing import Iterator

from elasticsearch import Elasticsearch

from villagers.config import settings
from villagers.database import SessionLocal
from villagers.domain.browsing.ports import SearchBackend
from villagers.domain.common.uow import UnitOfWork
from villagers.infra.db.uow import SqlUnitOfWork
from villagers.infra.search.elasticsearch_backend import ElasticsearchSearchBackend
from villagers.use_cases.browsing.autocomplete_villagers import AutocompleteVillagersUseCase
from villagers.use_cases.browsing.list_villagers import ListVillagersUseCase

logger = logging.getLogger(__name__)


# ── Unit of Work ─────────────────────────────────────────────────────────


def get_uow() -> Iterator[UnitOfWork]:
    """Yield a SqlUnitOfWork bound to SessionLocal.

    Designed for FastAPI Depends()::

        uow: UnitOfWork = Depends(get_uow)
    """
    uow = SqlUnitOfWork(SessionLocal)
    yield uow


# ── Search backend ───────────────────────────────────────────────────────

_es_client: Elasticsearch | None = None
_search_backend: ElasticsearchSearchBackend | None = None


def get_es_client() -> Elasticsearch:
    """Return a singleton Elasticsearch client (connection pool is shared)."""
    global _es_client
    if _es_client is None:
        _es_client = Elasticsearch(
            settings.elasticsearch_url,
            request_timeout=settings.elasticsearch_timeout,
        )
        logger.info("Elasticsearch client created for %s", settings.elasticsearch_url)
    return _es_client


def get_search_backend() -> SearchBackend:
    """Return a singleton SearchBackend over the villager index."""
    global _search_backend
    if _search_backend is None:
        _search_backend = ElasticsearchSearchBackend(
            get_es_client(), index=settings.elasticsearch_index
        )
    return _search_backend


def close_search_backend() -> None:
    """Release the Elasticsearch client; called on application shutdown."""
    global _es_client, _search_backend
    if _es_client is not None:
        _es_client.close()
        logger.info("Elasticsearch client closed")
    _es_client = None
    _search_backend = None


# ── Use Cases ────────────────────────────────────────────────────────────


def get_list_villagers_use_case() -> ListVillagersUseCase:
    """Build a ListVillagersUseCase wired with the search backend."""
    return ListVillagersUseCase(search=get_search_backend())


def get_autocomplete_villagers_use_case() -> AutocompleteVillagersUseCase:
    """Build an AutocompleteVillagersUseCase wired with the search backend."""
    return AutocompleteVillagersUseCase(search=get_search_backend())

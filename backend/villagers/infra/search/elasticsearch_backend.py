"""Elasticsearch implementation of the SearchBackend port.

Every client call is wrapped so that connection failures surface as
BackendUnavailableError and any other client failure as BackendError.
Nothing is retried.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from elasticsearch import (
    ApiError,
    ConnectionError as ESConnectionError,
    ConnectionTimeout,
    Elasticsearch,
    TransportError,
)

from villagers.domain.browsing.models import SearchPage, SearchRequest
from villagers.domain.browsing.ports import SearchBackend
from villagers.domain.common.errors import BackendError, BackendUnavailableError
from villagers.domain.common.query import QueryNode
from villagers.infra.query.villager_query import (
    parse_search_response,
    parse_suggest_response,
    to_es_aggregations,
    to_es_query,
    to_es_sort,
    to_es_suggest,
)

logger = logging.getLogger(__name__)

BACKEND_NAME = "elasticsearch"


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (ESConnectionError, ConnectionTimeout) as exc:
        logger.error("Elasticsearch unreachable during %s: %s", operation, exc)
        raise BackendUnavailableError(BACKEND_NAME, f"{operation} failed: {exc}") from exc
    except (ApiError, TransportError) as exc:
        logger.error("Elasticsearch %s failed: %s", operation, exc)
        raise BackendError(BACKEND_NAME, f"{operation} failed: {exc}") from exc


def _body(response):
    """Plain dict behind an elastic-transport ObjectApiResponse."""
    return getattr(response, "body", response)


class ElasticsearchSearchBackend(SearchBackend):
    """Run villager queries against one Elasticsearch index."""

    def __init__(self, client: Elasticsearch, index: str = "villager") -> None:
        self._client = client
        self._index = index

    def count(self, query: QueryNode) -> int:
        with _translate_errors("count"):
            response = self._client.count(index=self._index, query=to_es_query(query))
        return int(_body(response)["count"])

    def search(self, request: SearchRequest) -> SearchPage:
        with _translate_errors("search"):
            response = self._client.search(
                index=self._index,
                query=to_es_query(request.query),
                aggregations=to_es_aggregations(request.aggregations),
                sort=to_es_sort(request.sort),
                from_=request.offset,
                size=request.size,
            )
        return parse_search_response(_body(response))

    def suggest(self, prefix: str, field: str, limit: int) -> list[str]:
        with _translate_errors("suggest"):
            response = self._client.search(
                index=self._index,
                suggest=to_es_suggest(prefix, field, limit),
            )
        return parse_suggest_response(_body(response))

"""Ports (abstract interfaces) for the browsing domain.

These define WHAT the domain needs from the outside world without
specifying HOW it's provided.  Concrete implementations live in infra/.
"""

from __future__ import annotations

import abc
from typing import Any, Sequence

from ..common.query import QueryNode
from .models import SearchPage, SearchRequest


class SearchBackend(abc.ABC):
    """Document search engine holding the villager index."""

    @abc.abstractmethod
    def count(self, query: QueryNode) -> int:
        """Return the number of documents matching *query*."""
        ...

    @abc.abstractmethod
    def search(self, request: SearchRequest) -> SearchPage:
        """Return one page of hits plus aggregation buckets."""
        ...

    @abc.abstractmethod
    def suggest(self, prefix: str, field: str, limit: int) -> list[str]:
        """Return up to *limit* completions for *prefix* on *field*."""
        ...


class VillagerRepository(abc.ABC):
    """Persistent store of full villager records."""

    @abc.abstractmethod
    def get_by_ids(self, ids: Sequence[str]) -> list[Any]:
        """Return the records for *ids*, in no particular order.

        Records expose at least ``id`` and ``name`` attributes.  Missing
        identifiers are simply absent from the result.
        """
        ...

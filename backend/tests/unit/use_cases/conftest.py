"""Shared test fakes and fixtures for browsing use case tests.

In-memory fake implementations of the domain ports.  Each fake stores
real data and records every call, so tests can assert both on what was
returned and on which backend calls were (or were not) made.

Other test files outside this directory can import these fakes directly::

    from tests.unit.use_cases.conftest import FakeSearchBackend, FakeUnitOfWork
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pytest

from villagers.domain.browsing.models import (
    AggregationBucket,
    SearchHit,
    SearchPage,
    SearchRequest,
)
from villagers.domain.browsing.ports import SearchBackend, VillagerRepository
from villagers.domain.common.query import QueryNode
from villagers.domain.common.uow import UnitOfWork


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass
class FakeVillager:
    """Minimal stored record (mimics the SQLAlchemy Villager row)."""

    id: str
    name: str


# ---------------------------------------------------------------------------
# Fake search backend
# ---------------------------------------------------------------------------


class FakeSearchBackend(SearchBackend):
    """Configurable search backend that records every call.

    ``calls`` holds ``(operation, argument)`` tuples in call order.
    Pass ``error`` to make every call raise it.
    """

    def __init__(
        self,
        *,
        total: int = 0,
        hit_ids: Sequence[str] = (),
        aggregations: dict[str, list[tuple[str, int]]] | None = None,
        suggestions: Sequence[str] = (),
        error: Exception | None = None,
    ) -> None:
        self.total = total
        self.hit_ids = list(hit_ids)
        self.aggregations = aggregations or {}
        self.suggestions = list(suggestions)
        self.error = error
        self.calls: list[tuple[str, object]] = []

    @property
    def operations(self) -> list[str]:
        return [op for op, _ in self.calls]

    @property
    def last_search(self) -> SearchRequest | None:
        for op, arg in reversed(self.calls):
            if op == "search":
                return arg
        return None

    def count(self, query: QueryNode) -> int:
        self.calls.append(("count", query))
        if self.error is not None:
            raise self.error
        return self.total

    def search(self, request: SearchRequest) -> SearchPage:
        self.calls.append(("search", request))
        if self.error is not None:
            raise self.error
        return SearchPage(
            hits=tuple(SearchHit(id=i, score=1.0) for i in self.hit_ids),
            aggregations={
                name: tuple(AggregationBucket(key=k, count=c) for k, c in buckets)
                for name, buckets in self.aggregations.items()
            },
        )

    def suggest(self, prefix: str, field: str, limit: int) -> list[str]:
        self.calls.append(("suggest", (prefix, field, limit)))
        if self.error is not None:
            raise self.error
        return self.suggestions[:limit]


# ---------------------------------------------------------------------------
# Fake persistent store
# ---------------------------------------------------------------------------


class FakeVillagerRepository(VillagerRepository):
    """In-memory villager store.

    Returns records in *reverse* storage order by default, so tests
    catch any reliance on the store preserving the requested order.
    """

    def __init__(self, villagers: Sequence[FakeVillager] = (), *, reverse: bool = True) -> None:
        self._villagers = {v.id: v for v in villagers}
        self._reverse = reverse
        self.requested_ids: list[list[str]] = []

    def get_by_ids(self, ids: Sequence[str]) -> list[FakeVillager]:
        self.requested_ids.append(list(ids))
        found = [self._villagers[i] for i in ids if i in self._villagers]
        return list(reversed(found)) if self._reverse else found


class FakeUnitOfWork(UnitOfWork):
    def __init__(self, villagers: FakeVillagerRepository | None = None) -> None:
        self.villagers = villagers or FakeVillagerRepository()
        self.entered = 0

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, *args) -> None:
        pass

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass


# ---------------------------------------------------------------------------
# Helpers / fixtures
# ---------------------------------------------------------------------------


def make_villagers(count: int, prefix: str = "v") -> list[FakeVillager]:
    """``count`` villagers with ids ``v000``, ``v001``, ... and matching names."""
    return [
        FakeVillager(id=f"{prefix}{i:03d}", name=f"Villager {i:03d}")
        for i in range(count)
    ]


@pytest.fixture
def villagers() -> list[FakeVillager]:
    return make_villagers(30)


@pytest.fixture
def uow(villagers) -> FakeUnitOfWork:
    return FakeUnitOfWork(FakeVillagerRepository(villagers))

"""Unit of Work port.

A use case opens the UoW as a context manager and reads through the
repositories it exposes; the concrete implementation decides how a
session or connection is shared between them.
"""

from __future__ import annotations

import abc
from typing import Self

from villagers.domain.browsing.ports import VillagerRepository


class UnitOfWork(abc.ABC):
    """Transactional boundary over the persistent store."""

    villagers: VillagerRepository

    @abc.abstractmethod
    def __enter__(self) -> Self:
        ...

    @abc.abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    @abc.abstractmethod
    def commit(self) -> None:
        ...

    @abc.abstractmethod
    def rollback(self) -> None:
        ...

"""SQLAlchemy Unit of Work: concrete implementation of the domain UoW port.

Wraps a SQLAlchemy Session and exposes repository instances that share
the same session.
"""

from __future__ import annotations

from typing import Self

from sqlalchemy.orm import Session, sessionmaker

from villagers.domain.common.uow import UnitOfWork
from villagers.infra.db.repositories.villager_repo import SqlVillagerRepository


class SqlUnitOfWork(UnitOfWork):
    """Transactional boundary backed by a SQLAlchemy Session."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def __enter__(self) -> Self:
        self.session: Session = self._session_factory()
        self.villagers = SqlVillagerRepository(self.session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.rollback()
        self.session.close()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

"""SQLAlchemy implementation of VillagerRepository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from villagers.domain.browsing.ports import VillagerRepository
from villagers.domain.common.errors import BackendError, BackendUnavailableError
from villagers.models.villager import Villager

BACKEND_NAME = "villager-store"


class SqlVillagerRepository(VillagerRepository):
    """Retrieve Villager rows via SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_ids(self, ids: Sequence[str]) -> list[Villager]:
        if not ids:
            return []
        try:
            return (
                self._session.query(Villager)
                .filter(Villager.id.in_(list(ids)))
                .all()
            )
        except OperationalError as exc:
            raise BackendUnavailableError(BACKEND_NAME, str(exc)) from exc
        except SQLAlchemyError as exc:
            raise BackendError(BACKEND_NAME, str(exc)) from exc

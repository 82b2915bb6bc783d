"""Shared fixtures for repository tests.

Provides an in-memory SQLite engine with every table created and a
session bound to it.
"""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from villagers.database import Base

# Force model registration so create_all picks up every table.
import villagers.models.villager  # noqa: F401


@pytest.fixture
def engine():
    """Function-scoped :memory: SQLite engine."""
    eng = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def session(session_factory):
    """Function-scoped session bound to the in-memory engine."""
    sess = session_factory()
    yield sess
    sess.close()

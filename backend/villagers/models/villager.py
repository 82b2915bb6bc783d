"""Villager records: the persistent store behind search hits"""
from sqlalchemy import JSON, Column, String, Text

from ..database import Base


class Villager(Base):
    """One villager, keyed by the same identifier the search index uses"""

    __tablename__ = "villagers"

    id = Column(String(64), primary_key=True)  # e.g. "ace", matches the index _id
    name = Column(String(100), nullable=False, index=True)

    # Facet fields mirrored in the search index
    gender = Column(String(16))
    species = Column(String(32), index=True)
    personality = Column(String(32), index=True)
    games = Column(JSON, default=list)  # ["nl", "cf", ...]

    phrase = Column(Text)

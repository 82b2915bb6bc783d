"""Filter catalog: the closed set of fields a villager listing can be narrowed by.

The catalog is built once at import time and never mutated.  Its
iteration order is the order every other component uses when it walks
the filterable fields (query clauses, aggregations, available filters).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class FilterKey(str, Enum):
    """Filterable villager fields.  Values double as document field names."""

    GENDER = "gender"
    GAME = "game"
    PERSONALITY = "personality"
    SPECIES = "species"


@dataclass(frozen=True)
class FilterValue:
    """One selectable value of a filter: stored key plus display label."""

    key: str
    label: str


@dataclass(frozen=True)
class FilterDefinition:
    """A filterable field with its ordered, enumerated values.

    ``aggregation_size`` caps how many distinct values the search backend
    reports for this field; binary fields only ever need 2.
    """

    key: FilterKey
    display_name: str
    values: tuple[FilterValue, ...]
    aggregation_size: int = 50

    def label_of(self, value_key: str) -> str | None:
        for value in self.values:
            if value.key == value_key:
                return value.label
        return None


class FilterCatalog:
    """Read-only registry of FilterDefinitions, in declaration order."""

    def __init__(self, definitions: tuple[FilterDefinition, ...]) -> None:
        keys = [d.key for d in definitions]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate filter keys in catalog: {keys}")
        self._definitions = definitions
        self._by_key = {d.key.value: d for d in definitions}

    def definition_of(self, key: str | FilterKey) -> FilterDefinition | None:
        if isinstance(key, FilterKey):
            key = key.value
        return self._by_key.get(key)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, FilterKey):
            key = key.value
        return key in self._by_key

    def __iter__(self) -> Iterator[FilterDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def keys(self) -> tuple[FilterKey, ...]:
        return tuple(d.key for d in self._definitions)


def _values(*pairs: tuple[str, str]) -> tuple[FilterValue, ...]:
    return tuple(FilterValue(key=k, label=v) for k, v in pairs)


VILLAGER_FILTERS = FilterCatalog((
    FilterDefinition(
        key=FilterKey.GENDER,
        display_name="Gender",
        values=_values(("male", "Male"), ("female", "Female")),
        aggregation_size=2,
    ),
    FilterDefinition(
        key=FilterKey.GAME,
        display_name="Games",
        values=_values(
            ("nl", "New Leaf"),
            ("cf", "City Folk"),
            ("ww", "Wild World"),
            ("afe+", "Animal Forest e+"),
            ("ac", "Animal Crossing"),
            ("af+", "Animal Forest+"),
            ("af", "Animal Forest"),
        ),
    ),
    FilterDefinition(
        key=FilterKey.PERSONALITY,
        display_name="Personality",
        values=_values(
            ("cranky", "Cranky"),
            ("jock", "Jock"),
            ("lazy", "Lazy"),
            ("normal", "Normal"),
            ("peppy", "Peppy"),
            ("smug", "Smug"),
            ("snooty", "Snooty"),
            ("uchi", "Uchi"),
        ),
    ),
    FilterDefinition(
        key=FilterKey.SPECIES,
        display_name="Species",
        values=_values(
            ("alligator", "Alligator"),
            ("anteater", "Anteater"),
            ("bear", "Bear"),
            ("bird", "Bird"),
            ("bull", "Bull"),
            ("cat", "Cat"),
            ("chicken", "Chicken"),
            ("cow", "Cow"),
            ("cub", "Cub"),
            ("deer", "Deer"),
            ("dog", "Dog"),
            ("duck", "Duck"),
            ("eagle", "Eagle"),
            ("elephant", "Elephant"),
            ("frog", "Frog"),
            ("goat", "Goat"),
            ("gorilla", "Gorilla"),
            ("hamster", "Hamster"),
            ("hippo", "Hippo"),
            ("horse", "Horse"),
            ("kangaroo", "Kangaroo"),
            ("koala", "Koala"),
            ("lion", "Lion"),
            ("monkey", "Monkey"),
            ("mouse", "Mouse"),
            ("octopus", "Octopus"),
            ("ostrich", "Ostrich"),
            ("penguin", "Penguin"),
            ("pig", "Pig"),
            ("rabbit", "Rabbit"),
            ("rhino", "Rhino"),
            ("sheep", "Sheep"),
            ("squirrel", "Squirrel"),
            ("tiger", "Tiger"),
            ("wolf", "Wolf"),
        ),
    ),
))


__all__ = [
    "FilterKey",
    "FilterValue",
    "FilterDefinition",
    "FilterCatalog",
    "VILLAGER_FILTERS",
]

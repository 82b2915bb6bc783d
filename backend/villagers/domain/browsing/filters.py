"""Applied filters and the parser that builds them from request parameters.

Only keys registered in the catalog survive parsing.  Values are not
checked against the catalog's value set: an unknown value simply matches
no document once the query runs.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from .catalog import VILLAGER_FILTERS, FilterCatalog, FilterKey


class AppliedFilters:
    """Filter key -> non-empty tuple of requested value keys.

    Keys are kept in catalog order.  Never holds a key mapped to an
    empty tuple; such entries are refused at construction.
    """

    def __init__(self, selections: Mapping[FilterKey, tuple[str, ...]] | None = None) -> None:
        selections = dict(selections or {})
        for key, values in selections.items():
            if not values:
                raise ValueError(f"Applied filter {key.value!r} has no values")
        self._selections = {
            key: tuple(selections[key])
            for key in FilterKey
            if key in selections
        }

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str) and not isinstance(key, FilterKey):
            try:
                key = FilterKey(key)
            except ValueError:
                return False
        return key in self._selections

    def __iter__(self) -> Iterator[FilterKey]:
        return iter(self._selections)

    def __len__(self) -> int:
        return len(self._selections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppliedFilters):
            return NotImplemented
        return self._selections == other._selections

    def __repr__(self) -> str:
        return f"AppliedFilters({self.as_dict()!r})"

    def get(self, key: FilterKey) -> tuple[str, ...]:
        return self._selections.get(key, ())

    def items(self):
        return self._selections.items()

    def as_dict(self) -> dict[str, list[str]]:
        """Plain ``{key: [values]}`` form for serialisation."""
        return {key.value: list(values) for key, values in self._selections.items()}


def parse_applied_filters(
    params: Mapping[str, str],
    catalog: FilterCatalog = VILLAGER_FILTERS,
) -> AppliedFilters:
    """Build AppliedFilters from raw ``{param: "a,b,c"}`` request parameters.

    Unknown keys are ignored.  An empty value yields no entry for its
    key.  Whitespace, duplicates and unknown value keys pass through.
    """
    selections: dict[FilterKey, tuple[str, ...]] = {}
    for name, raw in params.items():
        definition = catalog.definition_of(name)
        if definition is None:
            continue
        values = tuple(raw.split(",")) if raw else ()
        if values:
            selections[definition.key] = values
    return AppliedFilters(selections)


__all__ = ["AppliedFilters", "parse_applied_filters"]

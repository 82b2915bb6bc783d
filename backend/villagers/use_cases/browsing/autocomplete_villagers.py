"""AutocompleteVillagersUseCase: name completions for the search box."""

from __future__ import annotations

from dataclasses import dataclass

from villagers.domain.browsing.ports import SearchBackend
from villagers.domain.browsing.query_compiler import MAX_SEARCH_LENGTH
from villagers.domain.common.errors import InvalidInputError

SUGGEST_FIELD = "suggest"
SUGGEST_LIMIT = 5


@dataclass(frozen=True)
class AutocompleteQuery:
    prefix: object


@dataclass(frozen=True)
class AutocompleteResult:
    suggestions: tuple[str, ...]


class AutocompleteVillagersUseCase:
    """Validate a prefix and ask the search backend for completions."""

    def __init__(self, search: SearchBackend) -> None:
        self._search = search

    def execute(self, query: AutocompleteQuery) -> AutocompleteResult:
        prefix = query.prefix
        if not isinstance(prefix, str) or len(prefix) > MAX_SEARCH_LENGTH:
            raise InvalidInputError("Invalid request.")

        suggestions = self._search.suggest(prefix, SUGGEST_FIELD, SUGGEST_LIMIT)
        return AutocompleteResult(suggestions=tuple(suggestions))

"""Request parsing helpers shared by the villager listing routes.

Normalizes the page number and extracts the search text and raw filter
parameters, so every listing route hands the use case the same query.
"""

from __future__ import annotations

import re
from typing import Optional

from fastapi import Request

from villagers.use_cases.browsing.list_villagers import ListVillagersQuery

# Parameters with a meaning of their own; everything else may be a filter.
RESERVED_PARAMS = frozenset({"q", "isAjax"})

_POSITIVE_INTEGER = re.compile(r"\+?[0-9]+")


def parse_positive_integer(value: object) -> int:
    """Return *value* as a positive integer, or 1 when it is not one.

    Non-numeric, fractional, zero and negative inputs all normalize to 1.
    """
    text = str(value).strip()
    if not _POSITIVE_INTEGER.fullmatch(text):
        return 1
    parsed = int(text)
    return parsed if parsed >= 1 else 1


def parse_filter_params(request: Request) -> dict[str, str]:
    """Raw query parameters minus the reserved ones (last value wins)."""
    return {
        key: value
        for key, value in request.query_params.items()
        if key not in RESERVED_PARAMS
    }


def build_listing_query(
    request: Request,
    page_number: object = 1,
    q: Optional[str] = None,
) -> ListVillagersQuery:
    """Build a ListVillagersQuery from the path page number and query string."""
    return ListVillagersQuery(
        page=parse_positive_integer(page_number),
        search_text=q,
        params=parse_filter_params(request),
    )

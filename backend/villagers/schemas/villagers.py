"""Pydantic response schemas for the villager listing endpoints.

Field names are camelCase on the wire, matching what the listing
frontend reads from its initial state.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AvailableFilterResponse(_CamelModel):
    """Display name plus ``{valueKey: label}`` in presentation order."""

    name: str
    values: Dict[str, str]


class VillagerSummaryResponse(_CamelModel):
    id: str
    name: str


class VillagerListResponse(_CamelModel):
    """Listing page: applied filters, paging window, facets and rows."""

    applied_filters: Dict[str, List[str]]
    page_url_prefix: str
    is_search: bool = False
    search_query: Optional[str] = None
    search_query_string: Optional[str] = None
    total_count: int
    total_pages: int
    current_page: int
    start_index: int
    end_index: int
    page_size: int
    available_filters: Optional[Dict[str, AvailableFilterResponse]] = None
    results: List[VillagerSummaryResponse]

"""Pagination math: reconcile a requested page with an actual result count."""

from __future__ import annotations

import math

from .models import PageDescriptor

# Entities per page, identical for browse and search listings.
PAGE_SIZE = 25


def compute_page(
    requested_page: int,
    total_count: int,
    page_size: int = PAGE_SIZE,
) -> PageDescriptor:
    """Clamp *requested_page* into ``[1, max(total_pages, 1)]`` and derive bounds.

    With no results the descriptor is page 1 of 0 with an empty
    ``start_index..end_index`` range; callers should skip fetching.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    if total_count < 0:
        raise ValueError(f"total_count must be >= 0, got {total_count}")

    total_pages = math.ceil(total_count / page_size)
    current_page = max(1, min(requested_page, total_pages))

    return PageDescriptor(
        total_count=total_count,
        total_pages=total_pages,
        current_page=current_page,
        start_index=page_size * (current_page - 1) + 1,
        end_index=min(page_size * current_page, total_count),
        page_size=page_size,
    )


__all__ = ["PAGE_SIZE", "compute_page"]

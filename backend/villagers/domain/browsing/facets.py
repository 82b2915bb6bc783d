"""Restrict offered filter values to those that still yield results."""

from __future__ import annotations

import logging

from .catalog import VILLAGER_FILTERS, FilterCatalog, FilterValue
from .filters import AppliedFilters
from .models import AvailableFilter, SearchPage

logger = logging.getLogger(__name__)


def build_available_filters(
    applied: AppliedFilters,
    page: SearchPage,
    catalog: FilterCatalog = VILLAGER_FILTERS,
) -> tuple[AvailableFilter, ...]:
    """Derive what the UI may offer next from aggregation buckets.

    An applied field always exposes its full catalog value set, in
    catalog order, whatever its own buckets say.  An unapplied field
    exposes only the bucket keys (in bucket order) that carry a catalog
    label, and is left out when no such key remains.
    """
    available: list[AvailableFilter] = []
    for definition in catalog:
        if definition.key in applied:
            available.append(
                AvailableFilter(
                    key=definition.key,
                    display_name=definition.display_name,
                    values=definition.values,
                )
            )
            continue

        buckets = page.buckets_for(definition.key.value)
        if not buckets:
            continue

        values: list[FilterValue] = []
        for bucket in buckets:
            label = definition.label_of(bucket.key)
            if label is None:
                logger.warning(
                    "Dropping %s bucket %r: no catalog label",
                    definition.key.value,
                    bucket.key,
                )
                continue
            values.append(FilterValue(key=bucket.key, label=label))

        if not values:
            continue
        available.append(
            AvailableFilter(
                key=definition.key,
                display_name=definition.display_name,
                values=tuple(values),
            )
        )
    return tuple(available)


__all__ = ["build_available_filters"]

"""Villager browsing domain: filter catalog, query compilation, facets, paging."""

"""Villager browsing and search service."""

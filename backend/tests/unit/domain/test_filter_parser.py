"""Tests for parsing request parameters into AppliedFilters."""

import pytest

from villagers.domain.browsing.catalog import FilterKey
from villagers.domain.browsing.filters import AppliedFilters, parse_applied_filters


class TestParseAppliedFilters:
    def test_only_unknown_keys_yields_empty(self):
        applied = parse_applied_filters({"zodiac": "leo", "q": "bob", "page": "2"})
        assert len(applied) == 0
        assert not applied.as_dict()

    def test_comma_separated_values(self):
        applied = parse_applied_filters({"species": "cat,dog"})
        assert applied.as_dict() == {"species": ["cat", "dog"]}
        assert applied.get(FilterKey.SPECIES) == ("cat", "dog")

    def test_empty_value_omits_key(self):
        applied = parse_applied_filters({"species": ""})
        assert "species" not in applied
        assert applied.as_dict() == {}

    def test_values_pass_through_unvalidated(self):
        applied = parse_applied_filters({"species": " cat,cat,dragon,"})
        assert applied.get(FilterKey.SPECIES) == (" cat", "cat", "dragon", "")

    def test_keys_follow_catalog_order(self):
        applied = parse_applied_filters({"species": "cat", "gender": "male", "game": "nl"})
        assert list(applied) == [FilterKey.GENDER, FilterKey.GAME, FilterKey.SPECIES]

    def test_mixed_known_and_unknown(self):
        applied = parse_applied_filters({"personality": "lazy", "isAjax": "true"})
        assert applied.as_dict() == {"personality": ["lazy"]}


class TestAppliedFilters:
    def test_rejects_empty_selection(self):
        with pytest.raises(ValueError):
            AppliedFilters({FilterKey.GENDER: ()})

    def test_contains_accepts_strings_and_keys(self):
        applied = AppliedFilters({FilterKey.GENDER: ("male",)})
        assert "gender" in applied
        assert FilterKey.GENDER in applied
        assert "species" not in applied
        assert "not-a-filter" not in applied

    def test_equality(self):
        a = AppliedFilters({FilterKey.GENDER: ("male",)})
        b = parse_applied_filters({"gender": "male"})
        assert a == b

    def test_get_missing_key(self):
        assert AppliedFilters().get(FilterKey.SPECIES) == ()

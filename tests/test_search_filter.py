"""Tests for $__searchFilter detection and substitution."""

import pytest

from templating.variables.search_filter import (
    SEARCH_FILTER_VARIABLE,
    contains_search_filter,
    interpolate_search_filter,
)


class TestContainsSearchFilter:

    def test_empty_or_missing_query(self):
        assert contains_search_filter("") is False
        assert contains_search_filter(None) is False

    def test_sentinel_present(self):
        assert contains_search_filter("has $__searchFilter") is True

    def test_sentinel_absent(self):
        assert contains_search_filter("has $searchFilter") is False


class TestInterpolateSearchFilter:

    def test_appends_wildcard_to_search_term(self):
        result = interpolate_search_filter("show me $__searchFilter", {"searchFilter": "abc"}, "*", False)
        assert result == "show me abc*"

    def test_only_first_occurrence_replaced(self):
        result = interpolate_search_filter("x $__searchFilter y $__searchFilter", {}, "*", True)
        assert result == "x '*' y $__searchFilter"

    def test_query_without_sentinel_is_unchanged(self):
        query = "label_values(up, instance)"
        assert interpolate_search_filter(query, {"searchFilter": "abc"}, "*", True) is query

    def test_missing_options(self):
        assert interpolate_search_filter("q=$__searchFilter", None, "%", False) == "q=%"

    def test_empty_search_term_uses_wildcard_alone(self):
        assert interpolate_search_filter("$__searchFilter", {"searchFilter": ""}, ".*", True) == "'.*'"

    def test_quoted_search_term(self):
        result = interpolate_search_filter("name =~ $__searchFilter", {"searchFilter": "web"}, ".*", True)
        assert result == "name =~ 'web.*'"

    def test_replacement_is_literal(self):
        result = interpolate_search_filter(SEARCH_FILTER_VARIABLE, {"searchFilter": r"a\1$&"}, "*", False)
        assert result == r"a\1$&*"

    def test_wildcard_and_quote_are_required(self):
        with pytest.raises(TypeError):
            interpolate_search_filter("$__searchFilter", {})

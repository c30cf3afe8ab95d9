"""Search filter sentinel detection and substitution."""

import logging
from typing import Any, Mapping, Optional


logger = logging.getLogger(__name__)

SEARCH_FILTER_VARIABLE = '$__searchFilter'


def contains_search_filter(query: Optional[str]) -> bool:
    """Return True if the search filter sentinel occurs in query."""
    return SEARCH_FILTER_VARIABLE in query if query else False


def interpolate_search_filter(
    query: str,
    options: Optional[Mapping[str, Any]],
    wildcard_char: str,
    quote_literal: bool
) -> str:
    """
    Replace the first $__searchFilter in query with the search term.

    Later occurrences of the sentinel are left in place.

    Args:
        query: Query string that may contain the sentinel
        options: Mapping (or None) whose 'searchFilter' key holds the typed search term
        wildcard_char: Appended to the search term
        quote_literal: Wrap the computed literal in single quotes

    Returns:
        The query with at most one substitution made
    """
    if not contains_search_filter(query):
        return query

    options = options or {}

    search_filter = options.get('searchFilter')
    filter_value = f"{search_filter}{wildcard_char}" if search_filter else f"{wildcard_char}"
    replace_value = f"'{filter_value}'" if quote_literal else filter_value

    logger.debug(f"Interpolating search filter as {replace_value!r}")
    return query.replace(SEARCH_FILTER_VARIABLE, replace_value, 1)

"""
Variable reference module.
Scanning, matching and search filter handling for dashboard query strings.
"""

from .scanner import (
    VARIABLE_PATTERN,
    ReferenceSyntax,
    ParsedReference,
    scan,
    find_all,
    first_match,
)
from .search_filter import (
    SEARCH_FILTER_VARIABLE,
    contains_search_filter,
    interpolate_search_filter,
)
from .matcher import contains_variable, referenced_variables
from .model_utils import assign_model_properties
from .store import VariableStore


__all__ = [
    "VARIABLE_PATTERN",
    "ReferenceSyntax",
    "ParsedReference",
    "scan",
    "find_all",
    "first_match",
    "SEARCH_FILTER_VARIABLE",
    "contains_search_filter",
    "interpolate_search_filter",
    "contains_variable",
    "referenced_variables",
    "assign_model_properties",
    "VariableStore",
]

"""CLI commands."""

from .references import scan_text, check_contains, interpolate_query
from .usages import report_usages

__all__ = ['scan_text', 'check_contains', 'interpolate_query', 'report_usages']

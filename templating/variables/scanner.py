"""
Variable reference scanner.

Recognizes the three ways a dashboard query string can embed a variable:

- shorthand:       $var1
- double bracket:  [[var2]] or [[var2:fmt2]]
- curly brace:     ${var3}, ${var3:fmt3} or ${var3.field:fmt3}
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


# \$(\w+)                                   $var1
# \[\[([\s\S]+?)(?::(\w+))?\]\]             [[var2]] or [[var2:fmt2]]
# \${(\w+)(?:\.([^:^}]+))?(?::(\w+))?}      ${var3}, ${var3.field} or ${var3:fmt3}
VARIABLE_PATTERN = re.compile(
    r'\$(\w+)'
    r'|\[\[([\s\S]+?)(?::(\w+))?\]\]'
    r'|\$\{(\w+)(?:\.([^:^}]+))?(?::(\w+))?\}',
    re.ASCII,
)


class ReferenceSyntax(str, Enum):
    """Which of the three reference forms produced a match."""
    SHORTHAND_DOLLAR = "shorthand_dollar"
    DOUBLE_BRACKET = "double_bracket"
    CURLY_BRACE = "curly_brace"


@dataclass(frozen=True)
class ParsedReference:
    """
    A single variable reference found in a string.

    Attributes:
        syntax: Reference form that matched
        raw_match: Exact matched substring
        name: Variable name (bracket names may hold non-word characters)
        format: Optional format specifier
        field: Optional field path (curly brace form only)
        start: Offset of the match in the scanned text
        end: Offset just past the match
        groups: All six capture slots, None where another form matched
    """
    syntax: ReferenceSyntax
    raw_match: str
    name: str
    format: Optional[str] = None
    field: Optional[str] = None
    start: int = 0
    end: int = 0
    groups: Tuple[Optional[str], ...] = ()


def _to_reference(match: "re.Match[str]") -> ParsedReference:
    (dollar_name, bracket_name, bracket_format,
     curly_name, curly_field, curly_format) = match.groups()

    if dollar_name is not None:
        syntax, name, fmt, fld = ReferenceSyntax.SHORTHAND_DOLLAR, dollar_name, None, None
    elif bracket_name is not None:
        syntax, name, fmt, fld = ReferenceSyntax.DOUBLE_BRACKET, bracket_name, bracket_format, None
    else:
        syntax, name, fmt, fld = ReferenceSyntax.CURLY_BRACE, curly_name, curly_format, curly_field

    return ParsedReference(
        syntax=syntax,
        raw_match=match.group(0),
        name=name,
        format=fmt,
        field=fld,
        start=match.start(),
        end=match.end(),
        groups=match.groups(),
    )


def _require_text(text) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected a string to scan, got {type(text).__name__}")


def scan(text: str) -> Iterator[ParsedReference]:
    """
    Lazily yield every reference in text, left to right, non-overlapping.

    Each call starts its own matching context, so the same input always
    yields the same sequence and concurrent scans never share a cursor.

    Raises:
        TypeError: If text is not a string
    """
    _require_text(text)
    for match in VARIABLE_PATTERN.finditer(text):
        yield _to_reference(match)


def find_all(text: str) -> List[str]:
    """Return the raw matched substrings of every reference in text."""
    _require_text(text)
    return [match.group(0) for match in VARIABLE_PATTERN.finditer(text)]


def first_match(text: str) -> Optional[ParsedReference]:
    """Return the first reference in text, or None if there is none."""
    _require_text(text)
    match = VARIABLE_PATTERN.search(text)
    if match is None:
        return None
    return _to_reference(match)

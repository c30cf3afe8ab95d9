"""
Variable reference matching.

Answers "does any of these strings (or flattened records) reference
variable X?" using the reference grammar from the scanner module.
"""

from typing import Any, List, Mapping, Sequence, Set, Union

from .scanner import find_all, first_match, scan


MatchInput = Union[str, Mapping[str, Any]]


def _value_to_text(value: Any) -> str:
    """Render a record value the way a script join would."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join(_value_to_text(item) for item in value)
    return str(value)


def flatten_input(value: MatchInput) -> str:
    """
    Turn one matcher input into a string.

    Strings pass through unchanged. Mappings become their values (keys
    ignored) in iteration order, joined by single spaces.

    Raises:
        TypeError: If value is neither a string nor a mapping
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return ' '.join(_value_to_text(v) for v in value.values())
    raise TypeError(
        f"Matcher inputs must be strings or mappings, got {type(value).__name__}"
    )


def _combine(values: Union[MatchInput, Sequence[MatchInput]]) -> str:
    if isinstance(values, (str, Mapping)):
        values = [values]
    inputs: List[MatchInput] = list(values)
    if not inputs:
        raise ValueError("contains_variable requires at least one input value")
    # Joining before scanning means a reference can span two inputs
    return ' '.join(flatten_input(value) for value in inputs)


def contains_variable(
    values: Union[MatchInput, Sequence[MatchInput]],
    variable_name: str
) -> bool:
    """
    Check whether variable_name is referenced anywhere in values.

    A reference counts when variable_name is exactly equal to one of its
    capture slots: the name, and also the format or field slot.

    Args:
        values: A string or mapping, or an ordered sequence of them
        variable_name: Name to look for

    Returns:
        True if at least one reference matches

    Raises:
        ValueError: If values is empty
        TypeError: If variable_name is not a string or an input is not
            a string or mapping
    """
    if not isinstance(variable_name, str):
        raise TypeError(
            f"variable_name must be a string, got {type(variable_name).__name__}"
        )

    variable_string = _combine(values)

    for raw_match in find_all(variable_string):
        reference = first_match(raw_match)
        if reference is not None and variable_name in reference.groups:
            return True
    return False


def referenced_variables(values: Union[MatchInput, Sequence[MatchInput]]) -> Set[str]:
    """Return the set of variable names referenced in values."""
    return {reference.name for reference in scan(_combine(values))}

"""Property copy helpers for variable records."""

from typing import Any, Dict, Mapping

_MISSING = object()


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    return getattr(obj, key, _MISSING)


def _set(obj: Any, key: str, value: Any) -> None:
    if isinstance(obj, dict):
        obj[key] = value
    else:
        setattr(obj, key, value)


def assign_model_properties(target: Any, source: Any, defaults: Mapping[str, Any]) -> Any:
    """
    Copy every property named in defaults from source onto target.

    Only a property absent from source takes the default; an explicit
    None in source is copied as is.

    Args:
        target: dict or object to write into
        source: dict or object to read from
        defaults: Property names and their default values

    Returns:
        target
    """
    for key, default in defaults.items():
        value = _get(source, key)
        _set(target, key, default if value is _MISSING else value)

    return target


def strip_id(model: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a shallow copy of a record without its 'id' key."""
    return {k: v for k, v in model.items() if k != 'id'}

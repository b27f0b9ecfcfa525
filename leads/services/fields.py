"""
Safe field extraction for untyped webhook payloads.

The automation tool's payload shape drifts between integration versions, so
every read goes through these helpers instead of direct indexing.
"""
from typing import Any, Dict, Iterable, List, Union

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

_MISSING = object()


def _lookup(data: JSONValue, path: str) -> Any:
    value = data
    for key in path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return _MISSING
    return value


def get_nested_value(data: JSONValue, path: str, default: Any = ''):
    """
    Get a value from a nested dictionary using dot notation.

    Only ``None`` or a missing key falls back to ``default``; falsy values
    such as ``''`` or ``0`` are returned as-is.

    Args:
        data: The payload to search (any JSON value)
        path: Dot-separated path (e.g., 'contact.lastAttributionSource.adId')
        default: Default value if path not found

    Returns:
        The value at the path or default
    """
    value = _lookup(data, path)
    if value is _MISSING or value is None:
        return default
    return value


def first_present(data: JSONValue, paths: Iterable[str], default: Any = ''):
    """Return the value at the first of ``paths`` that is present and not null."""
    for path in paths:
        value = _lookup(data, path)
        if value is not _MISSING and value is not None:
            return value
    return default


def as_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return str(value)

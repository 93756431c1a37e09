"""Structural access helpers for untyped JSON payloads.

Trace payloads have no schema, so every field access goes through these
helpers. Each one returns None instead of raising when the value is missing
or has the wrong shape.
"""

from collections.abc import Mapping
from typing import Any


def as_dict(value: Any) -> Mapping[str, Any] | None:
    """Return the value if it is a JSON object, None otherwise."""
    return value if isinstance(value, Mapping) else None


def as_list(value: Any) -> list[Any] | tuple[Any, ...] | None:
    """Return the value if it is a JSON array, None otherwise.

    Strings are sequences too, so only lists and tuples qualify.
    """
    return value if isinstance(value, (list, tuple)) else None


def as_str(value: Any) -> str | None:
    """Return the value if it is a string, None otherwise."""
    return value if isinstance(value, str) else None


def non_empty_str(value: Any) -> str | None:
    """Return the value if it is a non-empty string, None otherwise."""
    return value if isinstance(value, str) and value else None


def last(items: list[Any] | tuple[Any, ...] | None) -> Any:
    """Return the last element, or None for an empty or missing list."""
    return items[-1] if items else None


def get_path(value: Any, *keys: str) -> Any:
    """Walk nested objects by key.

    Args:
        value: The payload to walk.
        *keys: Keys to follow, outermost first.

    Returns:
        The value at the end of the path, or None if any step is missing
        or is not an object.
    """
    for key in keys:
        mapping = as_dict(value)
        if mapping is None or key not in mapping:
            return None
        value = mapping[key]
    return value


def lookup(mapping: Mapping[str, Any], key: str) -> Any:
    """Look up a key, treating a dotted key as a path when it is not literal.

    ``lookup({"sys.query": "a"}, "sys.query")`` and
    ``lookup({"sys": {"query": "a"}}, "sys.query")`` both return ``"a"``.
    """
    if key in mapping:
        return mapping[key]
    if "." in key:
        return get_path(mapping, *key.split("."))
    return None

"""Equality and mapping helpers used by the connector binding."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

UNKNOWN_COMPONENT = "UnknownComponent"


def shallow_equal(a: Any, b: Any) -> bool:
    """
    Compare two mappings one level deep.

    Both must have the same keys, and each pair of values must be the same
    object or compare equal. Non-mappings fall back to identity/equality.
    """
    if a is b:
        return True
    if not isinstance(a, Mapping) or not isinstance(b, Mapping):
        return _values_equal(a, b)
    if a.keys() != b.keys():
        return False
    return all(_values_equal(a[key], b[key]) for key in a)


def is_equal(a: Any, b: Any) -> bool:
    """Recursive structural equality over mappings and sequences."""
    if a is b:
        return True
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(is_equal(a[key], b[key]) for key in a)
    if _is_sequence(a) and _is_sequence(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b, strict=True))
    return _values_equal(a, b)


def remove_empty_key(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `obj` without empty nested mappings, recursively."""
    cleaned: dict[str, Any] = {}
    for key, value in obj.items():
        if isinstance(value, Mapping):
            if not value:
                continue
            cleaned[key] = remove_empty_key(value)
        else:
            cleaned[key] = value
    return cleaned


def omit(mapping: Mapping[str, Any] | None, *keys: str) -> dict[str, Any]:
    """Copy of `mapping` without `keys`."""
    if not mapping:
        return {}
    return {key: value for key, value in mapping.items() if key not in keys}


def get_display_name(component: Any) -> str:
    return getattr(component, "display_name", None) or getattr(component, "__name__", None) or UNKNOWN_COMPONENT


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _values_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Values whose == is not a plain bool (e.g. array-likes)
        return False

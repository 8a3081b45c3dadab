"""Dot-path lookups into actions.

A path such as ``"payload.entities.users"`` selects a value out of an action.
Each segment is resolved against the current value:

* mappings by key (a digit segment also tries the integer key),
* lists and tuples by index for digit segments,
* anything else by attribute, so pydantic models and dataclasses work.

A segment that cannot be resolved ends the walk with ``None``; lookups never
raise for missing data.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()


def _lookup(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        if segment.lstrip("-").isdigit():
            return current.get(int(segment), _MISSING)
        return _MISSING

    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        if segment.lstrip("-").isdigit():
            index = int(segment)
            if -len(current) <= index < len(current):
                return current[index]
        return _MISSING

    if segment.startswith("_"):
        return _MISSING
    return getattr(current, segment, _MISSING)


def split_path(path: str) -> tuple[str, ...]:
    """Split a dot path into its segments."""
    return tuple(path.split("."))


def resolve_path(obj: Any, path: str) -> Any:
    """Resolve *path* against *obj*, returning ``None`` for missing segments."""
    current = obj
    for segment in split_path(path):
        if current is None:
            return None
        current = _lookup(current, segment)
        if current is _MISSING:
            return None
    return current

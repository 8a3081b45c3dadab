"""Helpers for compact debug logging.

Dependency payloads are usually whole entity tables. This module turns them
into a bounded preview before they reach a DEBUG log line, and hides values
stored under credential-like keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import islice
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "secret",
        "token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
    }
)


def preview_for_log(
    value: Any,
    *,
    max_string: int = 120,
    max_items: int = 20,
    _depth: int = 0,
) -> Any:
    """Return a bounded, redacted copy of *value* suitable for debug logs."""
    if _depth > 6:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        preview: dict[Any, Any] = {}
        for index, (k, v) in enumerate(value.items()):
            if index >= max_items:
                preview["…"] = f"<{len(value) - max_items} more>"
                break
            if str(k).lower() in _SENSITIVE_VALUE_KEYS:
                preview[k] = "<redacted>"
            else:
                preview[k] = preview_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
        return preview

    if isinstance(value, Sequence):
        items = [
            preview_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for v in islice(value, max_items)
        ]
        if len(value) > max_items:
            items.append(f"<{len(value) - max_items} more>")
        return items

    # Unknown objects: repr, bounded like any other string.
    return preview_for_log(repr(value), max_string=max_string, _depth=_depth + 1)

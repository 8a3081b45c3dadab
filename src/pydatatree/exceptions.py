"""Custom exception hierarchy for pydatatree."""

from __future__ import annotations

from typing import Any


class DataTreeError(Exception):
    """Base exception for all pydatatree errors."""


class DataTreeConfigError(DataTreeError, TypeError):
    """Invalid configuration.

    Raised for dependency values that are neither a function nor a string,
    listener keys that are not non-empty strings, malformed
    :class:`pydatatree.config.DataTreeConfig` values, and (when enabled)
    ordinary actions addressed into the reserved namespace.

    Subclasses :class:`TypeError` so callers written against the plain
    type check keep working.
    """

    def __init__(self, message: str, *, key: Any = None) -> None:
        self.key = key
        super().__init__(message)


class DataTreeStateError(DataTreeError):
    """A listener could not build a new state of the given type."""

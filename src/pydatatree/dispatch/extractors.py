"""Extractors: how a dependency value is pulled out of the triggering action.

An extractor is either a function of the action (:class:`FuncExtractor`) or
a dot path into it (:class:`PathExtractor`). Dependency maps may use raw
callables and strings; :func:`coerce_extractors` validates and wraps them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydatatree.exceptions import DataTreeConfigError
from pydatatree.paths import resolve_path


@dataclass(frozen=True, slots=True)
class FuncExtractor:
    func: Callable[[Any], Any]

    def __call__(self, action: Any) -> Any:
        return self.func(action)


@dataclass(frozen=True, slots=True)
class PathExtractor:
    path: str

    def __call__(self, action: Any) -> Any:
        return resolve_path(action, self.path)


Extractor = FuncExtractor | PathExtractor
DependencyValue = Extractor | Callable[[Any], Any] | str


def coerce_extractor(key: str, value: Any) -> Extractor:
    """Wrap a dependency map value, rejecting anything but a function or a string."""
    if not isinstance(key, str) or not key:
        raise DataTreeConfigError(
            f"Dependency keys must be non-empty strings, but got {type(key).__name__} {key!r}",
            key=key,
        )
    if isinstance(value, (FuncExtractor, PathExtractor)):
        return value
    if isinstance(value, str):
        return PathExtractor(value)
    if callable(value):
        return FuncExtractor(value)
    raise DataTreeConfigError(
        f"Dependent reducer values must be either a function or a string, but got {type(value).__name__} for {key!r}",
        key=key,
    )


def coerce_extractors(deps: Mapping[str, DependencyValue]) -> list[tuple[str, Extractor]]:
    """Validate every entry of *deps* up front, preserving its order."""
    if not isinstance(deps, Mapping):
        raise DataTreeConfigError(f"Dependencies must be a mapping, but got {type(deps).__name__}")
    return [(key, coerce_extractor(key, value)) for key, value in deps.items()]

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class RecordingStore:
    """Stand-in host dispatcher that records every action it receives."""

    def __init__(self, middlewares: tuple[Callable[[Any], Any], ...] = ()) -> None:
        self.actions: list[Any] = []
        dispatch: Callable[[Any], Any] = self._record
        for middleware in reversed(middlewares):
            dispatch = middleware(self)(dispatch)
        self._dispatch = dispatch

    def _record(self, action: Any) -> str:
        self.actions.append(action)
        return "recorded"

    def dispatch(self, action: Any) -> Any:
        return self._dispatch(action)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def payload() -> dict[str, Any]:
    return {
        "entities": {
            "users": {1: "foo", 2: "bar", 3: "baz"},
            "repos": {
                1848: {"owner": 1, "name": "spring"},
                1574: {"owner": 3, "name": "flower"},
                1003: {"owner": 2, "name": "waterfall"},
            },
        }
    }

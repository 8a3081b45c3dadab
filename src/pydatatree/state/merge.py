"""Deterministic state merge policy.

A dependency payload replaces the entities region of a state slice. The merge
is shallow at the top level: every other field is carried over as-is, and the
entities region is replaced wholesale rather than deep-merged. The input
state is never mutated.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from pydatatree.exceptions import DataTreeStateError


def merge_entities(state: Any, payload: Any, *, entities_key: str) -> Any:
    """Return a copy of *state* whose *entities_key* field is *payload*."""
    if state is None:
        return {entities_key: payload}

    if isinstance(state, BaseModel):
        if entities_key not in type(state).model_fields and state.model_config.get("extra") != "allow":
            raise DataTreeStateError(f"{type(state).__name__} has no field {entities_key!r}")
        return state.model_copy(update={entities_key: payload})

    if isinstance(state, Mapping):
        return {**state, entities_key: payload}

    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        try:
            return dataclasses.replace(state, **{entities_key: payload})
        except TypeError as err:
            raise DataTreeStateError(f"cannot replace {entities_key!r} on {type(state).__name__}: {err}") from err

    raise DataTreeStateError(f"unsupported state type {type(state).__name__}")

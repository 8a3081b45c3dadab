"""Addresses and dependency actions.

A dependency ("satisfaction") action is a distinct variant of the general
action type. The declarer creates :class:`DependencyAction` instances; the
listener also recognises plain mappings carrying the :data:`DATA_TREE_ID`
marker, so hand-built actions and serialized ones match the same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pydatatree._constants import DATA_TREE_ID, DEFAULT_NAMESPACE, NAMESPACE_SEPARATOR


class Address(BaseModel):
    """Routing identifier of a dependency action.

    Two addresses are equal when their namespace-qualified names are equal,
    regardless of how they were split into ``namespace`` and ``name``. An
    address also compares equal to its qualified string.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str = ""
    name: str

    @property
    def qualified(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"

    @classmethod
    def parse(cls, value: Address | str) -> Address:
        """Build an address from a qualified string (or return *value*)."""
        if isinstance(value, Address):
            return value
        if not isinstance(value, str):
            raise TypeError(f"address must be a string or Address, got {type(value).__name__}")
        namespace, sep, name = value.partition(NAMESPACE_SEPARATOR)
        if not sep:
            return cls(name=value)
        return cls(namespace=namespace, name=name)

    def in_namespace(self, namespace: str) -> bool:
        return self.qualified.startswith(f"{namespace}{NAMESPACE_SEPARATOR}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self.qualified == other.qualified
        if isinstance(other, str):
            return self.qualified == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.qualified)

    def __str__(self) -> str:
        return self.qualified


def address_for(key: str, namespace: str = DEFAULT_NAMESPACE) -> Address:
    """Address that dependency actions for *key* are dispatched under."""
    return Address(namespace=namespace, name=key)


def coerce_address(value: Any) -> Address | None:
    """Return *value* as an :class:`Address`, or ``None`` if it cannot be one."""
    if isinstance(value, (Address, str)):
        return Address.parse(value)
    return None


class DependencyAction(BaseModel):
    """Synthesized action carrying the data a listener key depends on.

    Reads like a plain action for dict-oriented reducers: ``action["type"]``,
    ``action["payload"]`` and ``action[DATA_TREE_ID]`` all work.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    payload: Any = None
    namespace: str = DEFAULT_NAMESPACE

    @field_validator("key")
    @classmethod
    def _require_key(cls, value: str) -> str:
        if not value:
            raise ValueError("key must be non-empty")
        return value

    @property
    def type(self) -> Address:
        return address_for(self.key, self.namespace)

    def get(self, name: str, default: Any = None) -> Any:
        if name == DATA_TREE_ID:
            return True
        if name == "type":
            return self.type
        if name == "payload":
            return self.payload
        return default

    def __getitem__(self, name: str) -> Any:
        value = self.get(name, _ABSENT)
        if value is _ABSENT:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return name in (DATA_TREE_ID, "type", "payload")

    def as_dict(self) -> dict[str, Any]:
        """Plain-mapping form, e.g. for recording or serialization."""
        return {DATA_TREE_ID: True, "type": self.type.qualified, "payload": self.payload}


_ABSENT = object()


def get_field(action: Any, name: str, default: Any = None) -> Any:
    """Read *name* from a mapping-style or attribute-style action."""
    if isinstance(action, (Mapping, DependencyAction)):
        return action.get(name, default)
    return getattr(action, name, default)


def is_dependency_action(action: Any) -> bool:
    """Whether *action* carries the dependency marker."""
    if isinstance(action, DependencyAction):
        return True
    if isinstance(action, Mapping):
        return action.get(DATA_TREE_ID) is True
    return False


def is_dependency_for(action: Any, address: Address) -> bool:
    """Whether *action* is a dependency action addressed to *address*.

    The marker is checked first; the address is always compared as well, so
    an action that merely carries the marker never reaches the wrong key.
    """
    if not is_dependency_action(action):
        return False
    return coerce_address(get_field(action, "type")) == address

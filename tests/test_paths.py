from __future__ import annotations

from dataclasses import dataclass

from pydatatree.paths import resolve_path, split_path


def test_split_path() -> None:
    assert split_path("payload.entities.users") == ("payload", "entities", "users")


def test_resolve_nested_mapping() -> None:
    action = {"payload": {"entities": {"users": {1: "a"}}}}

    assert resolve_path(action, "payload.entities.users") == {1: "a"}


def test_digit_segments_match_integer_keys_and_indices() -> None:
    action = {"payload": {"users": {1: "a"}, "list": ["x", "y"]}}

    assert resolve_path(action, "payload.users.1") == "a"
    assert resolve_path(action, "payload.list.1") == "y"
    assert resolve_path(action, "payload.list.-1") == "y"
    assert resolve_path(action, "payload.list.5") is None


def test_string_keys_win_over_integer_keys() -> None:
    assert resolve_path({"1": "str", 1: "int"}, "1") == "str"


def test_missing_segments_resolve_to_none() -> None:
    action = {"payload": {"entities": None}}

    assert resolve_path(action, "payload.entities.users") is None
    assert resolve_path(action, "meta.deps") is None
    assert resolve_path(action, "payload.entities.users.name") is None


def test_attributes_are_resolved() -> None:
    @dataclass
    class Payload:
        name: str

    assert resolve_path({"payload": Payload("spring")}, "payload.name") == "spring"
    assert resolve_path({"payload": Payload("spring")}, "payload.__class__") is None


def test_strings_are_not_indexed() -> None:
    assert resolve_path({"type": "FOO"}, "type.0") is None

from __future__ import annotations

from collections import deque

from pydatatree._preview import preview_for_log


def test_preview_redacts_sensitive_keys() -> None:
    preview = preview_for_log({"user": {"name": "a", "password": "pw"}, "Token": "abc"})

    assert preview["user"]["password"] == "<redacted>"
    assert preview["Token"] == "<redacted>"
    assert preview["user"]["name"] == "a"


def test_preview_truncates_strings_and_collections() -> None:
    preview = preview_for_log({"text": "x" * 50, "items": list(range(10))}, max_string=10, max_items=3)

    assert preview["text"].startswith("x" * 10)
    assert "<truncated>" in preview["text"]
    assert preview["items"] == [0, 1, 2, "<7 more>"]


def test_preview_caps_mapping_size() -> None:
    preview = preview_for_log({i: i for i in range(5)}, max_items=2)

    assert preview == {0: 0, 1: 1, "…": "<3 more>"}


def test_preview_handles_unsliceable_sequences() -> None:
    assert preview_for_log(deque(range(5)), max_items=2) == [0, 1, "<3 more>"]

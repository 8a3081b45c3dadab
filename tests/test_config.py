from __future__ import annotations

import pytest

from pydatatree import DEFAULT_CONFIG, DataTreeConfig, DataTreeConfigError


def test_defaults() -> None:
    assert DEFAULT_CONFIG.namespace == "dataTree"
    assert DEFAULT_CONFIG.entities_key == "entities"
    assert DEFAULT_CONFIG.reject_reserved_types is False


@pytest.mark.parametrize(
    "kwargs",
    [{"namespace": ""}, {"namespace": "dataTree."}, {"entities_key": ""}, {"deps_key": 3}],
)
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(DataTreeConfigError):
        DataTreeConfig(**kwargs)


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DATATREE_NAMESPACE", "deps")
    monkeypatch.setenv("DATATREE_REJECT_RESERVED_TYPES", "yes")
    monkeypatch.setenv("DATATREE_LOG_PAYLOADS", "maybe")

    config = DataTreeConfig.from_env()

    assert config.namespace == "deps"
    assert config.reject_reserved_types is True
    assert config.log_payloads is False


def test_from_env_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("DATATREE_ENTITIES_KEY", "data")
    monkeypatch.setenv("DATATREE_LOG_PAYLOADS", "on")

    config = DataTreeConfig.from_env(entities_key="items", log_payloads=False)

    assert config.entities_key == "items"
    assert config.log_payloads is False

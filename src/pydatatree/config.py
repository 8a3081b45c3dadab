"""Configuration for pydatatree."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pydatatree._constants import (
    DEFAULT_DEPS_KEY,
    DEFAULT_ENTITIES_KEY,
    DEFAULT_META_KEY,
    DEFAULT_NAMESPACE,
    NAMESPACE_SEPARATOR,
)
from pydatatree.exceptions import DataTreeConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class DataTreeConfig:
    """Dependency layer configuration.

    Parameters
    ----------
    namespace : str
        Reserved address namespace. Dependency actions are addressed as
        ``"<namespace>.<key>"``. Producers of ordinary actions must not
        use it.
    entities_key : str
        Top-level state field replaced by a dependency payload.
    meta_key : str
        Action field the middleware reads the dependency map from.
    deps_key : str
        Field of ``action[meta_key]`` holding the dependency map.
    reject_reserved_types : bool
        When enabled, :func:`pydatatree.setup_tree` refuses to forward an
        ordinary action whose ``type`` falls inside ``namespace``.
    log_payloads : bool
        Include a truncated preview of payloads in DEBUG logs.
    """

    namespace: str = DEFAULT_NAMESPACE
    entities_key: str = DEFAULT_ENTITIES_KEY
    meta_key: str = DEFAULT_META_KEY
    deps_key: str = DEFAULT_DEPS_KEY
    reject_reserved_types: bool = False
    log_payloads: bool = False

    def __post_init__(self) -> None:
        for name in ("namespace", "entities_key", "meta_key", "deps_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise DataTreeConfigError(
                    f"{name} must be a non-empty string, but got {type(value).__name__}"
                )
        if self.namespace.endswith(NAMESPACE_SEPARATOR):
            raise DataTreeConfigError(f"namespace must not end with {NAMESPACE_SEPARATOR!r}: {self.namespace!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> DataTreeConfig:
        """Create configuration from environment variables.

        Reads the optional ``DATATREE_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DataTreeConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "DATATREE_NAMESPACE": "namespace",
            "DATATREE_ENTITIES_KEY": "entities_key",
            "DATATREE_META_KEY": "meta_key",
            "DATATREE_DEPS_KEY": "deps_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "reject_reserved_types" not in overrides:
            config_kwargs["reject_reserved_types"] = _env_bool(
                env.get("DATATREE_REJECT_RESERVED_TYPES"),
                False,
            )

        if "log_payloads" not in overrides:
            config_kwargs["log_payloads"] = _env_bool(env.get("DATATREE_LOG_PAYLOADS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = DataTreeConfig()

"""Dependency listener.

:func:`listen_for` wraps a reducer so that dependency actions addressed to a
key are merged into the reducer's entities region. Every other action is
delegated to the wrapped reducer untouched.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from pydatatree._preview import preview_for_log
from pydatatree.config import DEFAULT_CONFIG, DataTreeConfig
from pydatatree.exceptions import DataTreeConfigError
from pydatatree.state.actions import address_for, get_field, is_dependency_for
from pydatatree.state.merge import merge_entities

_logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Any], Any]


def listen_for(key: str, *, config: DataTreeConfig | None = None) -> Callable[[Reducer], Reducer]:
    """Enhance a reducer to respond to dependencies declared for *key*.

    Parameters
    ----------
    key
        Listener key. Must match the key used in the producer's dependency
        map. Several reducers may listen for the same key.
    config
        Namespace and entities field to use. Defaults to
        :data:`pydatatree.config.DEFAULT_CONFIG`.

    Raises
    ------
    DataTreeConfigError
        If *key* is not a non-empty string.
    """
    if not isinstance(key, str):
        raise DataTreeConfigError(f"The dependency key must be a string, but got {type(key).__name__}")
    if not key:
        raise DataTreeConfigError("The dependency key must be a non-empty string", key=key)

    cfg = config or DEFAULT_CONFIG
    address = address_for(key, cfg.namespace)

    def decorator(reducer: Reducer) -> Reducer:
        @functools.wraps(reducer)
        def wrapped(state: Any, action: Any) -> Any:
            if is_dependency_for(action, address):
                payload = get_field(action, "payload")
                if cfg.log_payloads and _logger.isEnabledFor(logging.DEBUG):
                    _logger.debug("Merging dependency %s into %s: %s", address, cfg.entities_key, preview_for_log(payload))
                else:
                    _logger.debug("Merging dependency %s into %s", address, cfg.entities_key)
                return merge_entities(state, payload, entities_key=cfg.entities_key)
            return reducer(state, action)

        return wrapped

    return decorator

"""Middleware form of the dependency declarer.

For stores built from ``store -> next -> action`` middleware chains. An action
declares its dependencies inline::

    store.dispatch({
        "type": "USERS_LOADED",
        "payload": payload,
        "meta": {"deps": {"user": "payload.entities.users"}},
    })

Dependency actions and the original action are handed to ``next``, so they
do not re-enter the middleware.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydatatree.config import DEFAULT_CONFIG, DataTreeConfig
from pydatatree.dispatch.declarer import setup_tree
from pydatatree.state.actions import get_field

Middleware = Callable[[Any], Callable[[Callable[[Any], Any]], Callable[[Any], Any]]]


def _declared_deps(action: Any, cfg: DataTreeConfig) -> Any:
    meta = get_field(action, cfg.meta_key)
    if meta is None:
        return None
    return get_field(meta, cfg.deps_key)


def create_data_dispatch(config: DataTreeConfig | None = None) -> Middleware:
    """Build a dependency middleware using *config*."""
    cfg = config or DEFAULT_CONFIG

    def middleware(store: Any) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
        def wrap(next_dispatch: Callable[[Any], Any]) -> Callable[[Any], Any]:
            tree_dispatch = setup_tree(next_dispatch, config=cfg)

            def dispatch(action: Any) -> Any:
                deps = _declared_deps(action, cfg)
                if deps is None:
                    return next_dispatch(action)
                return tree_dispatch(action, deps)

            return dispatch

        return wrap

    return middleware


data_dispatch = create_data_dispatch()

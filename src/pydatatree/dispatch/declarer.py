"""Dependency declarer.

:func:`setup_tree` augments a dispatch function: given an action and a
dependency map ``{listener_key: extractor}``, it dispatches one
:class:`~pydatatree.state.actions.DependencyAction` per key, in the map's
order, then the original action.

Everything is synchronous. All dependency values are validated before the
first dispatch, so a bad map leaves no side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from pydatatree._preview import preview_for_log
from pydatatree.config import DEFAULT_CONFIG, DataTreeConfig
from pydatatree.dispatch.extractors import DependencyValue, coerce_extractors
from pydatatree.exceptions import DataTreeConfigError
from pydatatree.state.actions import DependencyAction, coerce_address, get_field

_logger = logging.getLogger(__name__)

Dispatch = Callable[[Any], Any]
TreeDispatch = Callable[..., Any]


class _SupportsDispatch(Protocol):
    def dispatch(self, action: Any) -> Any: ...


def _dispatch_resolver(target: Dispatch | _SupportsDispatch) -> Callable[[], Dispatch]:
    # A store is asked for its dispatch on every call so later enhancers apply.
    if callable(getattr(target, "dispatch", None)):
        return lambda: target.dispatch
    if callable(target):
        return lambda: target
    raise DataTreeConfigError(f"Expected a dispatch function or a store, but got {type(target).__name__}")


def _check_reserved_type(action: Any, cfg: DataTreeConfig) -> None:
    address = coerce_address(get_field(action, "type"))
    if address is not None and address.in_namespace(cfg.namespace):
        raise DataTreeConfigError(
            f"Action type {address.qualified!r} is inside the reserved namespace {cfg.namespace!r}"
        )


def setup_tree(
    dispatch: Dispatch | _SupportsDispatch,
    *,
    config: DataTreeConfig | None = None,
) -> TreeDispatch:
    """Wrap *dispatch* so that actions can declare dependencies.

    Parameters
    ----------
    dispatch
        The host dispatcher: a ``dispatch(action)`` callable, or a store
        object exposing one as ``.dispatch``.
    config
        Namespace and guard settings. Defaults to
        :data:`pydatatree.config.DEFAULT_CONFIG`.

    Returns
    -------
    Callable
        ``tree_dispatch(action, deps=None)``, which dispatches the dependency
        actions followed by *action* and returns *action* itself.
    """
    cfg = config or DEFAULT_CONFIG
    resolve_dispatch = _dispatch_resolver(dispatch)

    def tree_dispatch(action: Any, deps: Mapping[str, DependencyValue] | None = None) -> Any:
        extractors = coerce_extractors(deps if deps is not None else {})
        if cfg.reject_reserved_types:
            _check_reserved_type(action, cfg)
        base_dispatch = resolve_dispatch()

        for key, extractor in extractors:
            dependency = DependencyAction(key=key, payload=extractor(action), namespace=cfg.namespace)
            if cfg.log_payloads and _logger.isEnabledFor(logging.DEBUG):
                _logger.debug("Dispatching dependency %s: %s", dependency.type, preview_for_log(dependency.payload))
            else:
                _logger.debug("Dispatching dependency %s", dependency.type)
            base_dispatch(dependency)

        _logger.debug(
            "Dispatching action type=%s after %d dependencies",
            get_field(action, "type"),
            len(extractors),
        )
        base_dispatch(action)
        return action

    return tree_dispatch

# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""Translation table caching helpers.

Tables are pure data derived from a fixed key, so they are built lazily and
kept for the life of the process. Three strategies are available:

``"global"``
    One store shared by every thread. A miss builds the table under a lock
    so each table is built at most once.
``"thread-local"``
    One store per thread, no locking.
``"none"``
    Tables are rebuilt on every call and never retained.
"""

from __future__ import annotations

import logging
import os
from threading import Lock, local
from typing import Callable, Dict, Tuple, TypeVar


T = TypeVar("T")

logger = logging.getLogger(__name__)

STRATEGY_ENV = "ESCAPE_STRING_CACHE_STRATEGY"
_STRATEGIES = ("global", "thread-local", "none")
_DEFAULT_STRATEGY = "global"


def _validate_strategy(name: str) -> str:
    normalized = name.strip().lower()
    if normalized not in _STRATEGIES:
        raise ValueError(f"unknown cache strategy {name!r}; expected one of {', '.join(_STRATEGIES)}")
    return normalized


def _initial_strategy() -> str:
    value = os.environ.get(STRATEGY_ENV)
    if value is None or not value.strip():
        return _DEFAULT_STRATEGY
    return _validate_strategy(value)


class _CacheState(local):
    """Thread-local table store used by the ``"thread-local"`` strategy."""

    def __init__(self) -> None:
        self.tables: Dict[str, object] = {}


_THREAD_LOCAL = _CacheState()
_GLOBAL_TABLES: Dict[str, object] = {}
_GLOBAL_LOCK = Lock()
_STRATEGY = _initial_strategy()


def _build(key: str, builder: Callable[[], T]) -> T:
    table = builder()
    logger.debug("built translation table %r (strategy=%s)", key, _STRATEGY)
    return table


def cached_table(key: str, builder: Callable[[], T]) -> T:
    """Return the table stored under *key*, building it with *builder* on a miss."""

    strategy = _STRATEGY
    if strategy == "none":
        return builder()

    if strategy == "thread-local":
        store = _THREAD_LOCAL.tables
        cached = store.get(key)
        if cached is None:
            cached = _build(key, builder)
            store[key] = cached
        return cached  # type: ignore[return-value]

    cached = _GLOBAL_TABLES.get(key)
    if cached is not None:
        return cached  # type: ignore[return-value]

    with _GLOBAL_LOCK:
        cached = _GLOBAL_TABLES.get(key)
        if cached is None:
            cached = _build(key, builder)
            _GLOBAL_TABLES[key] = cached
    return cached  # type: ignore[return-value]


def _active_store() -> Dict[str, object]:
    if _STRATEGY == "thread-local":
        return _THREAD_LOCAL.tables
    if _STRATEGY == "global":
        return _GLOBAL_TABLES
    return {}


def clear_cache() -> None:
    """Drop the shared tables and the tables cached by the current thread."""

    with _GLOBAL_LOCK:
        _GLOBAL_TABLES.clear()
    _THREAD_LOCAL.tables.clear()


def cache_info() -> Tuple[str, ...]:
    """Return the keys of the tables held by the active store."""

    return tuple(_active_store())


def cache_strategy(name: str | None = None) -> str:
    """Query or switch the caching strategy.

    Switching is only allowed while the active store is empty; call
    :func:`clear_cache` first. Returns the strategy in effect afterwards.
    """

    global _STRATEGY

    if name is None:
        return _STRATEGY

    requested = _validate_strategy(name)
    if requested == _STRATEGY:
        return _STRATEGY

    if _active_store():
        raise RuntimeError(
            f"cannot switch cache strategy from {_STRATEGY!r} to {requested!r} while tables are cached"
        )

    logger.debug("cache strategy changed from %s to %s", _STRATEGY, requested)
    _STRATEGY = requested
    return _STRATEGY


__all__ = [
    "STRATEGY_ENV",
    "cached_table",
    "clear_cache",
    "cache_info",
    "cache_strategy",
]

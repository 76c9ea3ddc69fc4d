"""Named sets of init/process/cleanup functions for rendering contexts."""

from __future__ import annotations

import threading
from typing import Callable, NamedTuple


class ContextFuncs(NamedTuple):
    """The three functions that drive a context."""

    init: Callable[[], None]
    process: Callable[[], bool]
    cleanup: Callable[[], None]


class UnsupportedContextError(ValueError):
    """Raised when no context is registered under a name."""


_registry: dict[str, ContextFuncs] = {}
_registry_lock = threading.Lock()


def register_context(
    name: str,
    init: Callable[[], None],
    process: Callable[[], bool],
    cleanup: Callable[[], None],
) -> ContextFuncs:
    """Register (or replace) the functions for a context type."""
    funcs = ContextFuncs(init, process, cleanup)
    with _registry_lock:
        _registry[name] = funcs
    return funcs


def create_context_funcs(context_type: str) -> ContextFuncs:
    """Return the functions registered for a context type."""
    with _registry_lock:
        try:
            return _registry[context_type]
        except KeyError:
            raise UnsupportedContextError(
                f"Unsupported context type: {context_type}"
            ) from None


def run_context(funcs: ContextFuncs) -> int:
    """Initialize, process until process() returns false, then clean up.

    Returns the number of process calls.
    """
    funcs.init()
    calls = 0
    try:
        while True:
            calls += 1
            if not funcs.process():
                break
    finally:
        funcs.cleanup()
    return calls
"""The plugin interface and a session helper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, TypeVar

P = TypeVar("P", bound="Plugin")


class Plugin(ABC):
    """A plugin that can be started and stopped."""

    @abstractmethod
    def initialize(self) -> None:
        """Start the plugin."""

    @abstractmethod
    def shutdown(self) -> None:
        """Stop the plugin."""


@contextmanager
def plugin_session(plugin: P) -> Iterator[P]:
    """Initialize a plugin for the block and always shut it down afterwards."""
    plugin.initialize()
    try:
        yield plugin
    finally:
        plugin.shutdown()
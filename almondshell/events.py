"""Input events, event type names and a thread-safe event dispatcher."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class EventType(Enum):
    """Kinds of input events."""

    MOUSE_BUTTON_CLICK = "MouseButtonClick"
    MOUSE_MOVE = "MouseMove"
    KEY_PRESS = "KeyPress"
    TEXT_INPUT = "TextInput"
    UNKNOWN = "Unknown"


@dataclass
class Event:
    """A single input event with optional key/value payload."""

    type: EventType = EventType.MOUSE_BUTTON_CLICK
    data: dict[str, str] = field(default_factory=dict)
    x: float = 0.0
    y: float = 0.0
    key: int = 0
    text: str = ""

    def __post_init__(self) -> None:
        if len(self.text) > 1:
            raise ValueError("text input holds at most one character")


EventCallback = Callable[[Event], None]


class EventSystem:
    """Collects posted events and hands them to registered callbacks."""

    def __init__(self) -> None:
        self._callbacks: list[EventCallback] = []
        self._pending: deque[Event] = deque()
        self._lock = threading.Lock()

    def register_callback(self, callback: EventCallback) -> None:
        """Register a callable invoked for every polled event."""
        with self._lock:
            self._callbacks.append(callback)

    def post(self, event: Event) -> None:
        """Queue an event for the next poll."""
        with self._lock:
            self._pending.append(event)

    def poll_events(self) -> list[Event]:
        """Dispatch all queued events to the callbacks, in order, and return them."""
        with self._lock:
            events = list(self._pending)
            self._pending.clear()
            callbacks = list(self._callbacks)
        for event in events:
            for callback in callbacks:
                callback(event)
        return events


def event_type_to_string(event_type: EventType) -> str:
    """Return the serialised name of an event type."""
    return event_type.value


def string_to_event_type(text: str) -> EventType:
    """Parse an event type name; unrecognised names give ``EventType.UNKNOWN``."""
    try:
        return EventType(text)
    except ValueError:
        return EventType.UNKNOWN


@dataclass(frozen=True)
class MovementEvent:
    """A request to move an entity by a delta."""

    entity_id: int
    delta_x: float
    delta_y: float

    def describe(self) -> str:
        """Return a human-readable description of the movement."""
        return (
            f"Movement Event - Entity ID: {self.entity_id}, "
            f"Amount: ({self.delta_x:g}, {self.delta_y:g})"
        )
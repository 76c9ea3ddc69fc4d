"""Clickable rectangular buttons and a manager that feeds them events."""

from __future__ import annotations

from typing import Callable, Optional

from almondshell.events import Event, EventSystem, EventType


class UIButton:
    """A rectangular button that tracks hover state and fires a click callback."""

    def __init__(self, x: float, y: float, width: float, height: float, label: str) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.label = label
        self._on_click: Optional[Callable[[], None]] = None
        self._hovered = False
        self._pressed = False

    @property
    def is_hovered(self) -> bool:
        return self._hovered

    @property
    def is_pressed(self) -> bool:
        return self._pressed

    def set_on_click(self, callback: Optional[Callable[[], None]]) -> None:
        """Set the callable run when the button is clicked."""
        self._on_click = callback

    def _contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def update(self, event: Event) -> None:
        """Update hover state on mouse moves and fire the callback on clicks while hovered."""
        if event.type is EventType.MOUSE_MOVE:
            self._hovered = self._contains(event.x, event.y)
        if event.type is EventType.MOUSE_BUTTON_CLICK and self._hovered:
            self._pressed = True
            if self._on_click is not None:
                self._on_click()


class UIManager:
    """Holds buttons and passes polled events to each of them."""

    def __init__(self) -> None:
        self.buttons: list[UIButton] = []

    def add_button(self, button: UIButton) -> None:
        self.buttons.append(button)

    def update(self, event_system: EventSystem) -> None:
        """Poll the event system and hand every event to every button."""
        for event in event_system.poll_events():
            for button in self.buttons:
                button.update(event)
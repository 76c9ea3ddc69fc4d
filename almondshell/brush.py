"""Mouse-driven circular brush over a grid, and screen coordinate normalisation."""

from __future__ import annotations


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def brush_cells(x: int, y: int, radius: int, width: int, height: int) -> list[tuple[int, int]]:
    """Return the grid cells covered by a disc, clamped to the grid.

    Cells are listed row by row from the top; clamping can repeat a cell.
    """
    cells = []
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= radius * radius:
                cells.append(
                    (_clamp(x + dx, 0, width - 1), _clamp(y + dy, 0, height - 1))
                )
    return cells


def normalize_position(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Map grid coordinates to the [-1, 1] range."""
    return x / width * 2.0 - 1.0, y / height * 2.0 - 1.0


class BrushInput:
    """Tracks the mouse button and cursor for painting on a grid."""

    def __init__(self, width: int = 1024, height: int = 768) -> None:
        self.width = width
        self.height = height
        self.button_held = False
        self.position = (0, 0)
        self._last_position = (0, 0)

    def mouse_button(self, pressed: bool) -> None:
        """Record a press or release of the mouse button."""
        self.button_held = pressed

    def cursor_moved(self, x: float, y: float) -> bool:
        """Track the cursor while the button is held; return True if it reached a new spot."""
        if not self.button_held:
            return False
        self.position = (int(x), int(y))
        old_x, old_y = self._last_position
        if x != old_x or y != old_y:
            print(f"Cursor Position: ({x:g}, {y:g})")
            self._last_position = self.position
            return True
        return False

    def cells(self, x: int, y: int, radius: int) -> list[tuple[int, int]]:
        """Return the cells to paint at a point, or none while the button is up."""
        if not self.button_held:
            return []
        return brush_cells(x, y, radius, self.width, self.height)
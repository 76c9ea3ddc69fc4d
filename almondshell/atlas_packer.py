"""Binary-tree packing of rectangles into a fixed-size atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class AtlasFullError(RuntimeError):
    """Raised when a rectangle cannot be placed in the atlas."""


@dataclass
class Node:
    """A region of the atlas; used nodes split into right and down children."""

    x: int
    y: int
    width: int
    height: int
    used: bool = False
    right: Optional["Node"] = None
    down: Optional["Node"] = None


class TexturePacker:
    """Places rectangles into an atlas of the given size."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._root = Node(0, 0, width, height)

    def insert(self, width: int, height: int) -> tuple[int, int]:
        """Place a rectangle and return its top-left corner."""
        node = self._insert(self._root, width, height)
        if node is None:
            raise AtlasFullError(
                f"Failed to insert texture ({width}x{height}) into atlas "
                f"({self.width}x{self.height})."
            )
        return node.x, node.y

    def _insert(self, node: Optional[Node], width: int, height: int) -> Optional[Node]:
        if node is None:
            return None
        if node.used:
            return self._insert(node.right, width, height) or self._insert(
                node.down, width, height
            )
        if width > node.width or height > node.height:
            return None
        if width == node.width and height == node.height:
            node.used = True
            return node
        node.right = Node(node.x + width, node.y, node.width - width, height)
        node.down = Node(node.x, node.y + height, node.width, node.height - height)
        node.width = width
        node.height = height
        node.used = True
        return node
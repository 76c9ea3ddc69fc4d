"""Placement of images inside a growable texture atlas."""

from __future__ import annotations

import os
from typing import Optional, Union

from almondshell.image_loader import ImageData, load_image

PathLike = Union[str, os.PathLike]
Rect = tuple[int, int, int, int]

DEFAULT_ATLAS_SIZE = 16384
DEFAULT_MAX_ATLAS_SIZE = 32768


class AtlasError(RuntimeError):
    """Raised when a texture cannot be placed in or found in the atlas."""


def _overlaps(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


class TextureAtlas:
    """Tracks where textures sit inside an atlas and grows it when it is full.

    Positions are chosen scanning rows from the top and columns from the left,
    taking the first spot that does not overlap an occupied region.
    """

    def __init__(
        self,
        width: int = DEFAULT_ATLAS_SIZE,
        height: int = DEFAULT_ATLAS_SIZE,
        max_size: int = DEFAULT_MAX_ATLAS_SIZE,
        filepath: Optional[PathLike] = None,
    ) -> None:
        self.filepath = filepath
        self.base_image: Optional[ImageData] = None
        if filepath is not None:
            self.base_image = load_image(filepath)
            width, height = self.base_image.width, self.base_image.height
        if width <= 0 or height <= 0:
            raise AtlasError("Atlas dimensions must be positive.")
        self.width = width
        self.height = height
        self.max_size = max_size
        self._texture_map: dict[str, Rect] = {}
        self._occupied: list[Rect] = []
        self._images: dict[str, ImageData] = {}

    @property
    def textures(self) -> dict[str, ImageData]:
        """Images added with :meth:`try_add_texture`, keyed by path."""
        return dict(self._images)

    def try_add_texture(self, filepath: PathLike) -> Rect:
        """Load an image, place it in the atlas and return its (x, y, width, height)."""
        image = load_image(filepath)
        rect = self.pack_texture(image.width, image.height)
        self.update_atlas_data(filepath, *rect)
        self._images[os.fspath(filepath)] = image
        return rect

    def update_atlas_data(
        self, filepath: PathLike, x: int, y: int, width: int, height: int
    ) -> None:
        """Record a texture's region and mark it as occupied."""
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise AtlasError(
                f"Region ({x}, {y}, {width}, {height}) lies outside the "
                f"{self.width}x{self.height} atlas."
            )
        rect = (x, y, width, height)
        self._texture_map[os.fspath(filepath)] = rect
        self._occupied.append(rect)

    def get_atlas_texture_map(self, texture_path: PathLike) -> Rect:
        """Return the (x, y, width, height) region of a texture."""
        key = os.fspath(texture_path)
        try:
            return self._texture_map[key]
        except KeyError:
            raise AtlasError(f"Texture not found: {key}") from None

    def get_uvs(self, texture_path: PathLike) -> tuple[float, float, float, float]:
        """Return (u_min, u_max, v_min, v_max) of a texture in atlas coordinates."""
        x, y, width, height = self.get_atlas_texture_map(texture_path)
        return (
            x / self.width,
            (x + width) / self.width,
            y / self.height,
            (y + height) / self.height,
        )

    def pack_texture(self, width: int, height: int) -> Rect:
        """Find a free region for a texture, growing the atlas if needed.

        The region is not marked as occupied.
        """
        if width > self.width or height > self.height:
            raise AtlasError("Texture is too large for the current atlas size.")
        while True:
            position = self._find_position(width, height)
            if position is not None:
                return (*position, width, height)
            self.resize()

    def _find_position(self, width: int, height: int) -> Optional[tuple[int, int]]:
        # The first free spot in row-major order always lies on 0 or an occupied edge.
        xs = sorted({0, *(x + w for x, _, w, _ in self._occupied)})
        ys = sorted({0, *(y + h for _, y, _, h in self._occupied)})
        for y in ys:
            if y + height > self.height:
                break
            for x in xs:
                if x + width > self.width:
                    break
                if self.is_free_space(x, y, width, height):
                    return x, y
        return None

    def is_free_space(self, x: int, y: int, width: int, height: int) -> bool:
        """Return True if the region overlaps no occupied region."""
        candidate = (x, y, width, height)
        return not any(_overlaps(candidate, rect) for rect in self._occupied)

    def resize(self) -> tuple[int, int]:
        """Double the atlas size, capped at the maximum, and return the new size."""
        new_width = max(self.width, min(self.width * 2, self.max_size))
        new_height = max(self.height, min(self.height * 2, self.max_size))
        if (new_width, new_height) == (self.width, self.height):
            raise AtlasError(
                f"Atlas cannot grow beyond {self.width}x{self.height}."
            )
        print(
            f"Resizing Atlas: {self.width}x{self.height} -> {new_width}x{new_height}"
        )
        self.width, self.height = new_width, new_height
        return new_width, new_height
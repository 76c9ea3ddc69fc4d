"""A named store of sprites: a texture plus its UV rectangle and size."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Union

from almondshell.image_loader import load_image

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class Sprite:
    """A region of a texture."""

    texture: Any
    u_min: float
    v_min: float
    u_max: float
    v_max: float
    width: int
    height: int


class SpriteBank:
    """Sprites keyed by unique name; textures come from ``loader``."""

    def __init__(self, loader: Callable[[PathLike], Any] = load_image) -> None:
        self._loader = loader
        self._sprites: dict[str, Sprite] = {}

    def add_sprite(
        self,
        name: str,
        filepath: PathLike,
        u_min: float,
        v_min: float,
        u_max: float,
        v_max: float,
        width: int,
        height: int,
    ) -> Sprite:
        """Load the texture and store a new sprite under a name not yet used."""
        texture = self._loader(filepath)
        if name in self._sprites:
            raise ValueError(f"Sprite with name '{name}' already exists.")
        sprite = Sprite(texture, u_min, v_min, u_max, v_max, width, height)
        self._sprites[name] = sprite
        print(f"Added sprite: {name} from texture: {os.fspath(filepath)}")
        return sprite

    def get_sprite(self, name: str) -> Sprite:
        try:
            return self._sprites[name]
        except KeyError:
            raise KeyError(f"Sprite with name '{name}' not found.") from None

    def remove_sprite(self, name: str) -> bool:
        """Remove a sprite; return whether it was present."""
        if self._sprites.pop(name, None) is None:
            return False
        print(f"Removed sprite: {name}")
        return True

    def clear(self) -> None:
        self._sprites.clear()
        print("Cleared all sprites.")

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sprites)
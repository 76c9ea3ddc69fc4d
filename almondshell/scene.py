"""Scenes holding entities, and timestamped scene snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from almondshell.events import MovementEvent


class SceneEntity(Protocol):
    """What a scene needs from the entities it holds."""

    id: int

    def move(self, dx: float, dy: float) -> Any: ...

    def clone(self) -> "SceneEntity": ...

    def print_position(self) -> Any: ...


class Scene:
    """A collection of entities with a loaded flag."""

    def __init__(self) -> None:
        self._entities: list[SceneEntity] = []
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def entities(self) -> tuple[SceneEntity, ...]:
        return tuple(self._entities)

    def load(self) -> None:
        print("Scene loaded.")
        self._loaded = True

    def unload(self) -> None:
        print("Scene unloaded.")
        self._loaded = False

    def print_entity_positions(self) -> None:
        for entity in self._entities:
            entity.print_position()

    def apply_movement_event(self, event: MovementEvent) -> None:
        """Move every entity whose id matches the event."""
        for entity in self._entities:
            if entity.id == event.entity_id:
                entity.move(event.delta_x, event.delta_y)

    def add_entity(self, entity: SceneEntity) -> None:
        self._entities.append(entity)

    def clear_entities(self) -> None:
        self._entities.clear()

    def get_entity_by_id(self, entity_id: int) -> Optional[SceneEntity]:
        """Return the first entity with the id, or None."""
        return next((e for e in self._entities if e.id == entity_id), None)

    def clone(self) -> "Scene":
        """Return a new, unloaded scene holding clones of this scene's entities."""
        copy = Scene()
        for entity in self._entities:
            if entity is not None:
                copy.add_entity(entity.clone())
        return copy


@dataclass
class SceneSnapshot:
    """The state of a scene at a moment in time."""

    time_stamp: float = 0.0
    current_state: Optional[Scene] = None
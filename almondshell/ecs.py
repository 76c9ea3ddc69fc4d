"""A minimal entity-component system built on the component manager."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from almondshell.components import ComponentManager, ComponentNotFoundError

T = TypeVar("T")


class EntityNotFoundError(LookupError):
    """Raised when an entity id is unknown."""


class EntityComponentSystem:
    """Creates entities with sequential ids and stores their components."""

    def __init__(self) -> None:
        self._next_entity = 0
        self._entities: list[int] = []
        self._components = ComponentManager()

    @property
    def entities(self) -> tuple[int, ...]:
        return tuple(self._entities)

    def create_entity(self) -> int:
        """Create an entity and return its id."""
        entity_id = self._next_entity
        self._next_entity += 1
        self._entities.append(entity_id)
        print(f"Entity created with ID: {entity_id}")
        return entity_id

    def _require(self, entity_id: int) -> int:
        if entity_id not in self._entities:
            raise EntityNotFoundError(f"Entity with ID {entity_id} not found")
        return entity_id

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach a component to an existing entity."""
        self._components.add_component(self._require(entity_id), component)

    def get_component(self, entity_id: int, component_type: type[T]) -> Optional[T]:
        """Return the entity's component of the type, or None if entity or component is missing."""
        try:
            return self._components.get_component(self._require(entity_id), component_type)
        except (EntityNotFoundError, ComponentNotFoundError):
            return None
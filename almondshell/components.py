"""Component types and a per-entity component store keyed by type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

EntityID = int


@dataclass
class PositionComponent:
    """Position of an entity."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class VelocityComponent:
    """Velocity of an entity."""

    vx: float = 0.0
    vy: float = 0.0


class ComponentNotFoundError(LookupError):
    """Raised when an entity has no component of the requested type."""


class ComponentManager:
    """Stores at most one component of each type per entity."""

    def __init__(self) -> None:
        self._components: dict[EntityID, dict[type, Any]] = {}

    def add_component(self, entity: EntityID, component: Any) -> None:
        """Attach a component, replacing any earlier one of the same type."""
        self._components.setdefault(entity, {})[type(component)] = component

    def get_component(self, entity: EntityID, component_type: type[T]) -> T:
        """Return the entity's component of the given type."""
        try:
            return self._components[entity][component_type]
        except KeyError:
            raise ComponentNotFoundError(
                f"Component {component_type.__name__} not found for entity {entity}"
            ) from None
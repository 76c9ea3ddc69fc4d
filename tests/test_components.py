import pytest

from almondshell.components import (
    ComponentManager,
    ComponentNotFoundError,
    PositionComponent,
    VelocityComponent,
)


def test_defaults():
    assert PositionComponent() == PositionComponent(0.0, 0.0)
    assert VelocityComponent() == VelocityComponent(0.0, 0.0)


def test_add_and_get():
    manager = ComponentManager()
    manager.add_component(1, PositionComponent(2.0, 3.0))
    manager.add_component(1, VelocityComponent(0.5, -0.5))
    assert manager.get_component(1, PositionComponent) == PositionComponent(2.0, 3.0)
    assert manager.get_component(1, VelocityComponent) == VelocityComponent(0.5, -0.5)


def test_missing_component_raises():
    manager = ComponentManager()
    manager.add_component(1, PositionComponent())
    with pytest.raises(ComponentNotFoundError):
        manager.get_component(1, VelocityComponent)


def test_missing_entity_raises():
    with pytest.raises(ComponentNotFoundError):
        ComponentManager().get_component(42, PositionComponent)


def test_replace_component():
    manager = ComponentManager()
    manager.add_component(1, PositionComponent(1.0, 1.0))
    manager.add_component(1, PositionComponent(4.0, 5.0))
    assert manager.get_component(1, PositionComponent) == PositionComponent(4.0, 5.0)


def test_entities_are_separate():
    manager = ComponentManager()
    manager.add_component(1, PositionComponent(1.0, 1.0))
    manager.add_component(2, PositionComponent(9.0, 9.0))
    assert manager.get_component(1, PositionComponent).x == 1.0
    assert manager.get_component(2, PositionComponent).x == 9.0
"""Dynamic object behavior tests."""

from __future__ import annotations

import pytest
from dynamic_type_registry.object_model import DynamicObject, PropertyKindError
from dynamic_type_registry.property_values import EMPTY, PropertyValue, ValueKind
from dynamic_type_registry.schema_management import SchemaRegistry, TypeDescriptor


@pytest.fixture
def registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    registry.register_type(
        TypeDescriptor("Entity").add_property("id", "int", 0).add_property("name", "string", "?")
    )
    registry.register_type(
        TypeDescriptor("Player", base_type_name="Entity")
        .add_property("level", "int", 1)
        .add_property("health", "double", 100.0)
        .add_property("position", "Vector3", "0,0,0")
    )
    registry.register_type(
        TypeDescriptor("Boss", base_type_name="Player").add_property("health", "double", 5000.0)
    )
    registry.register_type(TypeDescriptor("Marker"))
    return registry


def test_construction_snapshots_resolved_defaults(registry: SchemaRegistry) -> None:
    player = DynamicObject("Player", registry)

    assert player.type_name == "Player"
    assert player.get_property_names() == {"id", "name", "level", "health", "position"}
    assert player.get_property("level", ValueKind.INT) == 1
    assert player.get_property("name", ValueKind.TEXT) == "?"


def test_derived_redeclaration_wins_over_base_default(registry: SchemaRegistry) -> None:
    boss = DynamicObject("Boss", registry)

    assert len(registry.get_all_properties("Boss")) == 6
    assert boss.get_property("health", ValueKind.FLOAT) == 5000.0
    assert len(boss.get_property_names()) == 5


def test_later_registry_changes_do_not_touch_existing_objects(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    registry.register_type(TypeDescriptor("Entity").add_property("uuid", "string", "u-1"))

    assert entity.get_property_names() == {"id", "name"}
    assert DynamicObject("Entity", registry).get_property_names() == {"uuid"}


def test_typed_get_requires_exact_kind(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    entity.set_property("x", 5)

    assert entity.get_property("x", ValueKind.INT) == 5
    assert entity.get_property("x", ValueKind.FLOAT) is None
    assert entity.get_property("x", ValueKind.BOOL) is None
    assert entity.get_property("missing", ValueKind.INT) is None


def test_typed_get_never_matches_empty(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    entity.set_property("blank", EMPTY)

    assert entity.get_property("blank", ValueKind.EMPTY) is None
    assert entity.get_property_variant("blank") is EMPTY


def test_variant_get_returns_empty_for_unknown_names(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)

    assert entity.get_property_variant("id") == PropertyValue.of_int(0)
    assert entity.get_property_variant("nope") is EMPTY
    assert not entity.has_property("nope")


def test_lenient_objects_accept_kind_drift_and_new_names(registry: SchemaRegistry) -> None:
    player = DynamicObject("Player", registry)

    player.set_property("level", "high")
    player.set_property("nickname", "Ace")

    assert player.get_property("level", ValueKind.TEXT) == "high"
    assert player.get_property("level", ValueKind.INT) is None
    assert "nickname" in player.get_property_names()


def test_strict_objects_reject_kind_drift(registry: SchemaRegistry) -> None:
    player = DynamicObject("Player", registry, strict_kinds=True)

    with pytest.raises(PropertyKindError, match="Player.level is declared as int"):
        player.set_property("level", "high")

    assert player.get_property("level", ValueKind.INT) == 1


def test_strict_objects_still_accept_empty_unknown_and_free_form(
    registry: SchemaRegistry,
) -> None:
    player = DynamicObject("Player", registry, strict_kinds=True)

    player.set_property("level", 42)
    player.set_property("health", EMPTY)
    player.set_property("position", 3)
    player.set_property("nickname", True)

    assert player.get_property("level", ValueKind.INT) == 42
    assert player.get_property_variant("health") is EMPTY
    assert player.get_property("position", ValueKind.INT) == 3
    assert player.get_property("nickname", ValueKind.BOOL) is True


def test_iter_properties_yields_current_values(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    entity.set_property("id", 12)

    assert dict(entity.iter_properties()) == {
        "id": PropertyValue.of_int(12),
        "name": PropertyValue.of_text("?"),
    }


def test_is_type_is_structural(registry: SchemaRegistry) -> None:
    player = DynamicObject("Player", registry)
    entity = DynamicObject("Entity", registry)
    boss = DynamicObject("Boss", registry)

    assert player.is_type("Player")
    assert player.is_type("Entity")
    assert boss.is_type("Player")
    assert not entity.is_type("Player")
    assert not player.is_type("UnregisteredType")


def test_is_type_matches_unrelated_types_with_same_shape(registry: SchemaRegistry) -> None:
    registry.register_type(
        TypeDescriptor("Named").add_property("name", "string").add_property("id", "int")
    )
    entity = DynamicObject("Entity", registry)

    assert entity.is_type("Named")


def test_is_type_compares_declared_type_labels(registry: SchemaRegistry) -> None:
    registry.register_type(TypeDescriptor("TextId").add_property("id", "string"))
    entity = DynamicObject("Entity", registry)

    assert not entity.is_type("TextId")


def test_is_type_never_matches_empty_marker_types(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    marker = DynamicObject("Marker", registry)

    assert not entity.is_type("Marker")
    assert marker.is_type("Marker")


def test_is_type_ignores_later_property_bag_changes(registry: SchemaRegistry) -> None:
    entity = DynamicObject("Entity", registry)
    entity.set_property("level", 3)
    entity.set_property("health", 1.0)
    entity.set_property("position", "1,2,3")

    assert not entity.is_type("Player")

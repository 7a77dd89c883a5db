"""Registry loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from dynamic_type_registry.configuration.runtime_settings import (
    Configuration,
    LoggingSettings,
    ObjectSettings,
    RegistrySettings,
    SchemaSource,
)
from dynamic_type_registry.property_values import ValueKind
from dynamic_type_registry.registry_loading import RegistryLoadError, load_registry


def _configuration(
    *texts: str, reject_cyclic_bases: bool = False, strict_property_kinds: bool = False
) -> Configuration:
    return Configuration(
        path=Path("registry.yaml"),
        schemas=tuple(SchemaSource(text=text, source_path=None) for text in texts),
        registry=RegistrySettings(reject_cyclic_bases=reject_cyclic_bases),
        objects=ObjectSettings(strict_property_kinds=strict_property_kinds),
        logging=LoggingSettings(level="WARNING"),
    )


def test_registers_every_schema_in_order() -> None:
    loaded = load_registry(
        _configuration(
            "Entity\nid: int = 0\n",
            "Player: Entity\nlevel: int = 1\n",
        )
    )

    assert loaded.registered_type_names == ("Entity", "Player")
    assert loaded.registry.type_names() == ["Entity", "Player"]
    player = loaded.factory.create("Player")
    assert player is not None
    assert player.get_property("id", ValueKind.INT) == 0


def test_factory_follows_strict_property_kinds_setting() -> None:
    loaded = load_registry(_configuration("Entity\nid: int = 0\n", strict_property_kinds=True))

    entity = loaded.factory.create("Entity")

    assert entity is not None
    assert entity.strict_kinds


def test_parse_failures_name_their_source() -> None:
    with pytest.raises(RegistryLoadError, match="Invalid schema in inline schema: Line 2"):
        load_registry(_configuration("Entity\nid: int = abc\n"))


def test_texts_without_type_definition_are_rejected() -> None:
    with pytest.raises(RegistryLoadError, match="No type definition found"):
        load_registry(_configuration("Entity\n", ": Base\n"))


def test_cycles_are_rejected_when_configured() -> None:
    with pytest.raises(RegistryLoadError, match="Cyclic base type chain"):
        load_registry(
            _configuration("Ping: Pong\n", "Pong: Ping\n", reject_cyclic_bases=True)
        )


def test_cycles_are_tolerated_by_default() -> None:
    loaded = load_registry(_configuration("Ping: Pong\n", "Pong: Ping\n"))

    assert loaded.registry.find_cycle("Ping") == ["Ping", "Pong", "Ping"]

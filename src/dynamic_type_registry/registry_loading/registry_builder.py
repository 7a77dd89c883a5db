"""Populate a schema registry from configured schema sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dynamic_type_registry.configuration.runtime_settings import Configuration
from dynamic_type_registry.object_model import ObjectFactory
from dynamic_type_registry.schema_management import InheritanceCycleError, SchemaRegistry
from dynamic_type_registry.schema_text_parsing import SchemaParseError, parse_schema_text

logger = logging.getLogger(__name__)


class RegistryLoadError(Exception):
    """Raised when a configured schema cannot be parsed or registered."""


@dataclass(frozen=True)
class LoadedRegistry:
    """Registry populated from configuration plus a factory bound to it."""

    registry: SchemaRegistry
    factory: ObjectFactory
    registered_type_names: tuple[str, ...]


def load_registry(configuration: Configuration) -> LoadedRegistry:
    """Parse and register every configured schema in order."""
    registry = SchemaRegistry(reject_cycles=configuration.registry.reject_cyclic_bases)
    registered: list[str] = []
    for source in configuration.schemas:
        try:
            descriptor = parse_schema_text(source.text)
        except SchemaParseError as exc:
            raise RegistryLoadError(f"Invalid schema in {source.label}: {exc}") from exc
        if descriptor is None:
            raise RegistryLoadError(f"No type definition found in {source.label}.")
        try:
            registry.register_type(descriptor)
        except InheritanceCycleError as exc:
            raise RegistryLoadError(f"Cannot register {source.label}: {exc}") from exc
        logger.info("Registered type %s from %s", descriptor.type_name, source.label)
        registered.append(descriptor.type_name)

    factory = ObjectFactory(registry, strict_kinds=configuration.objects.strict_property_kinds)
    return LoadedRegistry(
        registry=registry,
        factory=factory,
        registered_type_names=tuple(registered),
    )

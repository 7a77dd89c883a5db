"""Plain-data descriptions of registered types and dynamic objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from dynamic_type_registry.object_model import DynamicObject
from dynamic_type_registry.schema_management import SchemaRegistry


def describe_type(registry: SchemaRegistry, type_name: str) -> dict[str, Any] | None:
    """Describe a registered type and its resolved properties, or None if unknown."""
    descriptor = registry.get_type(type_name)
    if descriptor is None:
        return None
    return {
        "type_name": descriptor.type_name,
        "base": descriptor.base_type_name or "none",
        "properties": [
            {
                "name": name,
                "type": declared_type,
                "default_value": default.as_python(),
                "inherited": inherited,
            }
            for name, declared_type, default, inherited in registry.iter_properties(type_name)
        ],
    }


def describe_object(obj: DynamicObject) -> dict[str, Any]:
    """Describe an object's current property values, sorted by property name."""
    return {
        "object_type": obj.type_name,
        "properties": [
            {
                "name": name,
                "value": value.as_python(),
                "runtime_type": value.runtime_type_name,
            }
            for name, value in sorted(obj.iter_properties(), key=lambda item: item[0])
        ],
    }


def render_description(description: Mapping[str, Any]) -> str:
    """Render a description as YAML text, keeping field order."""
    return yaml.safe_dump(dict(description), sort_keys=False, allow_unicode=True)

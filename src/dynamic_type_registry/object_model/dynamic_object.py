"""Dynamic objects backed by a resolved schema snapshot."""

from __future__ import annotations

from collections.abc import Iterator

from dynamic_type_registry.property_values import (
    EMPTY,
    PropertyPayload,
    PropertyValue,
    ValueKind,
)
from dynamic_type_registry.schema_management import SchemaRegistry

from .structural_matching import is_structurally_compatible


class PropertyKindError(TypeError):
    """Raised by strict objects when a value's kind contradicts the declared type."""


class DynamicObject:
    """Instance of a named type holding its own property bag.

    Construction copies the defaults of every resolved property; a property
    redeclared by a derived type ends up holding the derived default. The
    registry is only consulted again by ``is_type``.
    """

    def __init__(
        self, type_name: str, registry: SchemaRegistry, *, strict_kinds: bool = False
    ) -> None:
        self._type_name = type_name
        self._registry = registry
        self._strict_kinds = strict_kinds
        self._properties: dict[str, PropertyValue] = {}
        self._declared_types: dict[str, str] = {}
        for prop in registry.get_all_properties(type_name):
            self._properties[prop.name] = prop.default
            self._declared_types[prop.name] = prop.declared_type

    def __repr__(self) -> str:
        return f"DynamicObject(type_name={self._type_name!r}, properties={self._properties!r})"

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def strict_kinds(self) -> bool:
        return self._strict_kinds

    def set_property(self, name: str, value: object) -> None:
        """Insert or overwrite a property value.

        Lenient objects accept any kind under any name. Strict objects reject a
        value whose kind contradicts a primitive declared type for ``name``.
        """
        property_value = PropertyValue.from_python(value)
        if self._strict_kinds:
            self._check_kind(name, property_value)
        self._properties[name] = property_value

    def get_property(self, name: str, kind: ValueKind) -> PropertyPayload:
        """Return the payload only when the stored value has exactly ``kind``."""
        value = self._properties.get(name)
        if value is None or value.is_empty or value.kind is not kind:
            return None
        return value.payload

    def get_property_variant(self, name: str) -> PropertyValue:
        return self._properties.get(name, EMPTY)

    def get_property_names(self) -> set[str]:
        return set(self._properties)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def iter_properties(self) -> Iterator[tuple[str, PropertyValue]]:
        yield from self._properties.items()

    def is_type(self, target_type_name: str) -> bool:
        """Check structural compatibility with another registered type.

        The object's own type always matches. Otherwise every property of the
        target's resolved schema needs a counterpart with the same name and
        declared type in this object's resolved schema.
        """
        if target_type_name == self._type_name:
            return True
        return is_structurally_compatible(
            self._registry.get_all_properties(self._type_name),
            self._registry.get_all_properties(target_type_name),
        )

    def _check_kind(self, name: str, value: PropertyValue) -> None:
        declared_type = self._declared_types.get(name)
        if declared_type is None or value.is_empty:
            return
        expected_kind = ValueKind.from_declared_type(declared_type)
        if expected_kind is not None and value.kind is not expected_kind:
            raise PropertyKindError(
                f"{self._type_name}.{name} is declared as {declared_type}, "
                f"got a {value.runtime_type_name} value."
            )

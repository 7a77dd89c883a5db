"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from dynamic_type_registry.property_values import EMPTY, PropertyValue


@dataclass(frozen=True)
class PropertyDescriptor:
    """Static description of one declared property."""

    name: str
    declared_type: str
    default: PropertyValue = EMPTY
    is_inherited: bool = False


@dataclass
class TypeDescriptor:
    """Named schema with its own properties and at most one base type."""

    type_name: str
    base_type_name: str | None = None
    own_properties: list[PropertyDescriptor] = field(default_factory=list)

    @property
    def has_base(self) -> bool:
        return bool(self.base_type_name)

    def add_property(
        self, name: str, declared_type: str, default: object = EMPTY
    ) -> TypeDescriptor:
        """Append a property declaration and return self for chaining."""
        self.own_properties.append(
            PropertyDescriptor(
                name=name,
                declared_type=declared_type,
                default=PropertyValue.from_python(default),
            )
        )
        return self

    def set_base_type(self, base_type_name: str | None) -> TypeDescriptor:
        """Set the base type; an empty name clears it."""
        self.base_type_name = base_type_name or None
        return self

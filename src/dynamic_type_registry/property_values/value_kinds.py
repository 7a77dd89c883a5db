"""Closed property value model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

PropertyPayload = int | float | str | bool | None


class ValueKind(str, Enum):
    """Supported property value kinds."""

    INT = "int"
    FLOAT = "double"
    TEXT = "string"
    BOOL = "bool"
    EMPTY = "empty"

    @classmethod
    def from_declared_type(cls, declared_type: str) -> ValueKind | None:
        """Return the primitive kind named by a declared type label, if any."""
        return _DECLARED_TYPE_KINDS.get(declared_type)


_DECLARED_TYPE_KINDS = {
    "int": ValueKind.INT,
    "double": ValueKind.FLOAT,
    "string": ValueKind.TEXT,
    "bool": ValueKind.BOOL,
}


@dataclass(frozen=True)
class PropertyValue:
    """Tagged property value; the kind never changes once produced."""

    kind: ValueKind
    payload: PropertyPayload = None

    @classmethod
    def of_int(cls, value: int) -> PropertyValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected an int payload, got {type(value).__name__}.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"Integer property value out of 64-bit range: {value}")
        return cls(kind=ValueKind.INT, payload=value)

    @classmethod
    def of_float(cls, value: float) -> PropertyValue:
        if not isinstance(value, float):
            raise TypeError(f"Expected a float payload, got {type(value).__name__}.")
        return cls(kind=ValueKind.FLOAT, payload=value)

    @classmethod
    def of_text(cls, value: str) -> PropertyValue:
        if not isinstance(value, str):
            raise TypeError(f"Expected a str payload, got {type(value).__name__}.")
        return cls(kind=ValueKind.TEXT, payload=value)

    @classmethod
    def of_bool(cls, value: bool) -> PropertyValue:
        if not isinstance(value, bool):
            raise TypeError(f"Expected a bool payload, got {type(value).__name__}.")
        return cls(kind=ValueKind.BOOL, payload=value)

    @classmethod
    def from_python(cls, value: object) -> PropertyValue:
        """Wrap a raw Python scalar, passing existing property values through."""
        if isinstance(value, PropertyValue):
            return value
        if value is None:
            return EMPTY
        if isinstance(value, bool):
            return cls.of_bool(value)
        if isinstance(value, int):
            return cls.of_int(value)
        if isinstance(value, float):
            return cls.of_float(value)
        if isinstance(value, str):
            return cls.of_text(value)
        raise TypeError(f"Unsupported property value type: {type(value).__name__}")

    @property
    def is_empty(self) -> bool:
        return self.kind is ValueKind.EMPTY

    @property
    def runtime_type_name(self) -> str:
        """Return the label of the kind actually held at runtime."""
        return self.kind.value

    def as_python(self) -> PropertyPayload:
        return self.payload


EMPTY = PropertyValue(kind=ValueKind.EMPTY)

"""Property value exports."""

from .value_kinds import EMPTY, INT64_MAX, INT64_MIN, PropertyPayload, PropertyValue, ValueKind

__all__ = [
    "EMPTY",
    "INT64_MAX",
    "INT64_MIN",
    "PropertyPayload",
    "PropertyValue",
    "ValueKind",
]

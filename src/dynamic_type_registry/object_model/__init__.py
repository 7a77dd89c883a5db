"""Dynamic object model exports."""

from .dynamic_object import DynamicObject, PropertyKindError
from .object_factory import ObjectFactory
from .structural_matching import is_structurally_compatible, missing_properties

__all__ = [
    "DynamicObject",
    "ObjectFactory",
    "PropertyKindError",
    "is_structurally_compatible",
    "missing_properties",
]

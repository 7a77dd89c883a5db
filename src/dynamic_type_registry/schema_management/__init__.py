"""Schema management exports."""

from .schema_models import PropertyDescriptor, TypeDescriptor
from .schema_registry import InheritanceCycleError, SchemaRegistry, SchemaRegistryError

__all__ = [
    "InheritanceCycleError",
    "PropertyDescriptor",
    "SchemaRegistry",
    "SchemaRegistryError",
    "TypeDescriptor",
]

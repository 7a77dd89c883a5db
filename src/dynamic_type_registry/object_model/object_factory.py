"""Validated construction of dynamic objects."""

from __future__ import annotations

import logging

from dynamic_type_registry.schema_management import SchemaRegistry

from .dynamic_object import DynamicObject

logger = logging.getLogger(__name__)


class ObjectFactory:
    """Create dynamic objects only for registered type names."""

    def __init__(self, registry: SchemaRegistry, *, strict_kinds: bool = False) -> None:
        self._registry = registry
        self._strict_kinds = strict_kinds

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def create(self, type_name: str) -> DynamicObject | None:
        """Return a new object of ``type_name``, or None when it is not registered."""
        if self._registry.get_type(type_name) is None:
            logger.debug("Cannot create object of unregistered type %s", type_name)
            return None
        return DynamicObject(type_name, self._registry, strict_kinds=self._strict_kinds)

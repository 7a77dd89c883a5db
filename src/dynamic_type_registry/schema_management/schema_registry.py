"""Schema registry and inherited property resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from dynamic_type_registry.property_values import PropertyValue

from .schema_models import PropertyDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)


class SchemaRegistryError(Exception):
    """Base error for schema registry failures."""


class InheritanceCycleError(SchemaRegistryError):
    """Raised when a registration would make a base chain loop back on itself."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__(f"Cyclic base type chain: {' -> '.join(cycle)}")


class SchemaRegistry:
    """Store of type descriptors keyed by type name.

    The registry owns every descriptor handed to it. Objects and factories
    receive the registry explicitly instead of reaching for shared state.
    """

    def __init__(self, *, reject_cycles: bool = False) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        self._inheritance_edges: dict[str, str] = {}
        self._reject_cycles = reject_cycles

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)

    @property
    def rejects_cycles(self) -> bool:
        return self._reject_cycles

    def type_names(self) -> list[str]:
        """Return registered type names in registration order."""
        return list(self._types)

    def register_type(self, descriptor: TypeDescriptor) -> None:
        """Insert or replace the descriptor stored under its type name."""
        name = descriptor.type_name
        base = descriptor.base_type_name or None

        cycle = self._cycle_through(name, base)
        if cycle is not None:
            if self._reject_cycles:
                raise InheritanceCycleError(cycle)
            logger.warning("Registering %s closes a base type cycle: %s", name, " -> ".join(cycle))

        if name in self._types:
            logger.debug("Replacing registered type %s", name)
        if base is not None and base not in self._types and base != name:
            logger.debug("Type %s names unregistered base type %s", name, base)

        if base is None:
            self._inheritance_edges.pop(name, None)
        else:
            self._inheritance_edges[name] = base
        self._types[name] = descriptor

    def get_type(self, type_name: str) -> TypeDescriptor | None:
        return self._types.get(type_name)

    def get_all_properties(self, type_name: str) -> list[PropertyDescriptor]:
        """Resolve the full property list of a type, base-first.

        Each type contributes its own properties in declaration order. Names are
        not de-duplicated: a redeclared property appears once per declaring type,
        with the most derived declaration last. Properties contributed by
        ancestors are returned flagged as inherited. Unknown types resolve to an
        empty list and an unknown base simply ends the chain.
        """
        chain = self.get_base_chain(type_name)
        resolved: list[PropertyDescriptor] = []
        for position, name in enumerate(reversed(chain)):
            inherited = position < len(chain) - 1
            resolved.extend(
                replace(prop, is_inherited=inherited) for prop in self._types[name].own_properties
            )
        return resolved

    def iter_properties(
        self, type_name: str
    ) -> Iterator[tuple[str, str, PropertyValue, bool]]:
        """Yield (name, declared type, default, inherited) for each resolved property."""
        for prop in self.get_all_properties(type_name):
            yield prop.name, prop.declared_type, prop.default, prop.is_inherited

    def get_base_chain(self, type_name: str) -> list[str]:
        """Return registered type names from ``type_name`` up to its root.

        The walk stops at the first unregistered name and at the first name seen
        twice, so a cyclic chain is truncated rather than followed forever.
        """
        chain: list[str] = []
        current: str | None = type_name
        while current:
            if current in chain:
                logger.warning(
                    "Base type cycle detected while resolving %s; truncating at %s",
                    type_name,
                    current,
                )
                break
            descriptor = self._types.get(current)
            if descriptor is None:
                break
            chain.append(current)
            current = descriptor.base_type_name
        return chain

    def find_cycle(self, type_name: str) -> list[str] | None:
        """Return the looping part of a base chain, e.g. ``["A", "B", "A"]``."""
        path: list[str] = []
        current: str | None = type_name
        while current:
            if current in path:
                return path[path.index(current) :] + [current]
            path.append(current)
            current = self._inheritance_edges.get(current)
        return None

    def get_descendants(self, type_name: str) -> list[str]:
        """Return registered types whose base chain passes through ``type_name``.

        Base chains end at the first unregistered name, so an unregistered
        ``type_name`` has no descendants.
        """
        if type_name not in self._types:
            return []
        descendants = []
        for candidate in self._types:
            if candidate == type_name:
                continue
            if type_name in self._walk_edges(candidate):
                descendants.append(candidate)
        return sorted(descendants)

    def _walk_edges(self, type_name: str) -> list[str]:
        ancestors: list[str] = []
        current = self._inheritance_edges.get(type_name)
        while current and current not in ancestors and current != type_name:
            ancestors.append(current)
            current = self._inheritance_edges.get(current)
        return ancestors

    def _cycle_through(self, type_name: str, base: str | None) -> list[str] | None:
        path = [type_name]
        current = base
        while current:
            if current == type_name:
                return path + [current]
            if current in path:
                return None
            path.append(current)
            current = self._inheritance_edges.get(current)
        return None

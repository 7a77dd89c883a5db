"""Structural compatibility between resolved property lists."""

from __future__ import annotations

from collections.abc import Sequence

from dynamic_type_registry.schema_management.schema_models import PropertyDescriptor


def missing_properties(
    source: Sequence[PropertyDescriptor], target: Sequence[PropertyDescriptor]
) -> list[PropertyDescriptor]:
    """Return target properties without a same-named, same-typed source property."""
    available = {(prop.name, prop.declared_type) for prop in source}
    return [prop for prop in target if (prop.name, prop.declared_type) not in available]


def is_structurally_compatible(
    source: Sequence[PropertyDescriptor], target: Sequence[PropertyDescriptor]
) -> bool:
    """Return True when ``source`` carries every property of a non-empty ``target``.

    An empty target is never satisfiable, so unknown types and property-less
    marker types both report False.
    """
    if not target:
        return False
    return not missing_properties(source, target)

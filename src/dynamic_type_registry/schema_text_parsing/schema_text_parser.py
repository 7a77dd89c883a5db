"""Line-oriented schema text parser.

Format::

    TypeName[: BaseTypeName]
    propName: declaredType[= defaultLiteral]
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from dynamic_type_registry.property_values import EMPTY, PropertyValue
from dynamic_type_registry.schema_management import TypeDescriptor

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\r\n"
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)", re.ASCII | re.IGNORECASE
)


class SchemaParseError(ValueError):
    """Raised when a default literal cannot be converted to its declared kind."""


def parse_schema_text(text: str) -> TypeDescriptor | None:
    """Parse one type definition, or return None when there is no usable header."""
    lines = [
        (line_number, line)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip(_WHITESPACE)
    ]
    if not lines:
        return None

    _, header = lines[0]
    type_name, _, base_type_name = header.partition(":")
    type_name = type_name.strip(_WHITESPACE)
    if not type_name:
        return None
    descriptor = TypeDescriptor(type_name=type_name)
    descriptor.set_base_type(base_type_name.strip(_WHITESPACE))

    for line_number, line in lines[1:]:
        name, separator, remainder = line.partition(":")
        name = name.strip(_WHITESPACE)
        if not separator or not name:
            logger.debug("Skipping schema line %d without a property declaration", line_number)
            continue
        declared_type, has_default, literal = remainder.partition("=")
        declared_type = declared_type.strip(_WHITESPACE)
        default = EMPTY
        if has_default:
            try:
                default = parse_default_literal(declared_type, literal.strip(_WHITESPACE))
            except SchemaParseError as exc:
                raise SchemaParseError(f"Line {line_number}: {exc}") from exc
        descriptor.add_property(name, declared_type, default)

    return descriptor


def parse_schema_file(path: Path | str) -> TypeDescriptor | None:
    """Read a UTF-8 schema file and parse it."""
    return parse_schema_text(Path(path).read_text(encoding="utf-8"))


def parse_default_literal(declared_type: str, literal: str) -> PropertyValue:
    """Convert a default literal according to its declared type label.

    ``int``, ``double`` and ``bool`` produce the matching kinds; any other label
    keeps the literal verbatim as text.
    """
    if declared_type == "int":
        if not _INTEGER_PATTERN.fullmatch(literal):
            raise SchemaParseError(f"Invalid int literal: {literal!r}")
        try:
            return PropertyValue.of_int(int(literal))
        except OverflowError as exc:
            raise SchemaParseError(f"Invalid int literal: {exc}") from exc
    if declared_type == "double":
        if not _DOUBLE_PATTERN.fullmatch(literal):
            raise SchemaParseError(f"Invalid double literal: {literal!r}")
        return PropertyValue.of_float(float(literal))
    if declared_type == "bool":
        return PropertyValue.of_bool(literal in ("true", "1"))
    return PropertyValue.of_text(literal)

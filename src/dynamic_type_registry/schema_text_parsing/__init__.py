"""Schema text parsing exports."""

from .schema_text_parser import (
    SchemaParseError,
    parse_default_literal,
    parse_schema_file,
    parse_schema_text,
)

__all__ = [
    "SchemaParseError",
    "parse_default_literal",
    "parse_schema_file",
    "parse_schema_text",
]

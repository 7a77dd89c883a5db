"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    LoggingSettings,
    ObjectSettings,
    RegistrySettings,
    SchemaSource,
)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = _read_text(path, "configuration file")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        schemas=_parse_schemas_section(parsed.get("schemas"), path.parent),
        registry=_parse_registry_section(parsed.get("registry")),
        objects=_parse_objects_section(parsed.get("objects")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def apply_logging_settings(settings: LoggingSettings) -> None:
    """Set the package logger level from configuration."""
    logging.getLogger("dynamic_type_registry").setLevel(settings.level)


def _parse_schemas_section(value: Any, base_path: Path) -> tuple[SchemaSource, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'schemas' is required.")
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("schemas must be a list of schema definitions.")
    if not value:
        raise ConfigurationError("schemas must contain at least one schema definition.")
    return tuple(
        _load_schema_definition(definition, base_path, f"schemas[{index}]")
        for index, definition in enumerate(value)
    )


def _load_schema_definition(definition: Any, base_path: Path, label: str) -> SchemaSource:
    if isinstance(definition, str):
        return SchemaSource(text=_require_schema_text(definition, label), source_path=None)
    mapping = _require_mapping(definition, label)
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError(f"{label} must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError(f"{label}.inline must be a string.")
        return SchemaSource(text=_require_schema_text(inline, label), source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError(f"{label}.path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        text = _read_text(schema_path, "schema file")
        return SchemaSource(text=_require_schema_text(text, label), source_path=schema_path)
    raise ConfigurationError(f"{label} requires either inline or path.")


def _parse_registry_section(value: Any) -> RegistrySettings:
    section = _optional_mapping(value, "registry")
    return RegistrySettings(
        reject_cyclic_bases=_optional_bool(
            section.get("reject_cyclic_bases"), "registry.reject_cyclic_bases", default=False
        )
    )


def _parse_objects_section(value: Any) -> ObjectSettings:
    section = _optional_mapping(value, "objects")
    return ObjectSettings(
        strict_property_kinds=_optional_bool(
            section.get("strict_property_kinds"), "objects.strict_property_kinds", default=False
        )
    )


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = section.get("level", "WARNING")
    if not isinstance(level, str):
        raise ConfigurationError("logging.level must be a string.")
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got '{level}'."
        )
    return LoggingSettings(level=normalized)


def _read_text(path: Path, description: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read {description} {path}: {exc}") from exc


def _require_schema_text(text: str, label: str) -> str:
    if not text.strip():
        raise ConfigurationError(f"{label} schema text cannot be empty.")
    return text


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value

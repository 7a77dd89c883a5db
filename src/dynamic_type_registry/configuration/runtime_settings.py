"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSource:
    """One schema definition, inline or read from a file."""

    text: str
    source_path: Path | None

    @property
    def label(self) -> str:
        """Human-readable origin used in error messages."""
        return str(self.source_path) if self.source_path is not None else "inline schema"


@dataclass(frozen=True)
class RegistrySettings:
    """Schema registry behavior."""

    reject_cyclic_bases: bool


@dataclass(frozen=True)
class ObjectSettings:
    """Dynamic object behavior."""

    strict_property_kinds: bool


@dataclass(frozen=True)
class LoggingSettings:
    """Logging verbosity."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schemas: tuple[SchemaSource, ...]
    registry: RegistrySettings
    objects: ObjectSettings
    logging: LoggingSettings

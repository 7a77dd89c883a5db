"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    LOG_LEVELS,
    ConfigurationError,
    apply_logging_settings,
    load_configuration,
)
from .runtime_settings import (
    Configuration,
    LoggingSettings,
    ObjectSettings,
    RegistrySettings,
    SchemaSource,
)

__all__ = [
    "Configuration",
    "LoggingSettings",
    "ObjectSettings",
    "RegistrySettings",
    "SchemaSource",
    "ConfigurationError",
    "LOG_LEVELS",
    "apply_logging_settings",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]

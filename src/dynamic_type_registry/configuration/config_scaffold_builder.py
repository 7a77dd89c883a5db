"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "registry.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Registry configuration template for dynamic-type-registry.
# Replace every <REQUIRED> placeholder before running describe-type, create-object or check-type.
# Uncomment <OPTIONAL> settings only when you need to change their defaults.

schemas:
  # Each entry is one type definition, given inline or as a path to a schema file.
  # Paths are resolved relative to this configuration file.
  # Register base types before the types deriving from them.
  - inline: |
      <REQUIRED>
  # - path: "<OPTIONAL>"

registry:
  # Reject registrations whose base type chain loops back on itself.
  reject_cyclic_bases: false

objects:
  # Reject property values whose kind contradicts a primitive declared type.
  strict_property_kinds: false

logging:
  # One of CRITICAL, ERROR, WARNING, INFO, DEBUG.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML registry configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder registry configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Registry configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

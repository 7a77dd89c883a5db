"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from dynamic_type_registry.configuration import (
    DEFAULT_CONFIG_FILENAME,
    LOG_LEVELS,
    ConfigurationError,
    apply_logging_settings,
    load_configuration,
    write_placeholder_configuration,
)
from dynamic_type_registry.object_model import missing_properties
from dynamic_type_registry.registry_loading import LoadedRegistry, RegistryLoadError, load_registry
from dynamic_type_registry.schema_reporting import (
    describe_object,
    describe_type,
    render_description,
)
from dynamic_type_registry.schema_text_parsing import SchemaParseError, parse_default_literal

_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML registry configuration file",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="dynamic-type-registry")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the logging level from the configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Schema registry and dynamic object utility."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    logging.basicConfig(level=ctx.obj["log_level"] or "WARNING", stream=sys.stderr)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML registry configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML registry configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe-type")
@_config_option
@click.argument("type_name")
@click.pass_context
def describe_type_command(ctx: click.Context, config_path: str, type_name: str) -> None:
    """Print a type's base and resolved properties."""
    loaded = _load_registry(ctx, config_path)
    description = describe_type(loaded.registry, type_name)
    if description is None:
        raise CliError(f"Type '{type_name}' not found!")
    click.echo(render_description(description), nl=False)


@cli.command(name="create-object")
@_config_option
@click.argument("type_name")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Property value to set after construction; may be repeated.",
)
@click.pass_context
def create_object_command(
    ctx: click.Context, config_path: str, type_name: str, assignments: tuple[str, ...]
) -> None:
    """Construct an object of a registered type and print its property values."""
    loaded = _load_registry(ctx, config_path)
    obj = loaded.factory.create(type_name)
    if obj is None:
        raise CliError(f"Type '{type_name}' not found!")

    declared_types = {
        prop.name: prop.declared_type for prop in loaded.registry.get_all_properties(type_name)
    }
    for assignment in assignments:
        name, separator, literal = assignment.partition("=")
        name = name.strip()
        if not separator or not name:
            raise CliError(f"Invalid --set value '{assignment}', expected NAME=VALUE.")
        try:
            value = parse_default_literal(declared_types.get(name, "string"), literal.strip())
            obj.set_property(name, value)
        except (SchemaParseError, TypeError) as exc:
            raise CliError(f"Cannot set {name}: {exc}") from exc

    click.echo(render_description(describe_object(obj)), nl=False)


@cli.command(name="check-type")
@_config_option
@click.argument("type_name")
@click.argument("target_type_name")
@click.pass_context
def check_type_command(
    ctx: click.Context, config_path: str, type_name: str, target_type_name: str
) -> None:
    """Report whether objects of TYPE_NAME structurally satisfy TARGET_TYPE_NAME."""
    loaded = _load_registry(ctx, config_path)
    obj = loaded.factory.create(type_name)
    if obj is None:
        raise CliError(f"Type '{type_name}' not found!")

    compatible = obj.is_type(target_type_name)
    click.echo("true" if compatible else "false")
    if not compatible:
        for prop in missing_properties(
            loaded.registry.get_all_properties(type_name),
            loaded.registry.get_all_properties(target_type_name),
        ):
            click.echo(f"missing: {prop.name} ({prop.declared_type})")


def _load_registry(ctx: click.Context, config_path: str) -> LoadedRegistry:
    try:
        configuration = load_configuration(config_path)
        if not (ctx.obj or {}).get("log_level"):
            apply_logging_settings(configuration.logging)
        return load_registry(configuration)
    except (ConfigurationError, RegistryLoadError, OSError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

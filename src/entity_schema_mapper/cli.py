"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from entity_schema_mapper.build_execution import (
    BuildExecutionError,
    BuildRequest,
    execute_schema_build,
)
from entity_schema_mapper.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from entity_schema_mapper.schema_export import logical_schema_to_dict


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON mapping document",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="entity-schema-mapper")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log build steps to stderr.")
def cli(verbose: bool) -> None:
    """Declarative entity-to-table schema mapper."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML mapping document template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML mapping document with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="build")
@_CONFIG_OPTION
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the schema report workbook to write",
)
def build(config_path: str, output_path: str) -> None:
    """Build and validate the logical schema, then write the report workbook."""
    try:
        outcome = execute_schema_build(
            BuildRequest(config_path=config_path, output_path=output_path)
        )
    except BuildExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="validate")
@_CONFIG_OPTION
def validate(config_path: str) -> None:
    """Build the logical schema and report every validation issue."""
    try:
        outcome = execute_schema_build(BuildRequest(config_path=config_path, require_valid=False))
    except BuildExecutionError as exc:
        raise CliError(str(exc)) from exc
    issues = outcome.validation.issues
    for issue in issues:
        click.echo(f"{issue.kind.value}: {issue.message}")
    if issues:
        raise CliError(f"{len(issues)} validation issue(s) found.")
    click.echo(f"valid: {len(outcome.schema.tables)} table(s)")


@cli.command(name="show")
@_CONFIG_OPTION
def show(config_path: str) -> None:
    """Print the built logical schema as JSON.

    The schema is not validated, so an invalid schema is printed as built.
    """
    try:
        outcome = execute_schema_build(BuildRequest(config_path=config_path, require_valid=False))
    except BuildExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(logical_schema_to_dict(outcome.schema), indent=2))


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

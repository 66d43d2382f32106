"""graphql-schema-policy CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from gqlpolicy import __version__


@click.group()
@click.version_option(version=__version__, prog_name="graphql-schema-policy")
@click.option("--verbose", "-v", is_flag=True, help="Verbose (debug) logging on stderr.")
def main(*, verbose: bool) -> None:
    """CLI tool for validating your GraphQL schema policy."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("schema_path")
@click.argument("config_path", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def validate(schema_path: str, config_path: Path, *, fmt: str) -> None:
    """Validate the GraphQL schema at SCHEMA_PATH against the rules in CONFIG_PATH.

    SCHEMA_PATH may be a file, a directory or a glob of SDL files.
    Exit codes: 0 = no violations, 1 = violations found,
    2 = schema or configuration could not be loaded.
    """
    from gqlpolicy.config import ConfigError, load_config
    from gqlpolicy.schema_loader import SchemaLoadError, load_schema
    from gqlpolicy.validator import format_json, format_text
    from gqlpolicy.validator import validate as run_validate

    try:
        schema = load_schema(schema_path)
    except SchemaLoadError as exc:
        click.echo(f"Error: failed to load schema: {exc}", err=True)
        sys.exit(2)

    if fmt == "text":
        click.echo(f"Schema loaded: {schema_path}")

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: invalid configuration: {exc}", err=True)
        sys.exit(2)

    result = run_validate(schema, config)

    formatters = {
        "text": format_text,
        "json": format_json,
    }
    click.echo(formatters[fmt](result))

    if not result.passed:
        sys.exit(1)


main.add_command(validate, name="v")

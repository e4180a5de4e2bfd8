"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from typing import Any

import click
from pydantic import BaseModel

from pattern_validator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_configured_checker,
    load_configuration,
    write_placeholder_configuration,
)

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pattern-validator")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Match text against regular expressions and validate the named captures."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML checker configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate an example YAML checker configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML checker configuration",
)
@click.option(
    "--require-match",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any input does not produce a value.",
)
@click.argument("inputs", nargs=-1)
def check(config_path: str, require_match: bool, inputs: tuple[str, ...]) -> None:
    """Check each INPUT (or each line of stdin) and print the result as JSON."""
    try:
        checker = build_configured_checker(load_configuration(config_path))
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    absent = 0
    for text in inputs or _stdin_lines():
        value = checker(text)
        if value is None:
            absent += 1
            logger.debug("No value for input %r", text)
        click.echo(json.dumps(_to_json(value), ensure_ascii=False))

    if require_match and absent:
        raise CliError(f"{absent} input(s) did not produce a value.")


def _stdin_lines() -> Iterable[str]:
    with click.open_file("-") as stream:
        for line in stream:
            yield line.rstrip("\r\n")


def _to_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


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

"""Command-line interface for JSON Response."""

import logging
import sys
from pathlib import Path
from typing import Any

import click

from . import profiles
from .data_type_detector import detect_kind
from .json_response import JSONResponse
from .types import JSONResponseError


ACCESSORS = {
    "string": JSONResponse.get_string,
    "int": JSONResponse.get_int,
    "long": JSONResponse.get_long,
    "double": JSONResponse.get_double,
    "float": JSONResponse.get_float,
    "boolean": JSONResponse.get_boolean,
    "decimal": JSONResponse.get_decimal,
    "list": JSONResponse.get_list,
    "map": JSONResponse.get_map,
}


class ResponseError(click.ClickException):
    """Error raised by the core while loading or querying a file."""
    exit_code = 2


def _load(input_file: Path, pretty: bool = False) -> JSONResponse:
    profile = profiles.PRETTY_PRINTING if pretty else profiles.DEFAULT
    try:
        return JSONResponse.from_text(input_file.read_text(encoding='utf-8'), profile)
    except JSONResponseError as e:
        raise ResponseError(f"{input_file}: {e}") from e


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose: bool):
    """JSON Response - Typed queries against a JSON object file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('key')
@click.option('--as', 'as_type', type=click.Choice(list(ACCESSORS) + ["raw"]), default="raw",
              help='Type to read the value as (default: raw JSON)')
@click.option('--pretty', '-p', is_flag=True, help='Indent JSON output')
def get(input_file: Path, key: str, as_type: str, pretty: bool):
    """Print the value stored under KEY in INPUT_FILE."""
    response = _load(input_file, pretty)

    try:
        if as_type == "raw":
            value = response.get(key, Any)
        else:
            value = ACCESSORS[as_type](response, key)
    except JSONResponseError as e:
        raise ResponseError(str(e)) from e

    if as_type in ("raw", "list", "map"):
        click.echo(response.profile.dumps(value))
    elif as_type == "boolean":
        click.echo("true" if value else "false")
    else:
        click.echo(str(value))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def keys(input_file: Path):
    """List the top-level keys of INPUT_FILE with their JSON kinds."""
    response = _load(input_file)
    document = response.get_response()

    for key in response.keys():
        click.echo(f"{key}\t{detect_kind(document[key]).value}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('key')
def contains(input_file: Path, key: str):
    """Check whether KEY is a top-level member of INPUT_FILE."""
    response = _load(input_file)

    found = response.contains(key)
    click.echo("true" if found else "false")
    if not found:
        sys.exit(1)


if __name__ == '__main__':
    main()

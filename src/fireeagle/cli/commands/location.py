"""Location commands."""

import typer

from fireeagle.cli.async_runner import async_command
from fireeagle.cli.client_factory import get_client
from fireeagle.cli.config import CLIConfig
from fireeagle.cli.formatters import print_body
from fireeagle.exceptions import ParameterError
from fireeagle.models.location import ResponseFormat

app = typer.Typer(no_args_is_help=True)


def _parse_params(params: list[str]) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a parameter mapping."""
    parsed: dict[str, str] = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ParameterError(f"Expected key=value, got {item!r}", field="param")
        parsed[key.strip()] = value.strip()
    return parsed


def _location_arg(query: str | None, params: list[str]) -> str | dict[str, str]:
    if params:
        return _parse_params(params)
    if query:
        return query
    raise ParameterError("Give a location string or at least one --param", field="location")


@app.command("show")
@async_command
async def show(
    ctx: typer.Context,
    output: ResponseFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Response format (server default: xml).",
    ),
) -> None:
    """Show your current location."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        body = await client.location.location(format=output)

    print_body(body)


@app.command("update")
@async_command
async def update(
    ctx: typer.Context,
    location: str | None = typer.Argument(
        None,
        help="Free-form location, e.g. '500 Third St., San Francisco, CA'.",
    ),
    param: list[str] = typer.Option(
        [],
        "--param",
        "-p",
        help="Location parameter as key=value (lat, lon, place_id, postal, ...).",
    ),
    output: ResponseFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Response format (server default: xml).",
    ),
) -> None:
    """Update your location."""
    config: CLIConfig = ctx.obj
    loc = _location_arg(location, param)

    async with get_client(config) as client:
        body = await client.location.update_location(loc, format=output)

    print_body(body)


@app.command("lookup")
@async_command
async def lookup(
    ctx: typer.Context,
    query: str | None = typer.Argument(
        None,
        help="Free-form place to look up, e.g. 'Pensacola'.",
    ),
    param: list[str] = typer.Option(
        [],
        "--param",
        "-p",
        help="Location parameter as key=value.",
    ),
    output: ResponseFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Response format (server default: xml).",
    ),
) -> None:
    """Look up candidate places for a location."""
    config: CLIConfig = ctx.obj
    loc = _location_arg(query, param)

    async with get_client(config) as client:
        body = await client.location.lookup_location(loc, format=output)

    print_body(body)

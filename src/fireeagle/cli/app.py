"""Main Typer application."""

import logging
from pathlib import Path

import typer

from fireeagle.cli.config import CLIConfig, _default_config_dir

# Create main app
app = typer.Typer(
    name="fireeagle",
    help="FireEagle location service command-line interface.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging of HTTP requests.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/fireeagle-cli).",
        envvar="FIREEAGLE_CLI_CONFIG_DIR",
    ),
) -> None:
    """FireEagle location service command-line interface.

    Authorize once with 'fireeagle auth login', then query or update your
    location.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    ctx.obj = CLIConfig(
        verbose=verbose,
        config_dir=config_dir or _default_config_dir(),
    )

"""FireEagle CLI - Command-line interface for the FireEagle API."""

from fireeagle.cli.app import app

# Import command modules to register them with the app
from fireeagle.cli.commands import auth, location

# Register sub-apps
app.add_typer(auth.app, name="auth", help="Authorization commands.")
app.add_typer(location.app, name="location", help="Query and update your location.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]

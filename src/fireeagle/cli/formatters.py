"""Output helpers for CLI commands."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def print_body(body: str) -> None:
    """Print a response body exactly as received."""
    console.out(body, highlight=False)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")

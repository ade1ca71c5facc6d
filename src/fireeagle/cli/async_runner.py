"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from fireeagle.exceptions import FireEagleError, UnauthorizedError

T = TypeVar("T")


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Library errors are reported on stderr and turned into exit code 1.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                body = await client.location.location()
                ...
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        from fireeagle.cli.formatters import print_error, print_info

        try:
            return asyncio.run(f(*args, **kwargs))
        except UnauthorizedError:
            print_error("Not authorized. Run 'fireeagle auth login' first.")
            raise typer.Exit(1) from None
        except FireEagleError as e:
            print_error(e.message)
            if e.__cause__ is not None:
                print_info(f"Caused by: {e.__cause__}")
            raise typer.Exit(1) from None

    return wrapper

"""Client factory for CLI commands."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fireeagle.client import FireEagleClient

if TYPE_CHECKING:
    from fireeagle.cli.config import CLIConfig


@asynccontextmanager
async def get_client(config: CLIConfig) -> AsyncGenerator[FireEagleClient]:
    """Create a FireEagleClient for CLI use.

    Credentials come from the CLI credentials file with environment variable
    overrides; an access token pair found there makes the client authorized.
    The connection pool lives for the duration of the block.

    Usage:
        async with get_client(cli_config) as client:
            body = await client.location.location()
    """
    client = FireEagleClient(config.load_config())

    async with client:
        yield client

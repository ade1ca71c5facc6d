"""Base API client with common functionality."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from fireeagle.exceptions import UnauthorizedError
from fireeagle.transport import send

if TYPE_CHECKING:
    import httpx

    from fireeagle.auth import FireEagleAuth
    from fireeagle.config import FireEagleConfig

logger = logging.getLogger(__name__)


class BaseAPI:
    """Base class for FireEagle API endpoints.

    Provides the signed request primitive every endpoint is built on. Response
    bodies are returned exactly as received.
    """

    def __init__(
        self,
        config: FireEagleConfig,
        auth: FireEagleAuth,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.auth = auth
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    async def execute_protected_request(
        self,
        url: str,
        method: str = "GET",
        extra_params: Mapping[str, str] | None = None,
    ) -> str:
        """Make a request signed with the access token.

        Args:
            url: Full endpoint URL, including any ``.xml``/``.json`` suffix
            method: HTTP method (GET or POST)
            extra_params: Request parameters; query string for GET,
                form-encoded body for POST

        Returns:
            Raw response body

        Raises:
            UnauthorizedError: No access token; nothing is sent
            SignatureError: Signed request failed local verification
            TransportError: Network failure or non-2xx response
        """
        if not self.auth.authorized:
            raise UnauthorizedError()

        signed = self.auth.sign_request(method, url, extra_params)

        logger.debug("Params: %s", sorted(extra_params or {}))

        response = await send(
            self._http_client,
            signed.method,
            signed.url,
            headers=signed.headers,
            body=signed.body,
        )
        return response.text

    async def _get(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Make a signed GET request."""
        return await self.execute_protected_request(url, "GET", params)

    async def _post(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Make a signed POST request."""
        return await self.execute_protected_request(url, "POST", params)

"""Main FireEagle client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import httpx

from fireeagle.api.location import LocationAPI
from fireeagle.auth import FireEagleAuth
from fireeagle.config import FireEagleConfig

if TYPE_CHECKING:
    from types import TracebackType

    from fireeagle.models.auth import AccessToken, ClientState, RequestToken


class FireEagleClient:
    """FireEagle API client.

    Provides a unified interface to the FireEagle API with OAuth authentication.

    Usage (first run - three-legged OAuth):
        async with FireEagleClient(config) as client:
            print(f"Visit: {await client.get_authorization_url()}")
            input("Press enter once you have authorized the app")
            access_token = await client.request_access_token()
            # Store access_token.token / access_token.token_secret yourself

    Usage (later runs - stored access token):
        config = FireEagleConfig(
            consumer_key="...",
            consumer_secret="...",
            access_token="...",
            access_token_secret="...",
        )
        async with FireEagleClient(config) as client:
            xml = await client.location.location()
            json_text = await client.location.update_location(
                "500 Third St., San Francisco, CA", format="json"
            )

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient()
        client = FireEagleClient(config, http_client=http_client)
        # Client uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        client = FireEagleClient(config)
        xml = await client.location.location()  # Per-request connection
    """

    def __init__(
        self,
        config: FireEagleConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: FireEagle configuration with credentials. Supplying both
                access token fields skips the handshake.
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
                        If not provided, use open()/close() or context manager to
                        enable pooling, or each request creates its own connection.
        """
        self.config = config
        self.auth = FireEagleAuth(config, http_client)

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

        self.location = LocationAPI(config, self.auth, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on auth and API modules."""
        self._http_client = http_client
        self.auth.set_http_client(http_client)
        self.location.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests.

        Creates a shared httpx.AsyncClient for connection pooling.
        Only needed if not using context manager or external http_client.
        """
        if self._http_client is None and self._owns_http_client:
            self._set_http_client(httpx.AsyncClient())

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> FireEagleClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls) -> FireEagleClient:
        """Create client from environment variables.

        Expects:
        - FIREEAGLE_CONSUMER_KEY
        - FIREEAGLE_CONSUMER_SECRET
        - FIREEAGLE_ACCESS_TOKEN / FIREEAGLE_ACCESS_TOKEN_SECRET (optional)
        """
        return cls(FireEagleConfig.from_env())

    @property
    def authorized(self) -> bool:
        """Whether the client holds an access token.

        The credentials may still be wrong, in which case requests fail.
        """
        return self.auth.authorized

    @property
    def state(self) -> ClientState:
        """Current position in the OAuth handshake."""
        return self.auth.state

    @property
    def access_token(self) -> AccessToken | None:
        """Current access token, for the caller to persist."""
        return self.auth.access_token

    async def request_request_token(self, callback: str | None = None) -> RequestToken:
        """Get a request token to start the OAuth flow."""
        return await self.auth.request_request_token(callback)

    async def get_authorization_url(self) -> str:
        """URL the user must visit to authorize this application."""
        return await self.auth.get_authorization_url()

    async def request_access_token(
        self,
        request_token: RequestToken | None = None,
        *,
        verifier: str | None = None,
    ) -> AccessToken:
        """Exchange the authorized request token for an access token."""
        return await self.auth.request_access_token(request_token, verifier=verifier)

    async def execute_protected_request(
        self,
        url: str,
        method: str = "GET",
        extra_params: Mapping[str, str] | None = None,
    ) -> str:
        """Signed request against any endpoint; returns the raw body."""
        return await self.location.execute_protected_request(url, method, extra_params)

"""OAuth 1.0a authentication for the FireEagle API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, urlencode

from oauthlib import oauth1
from oauthlib.common import Request, add_params_to_uri
from oauthlib.oauth1.rfc5849 import signature

from fireeagle.exceptions import ProtocolError, SignatureError, TokenError, UnauthorizedError
from fireeagle.models.auth import AccessToken, ClientState, RequestToken
from fireeagle.transport import send

if TYPE_CHECKING:
    import httpx

    from fireeagle.config import FireEagleConfig

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class SignedRequest:
    """A request rendered and signed by oauthlib, ready to send."""

    __slots__ = ("body", "headers", "method", "url")

    def __init__(self, method: str, url: str, headers: dict[str, str], body: str | None) -> None:
        self.method = method
        self.url = url
        self.headers = headers
        self.body = body


class FireEagleAuth:
    """OAuth 1.0a authentication handler for the FireEagle API.

    Holds the handshake state for one user session and implements the flow:
    1. Get request token
    2. User authorization (manual step, in a browser)
    3. Exchange the request token for an access token
    4. Sign protected requests with the access token

    An instance is mutated in place as tokens are acquired and must not be
    shared between concurrent tasks.
    """

    def __init__(
        self,
        config: FireEagleConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client
        self._request_token: RequestToken | None = None
        self._access_token: AccessToken | None = None

        if config.has_access_token:
            self._access_token = AccessToken(
                token=config.access_token,  # type: ignore[arg-type]
                token_secret=config.access_token_secret,  # type: ignore[arg-type]
            )

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    @property
    def authorized(self) -> bool:
        """Whether an access token is held.

        The token may still be rejected by the service.
        """
        return self._access_token is not None

    @property
    def state(self) -> ClientState:
        """Current position in the handshake."""
        if self._access_token is not None:
            return ClientState.AUTHORIZED
        if self._request_token is not None:
            return ClientState.HAS_REQUEST_TOKEN
        return ClientState.NO_TOKEN

    @property
    def request_token(self) -> RequestToken | None:
        """Pending request token, if any."""
        return self._request_token

    @property
    def access_token(self) -> AccessToken | None:
        """Current access token if authorized."""
        return self._access_token

    async def request_request_token(self, callback: str | None = None) -> RequestToken:
        """Step 1: Get a request token to start the OAuth flow.

        Args:
            callback: Optional ``oauth_callback`` value (``"oob"`` for
                desktop applications)

        Returns:
            RequestToken carrying the URL the user must visit
        """
        data = await self._exchange(
            self.config.request_token_url,
            stage="request_token",
            callback=callback,
        )
        request_token = RequestToken(
            token=data["oauth_token"],
            token_secret=data["oauth_token_secret"],
            authorization_url=self._build_authorization_url(data["oauth_token"]),
        )
        self._request_token = request_token
        logger.info("Obtained request token")
        return request_token

    async def request_access_token(
        self,
        request_token: RequestToken | None = None,
        *,
        verifier: str | None = None,
    ) -> AccessToken:
        """Step 3: Exchange an authorized request token for an access token.

        The user must have authorized the application at the URL from
        ``get_authorization_url`` first.

        Args:
            request_token: Token to exchange; defaults to the stored one
            verifier: ``oauth_verifier`` shown to the user, when the service
                issued one

        Returns:
            AccessToken for API access. Persisting it is up to the caller.
        """
        if request_token is None:
            request_token = self._request_token
        if request_token is None:
            raise TokenError(
                "No request token available. Call request_request_token first.",
                token_type="request",
            )
        if not isinstance(request_token, RequestToken):
            raise TokenError(
                f"Expected a RequestToken, got {type(request_token).__name__}",
                token_type="request",
            )

        data = await self._exchange(
            self.config.access_token_url,
            stage="access_token",
            token=request_token,
            verifier=verifier,
        )
        self._access_token = AccessToken(
            token=data["oauth_token"],
            token_secret=data["oauth_token_secret"],
        )

        # Request token is spent
        self._request_token = None

        logger.info("Obtained access token")
        return self._access_token

    async def get_authorization_url(self) -> str:
        """Step 2: URL the user must visit to grant access.

        Fetches a request token first if none is held yet; later calls reuse it.
        """
        request_token = self._request_token
        if request_token is None:
            request_token = await self.request_request_token()
        return request_token.authorization_url

    def sign_request(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None = None,
    ) -> SignedRequest:
        """Sign a protected request with the access token.

        For GET the parameters travel in the query string, for POST in a
        form-encoded body.

        Raises:
            UnauthorizedError: No access token held
            SignatureError: The signed request failed verification
        """
        if self._access_token is None:
            raise UnauthorizedError()
        return self._sign(method, url, token=self._access_token, params=params)

    def _build_authorization_url(self, token: str) -> str:
        return add_params_to_uri(self.config.authorization_url, [("oauth_token", token)])

    async def _exchange(
        self,
        url: str,
        *,
        stage: str,
        token: RequestToken | None = None,
        verifier: str | None = None,
        callback: str | None = None,
    ) -> dict[str, str]:
        """Run one token endpoint round trip and parse the token pair."""
        signed = self._sign("GET", url, token=token, verifier=verifier, callback=callback)
        response = await send(self._http_client, signed.method, signed.url, headers=signed.headers)

        # Parse response (URL-encoded)
        data = parse_qs(response.text)
        fields = {
            name: data.get(name, [""])[0] for name in ("oauth_token", "oauth_token_secret")
        }
        missing = tuple(name for name, value in fields.items() if not value)
        if missing:
            raise ProtocolError(
                f"FireEagle did not reply with {stage.replace('_', ' ')} fields: "
                f"{', '.join(missing)}",
                stage=stage,
                missing=missing,
            )
        return fields

    def _sign(
        self,
        method: str,
        url: str,
        *,
        token: RequestToken | AccessToken | None = None,
        params: Mapping[str, str] | None = None,
        verifier: str | None = None,
        callback: str | None = None,
    ) -> SignedRequest:
        """Build, sign and self-verify a request."""
        method = method.upper()
        token_secret = token.token_secret if token else None

        client = oauth1.Client(
            self.config.consumer_key,
            client_secret=self.config.consumer_secret,
            resource_owner_key=token.token if token else None,
            resource_owner_secret=token_secret,
            callback_uri=callback,
            verifier=verifier,
            signature_method=oauth1.SIGNATURE_HMAC_SHA1,
            signature_type=(
                oauth1.SIGNATURE_TYPE_BODY if method == "POST" else oauth1.SIGNATURE_TYPE_QUERY
            ),
        )

        headers: dict[str, str] = {}
        body: str | None = None
        if method == "POST":
            headers["Content-Type"] = FORM_CONTENT_TYPE
            body = urlencode(dict(params or {}))
        elif params:
            url = add_params_to_uri(url, list(params.items()))

        try:
            uri, headers, body = client.sign(url, http_method=method, body=body, headers=headers)
        except ValueError as e:
            raise SignatureError(f"Couldn't sign request: {e}") from e

        self._verify(method, uri, headers, body, token_secret)
        return SignedRequest(method, uri, headers, body)

    def _verify(
        self,
        method: str,
        uri: str,
        headers: dict[str, str],
        body: str | None,
        token_secret: str | None,
    ) -> None:
        """Recompute the HMAC-SHA1 signature over the rendered request."""
        request = Request(uri, http_method=method, body=body, headers=headers)
        params = signature.collect_parameters(
            uri_query=request.uri_query,
            body=request.body,
            headers=request.headers,
            exclude_oauth_signature=False,
        )
        request.signature = dict(params).get("oauth_signature")
        request.params = [(k, v) for k, v in params if k != "oauth_signature"]

        if not request.signature or not signature.verify_hmac_sha1(
            request,
            client_secret=self.config.consumer_secret,
            resource_owner_secret=token_secret,
        ):
            raise SignatureError("COULDN'T VERIFY! Check OAuth parameters.")

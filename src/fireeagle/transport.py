"""Single-request HTTP transport shared by token exchange and API calls."""

import logging
from urllib.parse import urlsplit

import httpx

from fireeagle.exceptions import TransportError

logger = logging.getLogger(__name__)


def _redact(url: str) -> str:
    """Strip the query string (it carries OAuth parameters) for logging."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


def check_response(response: httpx.Response) -> httpx.Response:
    """Raise TransportError for any non-2xx response."""
    if not response.is_success:
        status_line = f"{response.status_code} {response.reason_phrase}".rstrip()
        raise TransportError(
            status_line,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )
    return response


async def send(
    http_client: httpx.AsyncClient | None,
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    body: str | None = None,
) -> httpx.Response:
    """Send one already-signed request and return the successful response.

    Uses ``http_client`` when given (shared connection pool), otherwise a
    short-lived client for this request only. No timeout is set here; httpx
    defaults apply.

    Raises:
        TransportError: On network failure or non-2xx status
    """
    logger.debug("Request: %s %s", method, _redact(url))

    try:
        if http_client is not None:
            response = await http_client.request(method, url, headers=headers, content=body)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, headers=headers, content=body)
    except httpx.HTTPError as e:
        raise TransportError(f"{type(e).__name__}: {e}") from e

    logger.debug("Response: %s %s", response.status_code, response.reason_phrase)
    return check_response(response)

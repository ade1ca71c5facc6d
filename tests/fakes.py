"""A fake FireEagle service behind httpx.MockTransport."""

from urllib.parse import parse_qsl, urlsplit

import httpx

API_HOST = "https://fireeagle.yahooapis.com"
WEB_HOST = "https://fireeagle.yahoo.net"


class FakeFireEagle:
    """Routes requests by path and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, str]] = {
            "/oauth/request_token": (200, "oauth_token=RT1&oauth_token_secret=RS1"),
            "/oauth/access_token": (200, "oauth_token=AT1&oauth_token_secret=AS1"),
        }

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def respond(self, path: str, status_code: int, text: str = "") -> None:
        self.routes[path] = (status_code, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, text = self.routes.get(request.url.path, (404, "not found"))
        return httpx.Response(status_code, text=text)


def query_params(request: httpx.Request) -> dict[str, str]:
    """Decoded query string of a recorded request."""
    return dict(parse_qsl(urlsplit(str(request.url)).query, keep_blank_values=True))


def body_params(request: httpx.Request) -> dict[str, str]:
    """Decoded form body of a recorded request."""
    return dict(parse_qsl(request.content.decode(), keep_blank_values=True))

"""FireEagle client data models."""

from fireeagle.models.auth import AccessToken, ClientState, RequestToken
from fireeagle.models.location import ResponseFormat, format_url, location_params

__all__ = [
    # Auth
    "AccessToken",
    "ClientState",
    "RequestToken",
    # Location
    "ResponseFormat",
    "format_url",
    "location_params",
]

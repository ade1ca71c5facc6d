"""FireEagle API client library.

An async Python client for the FireEagle location service, authenticated
with OAuth 1.0a.

Example:
    from fireeagle import FireEagleClient, FireEagleConfig

    config = FireEagleConfig(
        consumer_key="your_key",
        consumer_secret="your_secret",
    )

    async with FireEagleClient(config) as client:
        # Authenticate (first time)
        print(f"Visit: {await client.get_authorization_url()}")
        input("Press enter after authorizing")
        access_token = await client.request_access_token()
        # Persist access_token.token and access_token.token_secret yourself

        # Use the client
        xml = await client.location.location()
        await client.location.update_location("Pensacola", format="json")

    # Subsequent runs - pass the stored token
    config = FireEagleConfig(
        consumer_key="your_key",
        consumer_secret="your_secret",
        access_token="...",
        access_token_secret="...",
    )
"""

from fireeagle.client import FireEagleClient
from fireeagle.config import FireEagleConfig
from fireeagle.exceptions import (
    ConfigurationError,
    FireEagleError,
    ParameterError,
    ProtocolError,
    SignatureError,
    TokenError,
    TransportError,
    UnauthorizedError,
)
from fireeagle.models import AccessToken, ClientState, RequestToken, ResponseFormat

__version__ = "0.8.0"

__all__ = [
    # Main client
    "FireEagleClient",
    "FireEagleConfig",
    # Models
    "AccessToken",
    "ClientState",
    "RequestToken",
    "ResponseFormat",
    # Exceptions
    "ConfigurationError",
    "FireEagleError",
    "ParameterError",
    "ProtocolError",
    "SignatureError",
    "TokenError",
    "TransportError",
    "UnauthorizedError",
]

"""OAuth token models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ClientState(StrEnum):
    """Where a client is in the OAuth handshake."""

    NO_TOKEN = "no_token"
    HAS_REQUEST_TOKEN = "has_request_token"
    AUTHORIZED = "authorized"


class RequestToken(BaseModel):
    """OAuth request token (first step of OAuth flow)."""

    token: str = Field(description="Request token value")
    token_secret: str = Field(description="Request token secret")
    authorization_url: str = Field(description="URL to redirect user for authorization")

    model_config = {"frozen": True}


class AccessToken(BaseModel):
    """OAuth access token (final step of OAuth flow)."""

    token: str = Field(description="Access token value")
    token_secret: str = Field(description="Access token secret", repr=False)

    model_config = {"frozen": True}

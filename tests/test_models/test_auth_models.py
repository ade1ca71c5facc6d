"""Tests for OAuth token models."""

import pytest
from pydantic import ValidationError

from fireeagle.models.auth import AccessToken, ClientState, RequestToken


class TestRequestToken:
    def test_fields(self) -> None:
        token = RequestToken(
            token="RT1",
            token_secret="RS1",
            authorization_url="https://fireeagle.yahoo.net/oauth/authorize?oauth_token=RT1",
        )

        assert token.token == "RT1"
        assert token.token_secret == "RS1"

    def test_is_frozen(self) -> None:
        token = RequestToken(token="RT1", token_secret="RS1", authorization_url="u")

        with pytest.raises(ValidationError):
            token.token = "other"  # type: ignore[misc]


class TestAccessToken:
    def test_equality_by_value(self) -> None:
        assert AccessToken(token="AT1", token_secret="AS1") == AccessToken(
            token="AT1", token_secret="AS1"
        )

    def test_secret_hidden_from_repr(self) -> None:
        token = AccessToken(token="AT1", token_secret="very-secret")

        assert "very-secret" not in repr(token)
        assert "AT1" in repr(token)

    def test_requires_both_fields(self) -> None:
        with pytest.raises(ValidationError):
            AccessToken(token="AT1")  # type: ignore[call-arg]

    def test_round_trips_through_dump(self) -> None:
        token = AccessToken(token="AT1", token_secret="AS1")

        assert AccessToken.model_validate(token.model_dump()) == token


class TestClientState:
    def test_values(self) -> None:
        assert ClientState.NO_TOKEN == "no_token"
        assert ClientState.HAS_REQUEST_TOKEN == "has_request_token"
        assert ClientState.AUTHORIZED == "authorized"

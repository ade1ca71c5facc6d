"""Shared fixtures for client tests."""

from collections.abc import AsyncIterator

import httpx
import pytest

from fireeagle import FireEagleClient, FireEagleConfig
from tests.fakes import FakeFireEagle


@pytest.fixture
def config() -> FireEagleConfig:
    """Consumer credentials only; the client starts unauthorized."""
    return FireEagleConfig(consumer_key="test_key", consumer_secret="test_secret")


@pytest.fixture
def authorized_config() -> FireEagleConfig:
    """Consumer credentials plus a stored access token."""
    return FireEagleConfig(
        consumer_key="test_key",
        consumer_secret="test_secret",
        access_token="AT0",
        access_token_secret="AS0",
    )


@pytest.fixture
def service() -> FakeFireEagle:
    return FakeFireEagle()


@pytest.fixture
async def http_client(service: FakeFireEagle) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(service.handler)) as client:
        yield client


@pytest.fixture
def client(config: FireEagleConfig, http_client: httpx.AsyncClient) -> FireEagleClient:
    return FireEagleClient(config, http_client=http_client)


@pytest.fixture
def authorized_client(
    authorized_config: FireEagleConfig, http_client: httpx.AsyncClient
) -> FireEagleClient:
    return FireEagleClient(authorized_config, http_client=http_client)

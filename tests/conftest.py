"""Test fixtures and utilities."""

import pytest
from fixtures import BASE_URL, COB_TOKEN, COBRAND_LOGIN, COBRAND_PASSWORD

from yodlee_client import YodleeClient


@pytest.fixture
def client() -> YodleeClient:
    """Unauthenticated client pointed at the test base URL."""
    return YodleeClient(COBRAND_LOGIN, COBRAND_PASSWORD, base_url=BASE_URL)


@pytest.fixture
def authenticated_client(client: YodleeClient) -> YodleeClient:
    """Client holding a cobrand session token without a network call."""
    client._session_token = COB_TOKEN
    return client

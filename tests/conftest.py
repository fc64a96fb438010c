"""Shared fixtures for the Garmin Connect tests."""

import pytest

from garmin_connect.config import GarminConfig
from garmin_connect.models.tokens import GarminTokens, OAuth1Token, OAuth2Token
from garmin_connect.services.garmin_service import GarminConnect
from garmin_connect.urls import GarminUrls


def make_tokens(access_token: str = "access-abc", expires_at: int = 4102444800) -> GarminTokens:
    return GarminTokens(
        oauth1=OAuth1Token(oauth_token="oauth-token", oauth_token_secret="oauth-secret", domain="garmin.com"),
        oauth2=OAuth2Token(
            scope="CONNECT_READ CONNECT_WRITE",
            jti="jti-1",
            token_type="Bearer",
            access_token=access_token,
            refresh_token="refresh-abc",
            expires_in=3600,
            refresh_token_expires_in=7200,
            expires_at=expires_at,
            refresh_token_expires_at=expires_at + 3600,
        ),
    )


class FakeClient:
    """Stands in for HttpClient and records every call."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []
        self._tokens = None

    @property
    def tokens(self):
        return self._tokens

    def set_tokens(self, tokens):
        self._tokens = tokens

    def clear_tokens(self):
        self._tokens = None

    async def login(self, username, password):
        self.calls.append(("LOGIN", username, password))
        self._tokens = make_tokens()

    async def _respond(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        value = self.responses.get(url)
        if isinstance(value, Exception):
            raise value
        return value

    async def get(self, url, params=None, headers=None, binary=False):
        return await self._respond("GET", url, params=params, binary=binary)

    async def post(self, url, data=None, params=None, headers=None, files=None):
        return await self._respond("POST", url, data=data, files=files)

    async def put(self, url, data=None, params=None, headers=None):
        return await self._respond("PUT", url, data=data)

    async def delete(self, url, params=None):
        return await self._respond("DELETE", url)


@pytest.fixture
def config():
    return GarminConfig(_env_file=None, username="runner@example.com", password="secret")


@pytest.fixture
def urls():
    return GarminUrls("garmin.com")


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def gc(config, fake_client):
    return GarminConnect(config, client=fake_client)


@pytest.fixture
def tokens():
    return make_tokens()


@pytest.fixture
def token_factory():
    return make_tokens


@pytest.fixture
def client_factory():
    return FakeClient

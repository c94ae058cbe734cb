"""Tests for the HTTP client factory and settings."""

import base64
import os
from unittest.mock import patch

import httpx
import pytest
import respx

from zendesk_sdk._internal.http import (
    DEFAULT_TIMEOUT_MS,
    ZendeskApiClient,
    ZendeskSettings,
    create_http_client,
)
from zendesk_sdk._version import __version__
from zendesk_sdk.exceptions import ZendeskConfigError


class TestZendeskSettings:
    """Tests for ZendeskSettings validation."""

    def test_requires_url(self):
        with pytest.raises(ZendeskConfigError):
            ZendeskSettings(url="", oauth_token="token")

    def test_requires_credentials(self):
        with pytest.raises(ZendeskConfigError):
            ZendeskSettings(url="https://acme.zendesk.com")

    def test_email_without_token_is_rejected(self):
        with pytest.raises(ZendeskConfigError):
            ZendeskSettings(url="https://acme.zendesk.com", email="agent@acme.com")

    def test_oauth_token_alone_is_enough(self):
        settings = ZendeskSettings(url="https://acme.zendesk.com", oauth_token="oauth")
        assert settings.auth is None
        assert settings.headers["Authorization"] == "Bearer oauth"

    def test_api_token_uses_basic_auth(self, settings):
        assert isinstance(settings.auth, httpx.BasicAuth)
        assert "Authorization" not in settings.headers

    def test_is_immutable(self, settings):
        with pytest.raises(AttributeError):
            settings.url = "https://other.zendesk.com"  # type: ignore[misc]


class TestZendeskSettingsFromEnv:
    """Tests for ZendeskSettings.from_env()."""

    def test_from_env_with_api_token(self):
        env = {
            "ZENDESK_URL": "https://acme.zendesk.com",
            "ZENDESK_EMAIL": "agent@acme.com",
            "ZENDESK_API_TOKEN": "secret",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ZendeskSettings.from_env()
            assert settings.url == "https://acme.zendesk.com"
            assert settings.email == "agent@acme.com"
            assert settings.api_token == "secret"
            assert settings.timeout_ms == DEFAULT_TIMEOUT_MS

    def test_from_env_with_oauth_token(self):
        env = {
            "ZENDESK_URL": "https://acme.zendesk.com",
            "ZENDESK_OAUTH_TOKEN": "oauth",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ZendeskSettings.from_env()
            assert settings.oauth_token == "oauth"

    def test_from_env_with_timeout(self):
        env = {
            "ZENDESK_URL": "https://acme.zendesk.com",
            "ZENDESK_OAUTH_TOKEN": "oauth",
            "ZENDESK_TIMEOUT_MS": "5000",
        }
        with patch.dict(os.environ, env, clear=True):
            assert ZendeskSettings.from_env().timeout_ms == 5000

    def test_from_env_missing_url_raises(self):
        env = {"ZENDESK_OAUTH_TOKEN": "oauth"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ZendeskConfigError):
            ZendeskSettings.from_env()

    def test_from_env_missing_credentials_raises(self):
        env = {"ZENDESK_URL": "https://acme.zendesk.com"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ZendeskConfigError):
            ZendeskSettings.from_env()

    def test_from_env_malformed_timeout_raises(self):
        """Should raise ValueError when ZENDESK_TIMEOUT_MS is not a valid integer."""
        env = {
            "ZENDESK_URL": "https://acme.zendesk.com",
            "ZENDESK_OAUTH_TOKEN": "oauth",
            "ZENDESK_TIMEOUT_MS": "soon",
        }
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            ZendeskSettings.from_env()


class TestCreateHttpClient:
    def test_sets_user_agent(self):
        client = create_http_client(base_url="https://acme.zendesk.com")
        assert client.headers["User-Agent"] == f"zendesk-sdk/{__version__}"

    def test_sets_timeout(self):
        client = create_http_client(timeout=2.5)
        assert client.timeout.read == 2.5


class TestZendeskApiClient:
    """Tests for the scoped client factory."""

    def test_base_url_without_resource_path(self, api_client):
        assert api_client.base_url_for() == "https://acme.zendesk.com/"

    def test_base_url_with_resource_path(self, api_client):
        assert (
            api_client.base_url_for("api/v2/tickets")
            == "https://acme.zendesk.com/api/v2/tickets/"
        )

    def test_base_url_tolerates_slashes(self):
        api_client = ZendeskApiClient(
            ZendeskSettings(url="https://acme.zendesk.com/", oauth_token="oauth")
        )
        assert (
            api_client.base_url_for("/api/v2/tickets/")
            == "https://acme.zendesk.com/api/v2/tickets/"
        )

    def test_timeout_from_settings(self):
        api_client = ZendeskApiClient(
            ZendeskSettings(
                url="https://acme.zendesk.com", oauth_token="oauth", timeout_ms=1500
            )
        )
        assert api_client.create_client().timeout.read == 1.5

    def test_from_env(self):
        env = {
            "ZENDESK_URL": "https://acme.zendesk.com",
            "ZENDESK_OAUTH_TOKEN": "oauth",
        }
        with patch.dict(os.environ, env, clear=True):
            api_client = ZendeskApiClient.from_env()
            assert api_client.settings.oauth_token == "oauth"

    @respx.mock
    async def test_relative_paths_resolve_under_resource_path(self, api_client):
        route = respx.get("https://acme.zendesk.com/api/v2/tickets/7").mock(
            return_value=httpx.Response(200, json={})
        )

        async with api_client.create_client("api/v2/tickets") as client:
            await client.get("7")

        assert route.called

    @respx.mock
    async def test_sends_api_token_basic_auth(self, api_client):
        route = respx.get("https://acme.zendesk.com/api/v2/tickets").mock(
            return_value=httpx.Response(200, json={})
        )

        async with api_client.create_client() as client:
            await client.get("api/v2/tickets")

        expected = base64.b64encode(b"agent@acme.com/token:secret-token").decode()
        request = route.calls.last.request
        assert request.headers["authorization"] == f"Basic {expected}"
        assert request.headers["accept"] == "application/json"

    @respx.mock
    async def test_sends_oauth_bearer(self):
        route = respx.get("https://acme.zendesk.com/api/v2/tickets").mock(
            return_value=httpx.Response(200, json={})
        )
        api_client = ZendeskApiClient(
            ZendeskSettings(url="https://acme.zendesk.com", oauth_token="oauth")
        )

        async with api_client.create_client() as client:
            await client.get("api/v2/tickets")

        assert route.calls.last.request.headers["authorization"] == "Bearer oauth"

    async def test_each_call_returns_a_new_client(self, api_client):
        first = api_client.create_client()
        second = api_client.create_client()
        try:
            assert first is not second
        finally:
            await first.aclose()
            await second.aclose()

"""Shared fixtures."""

import pytest

from zendesk_sdk._internal.http import ZendeskApiClient, ZendeskSettings

BASE_URL = "https://acme.zendesk.com"


@pytest.fixture
def settings() -> ZendeskSettings:
    return ZendeskSettings(url=BASE_URL, email="agent@acme.com", api_token="secret-token")


@pytest.fixture
def api_client(settings: ZendeskSettings) -> ZendeskApiClient:
    return ZendeskApiClient(settings)

"""Shared HTTP client configuration."""

import os
from dataclasses import dataclass

import httpx

from zendesk_sdk._version import __version__
from zendesk_sdk.exceptions import ZendeskConfigError

DEFAULT_TIMEOUT = 30.0
DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


@dataclass(frozen=True)
class ZendeskSettings:
    """Connection settings for a Zendesk account.

    Either ``email`` + ``api_token`` (API token auth) or ``oauth_token``
    must be provided.
    """

    url: str
    email: str | None = None
    api_token: str | None = None
    oauth_token: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.url:
            raise ZendeskConfigError("Zendesk URL is required")
        if not self.oauth_token and not (self.email and self.api_token):
            raise ZendeskConfigError(
                "Zendesk credentials are required: set an OAuth token "
                "or both an email and an API token"
            )

    @classmethod
    def from_env(cls) -> "ZendeskSettings":
        """Create settings from environment variables.

        Required environment variables:
            ZENDESK_URL: Account URL, e.g. https://acme.zendesk.com.

        Credentials (one of):
            ZENDESK_EMAIL + ZENDESK_API_TOKEN: API token authentication.
            ZENDESK_OAUTH_TOKEN: OAuth bearer token.

        Optional environment variables:
            ZENDESK_TIMEOUT_MS: Request timeout in milliseconds.

        Raises:
            ZendeskConfigError: If the URL or credentials are missing.
            ValueError: If ZENDESK_TIMEOUT_MS is not an integer.
        """
        timeout_ms = int(os.environ.get("ZENDESK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            url=os.environ.get("ZENDESK_URL", ""),
            email=os.environ.get("ZENDESK_EMAIL"),
            api_token=os.environ.get("ZENDESK_API_TOKEN"),
            oauth_token=os.environ.get("ZENDESK_OAUTH_TOKEN"),
            timeout_ms=timeout_ms,
        )

    @property
    def auth(self) -> httpx.Auth | None:
        """Auth flow for requests. OAuth is handled through headers instead."""
        if self.oauth_token:
            return None
        return httpx.BasicAuth(f"{self.email}/token", self.api_token or "")

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.oauth_token:
            headers["Authorization"] = f"Bearer {self.oauth_token}"
        return headers


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    auth: httpx.Auth | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        auth: Optional auth flow applied to every request.
        headers: Extra default headers.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        auth=auth,
        headers={"User-Agent": f"zendesk-sdk/{__version__}", **(headers or {})},
    )


class ZendeskApiClient:
    """Factory for HTTP clients scoped to a Zendesk account.

    Every call to :meth:`create_client` returns a fresh ``httpx.AsyncClient``;
    callers own it and should use it as an async context manager so it is
    closed on every exit path. The factory itself holds only immutable
    settings and is safe to share across concurrent operations.
    """

    def __init__(self, settings: ZendeskSettings) -> None:
        self._settings = settings

    @classmethod
    def from_env(cls) -> "ZendeskApiClient":
        """Create a client factory from environment variables."""
        return cls(ZendeskSettings.from_env())

    @property
    def settings(self) -> ZendeskSettings:
        return self._settings

    def base_url_for(self, resource_path: str | None = None) -> str:
        """Build the base URL a scoped client is rooted at."""
        base = self._settings.url.rstrip("/") + "/"
        if resource_path:
            base += resource_path.strip("/") + "/"
        return base

    def create_client(self, resource_path: str | None = None) -> httpx.AsyncClient:
        """Create an HTTP client rooted at the account URL.

        Args:
            resource_path: Optional path (e.g. ``api/v2/tickets``) that
                relative request URLs are resolved against.

        Returns:
            A new httpx.AsyncClient the caller must close.
        """
        return create_http_client(
            timeout=self._settings.timeout_ms / 1000,
            base_url=self.base_url_for(resource_path),
            auth=self._settings.auth,
            headers=self._settings.headers,
        )

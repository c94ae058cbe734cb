"""User-facing ZendeskClient.

Example usage:
    from zendesk_sdk import ZendeskClient
    from zendesk_sdk.models import Ticket, TicketComment

    client = ZendeskClient.from_env()

    ticket = await client.tickets.create(
        Ticket(subject="Printer on fire", comment=TicketComment(body="Help"))
    )
    fields = await client.ticket_fields.list()
"""

from zendesk_sdk._internal.http import ZendeskApiClient, ZendeskSettings
from zendesk_sdk.resources import (
    JobStatusesResource,
    TicketFieldsResource,
    TicketsResource,
)


class ZendeskClient:
    """User-facing client for the Zendesk REST API.

    Holds no connections; every operation opens and closes its own HTTP
    client, so a single instance can be shared by concurrent tasks.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        email: str | None = None,
        api_token: str | None = None,
        oauth_token: str | None = None,
        timeout_ms: int | None = None,
        api_client: ZendeskApiClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Account URL, e.g. https://acme.zendesk.com.
            email: Agent email for API token auth.
            api_token: API token for API token auth.
            oauth_token: OAuth bearer token (alternative to email/api_token).
            timeout_ms: Request timeout in milliseconds.
            api_client: Pre-built HTTP client factory; overrides the
                connection arguments above.

        Raises:
            ZendeskConfigError: If neither an api_client nor a URL with
                credentials is given.
        """
        if api_client is None:
            settings_kwargs = {"timeout_ms": timeout_ms} if timeout_ms is not None else {}
            api_client = ZendeskApiClient(
                ZendeskSettings(
                    url=url or "",
                    email=email,
                    api_token=api_token,
                    oauth_token=oauth_token,
                    **settings_kwargs,
                )
            )
        self._api_client = api_client
        self._tickets = TicketsResource(api_client)
        self._ticket_fields = TicketFieldsResource(api_client)
        self._job_statuses = JobStatusesResource(api_client)

    @classmethod
    def from_env(cls) -> "ZendeskClient":
        """Create a client configured from ZENDESK_* environment variables.

        See ZendeskSettings.from_env for the variables read.
        """
        return cls(api_client=ZendeskApiClient.from_env())

    @property
    def tickets(self) -> TicketsResource:
        return self._tickets

    @property
    def ticket_fields(self) -> TicketFieldsResource:
        return self._ticket_fields

    @property
    def job_statuses(self) -> JobStatusesResource:
        return self._job_statuses

"""Tickets resource.

API reference: https://developer.zendesk.com/rest_api/docs/core/tickets
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from zendesk_sdk._internal.envelopes import (
    JobStatusResponse,
    TicketRequest,
    TicketResponse,
    TicketsRequest,
    TicketsResponse,
)
from zendesk_sdk._internal.formatters import to_csv
from zendesk_sdk.exceptions import ZendeskValidationError
from zendesk_sdk.models import JobStatus, Ticket
from zendesk_sdk.resources.base import DOCS_BASE_URL, BaseResource

ORGANIZATION_TICKETS_PATH = "api/v2/organizations/{organization_id}/tickets.json"
USER_TICKETS_PATH = "api/v2/users/{user_id}/tickets"

CREATE_TICKET_DOCS_URL = f"{DOCS_BASE_URL}/tickets#create-ticket"
CREATE_MANY_TICKETS_DOCS_URL = f"{DOCS_BASE_URL}/tickets#create-many-tickets"


class TicketsResource(BaseResource):
    """Accessor for ``api/v2/tickets``."""

    resource_name = "tickets"
    resource_path = "api/v2/tickets"

    # =========================================================================
    # Listing
    # =========================================================================

    async def list(self) -> list[Ticket]:
        """List tickets in the order the API returns them."""
        with self._scope("list"):
            async with self._api_client.create_client() as client:
                response = await client.get(self.resource_path)
                self._ensure_success(response)
                return self._unwrap(response, TicketsResponse)

    async def list_for_organization(self, organization_id: int) -> list[Ticket]:
        """List tickets belonging to an organization."""
        with self._scope("list_for_organization", organization_id=organization_id):
            async with self._api_client.create_client() as client:
                response = await client.get(
                    ORGANIZATION_TICKETS_PATH.format(organization_id=organization_id)
                )
                self._ensure_success(response)
                return self._unwrap(response, TicketsResponse)

    async def list_requested_for_user(self, user_id: int) -> list[Ticket]:
        """List tickets requested by a user."""
        return await self._list_for_user("requested", user_id)

    async def list_ccd_for_user(self, user_id: int) -> list[Ticket]:
        """List tickets a user is CC'd on."""
        return await self._list_for_user("ccd", user_id)

    async def list_assigned_for_user(self, user_id: int) -> list[Ticket]:
        """List tickets assigned to a user."""
        return await self._list_for_user("assigned", user_id)

    async def _list_for_user(self, relation: str, user_id: int) -> list[Ticket]:
        with self._scope(f"list_{relation}_for_user", user_id=user_id):
            async with self._api_client.create_client(
                USER_TICKETS_PATH.format(user_id=user_id)
            ) as client:
                response = await client.get(relation)
                self._ensure_success(response)
                return self._unwrap(response, TicketsResponse)

    # =========================================================================
    # Single and multi fetch
    # =========================================================================

    async def get(self, ticket_id: int) -> Ticket | None:
        """Fetch one ticket.

        Returns:
            The ticket, or None if it does not exist.
        """
        with self._scope("get", ticket_id=ticket_id) as log:
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.get(str(ticket_id))
                if response.status_code == httpx.codes.NOT_FOUND:
                    log.info("Ticket not found", ticket_id=ticket_id)
                    return None
                self._ensure_success(response)
                return self._unwrap(response, TicketResponse)

    async def get_many(self, ticket_ids: Sequence[int]) -> list[Ticket]:
        """Fetch several tickets in one request via ``show_many``."""
        ids = to_csv(ticket_ids)
        with self._scope("get_many", ticket_ids=ids):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.get(f"show_many?ids={ids}")
                self._ensure_success(response)
                return self._unwrap(response, TicketsResponse)

    # =========================================================================
    # Create / update
    # =========================================================================

    async def create(self, ticket: Ticket) -> Ticket:
        """Create a ticket.

        Raises:
            ZendeskUnexpectedStatusError: If the API does not answer 201 Created.
        """
        with self._scope("create"):
            async with self._api_client.create_client() as client:
                response = await client.post(
                    self.resource_path, json=TicketRequest(item=ticket).to_body()
                )
                self._ensure_status(
                    response, httpx.codes.CREATED, docs_url=CREATE_TICKET_DOCS_URL
                )
                return self._unwrap(response, TicketResponse)

    async def create_many(self, tickets: Sequence[Ticket]) -> JobStatus:
        """Queue creation of several tickets.

        Returns:
            The job status of the bulk operation; poll it through
            ``client.job_statuses``.
        """
        with self._scope("create_many", count=len(tickets)):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.post(
                    "create_many", json=TicketsRequest(item=list(tickets)).to_body()
                )
                self._ensure_status(
                    response, httpx.codes.CREATED, docs_url=CREATE_MANY_TICKETS_DOCS_URL
                )
                return self._unwrap(response, JobStatusResponse)

    async def update(self, ticket: Ticket) -> Ticket | None:
        """Update a ticket identified by ``ticket.id``.

        Returns:
            The updated ticket, or None if it does not exist.
        """
        if ticket.id is None:
            raise ZendeskValidationError("Ticket id is required for update")

        with self._scope("update", ticket_id=ticket.id) as log:
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.put(
                    str(ticket.id), json=TicketRequest(item=ticket).to_body()
                )
                if response.status_code == httpx.codes.NOT_FOUND:
                    log.info("Cannot update ticket, ticket not found", ticket_id=ticket.id)
                    return None
                self._ensure_success(response)
                return self._unwrap(response, TicketResponse)

    async def update_many(self, tickets: Sequence[Ticket]) -> JobStatus:
        """Queue updates of several tickets; each ticket must carry an id."""
        missing = [index for index, ticket in enumerate(tickets) if ticket.id is None]
        if missing:
            raise ZendeskValidationError(
                f"Ticket id is required for update (missing at positions {missing})"
            )

        with self._scope("update_many", count=len(tickets)):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.put(
                    "update_many", json=TicketsRequest(item=list(tickets)).to_body()
                )
                self._ensure_success(response)
                return self._unwrap(response, JobStatusResponse)

    # =========================================================================
    # Spam / delete
    # =========================================================================

    async def mark_as_spam(self, ticket_id: int) -> None:
        """Mark a ticket as spam and suspend its requester."""
        with self._scope("mark_as_spam", ticket_id=ticket_id):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.put(f"{ticket_id}/mark_as_spam", json={})
                self._ensure_success(response)

    async def mark_many_as_spam(self, ticket_ids: Sequence[int]) -> JobStatus:
        """Mark several tickets as spam and suspend their requesters."""
        ids = to_csv(ticket_ids)
        with self._scope("mark_many_as_spam", ticket_ids=ids):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.put(f"mark_many_as_spam?ids={ids}", json={})
                self._ensure_success(response)
                return self._unwrap(response, JobStatusResponse)

    async def delete(self, ticket_id: int) -> None:
        """Delete a ticket. Any 2xx status counts as success."""
        with self._scope("delete", ticket_id=ticket_id):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.delete(str(ticket_id))
                self._ensure_success(response)

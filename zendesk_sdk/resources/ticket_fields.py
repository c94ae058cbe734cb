"""Ticket fields resource.

API reference: https://developer.zendesk.com/rest_api/docs/core/ticket_fields
"""

from __future__ import annotations

import httpx

from zendesk_sdk._internal.envelopes import (
    TicketFieldRequest,
    TicketFieldResponse,
    TicketFieldsResponse,
)
from zendesk_sdk.exceptions import ZendeskValidationError
from zendesk_sdk.models import TicketField
from zendesk_sdk.resources.base import DOCS_BASE_URL, BaseResource

CREATE_TICKET_FIELD_DOCS_URL = f"{DOCS_BASE_URL}/ticket_fields#create-ticket-field"
DELETE_TICKET_FIELD_DOCS_URL = f"{DOCS_BASE_URL}/ticket_fields#delete-ticket-field"


class TicketFieldsResource(BaseResource):
    """Accessor for ``api/v2/ticket_fields``."""

    resource_name = "ticket_fields"
    resource_path = "api/v2/ticket_fields"

    async def list(self) -> list[TicketField]:
        with self._scope("list"):
            async with self._api_client.create_client() as client:
                response = await client.get(self.resource_path)
                self._ensure_success(response)
                return self._unwrap(response, TicketFieldsResponse)

    async def get(self, ticket_field_id: int) -> TicketField | None:
        """Fetch one ticket field, or None if it does not exist."""
        with self._scope("get", ticket_field_id=ticket_field_id) as log:
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.get(str(ticket_field_id))
                if response.status_code == httpx.codes.NOT_FOUND:
                    log.info("Ticket field not found", ticket_field_id=ticket_field_id)
                    return None
                self._ensure_success(response)
                return self._unwrap(response, TicketFieldResponse)

    async def create(self, ticket_field: TicketField) -> TicketField:
        """Create a ticket field; only 201 Created counts as success."""
        with self._scope("create"):
            async with self._api_client.create_client() as client:
                response = await client.post(
                    self.resource_path,
                    json=TicketFieldRequest(item=ticket_field).to_body(),
                )
                self._ensure_status(
                    response, httpx.codes.CREATED, docs_url=CREATE_TICKET_FIELD_DOCS_URL
                )
                return self._unwrap(response, TicketFieldResponse)

    async def update(self, ticket_field: TicketField) -> TicketField | None:
        """Update the ticket field identified by ``ticket_field.id``.

        Returns:
            The updated field, or None if it does not exist.
        """
        if ticket_field.id is None:
            raise ZendeskValidationError("Ticket field id is required for update")

        with self._scope("update", ticket_field_id=ticket_field.id) as log:
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.put(
                    str(ticket_field.id),
                    json=TicketFieldRequest(item=ticket_field).to_body(),
                )
                if response.status_code == httpx.codes.NOT_FOUND:
                    log.info(
                        "Cannot update ticket field, ticket field not found",
                        ticket_field_id=ticket_field.id,
                    )
                    return None
                self._ensure_success(response)
                return self._unwrap(response, TicketFieldResponse)

    async def delete(self, ticket_field_id: int) -> None:
        """Delete a ticket field; only 204 No Content counts as success."""
        with self._scope("delete", ticket_field_id=ticket_field_id):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.delete(str(ticket_field_id))
                self._ensure_status(
                    response,
                    httpx.codes.NO_CONTENT,
                    docs_url=DELETE_TICKET_FIELD_DOCS_URL,
                )

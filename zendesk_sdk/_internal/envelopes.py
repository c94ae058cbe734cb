"""Request/response envelopes matching the Zendesk JSON convention.

Zendesk wraps every payload in a single key named after the resource:
``{"ticket": {...}}`` for one item and ``{"tickets": [...]}`` for many.
Envelopes expose the payload as ``item`` and never leave the resource layer.
Request bodies carry only the fields the caller set; an explicit None is
sent as null, which is how the API clears a field.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from zendesk_sdk.models import JobStatus, Ticket, TicketField

# =============================================================================
# Base
# =============================================================================


class Envelope(BaseModel):
    """Single-key wrapper; subclasses alias ``item`` to the resource name."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item: Any

    def to_body(self) -> dict[str, Any]:
        """Serialize to the JSON body sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# =============================================================================
# Tickets
# =============================================================================


class TicketRequest(Envelope):
    item: Ticket = Field(alias="ticket")


class TicketsRequest(Envelope):
    item: list[Ticket] = Field(alias="tickets")


class TicketResponse(Envelope):
    item: Ticket = Field(alias="ticket")


class TicketsResponse(Envelope):
    item: list[Ticket] = Field(alias="tickets")


# =============================================================================
# Ticket Fields
# =============================================================================


class TicketFieldRequest(Envelope):
    item: TicketField = Field(alias="ticket_field")


class TicketFieldResponse(Envelope):
    item: TicketField = Field(alias="ticket_field")


class TicketFieldsResponse(Envelope):
    item: list[TicketField] = Field(alias="ticket_fields")


# =============================================================================
# Job Statuses
# =============================================================================


class JobStatusResponse(Envelope):
    item: JobStatus = Field(alias="job_status")


class JobStatusesResponse(Envelope):
    item: list[JobStatus] = Field(alias="job_statuses")

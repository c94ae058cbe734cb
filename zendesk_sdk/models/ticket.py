"""Ticket models.

Field reference: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, WrapValidator

from zendesk_sdk.models.base import keep_unknown_from_response

TicketStatus = Literal["new", "open", "pending", "hold", "solved", "closed"]
TicketPriority = Literal["low", "normal", "high", "urgent"]
TicketType = Literal["problem", "incident", "question", "task"]

_Status = Annotated[TicketStatus, WrapValidator(keep_unknown_from_response)]
_Priority = Annotated[TicketPriority, WrapValidator(keep_unknown_from_response)]
_Type = Annotated[TicketType, WrapValidator(keep_unknown_from_response)]


class CustomFieldValue(BaseModel):
    """Value of a custom ticket field set on a ticket."""

    id: int
    value: Any = None


class TicketComment(BaseModel):
    """Comment attached to a ticket on create or update.

    The API never returns this on reads; comments have their own endpoint.
    """

    body: str | None = None
    html_body: str | None = None
    public: bool | None = None
    author_id: int | None = None


class Via(BaseModel):
    """How the ticket was created."""

    model_config = ConfigDict(extra="allow")

    channel: str | int | None = None
    source: dict[str, Any] | None = None


class Ticket(BaseModel):
    """Zendesk ticket.

    Every field is optional so the same model serves requests (where the
    API fills in ids and timestamps) and responses. Unknown fields returned
    by the API are preserved.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    url: str | None = None
    external_id: str | None = None
    type: _Type | None = None
    subject: str | None = None
    raw_subject: str | None = None
    description: str | None = None
    priority: _Priority | None = None
    status: _Status | None = None
    recipient: str | None = None
    requester_id: int | None = None
    submitter_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None
    collaborator_ids: list[int] | None = None
    follower_ids: list[int] | None = None
    email_cc_ids: list[int] | None = None
    problem_id: int | None = None
    has_incidents: bool | None = None
    is_public: bool | None = None
    due_at: datetime | None = None
    tags: list[str] | None = None
    custom_fields: list[CustomFieldValue] | None = None
    via: Via | None = None
    brand_id: int | None = None
    comment: TicketComment | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

"""Ticket field models.

Field reference: https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_fields/
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class CustomFieldOption(BaseModel):
    """Selectable option of a dropdown/multiselect ticket field."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str
    raw_name: str | None = None
    value: str
    default: bool | None = None


class TicketField(BaseModel):
    """Definition of a system or custom field that tickets can carry."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    url: str | None = None
    type: str | None = None
    title: str | None = None
    raw_title: str | None = None
    description: str | None = None
    raw_description: str | None = None
    agent_description: str | None = None
    position: int | None = None
    active: bool | None = None
    required: bool | None = None
    collapsed_for_agents: bool | None = None
    regexp_for_validation: str | None = None
    title_in_portal: str | None = None
    raw_title_in_portal: str | None = None
    visible_in_portal: bool | None = None
    editable_in_portal: bool | None = None
    required_in_portal: bool | None = None
    tag: str | None = None
    removable: bool | None = None
    custom_field_options: list[CustomFieldOption] | None = None
    system_field_options: list[dict[str, Any]] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

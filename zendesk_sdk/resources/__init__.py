"""Resource accessors, one per Zendesk API resource group."""

from zendesk_sdk.resources.abstractions import (
    JobStatusesResourceProtocol,
    TicketFieldsResourceProtocol,
    TicketsResourceProtocol,
)
from zendesk_sdk.resources.job_statuses import JobStatusesResource
from zendesk_sdk.resources.ticket_fields import TicketFieldsResource
from zendesk_sdk.resources.tickets import TicketsResource

__all__ = [
    "JobStatusesResource",
    "JobStatusesResourceProtocol",
    "TicketFieldsResource",
    "TicketFieldsResourceProtocol",
    "TicketsResource",
    "TicketsResourceProtocol",
]

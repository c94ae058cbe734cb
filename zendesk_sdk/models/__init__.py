"""Public models for the Zendesk API.

Example:
    from zendesk_sdk.models import Ticket, TicketComment

    ticket = Ticket(
        subject="Printer on fire",
        comment=TicketComment(body="The smoke is very colorful."),
        priority="urgent",
    )
"""

from zendesk_sdk.models.job_status import JobState, JobStatus, JobStatusResult
from zendesk_sdk.models.ticket import (
    CustomFieldValue,
    Ticket,
    TicketComment,
    TicketPriority,
    TicketStatus,
    TicketType,
    Via,
)
from zendesk_sdk.models.ticket_field import CustomFieldOption, TicketField

__all__ = [
    "CustomFieldOption",
    "CustomFieldValue",
    "JobState",
    "JobStatus",
    "JobStatusResult",
    "Ticket",
    "TicketComment",
    "TicketField",
    "TicketPriority",
    "TicketStatus",
    "TicketType",
    "Via",
]

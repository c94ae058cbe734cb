"""Tests for request/response envelopes."""

from zendesk_sdk._internal.envelopes import (
    JobStatusResponse,
    TicketFieldRequest,
    TicketRequest,
    TicketResponse,
    TicketsRequest,
    TicketsResponse,
)
from zendesk_sdk.models import Ticket, TicketComment, TicketField
from zendesk_sdk.models.base import RESPONSE_CONTEXT


class TestRequestEnvelopes:
    def test_single_ticket_wrapped_under_singular_key(self):
        body = TicketRequest(item=Ticket(subject="Hi", priority="low")).to_body()
        assert body == {"ticket": {"subject": "Hi", "priority": "low"}}

    def test_many_tickets_wrapped_under_plural_key(self):
        body = TicketsRequest(item=[Ticket(id=1, status="solved"), Ticket(id=2)]).to_body()
        assert body == {"tickets": [{"id": 1, "status": "solved"}, {"id": 2}]}

    def test_nested_unset_fields_are_dropped(self):
        ticket = Ticket(subject="Hi", comment=TicketComment(body="Hello"))
        body = TicketRequest(item=ticket).to_body()
        assert body["ticket"]["comment"] == {"body": "Hello"}

    def test_explicit_none_is_sent_as_null(self):
        """Setting a field to None clears it on the API side."""
        body = TicketRequest(item=Ticket(id=7, assignee_id=None)).to_body()
        assert body == {"ticket": {"id": 7, "assignee_id": None}}

    def test_fields_from_a_fetched_ticket_are_kept(self):
        ticket = Ticket.model_validate({"id": 7, "due_at": None, "status": "open"})
        body = TicketRequest(item=ticket).to_body()
        assert body == {"ticket": {"id": 7, "due_at": None, "status": "open"}}

    def test_ticket_field_key(self):
        body = TicketFieldRequest(item=TicketField(type="text", title="Age")).to_body()
        assert body == {"ticket_field": {"type": "text", "title": "Age"}}


class TestResponseEnvelopes:
    def test_unwraps_list_in_order(self):
        envelope = TicketsResponse.model_validate(
            {"tickets": [{"id": 3}, {"id": 1}, {"id": 2}], "count": 3, "next_page": None}
        )
        assert [ticket.id for ticket in envelope.item] == [3, 1, 2]

    def test_unwraps_job_status(self):
        envelope = JobStatusResponse.model_validate(
            {"job_status": {"id": "abc", "status": "queued"}}
        )
        assert envelope.item.id == "abc"

    def test_unknown_enumerated_values_are_kept(self):
        """Values the API adds later do not break parsing."""
        envelope = TicketResponse.model_validate(
            {"ticket": {"id": 1, "status": "escalated", "priority": "critical"}},
            context=RESPONSE_CONTEXT,
        )
        assert envelope.item.status == "escalated"
        assert envelope.item.priority == "critical"

    def test_unknown_job_state_is_kept(self):
        envelope = JobStatusResponse.model_validate(
            {"job_status": {"id": "abc", "status": "paused"}}, context=RESPONSE_CONTEXT
        )
        assert envelope.item.status == "paused"
        assert envelope.item.is_finished is False

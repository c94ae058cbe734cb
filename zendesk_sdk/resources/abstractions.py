"""Interfaces implemented by the resource accessors.

Depend on these in application code to swap in fakes under test.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from zendesk_sdk.models import JobStatus, Ticket, TicketField


class TicketsResourceProtocol(Protocol):
    async def list(self) -> list[Ticket]: ...

    async def list_for_organization(self, organization_id: int) -> list[Ticket]: ...

    async def list_requested_for_user(self, user_id: int) -> list[Ticket]: ...

    async def list_ccd_for_user(self, user_id: int) -> list[Ticket]: ...

    async def list_assigned_for_user(self, user_id: int) -> list[Ticket]: ...

    async def get(self, ticket_id: int) -> Ticket | None: ...

    async def get_many(self, ticket_ids: Sequence[int]) -> list[Ticket]: ...

    async def create(self, ticket: Ticket) -> Ticket: ...

    async def create_many(self, tickets: Sequence[Ticket]) -> JobStatus: ...

    async def update(self, ticket: Ticket) -> Ticket | None: ...

    async def update_many(self, tickets: Sequence[Ticket]) -> JobStatus: ...

    async def mark_as_spam(self, ticket_id: int) -> None: ...

    async def mark_many_as_spam(self, ticket_ids: Sequence[int]) -> JobStatus: ...

    async def delete(self, ticket_id: int) -> None: ...


class TicketFieldsResourceProtocol(Protocol):
    async def list(self) -> list[TicketField]: ...

    async def get(self, ticket_field_id: int) -> TicketField | None: ...

    async def create(self, ticket_field: TicketField) -> TicketField: ...

    async def update(self, ticket_field: TicketField) -> TicketField | None: ...

    async def delete(self, ticket_field_id: int) -> None: ...


class JobStatusesResourceProtocol(Protocol):
    async def list(self) -> list[JobStatus]: ...

    async def get(self, job_status_id: str) -> JobStatus | None: ...

    async def get_many(self, job_status_ids: Sequence[str]) -> list[JobStatus]: ...

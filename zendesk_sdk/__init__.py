"""Zendesk SDK for Python.

Typed async client for the Zendesk REST API.

Public API:
    ZendeskClient - User-facing client exposing resource accessors
    zendesk_sdk.models - Ticket, TicketField, JobStatus
    zendesk_sdk.exceptions - Error hierarchy

Internal (not for direct use):
    _internal.http - HTTP client factory
    _internal.envelopes - JSON envelope models
"""

from zendesk_sdk._version import __version__
from zendesk_sdk.client import ZendeskClient
from zendesk_sdk.exceptions import (
    ZendeskAPIError,
    ZendeskConfigError,
    ZendeskError,
    ZendeskUnexpectedStatusError,
    ZendeskValidationError,
)

__all__ = [
    "__version__",
    "ZendeskClient",
    "ZendeskError",
    "ZendeskAPIError",
    "ZendeskUnexpectedStatusError",
    "ZendeskConfigError",
    "ZendeskValidationError",
]

"""Shared plumbing for resource accessors."""

from contextlib import AbstractContextManager
from typing import Any, ClassVar, TypeVar

import httpx

from zendesk_sdk._internal.envelopes import Envelope
from zendesk_sdk._internal.http import ZendeskApiClient
from zendesk_sdk._internal.logging import operation_scope
from zendesk_sdk.exceptions import (
    ZendeskAPIError,
    ZendeskUnexpectedStatusError,
    ZendeskValidationError,
)
from zendesk_sdk.models.base import RESPONSE_CONTEXT

DOCS_BASE_URL = "https://developer.zendesk.com/rest_api/docs/core"
ERROR_BODY_MAX_LENGTH = 500

E = TypeVar("E", bound=Envelope)


class BaseResource:
    """Base class for resource accessors.

    Subclasses set ``resource_name`` (used in log context) and
    ``resource_path`` (the collection path, e.g. ``api/v2/tickets``).
    """

    resource_name: ClassVar[str]
    resource_path: ClassVar[str]

    def __init__(self, api_client: ZendeskApiClient) -> None:
        self._api_client = api_client

    def _scope(self, operation: str, **fields: Any) -> AbstractContextManager[Any]:
        return operation_scope(self.resource_name, operation, **fields)

    @staticmethod
    def _ensure_success(response: httpx.Response) -> None:
        """Raise ZendeskAPIError unless the response status is 2xx."""
        if not response.is_success:
            message = (
                f"{response.request.method} {response.request.url} "
                f"failed with status {response.status_code}"
            )
            body = response.text.strip()
            if body:
                if len(body) > ERROR_BODY_MAX_LENGTH:
                    body = body[: ERROR_BODY_MAX_LENGTH - 3] + "..."
                message += f": {body}"
            raise ZendeskAPIError(message, status_code=response.status_code)

    @staticmethod
    def _ensure_status(
        response: httpx.Response, expected: int, docs_url: str | None = None
    ) -> None:
        """Raise unless the response status is exactly ``expected``."""
        if response.status_code != expected:
            raise ZendeskUnexpectedStatusError(
                response.status_code, expected, docs_url=docs_url
            )

    @staticmethod
    def _unwrap(response: httpx.Response, envelope: type[E]) -> Any:
        """Deserialize the response body and return the enveloped payload."""
        try:
            return envelope.model_validate(
                response.json(), context=RESPONSE_CONTEXT
            ).item
        except ValueError as e:
            raise ZendeskValidationError(
                f"Could not parse {envelope.__name__} from response: {e}"
            ) from e

"""Public exceptions for the Zendesk SDK."""


class ZendeskError(Exception):
    """Base exception for all Zendesk SDK errors."""


class ZendeskAPIError(ZendeskError):
    """Error from Zendesk API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ZendeskUnexpectedStatusError(ZendeskAPIError):
    """The API answered with a status other than the one the endpoint promises.

    Raised by operations that only treat one exact status as success
    (201 for creation, 204 for strict deletes).
    """

    def __init__(
        self,
        status_code: int,
        expected_status_code: int,
        docs_url: str | None = None,
    ) -> None:
        message = (
            f"Status code retrieved was {status_code} "
            f"and not a {expected_status_code} as expected"
        )
        if docs_url:
            message += f"\nSee: {docs_url}"
        super().__init__(message, status_code=status_code)
        self.expected_status_code = expected_status_code
        self.docs_url = docs_url


class ZendeskConfigError(ZendeskError):
    """Configuration error (missing env vars, invalid config)."""


class ZendeskValidationError(ZendeskError):
    """Validation error for request/response data."""

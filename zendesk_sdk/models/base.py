"""Validation helpers shared by the public models."""

from typing import Any

from pydantic import ValidationError, ValidationInfo, ValidatorFunctionWrapHandler

# Passed as the validation context when parsing API responses.
RESPONSE_CONTEXT: dict[str, Any] = {"from_response": True}


def keep_unknown_from_response(
    value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
) -> Any:
    """Validate an enumerated field, keeping unlisted strings sent by the API.

    Models built by callers still reject values outside the Literal.
    """
    try:
        return handler(value)
    except ValidationError:
        if isinstance(value, str) and (info.context or {}).get("from_response"):
            return value
        raise

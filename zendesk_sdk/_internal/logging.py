"""Structured logging scope for resource operations."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

logger = structlog.get_logger("zendesk_sdk")


@contextmanager
def operation_scope(resource: str, operation: str, **fields: Any) -> Iterator[Any]:
    """Bind ``resource``/``operation`` to every log line emitted inside the block.

    Failures are logged and re-raised unchanged.
    """
    with structlog.contextvars.bound_contextvars(
        resource=resource, operation=operation, **fields
    ):
        log = logger.bind()
        log.debug("Zendesk operation started")
        try:
            yield log
        except Exception as e:
            log.warning("Zendesk operation failed", error=str(e))
            raise
        log.debug("Zendesk operation finished")

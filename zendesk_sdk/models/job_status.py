"""Job status models for asynchronous bulk operations.

Bulk endpoints (``create_many``, ``update_many``, ``mark_many_as_spam``)
return a job status immediately; poll it through ``client.job_statuses``
until ``status`` is ``completed``, ``failed`` or ``killed``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, WrapValidator

from zendesk_sdk.models.base import keep_unknown_from_response

JobState = Literal["queued", "working", "failed", "completed", "killed"]
TERMINAL_JOB_STATES: frozenset[str] = frozenset({"failed", "completed", "killed"})

_JobState = Annotated[JobState, WrapValidator(keep_unknown_from_response)]


class JobStatusResult(BaseModel):
    """Outcome of one item processed by a bulk job."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    index: int | None = None
    action: str | None = None
    success: bool | None = None
    status: str | None = None
    errors: str | None = None
    details: str | None = None


class JobStatus(BaseModel):
    """Handle of a bulk operation running on the Zendesk side."""

    model_config = ConfigDict(extra="allow")

    id: str
    url: str | None = None
    total: int | None = None
    progress: int | None = None
    status: _JobState | None = None
    message: str | None = None
    results: list[JobStatusResult] | None = None

    @property
    def is_finished(self) -> bool:
        return self.status in TERMINAL_JOB_STATES

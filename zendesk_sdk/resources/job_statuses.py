"""Job statuses resource, for polling bulk operations.

API reference: https://developer.zendesk.com/rest_api/docs/core/job_statuses
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from zendesk_sdk._internal.envelopes import JobStatusesResponse, JobStatusResponse
from zendesk_sdk.models import JobStatus
from zendesk_sdk.resources.base import BaseResource


class JobStatusesResource(BaseResource):
    """Accessor for ``api/v2/job_statuses``."""

    resource_name = "job_statuses"
    resource_path = "api/v2/job_statuses"

    async def list(self) -> list[JobStatus]:
        """List recent job statuses."""
        with self._scope("list"):
            async with self._api_client.create_client() as client:
                response = await client.get(self.resource_path)
                self._ensure_success(response)
                return self._unwrap(response, JobStatusesResponse)

    async def get(self, job_status_id: str) -> JobStatus | None:
        with self._scope("get", job_status_id=job_status_id) as log:
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.get(job_status_id)
                if response.status_code == httpx.codes.NOT_FOUND:
                    log.info("Job status not found", job_status_id=job_status_id)
                    return None
                self._ensure_success(response)
                return self._unwrap(response, JobStatusResponse)

    async def get_many(self, job_status_ids: Sequence[str]) -> list[JobStatus]:
        ids = ",".join(job_status_ids)
        with self._scope("get_many", job_status_ids=ids):
            async with self._api_client.create_client(self.resource_path) as client:
                response = await client.get(f"show_many?ids={ids}")
                self._ensure_success(response)
                return self._unwrap(response, JobStatusesResponse)

"""Asynchronous job request/response schemas.

RESTful Endpoints:
    POST   /jobs                 - Create and dispatch a job
    GET    /jobs/{job_id}        - Poll a job
    POST   /webhooks/job-result  - Workflow engine callback
"""

import json
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from exitplans.domain.entities.job import Job
from exitplans.domain.enums import JobStatus, JobType
from exitplans.schemas.common_schemas import CamelModel


# =============================================================================
# Request Schemas
# =============================================================================


class JobCreateRequest(CamelModel):
    """Request schema for job creation.

    POST /jobs
    """

    type: JobType = Field(..., description="Job type")
    payload: dict[str, Any] = Field(
        default_factory=dict, description="Job input forwarded to the workflow"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "VALIDATION",
                "payload": {"ideaName": "ShiftSwap", "email": "founder@example.com"},
            }
        }
    )


class JobResultCallbackRequest(CamelModel):
    """Workflow engine callback body.

    POST /webhooks/job-result

    jobId is optional at the schema level so a missing id gets the webhook's
    own 400 body instead of a validation problem.
    """

    job_id: str | None = Field(None, description="Job identifier")
    status: JobStatus | None = Field(None, description="Final or intermediate status")
    result: Any = Field(None, description="Result payload (any JSON value)")
    error: str | None = Field(None, description="Error message")

    @field_validator("result", mode="before")
    @classmethod
    def decode_serialized_result(cls, value: Any) -> Any:
        """Decode results the engine sends as a JSON string; keep other text as is."""
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value

    def resolved_status(self) -> JobStatus:
        """Explicit status, else FAILED when an error is given, else COMPLETED."""
        if self.status is not None:
            return self.status
        return JobStatus.FAILED if self.error else JobStatus.COMPLETED


# =============================================================================
# Response Schemas
# =============================================================================


class JobCreateResponse(CamelModel):
    """Response schema for job creation.

    POST /jobs
    Returns: 202 Accepted
    """

    job_id: str = Field(..., description="Job identifier for polling")
    status: JobStatus = Field(..., description="Initial status (PENDING)")


class JobResponse(CamelModel):
    """Response schema for a polled job.

    GET /jobs/{job_id}
    Returns: 200 OK
    """

    id: str
    type: JobType
    status: JobStatus
    result: Any = None
    error: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        """Convert the Job entity to the response schema."""
        return cls(
            id=job.id,
            type=job.type,
            status=job.status,
            result=job.result,
            error=job.error,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class WebhookAckResponse(CamelModel):
    """Callback acknowledgement."""

    success: bool = True

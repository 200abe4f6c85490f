"""Jobs resource router.

RESTful endpoints for asynchronous jobs processed by the workflow engine.

Endpoints:
    POST /jobs            - Create a job and dispatch it (202 Accepted)
    GET  /jobs/{job_id}   - Poll a job
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from exitplans.application.services import JobSubmissionService, JobTracker
from exitplans.core.container import get_job_submission_service, get_job_tracker
from exitplans.core.result import Failure, Success
from exitplans.domain.errors import JobNotFoundError
from exitplans.presentation.api.middleware.trace_middleware import get_trace_id
from exitplans.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from exitplans.schemas.job_schemas import (
    JobCreateRequest,
    JobCreateResponse,
    JobResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobCreateResponse,
    responses={
        202: {"description": "Job accepted", "model": JobCreateResponse},
        400: {"description": "Invalid job request", "model": ProblemDetails},
        503: {"description": "Job workflow not configured", "model": ProblemDetails},
    },
    summary="Create job",
    description="Create a job and hand it to the workflow engine. Poll GET /jobs/{id}.",
)
async def create_job(
    request: Request,
    data: JobCreateRequest,
    service: JobSubmissionService = Depends(get_job_submission_service),
) -> JobCreateResponse | JSONResponse:
    """Create and dispatch a job.

    POST /jobs → 202 Accepted

    Args:
        request: FastAPI request object.
        data: Job type and payload.
        service: Job submission service (injected).

    Returns:
        JobCreateResponse with the job id.
        JSONResponse 503 when the workflow is not configured.
    """
    result = await service.submit(data.type, data.payload)

    match result:
        case Success(value=job):
            return JobCreateResponse(job_id=job.id, status=job.status)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/{job_id}",
    response_model=JobResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Job state", "model": JobResponse},
        404: {"description": "Job not found", "model": ProblemDetails},
    },
    summary="Get job",
    description="Get the current state of a job, including its result once completed.",
)
async def get_job(
    request: Request,
    job_id: str,
    tracker: JobTracker = Depends(get_job_tracker),
) -> JobResponse | JSONResponse:
    """Poll a job.

    GET /jobs/{job_id} → 200 OK

    Args:
        request: FastAPI request object.
        job_id: Job identifier.
        tracker: Job tracker (injected).

    Returns:
        JobResponse, or JSONResponse 404 for unknown ids.
    """
    result = await tracker.get_job(job_id)

    match result:
        case Success(value=None):
            return ErrorResponseBuilder.from_domain_error(
                JobNotFoundError.for_id(job_id), request, get_trace_id()
            )
        case Success(value=job):
            return JobResponse.from_entity(job)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())

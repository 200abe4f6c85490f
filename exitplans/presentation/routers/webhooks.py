"""Inbound webhooks router.

Endpoints:
    POST /webhooks/job-result - Workflow engine reports a job result

The callback is idempotent: duplicate or late deliveries for a finished job
are acknowledged with 200 and change nothing.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from exitplans.application.services import JobTracker
from exitplans.core.container import get_job_tracker
from exitplans.core.result import Failure, Success
from exitplans.presentation.api.middleware.trace_middleware import get_trace_id
from exitplans.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from exitplans.schemas.job_schemas import JobResultCallbackRequest, WebhookAckResponse

router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


@router.post(
    "/job-result",
    status_code=status.HTTP_200_OK,
    response_model=WebhookAckResponse,
    responses={
        200: {"description": "Processed or duplicate", "model": WebhookAckResponse},
        400: {"description": "Job ID missing or status invalid"},
        404: {"description": "Unknown job", "model": ProblemDetails},
    },
    summary="Receive job result",
    description="Callback used by the workflow engine to complete or fail a job.",
)
async def receive_job_result(
    request: Request,
    data: JobResultCallbackRequest,
    tracker: JobTracker = Depends(get_job_tracker),
) -> WebhookAckResponse | JSONResponse:
    """Apply a job result.

    POST /webhooks/job-result → 200 OK

    Status resolution: explicit status, else FAILED if an error is given,
    else COMPLETED.

    Args:
        request: FastAPI request object.
        data: Callback body.
        tracker: Job tracker (injected).

    Returns:
        WebhookAckResponse on processed and duplicate callbacks.
        JSONResponse 400 {"error": "Job ID required"} when jobId is missing.
        JSONResponse 404 for unknown jobs.
    """
    if not data.job_id:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Job ID required"},
        )

    result = await tracker.update_job(
        data.job_id,
        data.resolved_status(),
        result=data.result,
        error=data.error,
    )

    match result:
        case Success():
            return WebhookAckResponse(success=True)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())

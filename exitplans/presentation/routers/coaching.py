"""Coaching router.

Endpoints:
    POST /coach-nudge - Request an emailed coaching nudge (fire-and-forget)
    POST /coach-chat  - Chat with the AI business coach
"""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from exitplans.application.services import CoachNudgeService, ProviderChainOrchestrator
from exitplans.core.container import (
    get_coach_nudge_service,
    get_coach_providers,
    get_orchestrator,
)
from exitplans.core.enums import ErrorCode
from exitplans.core.errors import ValidationError
from exitplans.core.result import Failure, Success
from exitplans.domain.protocols.provider_protocol import ProviderProtocol
from exitplans.domain.value_objects import CoachingReply, CoachingRequest
from exitplans.presentation.api.middleware.trace_middleware import get_trace_id
from exitplans.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from exitplans.schemas.coaching_schemas import (
    CoachChatRequest,
    CoachChatResponse,
    CoachNudgeRequest,
    CoachNudgeResponse,
)

router = APIRouter(tags=["Coaching"])


@router.post(
    "/coach-nudge",
    status_code=status.HTTP_200_OK,
    response_model=CoachNudgeResponse,
    responses={
        200: {"description": "Nudge scheduled", "model": CoachNudgeResponse},
        400: {"description": "Invalid roadmap snapshot", "model": ProblemDetails},
        429: {"description": "Too many nudges"},
    },
    summary="Request coaching nudge",
    description="Compute today's progress and send a coaching nudge in the background.",
)
async def request_coach_nudge(
    data: CoachNudgeRequest,
    service: CoachNudgeService = Depends(get_coach_nudge_service),
) -> CoachNudgeResponse:
    """Schedule a coaching nudge.

    POST /coach-nudge → 200 OK

    Returns without waiting for the workflow engine.

    Args:
        data: Roadmap snapshot.
        service: Coach nudge service (injected).

    Returns:
        CoachNudgeResponse with the current day and progress.
    """
    progress = service.request_nudge(data.to_nudge_request())
    return CoachNudgeResponse(
        current_day=progress.current_day,
        progress_pct=progress.progress_pct,
    )


@router.post(
    "/coach-chat",
    status_code=status.HTTP_200_OK,
    response_model=CoachChatResponse,
    responses={
        200: {"description": "Coach reply", "model": CoachChatResponse},
        400: {"description": "Message is required", "model": ProblemDetails},
        500: {"description": "No provider could reply", "model": ProblemDetails},
    },
    summary="Chat with coach",
    description="Send a message to the AI business coach with optional roadmap context.",
)
async def coach_chat(
    request: Request,
    data: CoachChatRequest,
    orchestrator: ProviderChainOrchestrator = Depends(get_orchestrator),
    providers: Sequence[ProviderProtocol[CoachingRequest, CoachingReply]] = Depends(
        get_coach_providers
    ),
) -> CoachChatResponse | JSONResponse:
    """Reply to a coaching message.

    POST /coach-chat → 200 OK

    Args:
        request: FastAPI request object.
        data: Message, context and history.
        orchestrator: Provider chain orchestrator (injected).
        providers: Coaching providers in priority order (injected).

    Returns:
        CoachChatResponse, or JSONResponse 400/500.
    """
    if not data.message.strip():
        return ErrorResponseBuilder.from_domain_error(
            ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="Message is required",
                field="message",
            ),
            request,
            get_trace_id(),
        )

    result = await orchestrator.run(
        chain_name="coach_chat",
        work=data.to_coaching_request(),
        providers=providers,
    )

    match result:
        case Success(value=chain_result):
            return CoachChatResponse(
                reply=chain_result.value.text,
                provider_used=chain_result.provider_used,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())

"""Idea validation router.

Endpoints:
    POST /validate - Validate a business idea (rate limited: 1 per 24h per IP)
"""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from exitplans.application.services import ProviderChainOrchestrator
from exitplans.core.container import get_orchestrator, get_validation_providers
from exitplans.core.result import Failure, Success
from exitplans.domain.protocols.provider_protocol import ProviderProtocol
from exitplans.domain.value_objects import IdeaAnalysis, IdeaInput
from exitplans.presentation.api.middleware.trace_middleware import get_trace_id
from exitplans.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from exitplans.schemas.validation_schemas import (
    IdeaValidationRequest,
    IdeaValidationResponse,
)

router = APIRouter(tags=["Idea Validation"])


@router.post(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_model=IdeaValidationResponse,
    responses={
        200: {"description": "Idea analysis", "model": IdeaValidationResponse},
        400: {"description": "Invalid idea fields", "model": ProblemDetails},
        429: {"description": "Daily validation quota used"},
        500: {"description": "No provider could validate the idea", "model": ProblemDetails},
    },
    summary="Validate business idea",
    description=(
        "Validate an idea through the provider chain: workflow engine, then "
        "Gemini, then the built-in heuristic scorer."
    ),
)
async def validate_idea(
    request: Request,
    data: IdeaValidationRequest,
    orchestrator: ProviderChainOrchestrator = Depends(get_orchestrator),
    providers: Sequence[ProviderProtocol[IdeaInput, IdeaAnalysis]] = Depends(
        get_validation_providers
    ),
) -> IdeaValidationResponse | JSONResponse:
    """Validate a business idea.

    POST /validate → 200 OK

    Args:
        request: FastAPI request object.
        data: Idea fields.
        orchestrator: Provider chain orchestrator (injected).
        providers: Validation providers in priority order (injected).

    Returns:
        IdeaValidationResponse on success.
        JSONResponse with a generic 500 when every provider failed.
    """
    result = await orchestrator.run(
        chain_name="idea_validation",
        work=data.to_input(),
        providers=providers,
    )

    match result:
        case Success(value=chain_result):
            return IdeaValidationResponse.from_chain_result(chain_result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())

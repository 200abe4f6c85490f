"""Error response builder for RFC 7807 Problem Details.

Converts DomainError values returned by services into RFC 7807 JSON
responses. Server-side failures (5xx) never echo the internal message; the
client gets a generic detail and the trace id.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from exitplans.core.config import settings
from exitplans.core.enums import ErrorCode
from exitplans.core.errors import DomainError, ValidationError
from exitplans.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

GENERIC_SERVER_ERROR = (
    "An unexpected error occurred. Please contact support with the trace ID."
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_JOB_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.JOB_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROVIDER_NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
}

_TITLE_BY_STATUS: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Validation Failed",
    status.HTTP_404_NOT_FOUND: "Resource Not Found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=JobNotFoundError.for_id(job_id),
        ...     request=request,
        ...     trace_id=get_trace_id(),
        ... )
        >>> response.status_code
        404
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error to convert.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)
        is_server_error = status_code >= 500 and status_code != 503

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value.replace('_', '-')}",
            title=_TITLE_BY_STATUS.get(status_code, "Error"),
            status=status_code,
            detail=GENERIC_SERVER_ERROR if is_server_error else error.message,
            instance=str(request.url.path),
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map a domain error code to an HTTP status (default 500).

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.JOB_NOT_FOUND)
            404
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

"""RFC 7807 error responses."""

from exitplans.presentation.routers.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from exitplans.presentation.routers.errors.exception_handlers import (
    register_exception_handlers,
)
from exitplans.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]

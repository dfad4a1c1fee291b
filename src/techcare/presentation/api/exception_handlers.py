"""Centralized exception handlers for the FastAPI application.

Domain exceptions and authentication errors are mapped to HTTP responses
with one error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from techcare.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from techcare.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from techcare_identity.exceptions import (
    AuthError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    InvalidTokenError,
    SubjectNotFoundError,
    UnauthenticatedError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_UPLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OR_EXPIRED_RESET_TOKEN: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.SUBJECT_NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_APPROVED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INCOMPLETE_SETUP: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TECHNICIAN_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_APPROVED: status.HTTP_409_CONFLICT,
    # 422 Unprocessable Entity - business rule violations
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 503 Service Unavailable - external service errors
    ErrorCode.STORAGE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Most specific classes first: lookup walks this in order with isinstance
AUTH_ERROR_CODES: tuple[tuple[type[AuthError], ErrorCode], ...] = (
    (UnauthenticatedError, ErrorCode.UNAUTHENTICATED),
    (InvalidTokenError, ErrorCode.INVALID_TOKEN),
    (SubjectNotFoundError, ErrorCode.SUBJECT_NOT_FOUND),
    (InvalidCredentialsError, ErrorCode.INVALID_CREDENTIALS),
    (ForbiddenError, ErrorCode.FORBIDDEN),
    (InvalidResetTokenError, ErrorCode.INVALID_OR_EXPIRED_RESET_TOKEN),
    (WeakPasswordError, ErrorCode.WEAK_PASSWORD),
)


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, BusinessRuleViolation):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, ExternalServiceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE

    return status.HTTP_400_BAD_REQUEST


def get_auth_error_code(exc: AuthError) -> ErrorCode:
    for error_class, code in AUTH_ERROR_CODES:
        if isinstance(exc, error_class):
            return code
    return ErrorCode.UNAUTHENTICATED


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def auth_error_response(exc: AuthError) -> JSONResponse:
    """Build the response for an authentication or authorization error."""
    code = get_auth_error_code(exc)
    status_code = ERROR_CODE_TO_STATUS[code]
    headers = BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
    return _create_error_response(
        status_code=status_code,
        message=exc.message,
        code=code.value,
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle authentication and authorization failures.

        Credential failures are logged at info level since they are
        expected traffic, not application faults.
        """
        logger.info(
            "Auth error on %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            type(exc).__name__,
        )
        return auth_error_response(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )

"""Identity and authentication exceptions.

Token and credential errors come from techcare_auth. The errors defined
here cover resolving a token back to a principal, role checks, and the
customer password reset flow.
"""

from techcare_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

LOGGED_OUT_MESSAGE = "You have been logged out. Please log in again."


class UnauthenticatedError(AuthError):
    """Raised when a protected operation is called without a token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class SubjectNotFoundError(AuthError):
    """Raised when a valid token no longer resolves to a principal."""

    def __init__(self, message: str = LOGGED_OUT_MESSAGE):
        super().__init__(message)


class ForbiddenError(AuthError):
    """Raised when the caller's roles don't allow the operation."""

    def __init__(self, message: str = "You do not have access to this resource"):
        super().__init__(message)


class InvalidResetTokenError(AuthError):
    """Raised when a password reset token is unknown or expired."""

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message)


__all__ = [
    "LOGGED_OUT_MESSAGE",
    "AuthError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidTokenError",
    "SubjectNotFoundError",
    "UnauthenticatedError",
    "WeakPasswordError",
]

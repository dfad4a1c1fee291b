"""Authentication exceptions.

These exceptions are raised by the techcare_auth package and by the
identity services built on top of it. The API layer maps each of them to a
stable error code and HTTP status.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a bearer token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect.

    The same message is used for an unknown account and a wrong password.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)

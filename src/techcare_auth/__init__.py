"""TechCare Auth - Generic authentication infrastructure.

This package is independent of the TechCare principal model. It handles:
- Password hashing (bcrypt) and one-time password generation
- Bearer token issuance and parsing (PyJWT)

Usage:
    from techcare_auth import JWTService, PasswordHashingService

    jwt_service = JWTService(secret_key="...")
    token = jwt_service.issue("a@x.com", ["CUSTOMER"])
"""

from techcare_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from techcare_auth.schemas import TokenPayload
from techcare_auth.services import (
    BEARER_PREFIX,
    JWTService,
    PasswordHashingService,
    generate_password,
)

__all__ = [
    # Services
    "BEARER_PREFIX",
    "JWTService",
    "PasswordHashingService",
    "generate_password",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
]

"""Authentication services.

Provides password hashing and bearer token management.
"""

from techcare_auth.services.jwt_service import BEARER_PREFIX, JWTService
from techcare_auth.services.password_service import (
    PasswordHashingService,
    generate_password,
)

__all__ = [
    "BEARER_PREFIX",
    "JWTService",
    "PasswordHashingService",
    "generate_password",
]

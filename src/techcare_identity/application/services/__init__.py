from techcare_identity.application.services.approval_service import ApprovalService
from techcare_identity.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)
from techcare_identity.application.services.customer_profile_service import (
    CustomerProfileService,
)
from techcare_identity.application.services.password_reset_service import (
    PasswordResetService,
    hash_reset_token,
)

__all__ = [
    "ApprovalService",
    "AuthenticationService",
    "CustomerProfileService",
    "LoginResult",
    "PasswordResetService",
    "hash_reset_token",
]

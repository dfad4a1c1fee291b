"""TechCare Identity - Principals, authentication and account workflows.

This package handles all identity-related concerns:
- Admin, Customer and Technician principals and their stores
- Login, token resolution, logout and password change
- The technician approval workflow
- Customer password reset and profile self-service
- Notifications (email) and file storage for uploads
"""

from techcare_identity.application.commands import (
    SignUpAdminCommand,
    SignUpCustomerCommand,
    SignUpTechnicianCommand,
)
from techcare_identity.application.context import AuthContext
from techcare_identity.application.services import (
    ApprovalService,
    AuthenticationService,
    CustomerProfileService,
    LoginResult,
    PasswordResetService,
)
from techcare_identity.domain.principal import (
    Admin,
    Customer,
    Principal,
    PrincipalRole,
    Technician,
    TechnicianStatus,
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

__all__ = [
    # Domain
    "Admin",
    "Customer",
    "Principal",
    "PrincipalRole",
    "Technician",
    "TechnicianStatus",
    # Application
    "ApprovalService",
    "AuthContext",
    "AuthenticationService",
    "CustomerProfileService",
    "LoginResult",
    "PasswordResetService",
    "SignUpAdminCommand",
    "SignUpCustomerCommand",
    "SignUpTechnicianCommand",
    # Exceptions
    "AuthError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidTokenError",
    "SubjectNotFoundError",
    "UnauthenticatedError",
    "WeakPasswordError",
]

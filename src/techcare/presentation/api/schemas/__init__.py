"""Pydantic request/response models for the API."""

from techcare.presentation.api.schemas.admin import (
    AdminResponse,
    AdminSignupRequest,
    TechnicianSummaryResponse,
)
from techcare.presentation.api.schemas.common import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from techcare.presentation.api.schemas.customer import (
    CustomerResponse,
    CustomerSignupRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from techcare.presentation.api.schemas.technician import TechnicianResponse

__all__ = [
    "AdminResponse",
    "AdminSignupRequest",
    "ChangePasswordRequest",
    "CustomerResponse",
    "CustomerSignupRequest",
    "ForgotPasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ResetPasswordRequest",
    "TechnicianResponse",
    "TechnicianSummaryResponse",
]

"""Customer schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from techcare.presentation.api.schemas.common import RWANDAN_PHONE_REGEX


class CustomerSignupRequest(BaseModel):
    """Request schema for customer registration."""

    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone_number: str = Field(..., pattern=RWANDAN_PHONE_REGEX)
    password: str = Field(..., min_length=8, max_length=128)
    image: Optional[str] = Field(default=None, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Jean Habimana",
                "email": "jean@example.com",
                "phone_number": "0781234567",
                "password": "securepassword123",
            },
        },
    )


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset email."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "ResetPasswordRequest":
        if self.new_password != self.confirm_password:
            msg = "New password and confirm password do not match"
            raise ValueError(msg)
        return self


class CustomerResponse(BaseModel):
    """Customer profile without credentials or reset state."""

    id: UUID
    full_name: str
    email: str
    phone_number: str
    image: Optional[str] = None
    role: str
    created_at: datetime

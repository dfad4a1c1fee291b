"""Admin schemas for request/response models."""

import re
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from techcare.presentation.api.schemas.common import RWANDAN_PHONE_REGEX

ADMIN_PASSWORD_MIN_LENGTH = 10
ADMIN_PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+$",
)


class AdminSignupRequest(BaseModel):
    """Request schema for admin registration.

    Admin passwords are stricter than the other kinds: at least 10
    characters with upper and lower case letters, a digit and one of
    ``@$!%*?&``.
    """

    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone_number: str = Field(..., pattern=RWANDAN_PHONE_REGEX)
    password: str = Field(..., min_length=ADMIN_PASSWORD_MIN_LENGTH, max_length=128)
    image: Optional[str] = Field(default=None, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Alice Uwase",
                "email": "alice@techcare.rw",
                "phone_number": "+250781234567",
                "password": "Str0ng!Passw0rd",
            },
        },
    )

    @field_validator("password")
    @classmethod
    def password_complexity(cls, value: str) -> str:
        if not ADMIN_PASSWORD_PATTERN.match(value):
            msg = (
                "Admin password must contain at least one uppercase letter, "
                "one lowercase letter, one digit and one special character (@$!%*?&)"
            )
            raise ValueError(msg)
        return value


class AdminResponse(BaseModel):
    """Admin profile without credentials."""

    id: UUID
    full_name: str
    email: str
    phone_number: str
    image: Optional[str] = None
    role: str
    created_at: datetime


class TechnicianSummaryResponse(BaseModel):
    """Technician as seen by an admin reviewing applications."""

    id: UUID
    full_name: str
    email: str
    phone_number: str
    age: int
    gender: str
    specialization: str
    rating: float
    image_url: Optional[str] = None
    certification_url: Optional[str] = None
    status: str
    is_available: bool
    created_at: datetime

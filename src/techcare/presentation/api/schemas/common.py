"""Request/response models shared by all principal kinds."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# +250XXXXXXXXX or 0XXXXXXXXX
RWANDAN_PHONE_REGEX = r"^(\+250|0)[0-9]{9}$"


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int
    role: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
                "role": "CUSTOMER",
            },
        },
    )


class MessageResponse(BaseModel):
    message: str


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the caller's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)

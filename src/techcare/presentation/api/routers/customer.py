"""Customer router: account, password reset and profile endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, File, Form, UploadFile, status

from techcare.presentation.api.dependencies import (
    CurrentCustomer,
    CustomerAuth,
    CustomerAuthService,
    CustomerProfileServiceDep,
    DBSession,
    PasswordResetServiceDep,
    SignUpCustomer,
)
from techcare.presentation.api.files import read_optional_upload, read_upload
from techcare.presentation.api.schemas import (
    CustomerResponse,
    CustomerSignupRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
)
from techcare_identity import Customer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customer", tags=["customer"])

FORGOT_PASSWORD_MESSAGE = (
    "If an account exists with this email, you will receive a password reset link"
)


def _customer_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        full_name=customer.full_name,
        email=customer.email,
        phone_number=customer.phone_number,
        image=customer.image,
        role=customer.role.value,
        created_at=customer.created_at,
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
    responses={
        201: {"description": "Customer created"},
        409: {"description": "Email already registered"},
        422: {"description": "Validation error"},
    },
)
async def signup(
    request: CustomerSignupRequest,
    command: SignUpCustomer,
    session: DBSession,
) -> CustomerResponse:
    customer = await command.execute(
        full_name=request.full_name,
        email=request.email,
        phone_number=request.phone_number,
        password=request.password,
        image=request.image,
    )
    await session.commit()
    return _customer_response(customer)


@router.post(
    "/login",
    summary="Log in as customer",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: CustomerAuthService,
) -> LoginResponse:
    result = await auth_service.login(request.email, request.password)
    return LoginResponse(
        access_token=result.access_token,
        expires_in=result.expires_in,
        role=result.principal.role.value,
    )


@router.post(
    "/forgot-password",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request a password reset email",
    responses={
        202: {"description": "Reset email sent if the account exists"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: PasswordResetServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Always answers the same way so account existence isn't revealed."""
    await reset_service.request_reset(request.email)
    await session.commit()
    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post(
    "/reset-password",
    summary="Set a new password with a reset token",
    responses={
        200: {"description": "Password reset"},
        400: {"description": "Invalid or expired token"},
        422: {"description": "Passwords do not match"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: PasswordResetServiceDep,
    session: DBSession,
) -> MessageResponse:
    await reset_service.complete_reset(request.token, request.new_password)
    await session.commit()
    return MessageResponse(message="Password has been reset successfully")


@router.get(
    "/profile",
    summary="Get the current customer",
    responses={401: {"description": "Not authenticated or logged out"}},
)
async def profile(customer: CurrentCustomer) -> CustomerResponse:
    return _customer_response(customer)


@router.post("/logout", summary="Log out")
async def logout(
    auth: CustomerAuth,
    auth_service: CustomerAuthService,
) -> MessageResponse:
    await auth_service.logout(auth.token)
    return MessageResponse(message="Logged out successfully")


@router.post(
    "/upload-image",
    summary="Upload a profile image",
    responses={
        200: {"description": "Image stored"},
        400: {"description": "Empty, oversized or non-image file"},
    },
)
async def upload_image(
    customer: CurrentCustomer,
    image: Annotated[UploadFile, File()],
    profile_service: CustomerProfileServiceDep,
    session: DBSession,
) -> CustomerResponse:
    customer = await profile_service.upload_image(customer, await read_upload(image))
    await session.commit()
    return _customer_response(customer)


@router.put(
    "/update-profile",
    summary="Update name, phone number and image",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid field or upload"},
    },
)
async def update_profile(
    customer: CurrentCustomer,
    profile_service: CustomerProfileServiceDep,
    session: DBSession,
    full_name: Annotated[Optional[str], Form(max_length=100)] = None,
    phone_number: Annotated[Optional[str], Form()] = None,
    image: Annotated[Optional[UploadFile], File()] = None,
) -> CustomerResponse:
    """Blank or missing fields are left unchanged."""
    customer = await profile_service.update_profile(
        customer,
        full_name=full_name,
        phone_number=phone_number,
        image=await read_optional_upload(image),
    )
    await session.commit()
    return _customer_response(customer)

"""Technician router: application, login and self-service endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile, status

from techcare.presentation.api.dependencies import (
    CurrentTechnician,
    DBSession,
    SignUpTechnician,
    TechnicianAuth,
    TechnicianAuthService,
)
from techcare.presentation.api.files import read_upload
from techcare.presentation.api.schemas import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    TechnicianResponse,
)
from techcare_identity import Technician

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/technician", tags=["technician"])


def _technician_response(technician: Technician) -> TechnicianResponse:
    return TechnicianResponse(
        id=technician.id,
        full_name=technician.full_name,
        email=technician.email,
        phone_number=technician.phone_number,
        age=technician.age,
        gender=technician.gender,
        specialization=technician.specialization,
        rating=technician.rating,
        image_url=technician.image_url,
        certification_url=technician.certification_url,
        status=technician.status.value,
        is_available=technician.is_available,
        role=technician.role.value,
        created_at=technician.created_at,
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Apply as a technician",
    responses={
        201: {"description": "Application received, pending admin review"},
        400: {"description": "Invalid field or upload"},
        409: {"description": "Email already registered"},
    },
)
async def signup(  # NOQA: PLR0913
    command: SignUpTechnician,
    session: DBSession,
    full_name: Annotated[str, Form(min_length=2, max_length=100)],
    email: Annotated[str, Form(max_length=255)],
    phone_number: Annotated[str, Form()],
    age: Annotated[int, Form()],
    gender: Annotated[str, Form(min_length=1, max_length=20)],
    specialization: Annotated[str, Form(min_length=1, max_length=100)],
    image: Annotated[UploadFile, File()],
    certification: Annotated[UploadFile, File()],
) -> TechnicianResponse:
    """Create a PENDING technician. No password is set until approval."""
    technician = await command.execute(
        full_name=full_name,
        email=email,
        phone_number=phone_number,
        age=age,
        gender=gender,
        specialization=specialization,
        image=await read_upload(image),
        certification=await read_upload(certification),
    )
    await session.commit()
    return _technician_response(technician)


@router.post(
    "/login",
    summary="Log in as technician",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Application not approved or setup incomplete"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: TechnicianAuthService,
) -> LoginResponse:
    result = await auth_service.login(request.email, request.password)
    return LoginResponse(
        access_token=result.access_token,
        expires_in=result.expires_in,
        role=result.principal.role.value,
    )


@router.get(
    "/profile",
    summary="Get the current technician",
    responses={401: {"description": "Not authenticated or logged out"}},
)
async def profile(technician: CurrentTechnician) -> TechnicianResponse:
    return _technician_response(technician)


@router.post("/logout", summary="Log out")
async def logout(
    auth: TechnicianAuth,
    auth_service: TechnicianAuthService,
) -> MessageResponse:
    await auth_service.logout(auth.token)
    return MessageResponse(message="Logged out successfully")


@router.post(
    "/change-password",
    summary="Change the generated password",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password is incorrect"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    auth: TechnicianAuth,
    auth_service: TechnicianAuthService,
    session: DBSession,
) -> MessageResponse:
    await auth_service.change_password(
        auth.token,
        request.current_password,
        request.new_password,
    )
    await session.commit()
    return MessageResponse(message="Password changed successfully")

"""Admin router: account endpoints and the technician approval workflow."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from techcare.presentation.api.dependencies import (
    AdminAuth,
    AdminAuthService,
    ApprovalServiceDep,
    CurrentAdmin,
    DBSession,
    SignUpAdmin,
)
from techcare.presentation.api.schemas import (
    AdminResponse,
    AdminSignupRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    TechnicianSummaryResponse,
)
from techcare_identity import Admin, Technician

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _admin_response(admin: Admin) -> AdminResponse:
    return AdminResponse(
        id=admin.id,
        full_name=admin.full_name,
        email=admin.email,
        phone_number=admin.phone_number,
        image=admin.image,
        role=admin.role.value,
        created_at=admin.created_at,
    )


def technician_summary(technician: Technician) -> TechnicianSummaryResponse:
    return TechnicianSummaryResponse(
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
        created_at=technician.created_at,
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register an admin",
    responses={
        201: {"description": "Admin created"},
        409: {"description": "Email or phone number already registered"},
        422: {"description": "Validation error"},
    },
)
async def signup(
    request: AdminSignupRequest,
    command: SignUpAdmin,
    session: DBSession,
) -> AdminResponse:
    admin = await command.execute(
        full_name=request.full_name,
        email=request.email,
        phone_number=request.phone_number,
        password=request.password,
        image=request.image,
    )
    await session.commit()
    return _admin_response(admin)


@router.post(
    "/login",
    summary="Log in as admin",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(request: LoginRequest, auth_service: AdminAuthService) -> LoginResponse:
    result = await auth_service.login(request.email, request.password)
    return LoginResponse(
        access_token=result.access_token,
        expires_in=result.expires_in,
        role=result.principal.role.value,
    )


@router.get(
    "/profile",
    summary="Get the current admin",
    responses={401: {"description": "Not authenticated or logged out"}},
)
async def profile(admin: CurrentAdmin) -> AdminResponse:
    return _admin_response(admin)


@router.post("/logout", summary="Log out")
async def logout(auth: AdminAuth, auth_service: AdminAuthService) -> MessageResponse:
    await auth_service.logout(auth.token)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/technicians",
    summary="List all technicians",
    responses={403: {"description": "Admin access required"}},
)
async def list_technicians(
    _admin: AdminAuth,
    approval_service: ApprovalServiceDep,
) -> list[TechnicianSummaryResponse]:
    technicians = await approval_service.all_technicians()
    return [technician_summary(t) for t in technicians]


@router.get(
    "/technicians/pending",
    summary="List technician applications awaiting review",
    responses={403: {"description": "Admin access required"}},
)
async def list_pending_technicians(
    _admin: AdminAuth,
    approval_service: ApprovalServiceDep,
) -> list[TechnicianSummaryResponse]:
    technicians = await approval_service.pending_technicians()
    return [technician_summary(t) for t in technicians]


@router.post(
    "/technicians/{technician_id}/approve",
    summary="Approve a technician and email generated credentials",
    responses={
        200: {"description": "Technician approved"},
        404: {"description": "Technician not found"},
        409: {"description": "Technician already approved"},
    },
)
async def approve_technician(
    technician_id: UUID,
    auth: AdminAuth,
    approval_service: ApprovalServiceDep,
    session: DBSession,
) -> TechnicianSummaryResponse:
    technician = await approval_service.approve(technician_id)
    await session.commit()
    logger.info("Admin %s approved technician %s", auth.subject_email, technician_id)
    return technician_summary(technician)


@router.post(
    "/technicians/{technician_id}/reject",
    summary="Reject a technician application",
    responses={
        200: {"description": "Technician rejected"},
        404: {"description": "Technician not found"},
    },
)
async def reject_technician(
    technician_id: UUID,
    auth: AdminAuth,
    approval_service: ApprovalServiceDep,
    session: DBSession,
    reason: Optional[str] = Query(default=None, max_length=500),
) -> TechnicianSummaryResponse:
    technician = await approval_service.reject(technician_id, reason)
    await session.commit()
    logger.info("Admin %s rejected technician %s", auth.subject_email, technician_id)
    return technician_summary(technician)

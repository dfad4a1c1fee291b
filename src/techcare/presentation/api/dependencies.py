"""FastAPI dependency injection for the TechCare API.

Provides dependencies for:
- Database sessions
- The caller's auth context and role checks
- The current Admin, Customer or Technician
- Service and command instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from techcare.presentation.api.config import get_api_settings
from techcare_auth import JWTService, PasswordHashingService
from techcare_config.settings import Settings, get_settings
from techcare_identity import (
    Admin,
    ApprovalService,
    AuthContext,
    AuthenticationService,
    Customer,
    CustomerProfileService,
    PasswordResetService,
    PrincipalRole,
    SignUpAdminCommand,
    SignUpCustomerCommand,
    SignUpTechnicianCommand,
    Technician,
)
from techcare_identity.exceptions import ForbiddenError, UnauthenticatedError
from techcare_identity.infrastructure.email import EmailNotifier, Notifier
from techcare_identity.infrastructure.persistence.sqlalchemy import (
    AdminRepositorySQLAlchemy,
    Base,
    CustomerRepositorySQLAlchemy,
    TechnicianRepositorySQLAlchemy,
)
from techcare_identity.infrastructure.storage import (
    BlobStore,
    LocalBlobStore,
    SupabaseBlobStore,
    UploadPolicy,
)

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Routers commit explicitly; anything left uncommitted when the request
    ends is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables() -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    engine = get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


# -----------------------------------------------------------------------------
# Shared Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_notifier(settings: SettingsDep) -> Notifier:
    return EmailNotifier(settings)


def get_upload_policy(settings: SettingsDep) -> UploadPolicy:
    return UploadPolicy(max_bytes=settings.max_upload_bytes)


def build_blob_store(settings: Settings) -> BlobStore:
    """Create the blob store selected by ``storage_backend``."""
    policy = UploadPolicy(max_bytes=settings.max_upload_bytes)
    if settings.storage_backend == "supabase":
        service_key = settings.supabase_service_key
        return SupabaseBlobStore(
            base_url=settings.supabase_url,
            service_key=service_key.get_secret_value() if service_key else "",
            bucket=settings.supabase_bucket,
            policy=policy,
        )
    return LocalBlobStore(
        root=settings.upload_dir,
        public_base_url=settings.public_base_url,
        policy=policy,
    )


def get_blob_store(request: Request) -> BlobStore:
    """Return the process-wide blob store created by ``create_app``."""
    return request.app.state.blob_store


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
NotifierDep = Annotated[Notifier, Depends(get_notifier)]
UploadPolicyDep = Annotated[UploadPolicy, Depends(get_upload_policy)]
BlobStoreDep = Annotated[BlobStore, Depends(get_blob_store)]


# -----------------------------------------------------------------------------
# Authentication Services (one per principal kind)
# -----------------------------------------------------------------------------


def get_admin_auth_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService[Admin]:
    return AuthenticationService(
        repository=AdminRepositorySQLAlchemy(session),
        role=PrincipalRole.ADMIN,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_customer_auth_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService[Customer]:
    return AuthenticationService(
        repository=CustomerRepositorySQLAlchemy(session),
        role=PrincipalRole.CUSTOMER,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_technician_auth_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService[Technician]:
    return AuthenticationService(
        repository=TechnicianRepositorySQLAlchemy(session),
        role=PrincipalRole.TECHNICIAN,
        password_service=password_service,
        jwt_service=jwt_service,
    )


AdminAuthService = Annotated[
    AuthenticationService[Admin],
    Depends(get_admin_auth_service),
]
CustomerAuthService = Annotated[
    AuthenticationService[Customer],
    Depends(get_customer_auth_service),
]
TechnicianAuthService = Annotated[
    AuthenticationService[Technician],
    Depends(get_technician_auth_service),
]


# -----------------------------------------------------------------------------
# Auth Context and Role Checks
# -----------------------------------------------------------------------------


def get_auth_context(request: Request) -> AuthContext:
    """
    Read the caller identity the access gate attached to the request.

    Raises
    ------
    UnauthenticatedError
        If the request was not authenticated
    """
    auth = getattr(request.state, "auth", None)
    if auth is None:
        raise UnauthenticatedError
    return auth


def require_role(role: PrincipalRole) -> Callable[[AuthContext], AuthContext]:
    """Build a dependency that passes only callers holding ``role``."""

    def check_role(
        auth: AuthContext = Depends(get_auth_context),
    ) -> AuthContext:
        if not auth.has_role(role):
            logger.warning("%s denied: requires %s", auth, role.value)
            raise ForbiddenError
        return auth

    return check_role


AdminAuth = Annotated[AuthContext, Depends(require_role(PrincipalRole.ADMIN))]
CustomerAuth = Annotated[AuthContext, Depends(require_role(PrincipalRole.CUSTOMER))]
TechnicianAuth = Annotated[AuthContext, Depends(require_role(PrincipalRole.TECHNICIAN))]


# -----------------------------------------------------------------------------
# Current Principal
# -----------------------------------------------------------------------------


async def get_current_admin(auth: AdminAuth, service: AdminAuthService) -> Admin:
    return await service.who_am_i(auth.token)


async def get_current_customer(
    auth: CustomerAuth,
    service: CustomerAuthService,
) -> Customer:
    return await service.who_am_i(auth.token)


async def get_current_technician(
    auth: TechnicianAuth,
    service: TechnicianAuthService,
) -> Technician:
    return await service.who_am_i(auth.token)


CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
CurrentCustomer = Annotated[Customer, Depends(get_current_customer)]
CurrentTechnician = Annotated[Technician, Depends(get_current_technician)]


# -----------------------------------------------------------------------------
# Workflows
# -----------------------------------------------------------------------------


def get_approval_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    notifier: NotifierDep,
) -> ApprovalService:
    return ApprovalService(
        technician_repository=TechnicianRepositorySQLAlchemy(session),
        password_service=password_service,
        notifier=notifier,
    )


def get_password_reset_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    notifier: NotifierDep,
    settings: SettingsDep,
) -> PasswordResetService:
    return PasswordResetService(
        customer_repository=CustomerRepositorySQLAlchemy(session),
        password_service=password_service,
        notifier=notifier,
        frontend_base_url=settings.frontend_base_url,
        token_expiry_hours=settings.password_reset_token_expire_hours,
    )


def get_customer_profile_service(
    session: DBSession,
    blob_store: BlobStoreDep,
) -> CustomerProfileService:
    return CustomerProfileService(
        customer_repository=CustomerRepositorySQLAlchemy(session),
        blob_store=blob_store,
    )


def get_sign_up_admin_command(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> SignUpAdminCommand:
    return SignUpAdminCommand(
        admin_repository=AdminRepositorySQLAlchemy(session),
        password_service=password_service,
    )


def get_sign_up_customer_command(
    session: DBSession,
    password_service: PasswordServiceDep,
    notifier: NotifierDep,
) -> SignUpCustomerCommand:
    return SignUpCustomerCommand(
        customer_repository=CustomerRepositorySQLAlchemy(session),
        password_service=password_service,
        notifier=notifier,
    )


def get_sign_up_technician_command(
    session: DBSession,
    blob_store: BlobStoreDep,
    upload_policy: UploadPolicyDep,
    notifier: NotifierDep,
) -> SignUpTechnicianCommand:
    return SignUpTechnicianCommand(
        technician_repository=TechnicianRepositorySQLAlchemy(session),
        blob_store=blob_store,
        upload_policy=upload_policy,
        notifier=notifier,
    )


ApprovalServiceDep = Annotated[ApprovalService, Depends(get_approval_service)]
PasswordResetServiceDep = Annotated[
    PasswordResetService,
    Depends(get_password_reset_service),
]
CustomerProfileServiceDep = Annotated[
    CustomerProfileService,
    Depends(get_customer_profile_service),
]
SignUpAdmin = Annotated[SignUpAdminCommand, Depends(get_sign_up_admin_command)]
SignUpCustomer = Annotated[SignUpCustomerCommand, Depends(get_sign_up_customer_command)]
SignUpTechnician = Annotated[
    SignUpTechnicianCommand,
    Depends(get_sign_up_technician_command),
]

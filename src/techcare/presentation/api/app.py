"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check and uploaded files remain unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from techcare.presentation.api.access_gate import AccessGateMiddleware
from techcare.presentation.api.config import (
    API_V1_PREFIX,
    API_VERSION,
    get_api_settings,
)
from techcare.presentation.api.dependencies import build_blob_store, get_engine
from techcare.presentation.api.exception_handlers import setup_exception_handlers
from techcare.presentation.api.routers import (
    admin_router,
    customer_router,
    technician_router,
    uploads_router,
)
from techcare_auth import JWTService
from techcare_config.settings import Settings, get_settings
from techcare_identity.infrastructure.persistence.sqlalchemy import Base
from techcare_identity.infrastructure.storage import SupabaseBlobStore


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names. The level for the
    techcare packages comes from settings; noisy third-party libraries are
    held at WARNING.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("techcare", "techcare_auth", "techcare_identity"):
        logging.getLogger(name).setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "admin",
        "description": """Admin accounts and technician review.

**Approval workflow:**
- New technicians start PENDING and cannot log in
- Approving generates a one-time password and emails it to the technician
- Rejecting is allowed repeatedly and never sets a password
""",
    },
    {
        "name": "customer",
        "description": """Customer accounts, profile and password reset.

**Password reset:**
- `forgot-password` always answers the same way
- Reset tokens are single-use and expire
""",
    },
    {
        "name": "technician",
        "description": """Technician applications and self-service.

Signup is a multipart form carrying a profile image and a certification
document. Login works only once an admin has approved the application.
""",
    },
    {
        "name": "uploads",
        "description": "Files stored by the local blob store.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting TechCare API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down TechCare API...")
    blob_store = app.state.blob_store
    if isinstance(blob_store, SupabaseBlobStore):
        await blob_store.close()
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()
    v1_router.include_router(admin_router)
    v1_router.include_router(customer_router)
    v1_router.include_router(technician_router)
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, every
        dependency reading API settings receives these instead.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Account backend for **TechCare**: admin, customer and technician "
            "accounts with an **approval workflow** for technicians."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.dependency_overrides[get_api_settings] = lambda: settings
    app.state.blob_store = build_blob_store(settings)

    app.add_middleware(
        AccessGateMiddleware,
        jwt_service=JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            access_token_expire_hours=settings.jwt_access_token_expire_hours,
        ),
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)
    app.include_router(uploads_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "admin": f"{API_V1_PREFIX}/admin",
                "customer": f"{API_V1_PREFIX}/customer",
                "technician": f"{API_V1_PREFIX}/technician",
                "uploads": "/uploads",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()

"""API routers."""

from techcare.presentation.api.routers.admin import router as admin_router
from techcare.presentation.api.routers.customer import router as customer_router
from techcare.presentation.api.routers.technician import router as technician_router
from techcare.presentation.api.routers.uploads import router as uploads_router

__all__ = [
    "admin_router",
    "customer_router",
    "technician_router",
    "uploads_router",
]

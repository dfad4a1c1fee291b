# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for principals."""

from techcare_identity.infrastructure.persistence.sqlalchemy.models.admin_model import (
    AdminModel,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.models.customer_model import (
    CustomerModel,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.models.technician_model import (
    TechnicianModel,
)

__all__ = [
    "AdminModel",
    "CustomerModel",
    "TechnicianModel",
]

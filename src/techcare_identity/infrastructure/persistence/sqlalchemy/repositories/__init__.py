# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations."""

from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.admin_repository import (
    AdminRepositorySQLAlchemy,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.customer_repository import (
    CustomerRepositorySQLAlchemy,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.technician_repository import (
    TechnicianRepositorySQLAlchemy,
)

__all__ = [
    "AdminRepositorySQLAlchemy",
    "CustomerRepositorySQLAlchemy",
    "TechnicianRepositorySQLAlchemy",
]

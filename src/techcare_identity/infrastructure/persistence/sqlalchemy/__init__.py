"""SQLAlchemy implementation for techcare_identity persistence.

Provides:
- Base: Declarative base shared by every table
- AdminModel, CustomerModel, TechnicianModel: one table per principal kind
- *RepositorySQLAlchemy: Repository implementations over an AsyncSession
"""

from techcare_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.models import (
    AdminModel,
    CustomerModel,
    TechnicianModel,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AdminRepositorySQLAlchemy,
    CustomerRepositorySQLAlchemy,
    TechnicianRepositorySQLAlchemy,
)

__all__ = [
    "AdminModel",
    "AdminRepositorySQLAlchemy",
    "Base",
    "CustomerModel",
    "CustomerRepositorySQLAlchemy",
    "TechnicianModel",
    "TechnicianRepositorySQLAlchemy",
    "TimestampMixin",
]

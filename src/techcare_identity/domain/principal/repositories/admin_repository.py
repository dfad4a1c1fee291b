"""Admin repository interface."""

from abc import abstractmethod

from techcare_identity.domain.principal.aggregates import Admin
from techcare_identity.domain.principal.repositories.principal_repository import (
    PrincipalRepository,
)


class AdminRepository(PrincipalRepository[Admin]):
    """Repository interface for Admin aggregates."""

    @abstractmethod
    async def exists_by_phone_number(self, phone_number: str) -> bool:
        """Check if an admin already uses the given phone number."""

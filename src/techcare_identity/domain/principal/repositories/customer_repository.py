"""Customer repository interface."""

from abc import abstractmethod
from typing import Optional

from techcare_identity.domain.principal.aggregates import Customer
from techcare_identity.domain.principal.repositories.principal_repository import (
    PrincipalRepository,
)


class CustomerRepository(PrincipalRepository[Customer]):
    """Repository interface for Customer aggregates."""

    @abstractmethod
    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[Customer]:
        """Find the customer holding the given reset token digest."""

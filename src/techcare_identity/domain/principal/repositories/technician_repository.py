"""Technician repository interface."""

from abc import abstractmethod

from techcare_identity.domain.principal.aggregates import Technician
from techcare_identity.domain.principal.repositories.principal_repository import (
    PrincipalRepository,
)
from techcare_identity.domain.principal.value_objects import TechnicianStatus


class TechnicianRepository(PrincipalRepository[Technician]):
    """Repository interface for Technician aggregates."""

    @abstractmethod
    async def list_by_status(self, status: TechnicianStatus) -> list[Technician]:
        """List technicians in the given status, oldest first."""

    @abstractmethod
    async def list_all(self) -> list[Technician]:
        """List all technicians, oldest first."""

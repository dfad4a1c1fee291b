"""Repository interface shared by the three principal stores."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, Union
from uuid import UUID

from techcare_identity.domain.principal.value_objects import Email

P = TypeVar("P")


class PrincipalRepository(ABC, Generic[P]):
    """Keyed lookups and saves for one kind of principal.

    Lookups return None when nothing matches. Application services turn a
    miss into the matching NotFound error.
    """

    @abstractmethod
    async def find_by_id(self, principal_id: UUID) -> Optional[P]:
        """Find a principal by ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[P]:
        """Find a principal by email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a principal exists with the given email."""

    @abstractmethod
    async def save(self, principal: P) -> None:
        """Insert or update a principal.

        Raises
        ------
        EmailAlreadyExistsError
            If the store's unique email constraint rejects the write
        """

"""Shared SQLAlchemy plumbing for the three principal repositories."""

import logging
from typing import Generic, Optional, TypeVar, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from techcare.domain.shared.exceptions import ConflictError
from techcare_identity.domain.principal import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.base import Base

logger = logging.getLogger(__name__)

P = TypeVar("P")
M = TypeVar("M", bound=Base)


class PrincipalRepositorySQLAlchemy(Generic[P, M]):
    """Keyed lookups and upserts over one principal table.

    Subclasses set ``model_class`` and implement the three mapping hooks.
    """

    model_class: type[M]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, principal_id: UUID) -> Optional[P]:
        model = await self._find_model_by_id(principal_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[P]:
        try:
            email_value = email.value if isinstance(email, Email) else Email(email).value
        except InvalidEmailError:
            # No stored principal can have an address that fails validation
            return None

        stmt = select(self.model_class).where(self.model_class.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        principal = await self.find_by_email(email)
        return principal is not None

    async def save(self, principal: P) -> None:
        existing = await self._find_model_by_id(principal.id)  # type: ignore[attr-defined]

        try:
            if existing:
                self._update_model(existing, principal)
                logger.debug(
                    "Updated %s: %s",
                    self.model_class.__tablename__,
                    principal.id,  # type: ignore[attr-defined]
                )
            else:
                self._session.add(self._map_to_model(principal))
                logger.info(
                    "Created %s row: %s (email: %s)",
                    self.model_class.__tablename__,
                    principal.id,  # type: ignore[attr-defined]
                    principal.email,  # type: ignore[attr-defined]
                )

            await self._session.flush()
        except IntegrityError as e:
            # Only the driver message: the statement text names every column
            message = str(e.orig).lower()
            if "phone_number" in message:
                msg = "Phone number already registered"
                raise ConflictError(msg) from e
            if "unique" in message:
                raise EmailAlreadyExistsError(principal.email) from e  # type: ignore[attr-defined]
            raise

    async def _find_model_by_id(self, principal_id: UUID) -> Optional[M]:
        stmt = select(self.model_class).where(self.model_class.id == principal_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: M) -> P:
        raise NotImplementedError

    def _map_to_model(self, principal: P) -> M:
        raise NotImplementedError

    def _update_model(self, model: M, principal: P) -> None:
        raise NotImplementedError

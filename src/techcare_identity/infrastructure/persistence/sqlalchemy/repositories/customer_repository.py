"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy import select

from techcare_identity.domain.principal import Customer, CustomerRepository
from techcare_identity.infrastructure.persistence.sqlalchemy.models import (
    CustomerModel,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.base_repository import (  # NOQA: E501
    PrincipalRepositorySQLAlchemy,
)


class CustomerRepositorySQLAlchemy(
    PrincipalRepositorySQLAlchemy[Customer, CustomerModel],
    CustomerRepository,
):
    """SQLAlchemy implementation of the CustomerRepository interface."""

    model_class = CustomerModel

    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[Customer]:
        stmt = select(CustomerModel).where(CustomerModel.reset_token_hash == token_hash)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_domain(self, model: CustomerModel) -> Customer:
        return Customer.reconstitute(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            password_hash=model.password_hash,
            image=model.image,
            reset_token_hash=model.reset_token_hash,
            reset_token_expires_at=model.reset_token_expires_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, customer: Customer) -> CustomerModel:
        return CustomerModel(
            id=customer.id,
            full_name=customer.full_name,
            email=customer.email,
            phone_number=customer.phone_number,
            password_hash=customer.password_hash,
            image=customer.image,
            reset_token_hash=customer.reset_token_hash,
            reset_token_expires_at=customer.reset_token_expires_at,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )

    def _update_model(self, model: CustomerModel, customer: Customer) -> None:
        model.full_name = customer.full_name
        model.email = customer.email
        model.phone_number = customer.phone_number
        model.password_hash = customer.password_hash
        model.image = customer.image
        model.reset_token_hash = customer.reset_token_hash
        model.reset_token_expires_at = customer.reset_token_expires_at
        model.updated_at = customer.updated_at

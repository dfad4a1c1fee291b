"""SQLAlchemy implementation of AdminRepository."""

from sqlalchemy import select

from techcare_identity.domain.principal import Admin, AdminRepository, PhoneNumber
from techcare_identity.infrastructure.persistence.sqlalchemy.models import AdminModel
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.base_repository import (  # NOQA: E501
    PrincipalRepositorySQLAlchemy,
)


class AdminRepositorySQLAlchemy(
    PrincipalRepositorySQLAlchemy[Admin, AdminModel],
    AdminRepository,
):
    """SQLAlchemy implementation of the AdminRepository interface."""

    model_class = AdminModel

    async def exists_by_phone_number(self, phone_number: str) -> bool:
        value = PhoneNumber(phone_number).value
        stmt = select(AdminModel.id).where(AdminModel.phone_number == value)
        result = await self._session.execute(stmt)
        return result.first() is not None

    def _map_to_domain(self, model: AdminModel) -> Admin:
        return Admin.reconstitute(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            password_hash=model.password_hash,
            image=model.image,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, admin: Admin) -> AdminModel:
        return AdminModel(
            id=admin.id,
            full_name=admin.full_name,
            email=admin.email,
            phone_number=admin.phone_number,
            password_hash=admin.password_hash,
            image=admin.image,
            created_at=admin.created_at,
            updated_at=admin.updated_at,
        )

    def _update_model(self, model: AdminModel, admin: Admin) -> None:
        model.full_name = admin.full_name
        model.email = admin.email
        model.phone_number = admin.phone_number
        model.password_hash = admin.password_hash
        model.image = admin.image
        model.updated_at = admin.updated_at

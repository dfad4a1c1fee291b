"""SQLAlchemy implementation of TechnicianRepository."""

from sqlalchemy import select

from techcare_identity.domain.principal import (
    Technician,
    TechnicianRepository,
    TechnicianStatus,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.models import (
    TechnicianModel,
)
from techcare_identity.infrastructure.persistence.sqlalchemy.repositories.base_repository import (  # NOQA: E501
    PrincipalRepositorySQLAlchemy,
)


class TechnicianRepositorySQLAlchemy(
    PrincipalRepositorySQLAlchemy[Technician, TechnicianModel],
    TechnicianRepository,
):
    """SQLAlchemy implementation of the TechnicianRepository interface."""

    model_class = TechnicianModel

    async def list_by_status(self, status: TechnicianStatus) -> list[Technician]:
        stmt = (
            select(TechnicianModel)
            .where(TechnicianModel.status == status.value)
            .order_by(TechnicianModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def list_all(self) -> list[Technician]:
        stmt = select(TechnicianModel).order_by(TechnicianModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: TechnicianModel) -> Technician:
        return Technician.reconstitute(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            age=model.age,
            gender=model.gender,
            specialization=model.specialization,
            rating=model.rating,
            image_url=model.image_url,
            certification_url=model.certification_url,
            password_hash=model.password_hash,
            status=model.status,
            is_available=model.is_available,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, technician: Technician) -> TechnicianModel:
        return TechnicianModel(
            id=technician.id,
            full_name=technician.full_name,
            email=technician.email,
            phone_number=technician.phone_number,
            age=technician.age,
            gender=technician.gender,
            specialization=technician.specialization,
            rating=technician.rating,
            image_url=technician.image_url,
            certification_url=technician.certification_url,
            password_hash=technician.password_hash,
            status=technician.status.value,
            is_available=technician.is_available,
            created_at=technician.created_at,
            updated_at=technician.updated_at,
        )

    def _update_model(self, model: TechnicianModel, technician: Technician) -> None:
        model.full_name = technician.full_name
        model.email = technician.email
        model.phone_number = technician.phone_number
        model.age = technician.age
        model.gender = technician.gender
        model.specialization = technician.specialization
        model.rating = technician.rating
        model.image_url = technician.image_url
        model.certification_url = technician.certification_url
        model.password_hash = technician.password_hash
        model.status = technician.status.value
        model.is_available = technician.is_available
        model.updated_at = technician.updated_at

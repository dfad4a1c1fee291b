"""Admin approval workflow for technician applications."""

import logging
from typing import Optional
from uuid import UUID

from techcare_auth import PasswordHashingService, generate_password
from techcare_identity.application.notifications import notify_best_effort
from techcare_identity.domain.principal import (
    Technician,
    TechnicianNotFoundError,
    TechnicianRepository,
    TechnicianStatus,
)
from techcare_identity.infrastructure.email import Notifier
from techcare_identity.infrastructure.email.messages import (
    TECHNICIAN_APPROVED_SUBJECT,
    TECHNICIAN_APPROVED_TEXT,
    TECHNICIAN_REJECTED_SUBJECT,
    technician_rejected_text,
)

logger = logging.getLogger(__name__)

GENERATED_PASSWORD_LENGTH = 12


class ApprovalService:
    """Moves technicians through PENDING -> APPROVED / REJECTED.

    Approval is the only place a technician's password is created. The
    plaintext is sent once in the approval notification and never stored.
    """

    def __init__(
        self,
        technician_repository: TechnicianRepository,
        password_service: PasswordHashingService,
        notifier: Notifier,
    ):
        self._technician_repo = technician_repository
        self._password_service = password_service
        self._notifier = notifier

    async def approve(self, technician_id: UUID) -> Technician:
        """Approve an application and mail generated credentials.

        Raises
        ------
        TechnicianNotFoundError
            If no technician has this ID
        TechnicianAlreadyApprovedError
            If the technician is already approved
        """
        technician = await self._get(technician_id)

        password = generate_password(GENERATED_PASSWORD_LENGTH)
        technician.approve(self._password_service.hash(password))
        await self._technician_repo.save(technician)
        logger.info("Technician approved: %s (%s)", technician.id, technician.email)

        await notify_best_effort(
            self._notifier,
            technician.email,
            TECHNICIAN_APPROVED_SUBJECT,
            TECHNICIAN_APPROVED_TEXT.format(
                full_name=technician.full_name,
                email=technician.email,
                password=password,
            ),
        )
        return technician

    async def reject(
        self,
        technician_id: UUID,
        reason: Optional[str] = None,
    ) -> Technician:
        """Reject an application. Rejecting again is allowed.

        Raises
        ------
        TechnicianNotFoundError
            If no technician has this ID
        """
        technician = await self._get(technician_id)

        technician.reject()
        await self._technician_repo.save(technician)
        logger.info("Technician rejected: %s (%s)", technician.id, technician.email)

        await notify_best_effort(
            self._notifier,
            technician.email,
            TECHNICIAN_REJECTED_SUBJECT,
            technician_rejected_text(technician.full_name, reason),
        )
        return technician

    async def pending_technicians(self) -> list[Technician]:
        return await self._technician_repo.list_by_status(TechnicianStatus.PENDING)

    async def all_technicians(self) -> list[Technician]:
        return await self._technician_repo.list_all()

    async def _get(self, technician_id: UUID) -> Technician:
        technician = await self._technician_repo.find_by_id(technician_id)
        if technician is None:
            raise TechnicianNotFoundError(technician_id)
        return technician

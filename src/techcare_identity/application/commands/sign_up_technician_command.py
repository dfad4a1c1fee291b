"""Register a technician application with its documents."""

from __future__ import annotations

import logging

from techcare_identity.application.notifications import notify_best_effort
from techcare_identity.domain.principal import (
    EmailAlreadyExistsError,
    Technician,
    TechnicianRepository,
)
from techcare_identity.infrastructure.email import Notifier
from techcare_identity.infrastructure.email.messages import (
    TECHNICIAN_APPLICATION_SUBJECT,
    TECHNICIAN_APPLICATION_TEXT,
)
from techcare_identity.infrastructure.storage import (
    BlobCategory,
    BlobStore,
    FileUpload,
    UploadPolicy,
)

logger = logging.getLogger(__name__)


class SignUpTechnicianCommand:
    """Create a PENDING technician without a password.

    The profile image and certification are checked against the upload
    policy before anything is written, then stored under the technician's
    ID once the record exists.
    """

    def __init__(
        self,
        technician_repository: TechnicianRepository,
        blob_store: BlobStore,
        upload_policy: UploadPolicy,
        notifier: Notifier,
    ):
        self._technician_repo = technician_repository
        self._blob_store = blob_store
        self._upload_policy = upload_policy
        self._notifier = notifier

    async def execute(  # noqa: PLR0913
        self,
        full_name: str,
        email: str,
        phone_number: str,
        age: int,
        gender: str,
        specialization: str,
        image: FileUpload,
        certification: FileUpload,
    ) -> Technician:
        if await self._technician_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        self._upload_policy.validate(image, BlobCategory.IMAGES)
        self._upload_policy.validate(certification, BlobCategory.DOCUMENTS)

        technician = Technician.create(
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            age=age,
            gender=gender,
            specialization=specialization,
        )
        await self._technician_repo.save(technician)

        owner_id = f"technician_{technician.id}"
        image_url = await self._blob_store.store(owner_id, image, BlobCategory.IMAGES)
        certification_url = await self._blob_store.store(
            owner_id,
            certification,
            BlobCategory.DOCUMENTS,
        )
        technician.attach_documents(
            image_url=image_url,
            certification_url=certification_url,
        )
        await self._technician_repo.save(technician)
        logger.info("Technician application received: %s", technician.email)

        await notify_best_effort(
            self._notifier,
            technician.email,
            TECHNICIAN_APPLICATION_SUBJECT,
            TECHNICIAN_APPLICATION_TEXT.format(
                full_name=technician.full_name,
                specialization=technician.specialization,
            ),
        )
        return technician

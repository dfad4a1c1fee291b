"""Register a new admin account."""

from __future__ import annotations

import logging
from typing import Optional

from techcare.domain.shared.exceptions import ConflictError
from techcare_auth import PasswordHashingService
from techcare_identity.domain.principal import (
    Admin,
    AdminRepository,
    EmailAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class SignUpAdminCommand:
    """Create an admin with a hashed password.

    Admin email and phone number are both unique.
    """

    def __init__(
        self,
        admin_repository: AdminRepository,
        password_service: PasswordHashingService,
    ):
        self._admin_repo = admin_repository
        self._password_service = password_service

    async def execute(
        self,
        full_name: str,
        email: str,
        phone_number: str,
        password: str,
        image: Optional[str] = None,
    ) -> Admin:
        if await self._admin_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)
        if await self._admin_repo.exists_by_phone_number(phone_number):
            msg = "Phone number already registered"
            raise ConflictError(msg)

        admin = Admin.create(
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            password_hash=self._password_service.hash(password),
            image=image,
        )
        await self._admin_repo.save(admin)

        logger.info("Admin registered: %s", admin.email)
        return admin

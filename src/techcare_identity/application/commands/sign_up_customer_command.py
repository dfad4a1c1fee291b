"""Register a new customer account."""

from __future__ import annotations

import logging
from typing import Optional

from techcare_auth import PasswordHashingService
from techcare_identity.application.notifications import notify_best_effort
from techcare_identity.domain.principal import (
    Customer,
    CustomerRepository,
    EmailAlreadyExistsError,
)
from techcare_identity.infrastructure.email import Notifier
from techcare_identity.infrastructure.email.messages import (
    CUSTOMER_WELCOME_SUBJECT,
    CUSTOMER_WELCOME_TEXT,
)

logger = logging.getLogger(__name__)


class SignUpCustomerCommand:
    """Create a customer and send a welcome message."""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        password_service: PasswordHashingService,
        notifier: Notifier,
    ):
        self._customer_repo = customer_repository
        self._password_service = password_service
        self._notifier = notifier

    async def execute(
        self,
        full_name: str,
        email: str,
        phone_number: str,
        password: str,
        image: Optional[str] = None,
    ) -> Customer:
        if await self._customer_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        customer = Customer.create(
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            password_hash=self._password_service.hash(password),
            image=image,
        )
        await self._customer_repo.save(customer)
        logger.info("Customer registered: %s", customer.email)

        await notify_best_effort(
            self._notifier,
            customer.email,
            CUSTOMER_WELCOME_SUBJECT,
            CUSTOMER_WELCOME_TEXT.format(full_name=customer.full_name),
        )
        return customer

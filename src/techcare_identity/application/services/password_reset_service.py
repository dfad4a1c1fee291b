import hashlib
import logging
import secrets
from datetime import timedelta

from techcare.domain.shared.time import utc_now
from techcare_auth import PasswordHashingService
from techcare_identity.application.notifications import notify_best_effort
from techcare_identity.domain.principal import CustomerRepository
from techcare_identity.exceptions import InvalidResetTokenError
from techcare_identity.infrastructure.email import Notifier
from techcare_identity.infrastructure.email.messages import (
    PASSWORD_RESET_SUBJECT,
    PASSWORD_RESET_SUCCESS_SUBJECT,
    PASSWORD_RESET_SUCCESS_TEXT,
    PASSWORD_RESET_TEXT,
)

logger = logging.getLogger(__name__)


def hash_reset_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode()).hexdigest()


class PasswordResetService:
    """Service for customer password reset requests and completion."""

    DEFAULT_TOKEN_EXPIRY_HOURS = 24

    def __init__(  # noqa: PLR0913
        self,
        customer_repository: CustomerRepository,
        password_service: PasswordHashingService,
        notifier: Notifier,
        frontend_base_url: str,
        token_expiry_hours: int = DEFAULT_TOKEN_EXPIRY_HOURS,
    ):
        self._customer_repo = customer_repository
        self._password_service = password_service
        self._notifier = notifier
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._token_expiry = timedelta(hours=token_expiry_hours)

    async def request_reset(self, email: str) -> None:
        customer = await self._customer_repo.find_by_email(email)
        if not customer:
            # Silent fail to prevent email enumeration
            logger.debug("Password reset requested for unknown email: %s", email)
            return

        raw_token = secrets.token_urlsafe(32)
        customer.issue_reset_token(
            token_hash=hash_reset_token(raw_token),
            expires_at=utc_now() + self._token_expiry,
        )
        await self._customer_repo.save(customer)
        logger.info("Password reset token issued for customer: %s", customer.id)

        reset_link = f"{self._frontend_base_url}/reset-password?token={raw_token}"
        # Token is already saved, so a failed send doesn't fail the request
        await notify_best_effort(
            self._notifier,
            customer.email,
            PASSWORD_RESET_SUBJECT,
            PASSWORD_RESET_TEXT.format(
                full_name=customer.full_name,
                reset_link=reset_link,
                token=raw_token,
                valid_hours=int(self._token_expiry.total_seconds() // 3600),
            ),
        )

    async def complete_reset(self, token: str, new_password: str) -> None:
        if not token:
            raise InvalidResetTokenError

        customer = await self._customer_repo.find_by_reset_token_hash(
            hash_reset_token(token),
        )
        if not customer:
            raise InvalidResetTokenError

        if not customer.is_reset_token_valid(utc_now()):
            logger.info("Expired reset token used for customer: %s", customer.id)
            raise InvalidResetTokenError

        customer.complete_password_reset(self._password_service.hash(new_password))
        await self._customer_repo.save(customer)
        logger.info("Password reset completed for customer: %s", customer.id)

        await notify_best_effort(
            self._notifier,
            customer.email,
            PASSWORD_RESET_SUCCESS_SUBJECT,
            PASSWORD_RESET_SUCCESS_TEXT.format(full_name=customer.full_name),
        )

"""Unit tests for PasswordResetService."""

from datetime import timedelta
from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlparse

import pytest

from techcare.domain.shared.time import utc_now
from techcare_identity import PasswordResetService
from techcare_identity.application.services.password_reset_service import (
    hash_reset_token,
)
from techcare_identity.exceptions import InvalidResetTokenError
from tests.shared.fixtures.factories import TestPrincipalFactory, fast_password_service

FRONTEND_URL = "https://techcare.example.com"
TEST_NEW_PASSWORD = "new_secure_password_123"


def _token_from_body(body: str) -> str:
    link = next(word for word in body.split() if word.startswith(FRONTEND_URL))
    return parse_qs(urlparse(link).query)["token"][0]


class TestRequestReset:
    def setup_method(self):
        self.repo = AsyncMock()
        self.notifier = AsyncMock()
        self.service = PasswordResetService(
            customer_repository=self.repo,
            password_service=fast_password_service(),
            notifier=self.notifier,
            frontend_base_url=f"{FRONTEND_URL}/",
        )

    @pytest.mark.asyncio
    async def test_request_reset_stores_digest_and_mails_token(self):
        customer = TestPrincipalFactory.customer()
        self.repo.find_by_email.return_value = customer

        await self.service.request_reset(customer.email)

        self.repo.save.assert_awaited_once_with(customer)
        recipient, _subject, body = self.notifier.send.await_args.args
        assert recipient == customer.email
        assert f"{FRONTEND_URL}/reset-password?token=" in body

        token = _token_from_body(body)
        assert customer.reset_token_hash == hash_reset_token(token)
        assert customer.reset_token_hash != token
        assert customer.is_reset_token_valid()

    @pytest.mark.asyncio
    async def test_unknown_email_is_silent(self):
        self.repo.find_by_email.return_value = None

        await self.service.request_reset("unknown@example.com")

        self.repo.save.assert_not_called()
        self.notifier.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_notification_failure_keeps_token(self):
        customer = TestPrincipalFactory.customer()
        self.repo.find_by_email.return_value = customer
        self.notifier.send.side_effect = Exception("SMTP error")

        await self.service.request_reset(customer.email)

        self.repo.save.assert_awaited_once()
        assert customer.reset_token_hash is not None


class TestCompleteReset:
    def setup_method(self):
        self.repo = AsyncMock()
        self.notifier = AsyncMock()
        self.password_service = fast_password_service()
        self.service = PasswordResetService(
            customer_repository=self.repo,
            password_service=self.password_service,
            notifier=self.notifier,
            frontend_base_url=FRONTEND_URL,
        )
        self.customer = TestPrincipalFactory.customer()

    @pytest.mark.asyncio
    async def test_valid_token_sets_password_and_is_consumed(self):
        self.customer.issue_reset_token(
            hash_reset_token("raw-token"),
            utc_now() + timedelta(hours=1),
        )
        self.repo.find_by_reset_token_hash.return_value = self.customer

        await self.service.complete_reset("raw-token", TEST_NEW_PASSWORD)

        self.repo.find_by_reset_token_hash.assert_awaited_once_with(
            hash_reset_token("raw-token"),
        )
        assert self.password_service.verify(
            TEST_NEW_PASSWORD,
            self.customer.password_hash,
        )
        assert self.customer.reset_token_hash is None
        self.repo.save.assert_awaited_once_with(self.customer)
        self.notifier.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_expired_token_rejected(self):
        self.customer.issue_reset_token(
            hash_reset_token("raw-token"),
            utc_now() - timedelta(seconds=1),
        )
        self.repo.find_by_reset_token_hash.return_value = self.customer

        with pytest.raises(InvalidResetTokenError):
            await self.service.complete_reset("raw-token", TEST_NEW_PASSWORD)
        self.repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_token_rejected(self):
        self.repo.find_by_reset_token_hash.return_value = None

        with pytest.raises(InvalidResetTokenError):
            await self.service.complete_reset("nope", TEST_NEW_PASSWORD)

    @pytest.mark.asyncio
    async def test_empty_token_rejected_without_lookup(self):
        with pytest.raises(InvalidResetTokenError):
            await self.service.complete_reset("", TEST_NEW_PASSWORD)
        self.repo.find_by_reset_token_hash.assert_not_called()

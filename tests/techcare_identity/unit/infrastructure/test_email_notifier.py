"""Unit tests for EmailNotifier."""

from unittest.mock import MagicMock, patch

import pytest
from pydantic import SecretStr

from techcare_config.settings import Settings
from techcare_identity.infrastructure.email import EmailNotifier


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": SecretStr("test-secret"),
        "smtp_enabled": True,
        "smtp_host": "smtp.example.com",
        "smtp_port": 587,
        "smtp_user": "mailer",
        "smtp_password": SecretStr("mail-password"),
        "smtp_from_email": "noreply@techcare.rw",
    }
    values.update(overrides)
    return Settings(**values)


class TestEmailNotifier:
    @pytest.mark.asyncio
    async def test_disabled_smtp_sends_nothing(self):
        notifier = EmailNotifier(_settings(smtp_enabled=False))

        with patch("smtplib.SMTP") as smtp:
            await notifier.send("a@x.com", "Subject", "Body")

        smtp.assert_not_called()

    @pytest.mark.asyncio
    async def test_sends_with_starttls_and_login(self):
        notifier = EmailNotifier(_settings())
        server = MagicMock()

        with patch("smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            await notifier.send("a@x.com", "Subject", "Body")

        smtp.assert_called_once_with("smtp.example.com", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "mail-password")
        message = server.send_message.call_args.args[0]
        assert message["To"] == "a@x.com"
        assert message["Subject"] == "Subject"

    @pytest.mark.asyncio
    async def test_smtp_failure_propagates(self):
        notifier = EmailNotifier(_settings())

        with patch("smtplib.SMTP", side_effect=OSError("connection refused")):
            with pytest.raises(OSError):
                await notifier.send("a@x.com", "Subject", "Body")

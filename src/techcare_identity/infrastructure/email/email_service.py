import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Protocol

from techcare_config.settings import Settings

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Sends a short message to a recipient address."""

    async def send(self, recipient: str, subject: str, body: str) -> None: ...


class EmailNotifier:
    """Notifier backed by an SMTP relay.

    smtplib is blocking, so each send runs in a worker thread.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    async def send(self, recipient: str, subject: str, body: str) -> None:
        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, email '%s' not sent to %s", subject, recipient)
            return

        message = self._create_message(recipient, subject, body)
        await asyncio.to_thread(self._send_email, recipient, message)

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain", "utf-8"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

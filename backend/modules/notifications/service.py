"""
Email sender implementations.

SmtpEmailService delivers mail through an SMTP relay. LoggingEmailService
is used when no relay is configured: it records and logs messages
instead of sending them.
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from shared.exceptions import ExternalServiceError

from .interfaces import IEmailService
from .models import EmailMessage

logger = logging.getLogger(__name__)


class SmtpEmailService(IEmailService):
    """
    SMTP implementation of the email service.

    Port 465 uses implicit TLS; any other port upgrades with STARTTLS.
    Delivery failures are raised, never swallowed.
    """

    def __init__(
        self,
        host: str,
        port: int = 465,
        username: str = "",
        password: str = "",
        timeout: float = 30.0,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    async def send_email(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
    ) -> None:
        message = EmailMessage(
            from_address=from_address,
            to_address=to_address,
            subject=subject,
            html_body=html_body,
        )
        await asyncio.to_thread(self._deliver, message)
        logger.info(f"Sent email '{subject}' to {to_address}")

    def _deliver(self, message: EmailMessage) -> None:
        if not (self._host and message.from_address):
            raise ExternalServiceError(
                "SMTP configuration missing. Set SMTP_HOST and TACH_EMAIL_SOURCE.",
                service="smtp",
            )

        mime = self._build_mime(message)

        try:
            if self._port == 465:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._host, self._port, context=context, timeout=self._timeout
                ) as server:
                    self._login(server)
                    server.sendmail(message.from_address, [message.to_address], mime.as_string())
            else:
                with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                    server.ehlo()
                    server.starttls(context=ssl.create_default_context())
                    self._login(server)
                    server.sendmail(message.from_address, [message.to_address], mime.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise ExternalServiceError(
                f"Failed to send email to {message.to_address}: {e}",
                service="smtp",
                details={"to": message.to_address},
            ) from e

    def _login(self, server: smtplib.SMTP) -> None:
        if self._username:
            server.login(self._username, self._password)

    @staticmethod
    def _build_mime(message: EmailMessage) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["Subject"] = message.subject
        mime["From"] = message.from_address
        mime["To"] = message.to_address
        mime.attach(MIMEText(message.html_body, "html", "utf-8"))
        return mime


class LoggingEmailService(IEmailService):
    """
    Development email service.

    Keeps every message in memory and logs it. Useful locally, where the
    verification link can be copied from the log.
    """

    def __init__(self):
        self.sent: list[EmailMessage] = []

    async def send_email(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
    ) -> None:
        message = EmailMessage(
            from_address=from_address,
            to_address=to_address,
            subject=subject,
            html_body=html_body,
        )
        self.sent.append(message)
        logger.warning(
            f"SMTP not configured; email to {to_address} not delivered. "
            f"Subject: {subject!r} Body: {html_body}"
        )

    def last_message_to(self, to_address: str) -> Optional[EmailMessage]:
        """Return the most recent message sent to an address."""
        for message in reversed(self.sent):
            if message.to_address == to_address:
                return message
        return None

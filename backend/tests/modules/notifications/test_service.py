"""Tests for the email senders."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from modules.notifications.interfaces import IEmailService
from modules.notifications.service import LoggingEmailService, SmtpEmailService
from shared.exceptions import ExternalServiceError


class TestLoggingEmailService:
    @pytest.fixture
    def service(self):
        return LoggingEmailService()

    def test_implements_interface(self, service):
        assert isinstance(service, IEmailService)

    @pytest.mark.asyncio
    async def test_records_sent_messages(self, service):
        await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        assert len(service.sent) == 1
        message = service.sent[0]
        assert message.from_address == "from@x.com"
        assert message.to_address == "to@x.com"
        assert message.subject == "Hello"
        assert message.html_body == "<p>Hi</p>"

    @pytest.mark.asyncio
    async def test_last_message_to(self, service):
        await service.send_email("from@x.com", "a@x.com", "First", "1")
        await service.send_email("from@x.com", "b@x.com", "Other", "2")
        await service.send_email("from@x.com", "a@x.com", "Second", "3")

        assert service.last_message_to("a@x.com").subject == "Second"
        assert service.last_message_to("nobody@x.com") is None

    @pytest.mark.asyncio
    async def test_logs_undelivered_message(self, service, caplog):
        with caplog.at_level("WARNING", logger="modules.notifications.service"):
            await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        assert "to@x.com" in caplog.text


class TestSmtpEmailService:
    def test_implements_interface(self):
        assert isinstance(SmtpEmailService("smtp.x.com"), IEmailService)

    @pytest.mark.asyncio
    @patch("modules.notifications.service.smtplib.SMTP_SSL")
    async def test_sends_over_implicit_tls_on_465(self, mock_smtp_ssl):
        server = MagicMock()
        mock_smtp_ssl.return_value.__enter__.return_value = server
        service = SmtpEmailService("smtp.x.com", 465, "user", "pass")

        await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        assert mock_smtp_ssl.call_args.args[:2] == ("smtp.x.com", 465)
        server.login.assert_called_once_with("user", "pass")
        from_address, recipients, raw = server.sendmail.call_args.args
        assert from_address == "from@x.com"
        assert recipients == ["to@x.com"]
        assert "Subject: Hello" in raw

    @pytest.mark.asyncio
    @patch("modules.notifications.service.smtplib.SMTP")
    async def test_uses_starttls_on_other_ports(self, mock_smtp):
        server = MagicMock()
        mock_smtp.return_value.__enter__.return_value = server
        service = SmtpEmailService("smtp.x.com", 587, "user", "pass")

        await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        server.starttls.assert_called_once()
        server.sendmail.assert_called_once()

    @pytest.mark.asyncio
    @patch("modules.notifications.service.smtplib.SMTP")
    async def test_skips_login_without_username(self, mock_smtp):
        server = MagicMock()
        mock_smtp.return_value.__enter__.return_value = server
        service = SmtpEmailService("smtp.x.com", 25)

        await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        server.login.assert_not_called()

    @pytest.mark.asyncio
    @patch("modules.notifications.service.smtplib.SMTP_SSL")
    async def test_delivery_failure_raises(self, mock_smtp_ssl):
        server = MagicMock()
        server.sendmail.side_effect = smtplib.SMTPRecipientsRefused({"to@x.com": (550, b"no")})
        mock_smtp_ssl.return_value.__enter__.return_value = server
        service = SmtpEmailService("smtp.x.com", 465)

        with pytest.raises(ExternalServiceError) as exc_info:
            await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

        assert exc_info.value.service == "smtp"
        assert exc_info.value.details["to"] == "to@x.com"

    @pytest.mark.asyncio
    @patch("modules.notifications.service.smtplib.SMTP_SSL")
    async def test_connection_failure_raises(self, mock_smtp_ssl):
        mock_smtp_ssl.side_effect = OSError("connection refused")
        service = SmtpEmailService("smtp.x.com", 465)

        with pytest.raises(ExternalServiceError):
            await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

    @pytest.mark.asyncio
    async def test_missing_configuration_raises(self):
        service = SmtpEmailService("")

        with pytest.raises(ExternalServiceError, match="SMTP configuration missing"):
            await service.send_email("from@x.com", "to@x.com", "Hello", "<p>Hi</p>")

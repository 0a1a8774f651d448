"""
Notifications module.

Delivers templated messages to an email address.

Public API:
- IEmailService: Interface for outbound email
- SmtpEmailService: SMTP sender
- LoggingEmailService: In-memory sender for development
- EmailMessage: Outbound message model
"""

from .interfaces import IEmailService
from .models import EmailMessage
from .service import SmtpEmailService, LoggingEmailService

__all__ = [
    # Interface
    "IEmailService",
    # Implementations
    "SmtpEmailService",
    "LoggingEmailService",
    # Models
    "EmailMessage",
]

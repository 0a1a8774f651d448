"""
Notifications module interface.

The users module sends its verification and password-reset messages
through IEmailService and does not know which transport delivers them.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IEmailService(Protocol):
    """
    Interface for outbound email.
    """

    async def send_email(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
    ) -> None:
        """
        Deliver an HTML message.

        Args:
            from_address: Sender address
            to_address: Recipient address
            subject: Message subject
            html_body: HTML body

        Raises:
            ExternalServiceError: If the message could not be delivered
        """
        ...

"""
Email content for the account lifecycle.

Each builder returns a (subject, html_body) pair.
"""

from datetime import timedelta
from urllib.parse import quote


def describe_lifetime(lifetime: timedelta) -> str:
    """Render a token lifetime for humans, e.g. "30 minutes" or "14 days"."""
    seconds = int(lifetime.total_seconds())
    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if seconds >= size and seconds % size == 0:
            count = seconds // size
            return f"{count} {unit}{'s' if count != 1 else ''}"
    return f"{seconds} second{'s' if seconds != 1 else ''}"


def verification_email(app_name: str, base_url: str, token: str) -> tuple[str, str]:
    link = f"{base_url}/auth/verifyEmail?token={token}"
    subject = f"[Action Required] Welcome to {app_name}!"
    body = (
        "Please verify your email address by clicking this link: "
        f'<a href="{link}" target="_blank">Verify Email</a>'
    )
    return subject, body


def password_reset_request_email(
    app_name: str,
    base_url: str,
    token: str,
    email: str,
    lifetime: timedelta,
) -> tuple[str, str]:
    link = (
        f"{base_url}/auth/resetPassword/verify"
        f"?passwordResetToken={token}&email={quote(email, safe='')}"
    )
    subject = f"[Action Required] {app_name} password reset request"
    body = (
        "A request was made to reset the password for the account associated "
        "with this email. If you did not make this request, please disregard "
        f"this email. This link expires after {describe_lifetime(lifetime)}. "
        f'<a href="{link}" target="_blank">Reset Password</a>'
    )
    return subject, body


def password_reset_success_email(app_name: str) -> tuple[str, str]:
    subject = f"{app_name} password reset successful"
    body = (
        "Your password has been successfully reset. "
        "You can now login with your new password."
    )
    return subject, body

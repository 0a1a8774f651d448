"""
Token module data models.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Decoded claims of a verification or password-reset token.

    Tokens bind a subject (user ID) and an email address for a limited time.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="Email address the token was issued for")
    iat: Optional[int] = Field(None, description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: Optional[str] = Field(None, description="Unique token ID")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)

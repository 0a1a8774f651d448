"""
Notifications module data models.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field


class EmailMessage(BaseModel):
    """An outbound HTML email."""

    from_address: str = Field(..., description="Sender address")
    to_address: str = Field(..., description="Recipient address")
    subject: str = Field(..., description="Message subject")
    html_body: str = Field(..., description="HTML body")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

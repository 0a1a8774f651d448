"""
Address module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Address(BaseModel):
    """A postal address."""

    name: Optional[str] = Field(None, description="Recipient name")
    line1: str = Field(..., description="Street address")
    line2: Optional[str] = Field(None, description="Apartment, suite, etc.")
    city: str = Field(..., description="City")
    state: Optional[str] = Field(None, description="State or region")
    postal_code: str = Field(..., description="Postal code")
    country: str = Field(..., description="ISO country code")


class UserAddress(BaseModel):
    """A shipping or billing address owned by a user."""

    id: str = Field(..., description="Address record ID")
    user_id: str = Field(..., description="Owning user ID")
    address: Address = Field(..., description="The postal address")
    is_default: bool = Field(default=False, description="Whether this is the preferred address")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    model_config = {"extra": "ignore"}

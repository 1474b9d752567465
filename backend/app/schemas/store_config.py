"""
app/schemas/store_config.py - Storefront configuration schemas.

`StoreConfigUpdate` is a partial update: fields left out of the body keep
their stored value. Money amounts are cents.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class StoreConfigUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1)
    whatsapp_number: Optional[str] = Field(None, description="International format, digits only are kept")
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    country: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None
    free_shipping_threshold: Optional[int] = Field(None, ge=0)
    standard_shipping_cost: Optional[int] = Field(None, ge=0)
    delivery_time: Optional[str] = None
    welcome_message: Optional[str] = None
    farewell_message: Optional[str] = None

    @field_validator("whatsapp_number")
    @classmethod
    def _digits_only(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        digits = "".join(ch for ch in v if ch.isdigit())
        if v.strip() and not 10 <= len(digits) <= 15:
            raise ValueError("whatsapp_number must have between 10 and 15 digits")
        return digits

    @field_validator("currency")
    @classmethod
    def _upper(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if v else v


class StoreConfigOut(CamelModel):
    company_name: str
    whatsapp_number: str = ""
    description: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    currency: str = "USD"
    country: str = ""
    timezone: str = "UTC"
    language: str = "es"
    free_shipping_threshold: Optional[int] = None
    standard_shipping_cost: Optional[int] = None
    delivery_time: Optional[str] = None
    welcome_message: Optional[str] = None
    farewell_message: Optional[str] = None
    updated_at: datetime

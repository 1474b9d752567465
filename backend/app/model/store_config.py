"""
app/model/store_config.py - Storefront configuration (single document).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.model.cart import utcnow

STORE_CONFIG_DOC_ID = "main"


@dataclass
class StoreConfig:
    company_name: str = ""
    whatsapp_number: str = ""
    description: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    currency: str = "USD"
    country: str = ""
    timezone: str = "UTC"
    language: str = "es"
    free_shipping_threshold: Optional[int] = None  # cents
    standard_shipping_cost: Optional[int] = None  # cents
    delivery_time: Optional[str] = None
    welcome_message: Optional[str] = None
    farewell_message: Optional[str] = None
    updated_at: datetime = field(default_factory=utcnow)

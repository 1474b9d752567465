"""
app/schemas/whatsapp.py - WhatsApp order message response.
"""
from pydantic import Field

from app.schemas.common import CamelModel


class OrderMessageOut(CamelModel):
    message: str = Field(..., description="Plain-text order summary")
    whatsapp_url: str = Field(..., description="wa.me link with the message pre-filled")
    formatted_total: str = Field(..., description="Cart subtotal as $X.XX")


class ProductInquiryOut(CamelModel):
    message: str = Field(..., description="Plain-text question about one product")
    whatsapp_url: str

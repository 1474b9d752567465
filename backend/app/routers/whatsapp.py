"""
app/routers/whatsapp.py
Cart order summaries and product questions, ready to open in WhatsApp.
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_whatsapp_service
from app.schemas.common import Envelope
from app.schemas.whatsapp import OrderMessageOut, ProductInquiryOut
from app.services.whatsapp_service import WhatsAppService

router = APIRouter(prefix="/whatsapp", tags=["WhatsApp"])


@router.get("/carts/{cart_id}/message", response_model=Envelope[OrderMessageOut])
async def get_order_message(cart_id: str, service: WhatsAppService = Depends(get_whatsapp_service)):
    return Envelope(result=await service.generate_order_message(cart_id))


@router.get("/products/{product_id}/message", response_model=Envelope[ProductInquiryOut])
async def get_product_inquiry(product_id: str, service: WhatsAppService = Depends(get_whatsapp_service)):
    """Question about a single product (availability, delivery, discounts)."""
    return Envelope(result=await service.generate_product_inquiry(product_id))

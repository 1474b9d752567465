"""
app/services/whatsapp_service.py - Order summary for WhatsApp.

Builds a plain-text order from a cart (or a question about one product) and a
`https://wa.me/<number>?text=...` link the storefront opens so the customer
can send it to the shop. Nothing is sent from the backend.

Format (prices are cents rendered as `$X.XX`):

    Hi! I would like to place an order with <company>:

    1. <name> x <n> unit(s)
       Specs: <key>: <value>, ...
       Unit price: $X.XX
       Subtotal: $X.XX

    Estimated total: $X.XX
    ...
"""
import logging
from typing import Dict, Optional
from urllib.parse import quote

from app.core.exceptions import CartNotFound, ProductNotFound
from app.model.cart import Cart, SpecValue
from app.model.product import Product
from app.repositories.carts import CartRepository
from app.repositories.products import ProductLookup
from app.schemas.whatsapp import OrderMessageOut, ProductInquiryOut
from app.services.store_config_service import StoreConfigService

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def format_money(cents: int) -> str:
    return f"${cents / 100:.2f}"


def _format_specs(specs: Optional[Dict[str, SpecValue]]) -> str:
    parts = [f"{k}: {v}" for k, v in (specs or {}).items() if v is not None and v != ""]
    return ", ".join(parts)


def build_order_message(cart: Cart, company_name: str) -> str:
    lines = [f"Hi! I would like to place an order with {company_name}:", ""]

    if cart.is_empty():
        lines.append("There are no products in the cart.")
        return "\n".join(lines)

    for n, item in enumerate(cart.items, start=1):
        unit = "unit" if item.quantity == 1 else "units"
        lines.append(f"{n}. {item.name} x {item.quantity} {unit}")
        specs = _format_specs(item.specs)
        if specs:
            lines.append(f"   Specs: {specs}")
        lines.append(f"   Unit price: {format_money(item.unit_price)}")
        lines.append(f"   Subtotal: {format_money(item.line_total)}")
        lines.append("")

    lines += [
        f"Estimated total: {format_money(cart.subtotal())}",
        "",
        "Order details:",
        f"- Products: {len(cart.items)}",
        f"- Total units: {cart.total_item_count()}",
        "",
        "Please confirm:",
        "- Product availability",
        "- Estimated delivery time",
        "- Payment and shipping options",
        "",
        "Thank you!",
    ]
    return "\n".join(lines)


def build_product_inquiry_message(product: Product, company_name: str) -> str:
    lines = [
        f"Hi! I am interested in this product from {company_name}:",
        "",
        f"Product: {product.name}",
    ]
    if product.description:
        lines.append(f"Description: {product.description}")
    lines.append(f"Price: {format_money(product.unit_price)}")

    specs = [f"- {k}: {v}" for k, v in (product.specs or {}).items() if v is not None and v != ""]
    if specs:
        lines += ["", "Specs:"] + specs

    lines += [
        "",
        "I would like to know about:",
        "- Availability",
        "- Delivery time",
        "- Volume discounts",
        "- Payment options",
        "",
        "Thank you!",
    ]
    return "\n".join(lines)


def build_whatsapp_url(number: str, message: str) -> str:
    digits = "".join(ch for ch in (number or "") if ch.isdigit())
    return f"https://wa.me/{digits}?text={quote(message, safe=_URI_SAFE)}"


class WhatsAppService:

    def __init__(self, carts: CartRepository, products: ProductLookup, store_config: StoreConfigService):
        self._carts = carts
        self._products = products
        self._store_config = store_config

    async def _contact(self):
        """Company name and number; empty stored values fall back to the environment."""
        config = await self._store_config.load()
        defaults = self._store_config.defaults()
        company = config.company_name or defaults.company_name
        number = config.whatsapp_number or defaults.whatsapp_number
        if not number:
            logger.warning("whatsapp number is not configured")
        return company, number

    async def generate_order_message(self, cart_id: str) -> OrderMessageOut:
        cart = await self._carts.get_by_id(cart_id)
        if cart is None:
            raise CartNotFound(cart_id)

        company, number = await self._contact()
        message = build_order_message(cart, company)
        logger.info(
            "order message generated cart_id=%s items=%d total=%d",
            cart_id, cart.total_item_count(), cart.subtotal(),
        )
        return OrderMessageOut(
            message=message,
            whatsapp_url=build_whatsapp_url(number, message),
            formatted_total=format_money(cart.subtotal()),
        )

    async def generate_product_inquiry(self, product_id: str) -> ProductInquiryOut:
        product = await self._products.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        company, number = await self._contact()
        message = build_product_inquiry_message(product, company)
        logger.info("product inquiry generated product_id=%s", product_id)
        return ProductInquiryOut(message=message, whatsapp_url=build_whatsapp_url(number, message))

"""
app/services/cart_service.py - Cart use cases.

Each method loads what it needs, mutates the `Cart` aggregate in memory and
writes the whole document back through the `CartRepository`. Nothing is
retried and storage errors propagate unchanged; a failed write simply drops
the in-memory change.

Adding an item checks the catalog first (exists -> available -> enough stock)
and only then loads the cart, so an unknown product is reported even when the
cart id is wrong too.
"""
import logging
import uuid
from typing import List, Optional

from app.core.exceptions import (
    CartItemNotFound,
    CartNotFound,
    ProductNotFound,
    ProductUnavailable,
    StockInsufficient,
)
from app.mappers import cart_mapper
from app.model.cart import Cart, CartItem
from app.repositories.carts import CartRepository
from app.repositories.products import ProductLookup
from app.schemas.cart import CartItemIn, CartOut

logger = logging.getLogger(__name__)


class CartService:

    def __init__(self, carts: CartRepository, products: ProductLookup, strict_items: bool = False):
        self._carts = carts
        self._products = products
        self._strict_items = strict_items

    async def _load(self, cart_id: str) -> Cart:
        cart = await self._carts.get_by_id(cart_id)
        if cart is None:
            raise CartNotFound(cart_id)
        return cart

    # ---------- lifecycle ----------
    async def create_cart(self, owner_key: str, initial_items: Optional[List[CartItemIn]] = None) -> CartOut:
        cart = Cart(id=str(uuid.uuid4()), owner_key=owner_key)
        # Repeated product ids merge into one line, first snapshot wins
        for item in cart_mapper.items_from_input(initial_items or []):
            cart.add_item(item)
        await self._carts.create(cart)
        logger.info("create_cart cart_id=%s owner_key=%s items=%d", cart.id, owner_key, len(cart.items))
        return cart_mapper.to_dto(cart)

    async def get_cart_by_id(self, cart_id: str) -> Optional[CartOut]:
        cart = await self._carts.get_by_id(cart_id)
        return cart_mapper.to_dto(cart) if cart else None

    async def get_cart_by_owner(self, owner_key: str) -> Optional[CartOut]:
        cart = await self._carts.get_by_owner(owner_key)
        return cart_mapper.to_dto(cart) if cart else None

    async def get_or_create_cart(self, owner_key: str) -> CartOut:
        """Owner's existing cart, or a fresh empty one."""
        cart = await self._carts.get_by_owner(owner_key)
        if cart is not None:
            return cart_mapper.to_dto(cart)
        return await self.create_cart(owner_key)

    async def delete_cart(self, cart_id: str) -> None:
        await self._carts.delete(cart_id)
        logger.info("delete_cart cart_id=%s", cart_id)

    # ---------- items ----------
    async def add_item(self, cart_id: str, product_id: str, quantity: int) -> CartOut:
        logger.info("add_item cart_id=%s product_id=%s quantity=%d", cart_id, product_id, quantity)

        product = await self._products.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        if not product.is_available:
            raise ProductUnavailable(product_id)
        if product.stock < quantity:
            raise StockInsufficient(product_id, quantity, product.stock)

        cart = await self._load(cart_id)
        cart.add_item(
            CartItem(
                product_id=product.id,
                name=product.name,
                unit_price=product.unit_price,
                quantity=quantity,
                image_url=product.primary_image,
                specs=dict(product.specs) or None,
            )
        )
        await self._carts.update(cart)
        logger.info("add_item done cart_id=%s items=%d", cart_id, len(cart.items))
        return cart_mapper.to_dto(cart)

    async def update_quantity(self, cart_id: str, product_id: str, quantity: int) -> CartOut:
        logger.info("update_quantity cart_id=%s product_id=%s quantity=%d", cart_id, product_id, quantity)
        cart = await self._load(cart_id)

        if quantity == 0:
            cart.remove_item(product_id)
        else:
            if self._strict_items and cart.get_item(product_id) is None:
                raise CartItemNotFound(cart_id, product_id)
            # Best effort: a product gone from the catalog skips the check
            product = await self._products.get_product_by_id(product_id)
            if product is not None and product.stock < quantity:
                raise StockInsufficient(product_id, quantity, product.stock)
            cart.set_item_quantity(product_id, quantity)

        await self._carts.update(cart)
        return cart_mapper.to_dto(cart)

    async def remove_item(self, cart_id: str, product_id: str) -> CartOut:
        logger.info("remove_item cart_id=%s product_id=%s", cart_id, product_id)
        cart = await self._load(cart_id)
        cart.remove_item(product_id)
        await self._carts.update(cart)
        return cart_mapper.to_dto(cart)

    async def clear_cart(self, cart_id: str) -> CartOut:
        logger.info("clear_cart cart_id=%s", cart_id)
        cart = await self._load(cart_id)
        cart.clear()
        await self._carts.update(cart)
        return cart_mapper.to_dto(cart)

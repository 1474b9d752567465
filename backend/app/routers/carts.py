"""
app/routers/carts.py
Cart endpoints. A cart belongs to an `ownerKey` (session id or user id) and is
addressed by its own `id` afterwards.

Behavior
- Add uses ONLY productId + quantity; name, price, first image and specs are
  copied from the catalog at that moment and never resynced.
- Adding checks the product (exists, available, stock) before the cart, so a
  bad product is reported first.
- PATCH with quantity 0 removes the line. Updating a product that is not in
  the cart is a no-op unless STRICT_CART_ITEMS is on (then 404).
- Removing or clearing is idempotent.

Responses use the `{"success": true, "result": ...}` envelope; errors use
`{"success": false, "error": {...}}` (see `app.core.errors`).
"""
from fastapi import APIRouter, Depends, Response, status

from app.core.exceptions import CartNotFound, InvalidInputError, NotFoundError
from app.dependencies import get_cart_service
from app.schemas.cart import AddItemBody, CartCreate, CartOut, UpdateQuantityBody
from app.schemas.common import Envelope, clean_identifier
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Cart"])


def _clean(value: str, field: str) -> str:
    try:
        return clean_identifier(value)
    except ValueError:
        raise InvalidInputError(f"{field} cannot be empty", details={"field": field})


@router.post("", response_model=Envelope[CartOut], status_code=status.HTTP_201_CREATED)
async def create_cart(payload: CartCreate, service: CartService = Depends(get_cart_service)):
    cart = await service.create_cart(payload.owner_key, payload.items)
    return Envelope(result=cart)


@router.get("/owner/{owner_key}", response_model=Envelope[CartOut])
async def get_cart_by_owner(owner_key: str, service: CartService = Depends(get_cart_service)):
    owner_key = _clean(owner_key, "owner_key")
    cart = await service.get_cart_by_owner(owner_key)
    if cart is None:
        raise NotFoundError(f"No cart for owner {owner_key}", code="CART_NOT_FOUND",
                            details={"owner_key": owner_key})
    return Envelope(result=cart)


@router.put("/owner/{owner_key}", response_model=Envelope[CartOut])
async def get_or_create_cart(owner_key: str, service: CartService = Depends(get_cart_service)):
    """Returns the owner's cart, creating an empty one the first time."""
    cart = await service.get_or_create_cart(_clean(owner_key, "owner_key"))
    return Envelope(result=cart)


@router.get("/{cart_id}", response_model=Envelope[CartOut])
async def get_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    cart_id = _clean(cart_id, "cart_id")
    cart = await service.get_cart_by_id(cart_id)
    if cart is None:
        raise CartNotFound(cart_id)
    return Envelope(result=cart)


@router.post("/{cart_id}/items", response_model=Envelope[CartOut])
async def add_item(cart_id: str, body: AddItemBody, service: CartService = Depends(get_cart_service)):
    cart = await service.add_item(_clean(cart_id, "cart_id"), body.product_id, body.quantity)
    return Envelope(result=cart)


@router.patch("/{cart_id}/items/{product_id}", response_model=Envelope[CartOut])
async def update_item_quantity(
    cart_id: str,
    product_id: str,
    body: UpdateQuantityBody,
    service: CartService = Depends(get_cart_service),
):
    cart = await service.update_quantity(
        _clean(cart_id, "cart_id"), _clean(product_id, "product_id"), body.quantity
    )
    return Envelope(result=cart)


@router.delete("/{cart_id}/items/{product_id}", response_model=Envelope[CartOut])
async def remove_item(cart_id: str, product_id: str, service: CartService = Depends(get_cart_service)):
    cart = await service.remove_item(_clean(cart_id, "cart_id"), _clean(product_id, "product_id"))
    return Envelope(result=cart)


@router.delete("/{cart_id}/items", response_model=Envelope[CartOut])
async def clear_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    cart = await service.clear_cart(_clean(cart_id, "cart_id"))
    return Envelope(result=cart)


@router.delete("/{cart_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    await service.delete_cart(_clean(cart_id, "cart_id"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

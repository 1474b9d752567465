"""
app/mappers/cart_mapper.py - Cart <-> storage document <-> wire DTO.

Storage document shape (one document per cart, items nested as an array):

    {
      "id": "...", "ownerKey": "...",
      "items": [{"productId", "name", "unitPrice", "quantity", "imageUrl"?, "specs"?}],
      "createdAt": "<ISO-8601>", "updatedAt": "<ISO-8601>"
    }

Optional item fields are left out of the document when they are empty.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from app.model.cart import Cart, CartItem
from app.schemas.cart import CartItemIn, CartItemOut, CartOut


def parse_timestamp(value: Any) -> datetime:
    """Accept ISO strings (with or without 'Z') and Firestore datetimes."""
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


# ---------- storage ----------
def item_to_document(item: CartItem) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "productId": item.product_id,
        "name": item.name,
        "unitPrice": int(item.unit_price),
        "quantity": int(item.quantity),
    }
    if item.image_url:
        doc["imageUrl"] = item.image_url
    if item.specs:
        doc["specs"] = dict(item.specs)
    return doc


def item_from_document(raw: Dict[str, Any]) -> CartItem:
    return CartItem(
        product_id=str(raw["productId"]),
        name=raw.get("name", ""),
        unit_price=int(raw.get("unitPrice", 0) or 0),
        quantity=int(raw.get("quantity", 0) or 0),
        image_url=raw.get("imageUrl") or None,
        specs=raw.get("specs") or None,
    )


def to_document(cart: Cart) -> Dict[str, Any]:
    return {
        "id": cart.id,
        "ownerKey": cart.owner_key,
        "items": [item_to_document(i) for i in cart.items],
        "createdAt": cart.created_at.isoformat(),
        "updatedAt": cart.updated_at.isoformat(),
    }


def from_document(raw: Dict[str, Any]) -> Cart:
    return Cart(
        id=str(raw["id"]),
        owner_key=raw.get("ownerKey", ""),
        items=[item_from_document(i) for i in raw.get("items") or []],
        created_at=parse_timestamp(raw["createdAt"]),
        updated_at=parse_timestamp(raw["updatedAt"]),
    )


# ---------- wire ----------
def items_from_input(items: Iterable[CartItemIn]) -> List[CartItem]:
    return [
        CartItem(
            product_id=i.product_id,
            name=i.name,
            unit_price=i.unit_price,
            quantity=i.quantity,
            image_url=i.image_url or None,
            specs=i.specs or None,
        )
        for i in items
    ]


def to_dto(cart: Cart) -> CartOut:
    return CartOut(
        id=cart.id,
        owner_key=cart.owner_key,
        items=[
            CartItemOut(
                product_id=i.product_id,
                name=i.name,
                unit_price=i.unit_price,
                quantity=i.quantity,
                image_url=i.image_url,
                specs=i.specs,
            )
            for i in cart.items
        ],
        created_at=cart.created_at,
        updated_at=cart.updated_at,
        subtotal=cart.subtotal(),
        total_item_count=cart.total_item_count(),
    )

"""
app/model/cart.py - Cart aggregate and its line items.

The cart never talks to storage or to the catalog. Stock checks, product
existence and persistence belong to `app.services.cart_service`; the methods
here only keep the item list consistent and never raise.

Line items are snapshots: name, unit price, image and specs are copied from
the product when the item is first added and are not resynced afterwards
(price-at-add-time).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

SpecValue = Union[str, int, float, bool]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartItem:
    product_id: str
    name: str
    unit_price: int  # cents
    quantity: int
    image_url: Optional[str] = None
    specs: Optional[Dict[str, SpecValue]] = None

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    id: str
    owner_key: str
    items: List[CartItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    # ---------- reads ----------
    def get_item(self, product_id: str) -> Optional[CartItem]:
        return next((i for i in self.items if i.product_id == product_id), None)

    def total_item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    def subtotal(self) -> int:
        return sum(i.unit_price * i.quantity for i in self.items)

    def is_empty(self) -> bool:
        return len(self.items) == 0

    # ---------- mutations ----------
    def add_item(self, item: CartItem) -> None:
        """Add a line, or bump the quantity of the line with the same product_id.

        On merge only the quantity accumulates; the existing snapshot fields win.
        """
        existing = self.get_item(item.product_id)
        if existing:
            existing.quantity += item.quantity
        else:
            self.items.append(item)
        self.touch()

    def set_item_quantity(self, product_id: str, quantity: int) -> None:
        """Replace a line's quantity. `quantity <= 0` removes the line.

        Unknown product_id is a silent no-op.
        """
        if quantity <= 0:
            self.remove_item(product_id)
            return
        item = self.get_item(product_id)
        if item is None:
            return
        item.quantity = quantity
        self.touch()

    def remove_item(self, product_id: str) -> None:
        self.items = [i for i in self.items if i.product_id != product_id]
        self.touch()

    def clear(self) -> None:
        self.items = []
        self.touch()

    def touch(self) -> None:
        self.updated_at = utcnow()

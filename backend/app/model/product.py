"""
app/model/product.py - Catalog product as seen by the cart and the admin panel.

Prices are integers in the smallest currency unit (cents).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from app.model.cart import SpecValue, utcnow


class ProductStatus(str, Enum):
    AVAILABLE = "available"
    OUT_OF_STOCK = "out_of_stock"
    DISCONTINUED = "discontinued"


@dataclass
class Product:
    id: str
    name: str
    unit_price: int
    stock: int
    description: str = ""
    category: str = ""
    featured: bool = False
    status: ProductStatus = ProductStatus.AVAILABLE
    active: bool = True
    images: List[str] = field(default_factory=list)
    specs: Dict[str, SpecValue] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def is_available(self) -> bool:
        return self.active and self.status == ProductStatus.AVAILABLE and self.stock > 0

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, description and category."""
        term = term.lower()
        return any(term in (v or "").lower() for v in (self.name, self.description, self.category))

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

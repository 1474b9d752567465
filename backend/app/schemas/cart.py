"""
app/schemas/cart.py - Pydantic models for Cart requests and responses.

Wire names are camelCase (`ownerKey`, `productId`, `unitPrice`, ...); the
snake_case field names are accepted on input as well. Prices are cents.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, clean_identifier

SpecValue = Union[bool, int, float, str]


class CartItemIn(CamelModel):
    """A line item supplied when a cart is created with initial contents."""
    product_id: str = Field(..., description="ID of the product")
    name: str = Field(..., description="Product name at the time of adding")
    unit_price: int = Field(..., ge=0, description="Unit price in cents at the time of adding")
    quantity: int = Field(..., ge=1, description="Quantity of the product in the cart")
    image_url: Optional[str] = Field(None, description="Primary product image")
    specs: Optional[Dict[str, SpecValue]] = Field(None, description="Product specifications snapshot")

    @field_validator("product_id")
    @classmethod
    def _clean_pid(cls, v: str) -> str:
        return clean_identifier(v)


class CartCreate(CamelModel):
    owner_key: str = Field(..., description="Session or user key owning the cart")
    items: List[CartItemIn] = Field(default_factory=list)

    @field_validator("owner_key")
    @classmethod
    def _clean_owner(cls, v: str) -> str:
        return clean_identifier(v)


class AddItemBody(CamelModel):
    """Add to cart by product ID; name/price/image are taken from the catalog."""
    product_id: str = Field(..., description="Product ID (the same 'id' you see in /products).")
    quantity: int = Field(1, ge=1, le=10000, description="Quantity (>=1).")

    @field_validator("product_id")
    @classmethod
    def _clean_pid(cls, v: str) -> str:
        return clean_identifier(v)


class UpdateQuantityBody(CamelModel):
    quantity: int = Field(..., ge=0, le=10000, description="New quantity; 0 removes the line.")


class CartItemOut(CamelModel):
    product_id: str
    name: str
    unit_price: int
    quantity: int
    image_url: Optional[str] = None
    specs: Optional[Dict[str, SpecValue]] = None


class CartOut(CamelModel):
    id: str
    owner_key: str
    items: List[CartItemOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    subtotal: int = 0
    total_item_count: int = 0

"""
# `app/schemas/product.py` - Product schemas

Pydantic models for catalog create / update / output.

| Field       | Type              | Notes |
|-------------|-------------------|-------|
| name        | `str`             | Display name, required on create |
| description | `str`             | Optional |
| category    | `str`             | Free-form category label, exact match filter |
| featured    | `bool`            | Shown in the storefront highlights |
| unitPrice   | `int`             | Cents, >= 0 |
| stock       | `int`             | Units in stock, >= 0 |
| status      | `str`             | `available` / `out_of_stock` / `discontinued` |
| active      | `bool`            | Soft-delete flag |
| images      | `list[str]`       | First image is used as the cart thumbnail |
| specs       | `dict`            | Free-form specifications (str/number/bool values) |

`ProductOut` adds `id`, `isAvailable`, `createdAt` and `updatedAt`.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from app.model.product import ProductStatus
from app.schemas.cart import SpecValue
from app.schemas.common import CamelModel


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field("", description="Detailed description of the product")
    category: str = Field("", description="Category label, e.g. \"rfid-readers\"")
    featured: bool = Field(False, description="Highlight on the storefront")
    unit_price: int = Field(..., ge=0, description="Price in cents")
    stock: int = Field(..., ge=0, description="Quantity in stock")
    status: ProductStatus = Field(ProductStatus.AVAILABLE)
    active: bool = Field(True)
    images: List[str] = Field(default_factory=list, max_length=10)
    specs: Dict[str, SpecValue] = Field(default_factory=dict)


class ProductUpdate(CamelModel):
    """Schema for updating product fields (admin). Only sent fields change."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    featured: Optional[bool] = None
    unit_price: Optional[int] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    status: Optional[ProductStatus] = None
    active: Optional[bool] = None
    images: Optional[List[str]] = Field(None, max_length=10)
    specs: Optional[Dict[str, SpecValue]] = None


class ProductOut(CamelModel):
    id: str
    name: str
    description: str = ""
    category: str = ""
    featured: bool = False
    unit_price: int
    stock: int
    status: ProductStatus
    active: bool
    is_available: bool
    images: List[str] = Field(default_factory=list)
    specs: Dict[str, SpecValue] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class CategoryOut(CamelModel):
    value: str
    label: str
    count: int = Field(0, description="Active products in the category")

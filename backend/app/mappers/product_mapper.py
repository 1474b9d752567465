"""
app/mappers/product_mapper.py - Product <-> storage document <-> wire DTO.
"""
from typing import Any, Dict

from app.mappers.cart_mapper import parse_timestamp
from app.model.product import Product, ProductStatus
from app.schemas.product import ProductCreate, ProductOut


def to_document(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "category": product.category,
        "featured": bool(product.featured),
        "unitPrice": int(product.unit_price),
        "stock": int(product.stock),
        "status": product.status.value,
        "active": bool(product.active),
        "images": list(product.images),
        "specs": dict(product.specs),
        "createdAt": product.created_at.isoformat(),
        "updatedAt": product.updated_at.isoformat(),
    }


def from_document(raw: Dict[str, Any]) -> Product:
    return Product(
        id=str(raw["id"]),
        name=raw.get("name", ""),
        description=raw.get("description", "") or "",
        category=raw.get("category", "") or "",
        featured=bool(raw.get("featured", False)),
        unit_price=int(raw.get("unitPrice", 0) or 0),
        stock=int(raw.get("stock", 0) or 0),
        status=ProductStatus(raw.get("status", ProductStatus.AVAILABLE.value)),
        active=bool(raw.get("active", True)),
        images=list(raw.get("images") or []),
        specs=dict(raw.get("specs") or {}),
        created_at=parse_timestamp(raw["createdAt"]),
        updated_at=parse_timestamp(raw["updatedAt"]),
    )


def from_create(product_id: str, dto: ProductCreate) -> Product:
    return Product(
        id=product_id,
        name=dto.name,
        description=dto.description,
        category=dto.category,
        featured=dto.featured,
        unit_price=dto.unit_price,
        stock=dto.stock,
        status=dto.status,
        active=dto.active,
        images=list(dto.images),
        specs=dict(dto.specs),
    )


def to_dto(product: Product) -> ProductOut:
    return ProductOut(
        id=product.id,
        name=product.name,
        description=product.description,
        category=product.category,
        featured=product.featured,
        unit_price=product.unit_price,
        stock=product.stock,
        status=product.status,
        active=product.active,
        is_available=product.is_available,
        images=product.images,
        specs=product.specs,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )

"""
# `app/routers/products.py` - Product catalog

## Public endpoints

### `GET /products?category=&featured=&q=`
Lists active products, newest first. `category` and `featured` are exact
filters; `q` is a case-insensitive search over name, description and
category. Filters combine.

### `GET /products/categories`
Categories used by active products, with product counts.

### `GET /products/{product_id}`
Single product. Inactive (soft-deleted) products are still returned so that
old cart lines can be resolved; check `isAvailable` before selling.

---

## Admin endpoints (prefix `/admin`, `require_admin`)

### `POST /admin/products`
Creates a product from a JSON `ProductCreate` body. Images are uploaded
beforehand through `POST /admin/uploads/presign` and passed as URLs.

### `GET /admin/products`
Same as the public list but includes inactive products.

### `PATCH /admin/products/{product_id}`
Partial update; only the fields present in the body change.

### `DELETE /admin/products/{product_id}?hard=false`
- `hard=false` (default): soft delete, `active=False`.
- `hard=true`: the document is removed.

Unknown ids answer `404 PRODUCT_NOT_FOUND`.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.security import require_admin
from app.dependencies import get_product_service
from app.schemas.common import Envelope
from app.schemas.product import CategoryOut, ProductCreate, ProductOut, ProductUpdate
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=Envelope[List[ProductOut]], summary="List Products")
async def list_products(
    category: Optional[str] = Query(None, description="Exact category label"),
    featured: Optional[bool] = Query(None, description="Only featured (true) or non-featured (false)"),
    q: Optional[str] = Query(None, max_length=100, description="Search term"),
    service: ProductService = Depends(get_product_service),
):
    return Envelope(result=await service.list_products(category=category, featured=featured, q=q))


@router.get("/categories", response_model=Envelope[List[CategoryOut]], summary="List Categories")
async def list_categories(service: ProductService = Depends(get_product_service)):
    return Envelope(result=await service.list_categories())


@router.get("/{product_id}", response_model=Envelope[ProductOut], summary="Get Product")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return Envelope(result=await service.get_product(product_id))


# Admin router for product management
admin_router = APIRouter(prefix="/products", tags=["Admin: Products"], dependencies=[Depends(require_admin)])


@admin_router.post("", response_model=Envelope[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return Envelope(result=await service.create_product(payload))


@admin_router.get("", response_model=Envelope[List[ProductOut]])
async def list_all_products(service: ProductService = Depends(get_product_service)):
    return Envelope(result=await service.list_products(include_inactive=True))


@admin_router.patch("/{product_id}", response_model=Envelope[ProductOut])
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return Envelope(result=await service.update_product(product_id, payload))


@admin_router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    hard: bool = Query(False, description="Permanently delete instead of deactivating"),
    service: ProductService = Depends(get_product_service),
):
    await service.delete_product(product_id, hard=hard)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

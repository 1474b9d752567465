# app/services/product_service.py
import logging
import uuid
from collections import Counter
from typing import List, Optional

from app.core.exceptions import ProductNotFound
from app.mappers import product_mapper
from app.model.cart import utcnow
from app.repositories.products import ProductRepository
from app.schemas.product import CategoryOut, ProductCreate, ProductOut, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, products: ProductRepository):
        self._products = products

    async def create_product(self, payload: ProductCreate) -> ProductOut:
        product = product_mapper.from_create(str(uuid.uuid4()), payload)
        await self._products.save(product)
        logger.info("product created product_id=%s", product.id)
        return product_mapper.to_dto(product)

    async def get_product(self, product_id: str) -> ProductOut:
        product = await self._products.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product_mapper.to_dto(product)

    async def list_products(
        self,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        q: Optional[str] = None,
    ) -> List[ProductOut]:
        """Filters combine. A blank `q` is ignored."""
        term = (q or "").strip()
        filters = dict(include_inactive=include_inactive, category=category, featured=featured)
        if term:
            products = await self._products.search_products(term, **filters)
        else:
            products = await self._products.list_products(**filters)
        logger.info("list_products category=%s featured=%s q=%r count=%d", category, featured, term, len(products))
        return [product_mapper.to_dto(p) for p in products]

    async def list_categories(self) -> List[CategoryOut]:
        """Categories in use by active products, alphabetical."""
        counts = Counter(p.category for p in await self._products.list_products() if p.category)
        return [CategoryOut(value=c, label=c, count=n) for c, n in sorted(counts.items())]

    async def update_product(self, product_id: str, payload: ProductUpdate) -> ProductOut:
        """Only the fields present in the request body are changed."""
        product = await self._products.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        changes = payload.model_dump(exclude_unset=True)
        for key, value in changes.items():
            if value is not None:
                setattr(product, key, value)
        product.updated_at = utcnow()

        await self._products.save(product)
        logger.info("product updated product_id=%s fields=%s", product_id, sorted(changes))
        return product_mapper.to_dto(product)

    async def delete_product(self, product_id: str, hard: bool = False) -> None:
        """Soft delete (active=False) by default; `hard=True` removes the document."""
        product = await self._products.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        if hard:
            await self._products.delete(product_id)
        else:
            product.active = False
            product.updated_at = utcnow()
            await self._products.save(product)
        logger.info("product deleted product_id=%s hard=%s", product_id, hard)

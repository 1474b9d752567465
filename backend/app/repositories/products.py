"""
app/repositories/products.py - Product catalog persistence.

`ProductLookup` is the read-only slice the cart service needs; the full
`ProductRepository` adds the admin CRUD used by the catalog routes.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from google.cloud.firestore_v1 import FieldFilter

from app.mappers import product_mapper
from app.model.product import Product

logger = logging.getLogger(__name__)


class ProductLookup(ABC):

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        ...


class ProductRepository(ProductLookup):

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Full-document upsert."""

    @abstractmethod
    async def list_products(
        self,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        """Newest first. `category` and `featured` are exact-match filters."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        ...

    async def search_products(
        self,
        term: str,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        """Substring search on name, description and category.

        Firestore has no text search, so this scans the listing and filters in memory.
        """
        products = await self.list_products(
            include_inactive=include_inactive, category=category, featured=featured
        )
        return [p for p in products if p.matches(term)]


def _newest_first(products: List[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.created_at, reverse=True)


class FirestoreProductRepository(ProductRepository):

    def __init__(self, db, collection: str):
        self._db = db
        self._collection = collection

    def _doc(self, product_id: str):
        return self._db.collection(self._collection).document(product_id)

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        snap = await self._doc(product_id).get()
        if not snap.exists:
            logger.warning("product not found product_id=%s", product_id)
            return None
        return product_mapper.from_document(snap.to_dict() or {})

    async def save(self, product: Product) -> None:
        await self._doc(product.id).set(product_mapper.to_document(product))

    async def list_products(
        self,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        q = self._db.collection(self._collection)
        if not include_inactive:
            q = q.where(filter=FieldFilter("active", "==", True))
        if category:
            q = q.where(filter=FieldFilter("category", "==", category))
        if featured is not None:
            q = q.where(filter=FieldFilter("featured", "==", featured))
        out: List[Product] = []
        async for snap in q.stream():
            out.append(product_mapper.from_document(snap.to_dict() or {}))
        return _newest_first(out)

    async def delete(self, product_id: str) -> None:
        await self._doc(product_id).delete()


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        doc = self.documents.get(product_id)
        return product_mapper.from_document(copy.deepcopy(doc)) if doc else None

    async def save(self, product: Product) -> None:
        self.documents[product.id] = product_mapper.to_document(product)

    async def list_products(
        self,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        products = [product_mapper.from_document(copy.deepcopy(d)) for d in self.documents.values()]
        if not include_inactive:
            products = [p for p in products if p.active]
        if category:
            products = [p for p in products if p.category == category]
        if featured is not None:
            products = [p for p in products if p.featured == featured]
        return _newest_first(products)

    async def delete(self, product_id: str) -> None:
        self.documents.pop(product_id, None)

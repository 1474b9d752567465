"""
app/repositories/carts.py - Cart persistence.

`CartRepository` is the port the cart service programs against. Two adapters:

- `FirestoreCartRepository`: one document per cart in the carts collection,
  keyed by cart id. Every write is a full-document `set` (no patches, no
  preconditions), so concurrent writers on the same cart are last-write-wins.
- `InMemoryCartRepository`: keeps serialized documents in a dict; used by the
  tests and for running the API without Firestore.

Both return `None` for misses instead of raising.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from google.cloud.firestore_v1 import FieldFilter

from app.mappers import cart_mapper
from app.model.cart import Cart

logger = logging.getLogger(__name__)


class CartRepository(ABC):

    @abstractmethod
    async def create(self, cart: Cart) -> None:
        """Unconditional upsert of the full cart document."""

    @abstractmethod
    async def get_by_id(self, cart_id: str) -> Optional[Cart]:
        ...

    @abstractmethod
    async def get_by_owner(self, owner_key: str) -> Optional[Cart]:
        """First cart found for the owner key; which one is unspecified if several exist."""

    @abstractmethod
    async def update(self, cart: Cart) -> None:
        """Full-document overwrite, same as `create`."""

    @abstractmethod
    async def delete(self, cart_id: str) -> None:
        """Delete by id; deleting a missing cart is not an error."""


class FirestoreCartRepository(CartRepository):

    def __init__(self, db, collection: str):
        self._db = db
        self._collection = collection

    def _doc(self, cart_id: str):
        return self._db.collection(self._collection).document(cart_id)

    async def _put(self, cart: Cart) -> None:
        await self._doc(cart.id).set(cart_mapper.to_document(cart))

    async def create(self, cart: Cart) -> None:
        await self._put(cart)
        logger.info("cart created cart_id=%s owner_key=%s", cart.id, cart.owner_key)

    async def get_by_id(self, cart_id: str) -> Optional[Cart]:
        snap = await self._doc(cart_id).get()
        if not snap.exists:
            logger.warning("cart not found cart_id=%s", cart_id)
            return None
        return cart_mapper.from_document(snap.to_dict() or {})

    async def get_by_owner(self, owner_key: str) -> Optional[Cart]:
        query = (
            self._db.collection(self._collection)
            .where(filter=FieldFilter("ownerKey", "==", owner_key))
            .limit(1)
        )
        async for snap in query.stream():
            return cart_mapper.from_document(snap.to_dict() or {})
        logger.warning("no cart for owner_key=%s", owner_key)
        return None

    async def update(self, cart: Cart) -> None:
        await self._put(cart)
        logger.info("cart updated cart_id=%s items=%d", cart.id, len(cart.items))

    async def delete(self, cart_id: str) -> None:
        await self._doc(cart_id).delete()
        logger.info("cart deleted cart_id=%s", cart_id)


class InMemoryCartRepository(CartRepository):

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}

    async def create(self, cart: Cart) -> None:
        self.documents[cart.id] = cart_mapper.to_document(cart)

    async def get_by_id(self, cart_id: str) -> Optional[Cart]:
        doc = self.documents.get(cart_id)
        return cart_mapper.from_document(copy.deepcopy(doc)) if doc else None

    async def get_by_owner(self, owner_key: str) -> Optional[Cart]:
        for doc in self.documents.values():
            if doc.get("ownerKey") == owner_key:
                return cart_mapper.from_document(copy.deepcopy(doc))
        return None

    async def update(self, cart: Cart) -> None:
        self.documents[cart.id] = cart_mapper.to_document(cart)

    async def delete(self, cart_id: str) -> None:
        self.documents.pop(cart_id, None)

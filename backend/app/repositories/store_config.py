"""
app/repositories/store_config.py - Storefront configuration document.

Stored as `<store_config_collection>/main`. Fields use the same camelCase
naming as the rest of the documents.
"""
from dataclasses import asdict
from typing import Any, Dict, Optional

from pydantic.alias_generators import to_camel

from app.mappers.cart_mapper import parse_timestamp
from app.model.store_config import STORE_CONFIG_DOC_ID, StoreConfig

_FIELDS = [f for f in StoreConfig.__dataclass_fields__ if f != "updated_at"]


def to_document(config: StoreConfig) -> Dict[str, Any]:
    data = asdict(config)
    doc = {to_camel(k): data[k] for k in _FIELDS}
    doc["updatedAt"] = config.updated_at.isoformat()
    return doc


def from_document(raw: Dict[str, Any]) -> StoreConfig:
    kwargs = {k: raw[to_camel(k)] for k in _FIELDS if to_camel(k) in raw}
    config = StoreConfig(**kwargs)
    if raw.get("updatedAt"):
        config.updated_at = parse_timestamp(raw["updatedAt"])
    return config


class FirestoreStoreConfigRepository:

    def __init__(self, db, collection: str):
        self._db = db
        self._collection = collection

    def _doc(self):
        return self._db.collection(self._collection).document(STORE_CONFIG_DOC_ID)

    async def get(self) -> Optional[StoreConfig]:
        snap = await self._doc().get()
        return from_document(snap.to_dict() or {}) if snap.exists else None

    async def save(self, config: StoreConfig) -> None:
        await self._doc().set(to_document(config))


class InMemoryStoreConfigRepository:

    def __init__(self) -> None:
        self.document: Optional[Dict[str, Any]] = None

    async def get(self) -> Optional[StoreConfig]:
        return from_document(dict(self.document)) if self.document else None

    async def save(self, config: StoreConfig) -> None:
        self.document = to_document(config)

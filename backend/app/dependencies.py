"""
app/dependencies.py - FastAPI providers for repositories and services.

Routers only depend on the `get_*_service` functions. Tests swap the
repository providers through `app.dependency_overrides` to run on the
in-memory adapters.
"""
from fastapi import Depends

from app.config import Settings, collection_name, get_bucket, get_firestore, get_settings
from app.repositories.carts import CartRepository, FirestoreCartRepository
from app.repositories.products import FirestoreProductRepository, ProductRepository
from app.repositories.store_config import FirestoreStoreConfigRepository
from app.services.cart_service import CartService
from app.services.product_service import ProductService
from app.services.store_config_service import StoreConfigService
from app.services.uploads import UploadService
from app.services.whatsapp_service import WhatsAppService


# ---------- repositories ----------
def get_cart_repository(settings: Settings = Depends(get_settings)) -> CartRepository:
    return FirestoreCartRepository(get_firestore(), collection_name(settings, settings.carts_collection))


def get_product_repository(settings: Settings = Depends(get_settings)) -> ProductRepository:
    return FirestoreProductRepository(get_firestore(), collection_name(settings, settings.products_collection))


def get_store_config_repository(settings: Settings = Depends(get_settings)):
    return FirestoreStoreConfigRepository(
        get_firestore(), collection_name(settings, settings.store_config_collection)
    )


def get_storage_bucket():
    return get_bucket()


# ---------- services ----------
def get_cart_service(
    carts: CartRepository = Depends(get_cart_repository),
    products: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_settings),
) -> CartService:
    return CartService(carts, products, strict_items=settings.strict_cart_items)


def get_product_service(products: ProductRepository = Depends(get_product_repository)) -> ProductService:
    return ProductService(products)


def get_store_config_service(
    repo=Depends(get_store_config_repository),
    settings: Settings = Depends(get_settings),
) -> StoreConfigService:
    return StoreConfigService(repo, settings)


def get_whatsapp_service(
    carts: CartRepository = Depends(get_cart_repository),
    products: ProductRepository = Depends(get_product_repository),
    store_config: StoreConfigService = Depends(get_store_config_service),
) -> WhatsAppService:
    return WhatsAppService(carts, products, store_config)


def get_upload_service(
    bucket=Depends(get_storage_bucket),
    settings: Settings = Depends(get_settings),
) -> UploadService:
    return UploadService(bucket, expires_seconds=settings.upload_url_expires_seconds)

"""Shared fixtures: in-memory adapters, services and an app wired to them."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.core.auth import get_principal
from app.dependencies import (
    get_cart_repository,
    get_product_repository,
    get_storage_bucket,
    get_store_config_repository,
)
from app.main import app as fastapi_app
from app.mappers import product_mapper
from app.model.product import Product, ProductStatus
from app.repositories.carts import InMemoryCartRepository
from app.repositories.products import InMemoryProductRepository
from app.repositories.store_config import InMemoryStoreConfigRepository
from app.schemas.principal import Principal
from app.services.cart_service import CartService

ADMIN = Principal(uid="admin-1", role="admin", email="admin@example.com")
CUSTOMER = Principal(uid="user-1", role="user")


def make_product(product_id="prod-1", **overrides) -> Product:
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    fields = dict(
        id=product_id,
        name="Pallet Rack",
        unit_price=1500,
        stock=10,
        description="Heavy duty rack",
        status=ProductStatus.AVAILABLE,
        active=True,
        images=["https://img.example.com/rack.jpg"],
        specs={"material": "steel", "levels": 4},
        created_at=created,
        updated_at=created,
    )
    fields.update(overrides)
    return Product(**fields)


def seed_product(repo: InMemoryProductRepository, product: Product) -> Product:
    repo.documents[product.id] = product_mapper.to_document(product)
    return product


class FakeBlob:
    def __init__(self, name):
        self.name = name
        self.signed_with = None

    @property
    def public_url(self):
        return f"https://storage.googleapis.com/test-bucket/{self.name}"

    def generate_signed_url(self, **kwargs):
        self.signed_with = kwargs
        return f"https://signed.example.com/{self.name}?X-Goog-Signature=abc"


class FakeBucket:
    def __init__(self):
        self.blobs = {}

    def blob(self, name):
        self.blobs[name] = FakeBlob(name)
        return self.blobs[name]


@pytest.fixture
def cart_repo():
    return InMemoryCartRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def config_repo():
    return InMemoryStoreConfigRepository()


@pytest.fixture
def bucket():
    return FakeBucket()


@pytest.fixture
def settings():
    return Settings(company_name="Warehouse Solutions", whatsapp_number="5491112345678")


@pytest.fixture
def product(product_repo):
    return seed_product(product_repo, make_product())


@pytest.fixture
def cart_service(cart_repo, product_repo):
    return CartService(cart_repo, product_repo)


@pytest.fixture
def app(cart_repo, product_repo, config_repo, bucket, settings):
    fastapi_app.dependency_overrides[get_cart_repository] = lambda: cart_repo
    fastapi_app.dependency_overrides[get_product_repository] = lambda: product_repo
    fastapi_app.dependency_overrides[get_store_config_repository] = lambda: config_repo
    fastapi_app.dependency_overrides[get_storage_bucket] = lambda: bucket
    fastapi_app.dependency_overrides[get_settings] = lambda: settings
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def as_admin(app):
    app.dependency_overrides[get_principal] = lambda: ADMIN
    return ADMIN


@pytest.fixture
def as_customer(app):
    app.dependency_overrides[get_principal] = lambda: CUSTOMER
    return CUSTOMER

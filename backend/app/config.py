"""
app/config.py - Application configuration and Firebase initialization.

This module defines a Pydantic BaseSettings class to load configuration from environment,
and initializes the Firebase Admin SDK (Firestore, Storage) on first use.
Everything is reached through cached factories so the tests can run without
credentials by overriding the FastAPI dependencies in `app.dependencies`.
"""
import logging
from functools import lru_cache
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async, storage
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    firebase_cred_file: str = Field("firebase_service_account.json")
    firebase_project_id: Optional[str] = Field(None)
    firebase_storage_bucket: Optional[str] = Field(None)
    # "dev_" -> "dev_carts", "dev_products", ...
    firebase_collection_prefix: str = Field("")

    carts_collection: str = Field("carts")
    products_collection: str = Field("products")
    store_config_collection: str = Field("store_config")

    # Fallbacks used until the store configuration document is saved
    whatsapp_number: str = Field("")
    company_name: str = Field("Warehouse Solutions")

    # Reject quantity updates for products that are not in the cart
    strict_cart_items: bool = Field(False)
    upload_url_expires_seconds: int = Field(900, ge=60, le=7 * 24 * 3600)

    debug: bool = Field(False)
    log_level: str = Field("INFO")
    allowed_origins: str = Field("*")  # Comma-separated list or '*' for all

    @property
    def origins(self) -> list:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()] or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def collection_name(settings: Settings, base: str) -> str:
    prefix = (settings.firebase_collection_prefix or "").strip()
    return f"{prefix}{base}" if prefix else base


def init_firebase(settings: Optional[Settings] = None) -> firebase_admin.App:
    """Initialize the default Firebase app once; reuse it on later calls."""
    settings = settings or get_settings()
    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id
    if settings.firebase_storage_bucket:
        options["storageBucket"] = settings.firebase_storage_bucket

    try:
        cred = credentials.Certificate(settings.firebase_cred_file)
        app = firebase_admin.initialize_app(cred, options)
    except ValueError as e:
        if "already exists" in str(e):
            # Firebase app already initialized, get the default app
            return firebase_admin.get_app()
        raise
    logger.info("firebase initialized project=%s", settings.firebase_project_id)
    return app


@lru_cache
def get_firestore():
    """Process-wide async Firestore client."""
    return firestore_async.client(init_firebase())


@lru_cache
def get_bucket():
    """Default storage bucket."""
    return storage.bucket(app=init_firebase())

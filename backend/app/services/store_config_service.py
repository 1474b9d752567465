# app/services/store_config_service.py
import logging
from dataclasses import asdict

from app.config import Settings
from app.model.cart import utcnow
from app.model.store_config import StoreConfig
from app.schemas.store_config import StoreConfigOut, StoreConfigUpdate

logger = logging.getLogger(__name__)

# null in a patch clears optional fields only
_NOT_NULL = {"company_name", "whatsapp_number", "description", "currency", "country", "timezone", "language"}


class StoreConfigService:
    """Single storefront configuration document, with defaults from Settings."""

    def __init__(self, repo, settings: Settings):
        self._repo = repo
        self._settings = settings

    def defaults(self) -> StoreConfig:
        return StoreConfig(
            company_name=self._settings.company_name,
            whatsapp_number=self._settings.whatsapp_number,
        )

    async def load(self) -> StoreConfig:
        config = await self._repo.get()
        return config if config is not None else self.defaults()

    async def get_config(self) -> StoreConfigOut:
        return StoreConfigOut(**asdict(await self.load()))

    async def update_config(self, patch: StoreConfigUpdate) -> StoreConfigOut:
        config = await self.load()
        changes = patch.model_dump(exclude_unset=True)
        for key, value in changes.items():
            if value is None and key in _NOT_NULL:
                continue
            setattr(config, key, value)
        config.updated_at = utcnow()
        await self._repo.save(config)
        logger.info("store config updated fields=%s", sorted(changes))
        return StoreConfigOut(**asdict(config))

"""
Store configuration router: company details, WhatsApp number, shipping
defaults. Reads are public (the storefront needs them), writes are admin.
"""
from fastapi import APIRouter, Depends

from app.core.security import require_admin
from app.dependencies import get_store_config_service
from app.schemas.common import Envelope
from app.schemas.store_config import StoreConfigOut, StoreConfigUpdate
from app.services.store_config_service import StoreConfigService

router = APIRouter(prefix="/config", tags=["Store Config"])
admin_router = APIRouter(prefix="/config", tags=["Admin: Store Config"], dependencies=[Depends(require_admin)])


@router.get("", response_model=Envelope[StoreConfigOut])
async def get_store_config(service: StoreConfigService = Depends(get_store_config_service)):
    """
    Stored configuration, or the defaults from the environment when nothing
    has been saved yet.
    """
    return Envelope(result=await service.get_config())


@admin_router.put("", response_model=Envelope[StoreConfigOut])
async def update_store_config(
    payload: StoreConfigUpdate,
    service: StoreConfigService = Depends(get_store_config_service),
):
    """
    Update store configuration. Fields left out keep their value.
    """
    return Envelope(result=await service.update_config(payload))

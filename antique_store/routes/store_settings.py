"""
Store settings routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from antique_store.database import get_db
from antique_store.schemas import StoreSettingsResponse, StoreSettingsUpdate
from antique_store.services import store_settings_service

router = APIRouter()


@router.get(
    "/getStoreSettings",
    response_model=Optional[StoreSettingsResponse],
    operation_id="getStoreSettings",
)
async def get_store_settings(db: AsyncSession = Depends(get_db)):
    """Get store settings; null until settings are first saved."""
    return await store_settings_service.get_store_settings(db)


@router.post("/updateStoreSettings", response_model=StoreSettingsResponse, operation_id="updateStoreSettings")
async def update_store_settings(payload: StoreSettingsUpdate, db: AsyncSession = Depends(get_db)):
    """Create or update store settings. Omitted fields keep their stored value."""
    return await store_settings_service.update_store_settings(db, payload)

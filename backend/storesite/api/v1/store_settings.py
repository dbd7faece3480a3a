"""Store settings endpoints (GET / PUT / PATCH)."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from storesite.core.dependencies import get_store
from storesite.schemas.store_settings import PLACEHOLDER_SETTINGS, StoreSettingsResponse
from storesite.services import store_settings as settings_service
from storesite.services.record_store import RecordStore

router = APIRouter()


@router.get("")
async def get_store_settings(store: RecordStore = Depends(get_store)):
    """Current settings, or a placeholder while the site is still initializing."""
    current = await settings_service.get_settings(store)
    if current is None:
        return PLACEHOLDER_SETTINGS
    return current


@router.put("", response_model=StoreSettingsResponse)
async def replace_store_settings(
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store),
):
    """Full settings form. Every required field must be present and non-empty."""
    return await settings_service.apply_settings(store, payload)


@router.patch("", response_model=StoreSettingsResponse)
async def update_store_settings(
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store),
):
    """Partial update; omitted fields keep their current values."""
    return await settings_service.apply_settings(store, payload, partial=True)

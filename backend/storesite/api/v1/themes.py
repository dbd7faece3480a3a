"""AI theme generation and application."""

from fastapi import APIRouter, Depends, HTTPException

from storesite.core.dependencies import get_store, get_theme_generator
from storesite.schemas.store_settings import StoreSettingsResponse
from storesite.schemas.theme import ThemeApplyRequest, ThemeGenerateRequest, ThemeGenerationResult
from storesite.services.record_store import RecordStore
from storesite.services.theme_generator import ThemeGenerator, apply_theme

router = APIRouter()


@router.post("/generate", response_model=ThemeGenerationResult)
async def generate_themes(
    body: ThemeGenerateRequest,
    generator: ThemeGenerator = Depends(get_theme_generator),
):
    """Three theme proposals for a business description (demo themes if over quota)."""
    return await generator.suggest_themes(body.business_description)


@router.post("/apply", response_model=StoreSettingsResponse)
async def apply_selected_theme(
    body: ThemeApplyRequest,
    store: RecordStore = Depends(get_store),
):
    """Copy the chosen theme's colors (as hex) and font onto the store settings."""
    selected = next((t for t in body.themes if t.id == body.theme_id), None)
    if selected is None:
        raise HTTPException(status_code=400, detail="Theme not found")
    return await apply_theme(store, selected, hero_image_url=body.hero_image_url)

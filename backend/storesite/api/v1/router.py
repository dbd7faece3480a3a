"""Aggregate all v1 sub-routers."""

from fastapi import APIRouter

from storesite.api.v1.catalog import brands_router, categories_router, services_router
from storesite.api.v1.health import router as health_router
from storesite.api.v1.media import router as media_router
from storesite.api.v1.stock_photos import router as stock_photos_router
from storesite.api.v1.store_settings import router as store_settings_router
from storesite.api.v1.themes import router as themes_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["health"])
api_v1_router.include_router(
    store_settings_router, prefix="/store-settings", tags=["store-settings"]
)
api_v1_router.include_router(
    categories_router, prefix="/product-categories", tags=["product-categories"]
)
api_v1_router.include_router(
    services_router, prefix="/special-services", tags=["special-services"]
)
api_v1_router.include_router(brands_router, prefix="/featured-brands", tags=["featured-brands"])
api_v1_router.include_router(themes_router, prefix="/themes", tags=["themes"])
api_v1_router.include_router(stock_photos_router, prefix="/stock-photos", tags=["stock-photos"])
api_v1_router.include_router(media_router, prefix="/uploads", tags=["uploads"])

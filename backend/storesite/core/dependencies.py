"""FastAPI dependencies: handles built at startup and kept on ``app.state``.

Tests replace these through ``app.dependency_overrides``.
"""

from fastapi import Request

from storesite.services.record_store import RecordStore
from storesite.services.stock_photos import StockPhotoClient
from storesite.services.theme_generator import ThemeGenerator


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_upload_prefix(request: Request) -> str:
    """Key prefix for uploaded files (the tenant's schema key)."""
    return request.app.state.upload_prefix


def get_theme_generator(request: Request) -> ThemeGenerator:
    return request.app.state.theme_generator


def get_stock_photo_client(request: Request) -> StockPhotoClient:
    return request.app.state.stock_photos

"""Shared test fixtures."""

import os
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

# No database or API keys in tests: the app must come up on the memory store
os.environ.setdefault("ENVIRONMENT", "development")
os.environ["DATABASE_URL"] = "postgresql://placeholder"
os.environ.pop("CLIENT_NAME", None)
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("UNSPLASH_ACCESS_KEY", None)

from storesite.core.dependencies import (  # noqa: E402
    get_stock_photo_client,
    get_store,
    get_theme_generator,
    get_upload_prefix,
)
from storesite.main import app  # noqa: E402
from storesite.services.record_store import MemoryRecordStore  # noqa: E402
from storesite.services.stock_photos import StockPhotoClient  # noqa: E402
from storesite.services.tenancy import default_store_settings, schema_key_for  # noqa: E402
from storesite.services.theme_generator import ThemeGenerator  # noqa: E402
from tests.helpers import TENANT_DOMAIN, TENANT_NAME  # noqa: E402


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
async def seeded_store(store: MemoryRecordStore) -> MemoryRecordStore:
    """Memory store with first-boot settings for TENANT_NAME."""
    await store.seed_settings(default_store_settings(TENANT_NAME, TENANT_DOMAIN))
    return store


@pytest.fixture
def openai_client() -> MagicMock:
    """Stand-in for AsyncOpenAI; tests set ``chat.completions.create``."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        side_effect=AssertionError("OpenAI should not be called")
    )
    return client


@pytest.fixture
def theme_generator(openai_client: MagicMock) -> ThemeGenerator:
    return ThemeGenerator(openai_client, model="test-model")


@pytest.fixture
def stock_photo_client() -> StockPhotoClient:
    return StockPhotoClient(access_key=None)


@pytest.fixture
async def client(
    store: MemoryRecordStore,
    theme_generator: ThemeGenerator,
    stock_photo_client: StockPhotoClient,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP test client for the FastAPI app, backed by the ``store`` fixture.

    ASGITransport does not run the lifespan, so every app.state handle is
    supplied through dependency overrides.
    """
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_theme_generator] = lambda: theme_generator
    app.dependency_overrides[get_stock_photo_client] = lambda: stock_photo_client
    app.dependency_overrides[get_upload_prefix] = lambda: schema_key_for(TENANT_NAME)
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()

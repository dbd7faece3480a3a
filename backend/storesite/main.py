"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from openai import AsyncOpenAI
from starlette.exceptions import HTTPException as StarletteHTTPException

from storesite.api.v1.router import api_v1_router
from storesite.core.config import settings
from storesite.core.exceptions import (
    ProblemDetailError,
    http_exception_handler,
    problem_detail_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from storesite.core.logging import configure_logging
from storesite.core.middleware.cors import get_cors_config
from storesite.core.middleware.request_id import RequestIdMiddleware
from storesite.db.session import create_engine
from storesite.services.demo_data import build_demo_store
from storesite.services.sql_store import SqlRecordStore
from storesite.services.stock_photos import StockPhotoClient
from storesite.services.tenancy import provision_tenant, schema_key_for
from storesite.services.theme_generator import ThemeGenerator

logger = logging.getLogger(__name__)

LOCAL_UPLOAD_PREFIX = "local"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build shared handles and provision the tenant schema once per process."""
    configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    engine = None
    client_name = (settings.CLIENT_NAME or "").strip()
    if client_name and settings.has_database:
        schema_key = schema_key_for(client_name)
        engine = create_engine()
        app.state.store = SqlRecordStore(engine, schema_key)
        app.state.upload_prefix = schema_key
        # Failure is logged inside; keep serving either way.
        await provision_tenant(app.state.store, client_name, settings.DOMAIN)
    else:
        logger.info("Skipping client initialization - missing CLIENT_NAME or DATABASE_URL")
        app.state.store = await build_demo_store(client_name or None, settings.DOMAIN)
        app.state.upload_prefix = schema_key_for(client_name) if client_name else LOCAL_UPLOAD_PREFIX

    openai_client = (
        AsyncOpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.OPENAI_TIMEOUT)
        if settings.OPENAI_API_KEY
        else None
    )
    app.state.theme_generator = ThemeGenerator(openai_client, model=settings.OPENAI_MODEL)
    app.state.stock_photos = StockPhotoClient(
        settings.UNSPLASH_ACCESS_KEY, base_url=settings.UNSPLASH_API_URL
    )

    try:
        yield
    finally:
        if openai_client is not None:
            await openai_client.close()
        if engine is not None:
            await engine.dispose()


app = FastAPI(
    title="Storefront Site API",
    version=settings.APP_VERSION,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Middleware (last added = first executed)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(CORSMiddleware, **get_cors_config())

# Exception handlers (RFC 7807)
app.add_exception_handler(ProblemDetailError, problem_detail_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Routes
app.include_router(api_v1_router, prefix="/api/v1")

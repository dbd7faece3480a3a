"""CRUD endpoints for the display-ordered collections.

Categories, services and brands share one handler set; ``build_router``
binds it to a collection and its response schema.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from pydantic import BaseModel

from storesite.core.dependencies import get_store
from storesite.schemas.catalog import (
    FeaturedBrandResponse,
    ProductCategoryResponse,
    SpecialServiceResponse,
)
from storesite.services import catalog
from storesite.services.record_store import RecordStore


def build_router(kind: catalog.CatalogKind, response_model: type[BaseModel]) -> APIRouter:
    router = APIRouter()

    @router.get("", response_model=list[response_model])
    async def list_items(store: RecordStore = Depends(get_store)):
        return await catalog.list_items(store, kind)

    @router.post("", response_model=response_model, status_code=201)
    async def create_item(
        payload: dict[str, Any] = Body(...),
        store: RecordStore = Depends(get_store),
    ):
        return await catalog.create_item(store, kind, payload)

    @router.get("/{item_id}", response_model=response_model)
    async def get_item(item_id: int, store: RecordStore = Depends(get_store)):
        return await catalog.get_item(store, kind, item_id)

    @router.put("/{item_id}", response_model=response_model)
    async def update_item(
        item_id: int,
        payload: dict[str, Any] = Body(...),
        store: RecordStore = Depends(get_store),
    ):
        return await catalog.update_item(store, kind, item_id, payload)

    @router.delete("/{item_id}", status_code=204)
    async def delete_item(item_id: int, store: RecordStore = Depends(get_store)) -> Response:
        await catalog.delete_item(store, kind, item_id)
        return Response(status_code=204)

    return router


categories_router = build_router(catalog.CATEGORIES, ProductCategoryResponse)
services_router = build_router(catalog.SERVICES, SpecialServiceResponse)
brands_router = build_router(catalog.BRANDS, FeaturedBrandResponse)

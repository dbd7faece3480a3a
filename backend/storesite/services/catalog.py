"""CRUD for product categories, special services and featured brands."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from storesite.core.exceptions import NotFoundError, ValidationFailed
from storesite.schemas.catalog import (
    CatalogItemResponse,
    FeaturedBrandInput,
    ProductCategoryInput,
    SpecialServiceInput,
)
from storesite.services.record_store import Collection, RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogKind:
    attr: str  # RecordStore attribute
    label: str  # used in messages
    input_schema: type[BaseModel]


CATEGORIES = CatalogKind("categories", "Product category", ProductCategoryInput)
SERVICES = CatalogKind("services", "Special service", SpecialServiceInput)
BRANDS = CatalogKind("brands", "Featured brand", FeaturedBrandInput)


def _collection(store: RecordStore, kind: CatalogKind) -> Collection:
    return getattr(store, kind.attr)


def validate_item(kind: CatalogKind, payload: Mapping) -> dict:
    """Validate a full record; every invalid field is reported."""
    try:
        validated = kind.input_schema.model_validate(dict(payload))
    except ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc) from exc
    return validated.model_dump()


async def list_items(store: RecordStore, kind: CatalogKind) -> list[CatalogItemResponse]:
    return await _collection(store, kind).list_all()


async def get_item(store: RecordStore, kind: CatalogKind, item_id: int) -> CatalogItemResponse:
    item = await _collection(store, kind).get(item_id)
    if item is None:
        raise NotFoundError(f"{kind.label} not found")
    return item


async def create_item(store: RecordStore, kind: CatalogKind, payload: Mapping) -> CatalogItemResponse:
    values = validate_item(kind, payload)
    item = await _collection(store, kind).create(values)
    logger.info("Created %s %s", kind.label.lower(), item.id)
    return item


async def update_item(
    store: RecordStore, kind: CatalogKind, item_id: int, payload: Mapping
) -> CatalogItemResponse:
    values = validate_item(kind, payload)
    item = await _collection(store, kind).update(item_id, values)
    if item is None:
        raise NotFoundError(f"{kind.label} not found")
    return item


async def delete_item(store: RecordStore, kind: CatalogKind, item_id: int) -> None:
    if not await _collection(store, kind).delete(item_id):
        raise NotFoundError(f"{kind.label} not found")
    logger.info("Deleted %s %s", kind.label.lower(), item_id)

"""Record store: the settings singleton plus three display-ordered collections.

Two backends implement :class:`RecordStore`: :class:`MemoryRecordStore`
(used when no database is configured, and in tests) and
``storesite.services.sql_store.SqlRecordStore``.

Collection ids are assigned monotonically from 1 and never reused, even
after a delete. ``list_all`` returns records by ascending ``sort_order``;
equal sort orders keep insertion order.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Generic, TypeVar

from storesite.schemas.catalog import (
    CatalogItemResponse,
    FeaturedBrandResponse,
    ProductCategoryResponse,
    SpecialServiceResponse,
)
from storesite.schemas.store_settings import StoreSettingsResponse

R = TypeVar("R", bound=CatalogItemResponse)


class Collection(ABC, Generic[R]):
    """CRUD over one collection. Unknown ids return None / False."""

    @abstractmethod
    async def create(self, values: dict) -> R: ...

    @abstractmethod
    async def list_all(self) -> list[R]: ...

    @abstractmethod
    async def get(self, item_id: int) -> R | None: ...

    @abstractmethod
    async def update(self, item_id: int, values: dict) -> R | None: ...

    @abstractmethod
    async def delete(self, item_id: int) -> bool: ...


class RecordStore(ABC):
    categories: Collection[ProductCategoryResponse]
    services: Collection[SpecialServiceResponse]
    brands: Collection[FeaturedBrandResponse]
    # tenant schema the store is bound to; None when it has no schema
    schema_key: str | None = None

    @abstractmethod
    async def ensure_structure(self) -> None:
        """Create the backing schema/tables if they do not exist yet."""

    @abstractmethod
    async def get_settings(self) -> StoreSettingsResponse | None: ...

    @abstractmethod
    async def save_settings(self, values: dict) -> StoreSettingsResponse:
        """Shallow-merge ``values`` onto the singleton, inserting it if absent."""

    @abstractmethod
    async def seed_settings(self, values: dict) -> bool:
        """Insert the singleton only if none exists. Returns True if inserted."""

    @abstractmethod
    async def ping(self) -> None:
        """Raise StorageUnavailableError if the backend is unreachable."""


class MemoryCollection(Collection[R]):
    def __init__(self, record_type: type[R]):
        self._record_type = record_type
        self._items: dict[int, R] = {}
        self._next_id = 1

    async def create(self, values: dict) -> R:
        item_id = self._next_id
        self._next_id += 1
        now = datetime.now(UTC)
        record = self._record_type(id=item_id, created_at=now, updated_at=now, **values)
        self._items[item_id] = record
        return record

    async def list_all(self) -> list[R]:
        # sorted() is stable and dicts keep insertion order
        return sorted(self._items.values(), key=lambda r: r.sort_order)

    async def get(self, item_id: int) -> R | None:
        return self._items.get(item_id)

    async def update(self, item_id: int, values: dict) -> R | None:
        existing = self._items.get(item_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**values, "updated_at": datetime.now(UTC)})
        self._items[item_id] = updated
        return updated

    async def delete(self, item_id: int) -> bool:
        return self._items.pop(item_id, None) is not None


class MemoryRecordStore(RecordStore):
    """Process-local store. State is lost on restart."""

    def __init__(self, schema_key: str | None = None):
        self.schema_key = schema_key
        self.categories = MemoryCollection(ProductCategoryResponse)
        self.services = MemoryCollection(SpecialServiceResponse)
        self.brands = MemoryCollection(FeaturedBrandResponse)
        self._settings: StoreSettingsResponse | None = None

    async def ensure_structure(self) -> None:
        return None

    async def get_settings(self) -> StoreSettingsResponse | None:
        return self._settings

    async def save_settings(self, values: dict) -> StoreSettingsResponse:
        now = datetime.now(UTC)
        if self._settings is None:
            self._settings = StoreSettingsResponse(id=1, created_at=now, updated_at=now, **values)
        else:
            self._settings = self._settings.model_copy(update={**values, "updated_at": now})
        return self._settings

    async def seed_settings(self, values: dict) -> bool:
        if self._settings is not None:
            return False
        await self.save_settings(values)
        return True

    async def ping(self) -> None:
        return None

"""Postgres-backed record store for one tenant schema.

Every connection carries ``schema_translate_map={None: schema_key}``, so
the ORM models (declared without a schema) resolve to the tenant's tables.
The schema key is quoted by SQLAlchemy as an identifier and never
formatted into SQL text.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.schema import CreateSchema

from storesite.core.exceptions import StorageUnavailableError
from storesite.db.base import Base, CatalogItemBase
from storesite.models.catalog import FeaturedBrand, ProductCategory, SpecialService
from storesite.models.store_settings import StoreSettings
from storesite.schemas.catalog import (
    FeaturedBrandResponse,
    ProductCategoryResponse,
    SpecialServiceResponse,
)
from storesite.schemas.store_settings import StoreSettingsResponse
from storesite.services.record_store import Collection, R, RecordStore
from storesite.services.tenancy import SchemaKey

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, OSError, asyncio.TimeoutError)


@asynccontextmanager
async def _storage_errors(schema_key: str) -> AsyncIterator[None]:
    try:
        yield
    except _UNAVAILABLE_ERRORS as exc:
        logger.warning("Database unavailable for schema %s: %s", schema_key, exc)
        raise StorageUnavailableError() from exc


class SqlCollection(Collection[R]):
    def __init__(
        self,
        store: "SqlRecordStore",
        model: type[CatalogItemBase],
        record_type: type[R],
    ):
        self._store = store
        self._model = model
        self._record_type = record_type

    async def create(self, values: dict) -> R:
        async with self._store.session() as session:
            row = self._model(**values)
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return self._record_type.model_validate(row)

    async def list_all(self) -> list[R]:
        # SERIAL ids grow with insertion, so id breaks sort_order ties
        stmt = select(self._model).order_by(self._model.sort_order.asc(), self._model.id.asc())
        async with self._store.session() as session:
            result = await session.execute(stmt)
            return [self._record_type.model_validate(row) for row in result.scalars().all()]

    async def get(self, item_id: int) -> R | None:
        async with self._store.session() as session:
            row = await session.get(self._model, item_id)
            return None if row is None else self._record_type.model_validate(row)

    async def update(self, item_id: int, values: dict) -> R | None:
        async with self._store.session() as session:
            row = await session.get(self._model, item_id)
            if row is None:
                return None
            for field, value in values.items():
                setattr(row, field, value)
            await session.flush()
            await session.refresh(row)
            return self._record_type.model_validate(row)

    async def delete(self, item_id: int) -> bool:
        async with self._store.session() as session:
            row = await session.get(self._model, item_id)
            if row is None:
                return False
            await session.delete(row)
            await session.flush()
            return True


class SqlRecordStore(RecordStore):
    def __init__(self, engine: AsyncEngine, schema_key: SchemaKey):
        self.schema_key = schema_key
        self._engine = engine.execution_options(schema_translate_map={None: schema_key})
        self._sessions = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )
        self.categories = SqlCollection(self, ProductCategory, ProductCategoryResponse)
        self.services = SqlCollection(self, SpecialService, SpecialServiceResponse)
        self.brands = SqlCollection(self, FeaturedBrand, FeaturedBrandResponse)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session in a transaction. Commits on success, rolls back on error."""
        async with _storage_errors(self.schema_key):
            async with self._sessions() as session:
                async with session.begin():
                    yield session

    async def _lock_tenant(self, conn: AsyncConnection | AsyncSession) -> None:
        """Transaction-scoped advisory lock serializing provisioning per schema."""
        await conn.execute(
            text("SELECT pg_advisory_xact_lock(hashtext(:key))"), {"key": self.schema_key}
        )

    async def ensure_structure(self) -> None:
        async with _storage_errors(self.schema_key):
            async with self._engine.begin() as conn:
                await self._lock_tenant(conn)
                await conn.execute(CreateSchema(self.schema_key, if_not_exists=True))
                await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def _first_settings_row(self, session: AsyncSession) -> StoreSettings | None:
        result = await session.execute(
            select(StoreSettings).order_by(StoreSettings.id.asc()).limit(1)
        )
        return result.scalar_one_or_none()

    async def get_settings(self) -> StoreSettingsResponse | None:
        async with self.session() as session:
            row = await self._first_settings_row(session)
            return None if row is None else StoreSettingsResponse.model_validate(row)

    async def save_settings(self, values: dict) -> StoreSettingsResponse:
        async with self.session() as session:
            await self._lock_tenant(session)
            row = await self._first_settings_row(session)
            if row is None:
                row = StoreSettings(**values)
                session.add(row)
            else:
                for field, value in values.items():
                    setattr(row, field, value)
            await session.flush()
            await session.refresh(row)
            return StoreSettingsResponse.model_validate(row)

    async def seed_settings(self, values: dict) -> bool:
        async with self.session() as session:
            # concurrent workers booting together must not both insert
            await self._lock_tenant(session)
            if await self._first_settings_row(session) is not None:
                return False
            session.add(StoreSettings(**values))
            return True

    async def ping(self) -> None:
        async with _storage_errors(self.schema_key):
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

"""In-memory record store: ids, ordering, not-found signals."""

import pytest

from storesite.services.record_store import MemoryRecordStore
from tests.helpers import full_settings_payload


def _category(name: str, sort_order: int = 0) -> dict:
    return {
        "name": name,
        "description": f"{name} for farm and ranch",
        "image_url": f"/images/{name.lower()}.jpg",
        "featured": False,
        "sort_order": sort_order,
    }


@pytest.mark.asyncio
async def test_ids_start_at_one_and_increase(store: MemoryRecordStore):
    created = [await store.categories.create(_category(n)) for n in ("Feed", "Seed", "Tack")]
    assert [c.id for c in created] == [1, 2, 3]


@pytest.mark.asyncio
async def test_deleted_ids_are_never_reused(store: MemoryRecordStore):
    for name in ("Feed", "Seed", "Tack"):
        await store.categories.create(_category(name))

    assert await store.categories.delete(2) is True
    created = await store.categories.create(_category("Fencing"))

    assert created.id == 4
    assert [c.id for c in await store.categories.list_all()] == [1, 3, 4]


@pytest.mark.asyncio
async def test_collections_number_independently(store: MemoryRecordStore):
    await store.categories.create(_category("Feed"))
    await store.categories.create(_category("Seed"))
    service = await store.services.create(
        {"name": "Delivery", "description": "Free over $500", "icon": "truck", "featured": True, "sort_order": 0}
    )
    assert service.id == 1


@pytest.mark.asyncio
async def test_list_orders_by_sort_order(store: MemoryRecordStore):
    await store.categories.create(_category("Three", 3))
    await store.categories.create(_category("One", 1))
    await store.categories.create(_category("Two", 2))

    assert [c.sort_order for c in await store.categories.list_all()] == [1, 2, 3]


@pytest.mark.asyncio
async def test_list_keeps_insertion_order_for_equal_sort_order(store: MemoryRecordStore):
    await store.categories.create(_category("B", 1))
    await store.categories.create(_category("A", 0))
    await store.categories.create(_category("C", 1))
    await store.categories.create(_category("D", 1))

    assert [c.name for c in await store.categories.list_all()] == ["A", "B", "C", "D"]


@pytest.mark.asyncio
async def test_update_keeps_position_among_ties(store: MemoryRecordStore):
    await store.categories.create(_category("A", 1))
    await store.categories.create(_category("B", 1))
    await store.categories.update(1, {"name": "A2"})

    assert [c.name for c in await store.categories.list_all()] == ["A2", "B"]


@pytest.mark.asyncio
async def test_update_and_delete_unknown_id(store: MemoryRecordStore):
    assert await store.brands.update(42, {"name": "Purina"}) is None
    assert await store.brands.delete(42) is False
    assert await store.brands.get(42) is None


@pytest.mark.asyncio
async def test_save_settings_merges_onto_existing(seeded_store: MemoryRecordStore):
    before = await seeded_store.get_settings()
    after = await seeded_store.save_settings({"tagline": "Feed, seed and tack"})

    assert after.id == before.id
    assert after.tagline == "Feed, seed and tack"
    assert after.store_name == before.store_name
    assert after.created_at == before.created_at


@pytest.mark.asyncio
async def test_seed_settings_only_inserts_once(store: MemoryRecordStore):
    assert await store.seed_settings({"store_name": "First"} | _minimal_settings()) is True
    assert await store.seed_settings({"store_name": "Second"} | _minimal_settings()) is False
    assert (await store.get_settings()).store_name == "First"


def _minimal_settings() -> dict:
    values = full_settings_payload()
    values.pop("store_name")
    return values

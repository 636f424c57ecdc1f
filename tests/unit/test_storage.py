"""Unit tests for content and hotel record stores."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from boardcms.errors import DuplicateSlugError
from boardcms.io.storage import ContentStore, JsonContentStore, MemoryContentStore
from boardcms.models.records import ContentEntry, HotelEntity


@pytest.fixture(params=["memory", "json"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> ContentStore:
    """Provide each store implementation in turn."""

    if request.param == "memory":
        return MemoryContentStore()
    return JsonContentStore(tmp_path / "data")


def _hotel(hotel_id: str, slug: str, order: int, created_minute: int = 0) -> HotelEntity:
    created_at = datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=created_minute)
    return HotelEntity(
        id=hotel_id,
        slug=slug,
        order=order,
        active=True,
        available=True,
        cover_image_url="",
        locales={"en": {"name": slug}},
        created_at=created_at,
        updated_at=created_at,
    )


def test_upsert_keeps_creation_timestamp_and_isolates_values(store: ContentStore) -> None:
    """Upserts should keep `created_at` and reads should return independent copies."""

    first = store.upsert("page.home", "en", {"hero": {"titleLead": "A"}}, "alice")
    second = store.upsert("page.home", "en", {"hero": {"titleLead": "B"}}, "bob")

    entry = store.get("page.home", "en")
    assert entry is not None
    assert entry.created_at == first.created_at
    assert second.created_at == first.created_at
    assert entry.value == {"hero": {"titleLead": "B"}}
    assert entry.updated_by == "bob"

    entry.value["hero"]["titleLead"] = "mutated"
    reread = store.get("page.home", "en")
    assert reread is not None
    assert reread.value["hero"]["titleLead"] == "B"
    assert store.get("page.home", "de") is None


def test_list_entries_filters_by_key(store: ContentStore) -> None:
    """Entry listing should optionally filter by content key."""

    store.upsert("page.home", "en", {})
    store.upsert("page.home", "de", {})
    store.upsert("page.contact", "en", {})

    assert len(store.list_entries()) == 3
    assert sorted(entry.locale for entry in store.list_entries("page.home")) == ["de", "en"]


def test_hotels_sort_by_order_then_creation(store: ContentStore) -> None:
    """Hotels should list by order with creation time breaking ties."""

    store.insert_hotel(_hotel("c", "gamma", 2, created_minute=0))
    store.insert_hotel(_hotel("b", "beta", 1, created_minute=5))
    store.insert_hotel(_hotel("a", "alpha", 1, created_minute=1))

    assert [hotel.id for hotel in store.list_hotels()] == ["a", "b", "c"]
    found = store.find_hotel_by_slug("beta")
    assert found is not None
    assert found.id == "b"
    assert store.get_hotel("missing") is None


def test_hotel_slug_uniqueness(store: ContentStore) -> None:
    """Insert and replace should reject slugs used by another hotel."""

    store.insert_hotel(_hotel("a", "alpha", 1))
    store.insert_hotel(_hotel("b", "beta", 2))

    with pytest.raises(DuplicateSlugError, match="Slug may already exist"):
        store.insert_hotel(_hotel("c", "alpha", 3))
    with pytest.raises(DuplicateSlugError, match="Slug already exists"):
        store.replace_hotel(_hotel("b", "alpha", 2))

    renamed = store.replace_hotel(_hotel("a", "alpha", 5))
    assert renamed.order == 5
    assert store.delete_hotel("a") is True
    assert store.delete_hotel("a") is False
    assert [hotel.id for hotel in store.list_hotels()] == ["b"]


def test_json_store_writes_deterministic_files(tmp_path: Path) -> None:
    """The JSON store should lay out one sorted, UTF-8 JSON file per record."""

    store = JsonContentStore(tmp_path / "data")
    store.upsert("page.home", "de", {"hero": {"titleLead": "Süd"}}, "editor")
    store.insert_hotel(_hotel("h1", "haus-sud", 1))

    content_path = tmp_path / "data" / "content" / "page.home" / "de.json"
    hotel_path = tmp_path / "data" / "hotels" / "h1.json"
    assert content_path.exists()
    assert hotel_path.exists()

    text = content_path.read_text(encoding="utf-8")
    assert "Süd" in text
    payload = json.loads(text)
    assert list(payload) == sorted(payload)
    assert payload["updatedBy"] == "editor"

    restored = ContentEntry.from_payload(payload)
    assert restored.value == {"hero": {"titleLead": "Süd"}}
    hotel = HotelEntity.from_payload(json.loads(hotel_path.read_text(encoding="utf-8")))
    assert hotel == _hotel("h1", "haus-sud", 1)

"""Content and hotel record storage.

Responsibilities:
- Define the `ContentStore` protocol used by the access layer.
- Provide a deterministic filesystem store with one JSON file per record.
- Provide an in-memory store for tests and dry runs.

Writes are last-write-wins; neither store locks.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from ..content.coercion import clone_document
from ..errors import DuplicateSlugError
from ..models.records import ContentEntry, HotelEntity, utc_now


class ContentStore(Protocol):
    """Persistence contract for content entries and hotel entities."""

    def get(self, key: str, locale: str) -> ContentEntry | None:
        """Return the stored entry for a key and locale, if any."""

    def upsert(
        self, key: str, locale: str, value: Mapping[str, Any], updated_by: str | None = None
    ) -> ContentEntry:
        """Insert or replace an entry, keeping its creation timestamp."""

    def list_entries(self, key: str | None = None) -> list[ContentEntry]:
        """Return stored entries, optionally filtered by key."""

    def list_hotels(self) -> list[HotelEntity]:
        """Return hotels sorted by order, then creation time."""

    def get_hotel(self, hotel_id: str) -> HotelEntity | None:
        """Return a hotel by id, if any."""

    def find_hotel_by_slug(self, slug: str) -> HotelEntity | None:
        """Return the hotel using a slug, if any."""

    def insert_hotel(self, hotel: HotelEntity) -> HotelEntity:
        """Insert a new hotel, rejecting duplicate slugs."""

    def replace_hotel(self, hotel: HotelEntity) -> HotelEntity:
        """Replace an existing hotel, rejecting slugs used by other hotels."""

    def delete_hotel(self, hotel_id: str) -> bool:
        """Delete a hotel and return whether it existed."""


def _sorted_hotels(hotels: Iterable[HotelEntity]) -> list[HotelEntity]:
    return sorted(hotels, key=lambda hotel: (hotel.order, hotel.created_at))


def _next_entry(
    existing: ContentEntry | None,
    key: str,
    locale: str,
    value: Mapping[str, Any],
    updated_by: str | None,
) -> ContentEntry:
    now = utc_now()
    return ContentEntry(
        key=key,
        locale=locale,
        value=clone_document(dict(value)),
        created_at=existing.created_at if existing is not None else now,
        updated_at=now,
        updated_by=updated_by,
    )


def _check_slug(hotels: Iterable[HotelEntity], hotel: HotelEntity, detail: str) -> None:
    for other in hotels:
        if other.id != hotel.id and other.slug == hotel.slug:
            raise DuplicateSlugError(detail, hint=f"Choose a slug other than `{hotel.slug}`.")


class MemoryContentStore:
    """Dictionary-backed content store."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], ContentEntry] = {}
        self._hotels: dict[str, HotelEntity] = {}

    def get(self, key: str, locale: str) -> ContentEntry | None:
        entry = self._entries.get((key, locale))
        if entry is None:
            return None
        return replace(entry, value=clone_document(entry.value))

    def upsert(
        self, key: str, locale: str, value: Mapping[str, Any], updated_by: str | None = None
    ) -> ContentEntry:
        entry = _next_entry(self._entries.get((key, locale)), key, locale, value, updated_by)
        self._entries[(key, locale)] = entry
        return entry

    def list_entries(self, key: str | None = None) -> list[ContentEntry]:
        return [
            entry
            for (entry_key, _locale), entry in sorted(self._entries.items())
            if key is None or entry_key == key
        ]

    def list_hotels(self) -> list[HotelEntity]:
        return _sorted_hotels(self._hotels.values())

    def get_hotel(self, hotel_id: str) -> HotelEntity | None:
        return self._hotels.get(hotel_id)

    def find_hotel_by_slug(self, slug: str) -> HotelEntity | None:
        for hotel in self._hotels.values():
            if hotel.slug == slug:
                return hotel
        return None

    def insert_hotel(self, hotel: HotelEntity) -> HotelEntity:
        _check_slug(self._hotels.values(), hotel, "Hotel could not be created. Slug may already exist.")
        self._hotels[hotel.id] = hotel
        return hotel

    def replace_hotel(self, hotel: HotelEntity) -> HotelEntity:
        _check_slug(self._hotels.values(), hotel, "Slug already exists")
        self._hotels[hotel.id] = hotel
        return hotel

    def delete_hotel(self, hotel_id: str) -> bool:
        return self._hotels.pop(hotel_id, None) is not None


class JsonContentStore:
    """Filesystem-backed content store writing one JSON file per record.

    Layout under `root`:
    - `content/<key>/<locale>.json` for content entries.
    - `hotels/<id>.json` for hotel entities.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root data directory."""

        self.root = root

    def _content_path(self, key: str, locale: str) -> Path:
        return self.root / "content" / key / f"{locale}.json"

    def _hotel_path(self, hotel_id: str) -> Path:
        return self.root / "hotels" / f"{hotel_id}.json"

    def _write_json(self, path: Path, payload: dict[str, object]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        return path

    def _read_json(self, path: Path) -> dict[str, Any]:
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Stored record `{path}` is not a JSON object.")
        return payload

    def get(self, key: str, locale: str) -> ContentEntry | None:
        path = self._content_path(key, locale)
        if not path.exists():
            return None
        return ContentEntry.from_payload(self._read_json(path))

    def upsert(
        self, key: str, locale: str, value: Mapping[str, Any], updated_by: str | None = None
    ) -> ContentEntry:
        entry = _next_entry(self.get(key, locale), key, locale, value, updated_by)
        self._write_json(self._content_path(key, locale), entry.to_payload())
        return entry

    def list_entries(self, key: str | None = None) -> list[ContentEntry]:
        content_root = self.root / "content"
        if not content_root.exists():
            return []
        pattern = f"{key}/*.json" if key is not None else "*/*.json"
        return [
            ContentEntry.from_payload(self._read_json(path))
            for path in sorted(content_root.glob(pattern))
        ]

    def list_hotels(self) -> list[HotelEntity]:
        hotels_root = self.root / "hotels"
        if not hotels_root.exists():
            return []
        return _sorted_hotels(
            HotelEntity.from_payload(self._read_json(path))
            for path in hotels_root.glob("*.json")
        )

    def get_hotel(self, hotel_id: str) -> HotelEntity | None:
        path = self._hotel_path(hotel_id)
        if not hotel_id or not path.exists():
            return None
        return HotelEntity.from_payload(self._read_json(path))

    def find_hotel_by_slug(self, slug: str) -> HotelEntity | None:
        for hotel in self.list_hotels():
            if hotel.slug == slug:
                return hotel
        return None

    def insert_hotel(self, hotel: HotelEntity) -> HotelEntity:
        _check_slug(self.list_hotels(), hotel, "Hotel could not be created. Slug may already exist.")
        self._write_json(self._hotel_path(hotel.id), hotel.to_payload())
        return hotel

    def replace_hotel(self, hotel: HotelEntity) -> HotelEntity:
        _check_slug(self.list_hotels(), hotel, "Slug already exists")
        self._write_json(self._hotel_path(hotel.id), hotel.to_payload())
        return hotel

    def delete_hotel(self, hotel_id: str) -> bool:
        path = self._hotel_path(hotel_id)
        if not hotel_id or not path.exists():
            return False
        path.unlink()
        return True

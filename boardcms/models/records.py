"""Stored record types exchanged between the store and the access layer.

Responsibilities:
- Represent persisted content entries and hotel entities as immutable records.
- Convert records to and from their camelCase JSON payloads.

Key types:
- `ContentEntry`: one normalized document per `(key, locale)` pair.
- `HotelEntity`: one hotel with its per-locale content map.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping


def utc_now() -> datetime:
    """Return the current UTC timestamp without microseconds."""

    return datetime.now(timezone.utc).replace(microsecond=0)


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_timestamp(value: object) -> datetime:
    text = str(value or "").strip()
    if not text:
        return utc_now()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class ContentEntry:
    """A persisted content document for one content key and locale.

    Attributes:
        key: Content key, for example `page.home`.
        locale: Locale code of the document.
        value: Normalized JSON-compatible document.
        created_at: First write timestamp.
        updated_at: Latest write timestamp.
        updated_by: Optional editor identifier of the latest write.
    """

    key: str
    locale: str
    value: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    updated_by: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the JSON payload persisted for this entry."""

        return {
            "key": self.key,
            "locale": self.locale,
            "value": self.value,
            "createdAt": _format_timestamp(self.created_at),
            "updatedAt": _format_timestamp(self.updated_at),
            "updatedBy": self.updated_by,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ContentEntry:
        """Build an entry from a persisted JSON payload."""

        value = payload.get("value")
        return cls(
            key=str(payload.get("key", "")),
            locale=str(payload.get("locale", "")),
            value=value if isinstance(value, dict) else {},
            created_at=_parse_timestamp(payload.get("createdAt")),
            updated_at=_parse_timestamp(payload.get("updatedAt")),
            updated_by=_optional_text(payload.get("updatedBy")),
        )


@dataclass(frozen=True, slots=True)
class HotelEntity:
    """A hotel record with locale-independent attributes and locale content.

    Attributes:
        id: Stable hotel identifier.
        slug: URL slug, unique across hotels.
        order: 1-based listing order.
        active: Whether the hotel is published.
        available: Whether the hotel currently accepts bookings.
        cover_image_url: Cover image URL or an empty string.
        locales: Raw per-locale content documents keyed by locale code.
        created_at: Creation timestamp.
        updated_at: Latest write timestamp.
        updated_by: Optional editor identifier of the latest write.
    """

    id: str
    slug: str
    order: int
    active: bool
    available: bool
    cover_image_url: str
    locales: dict[str, dict[str, Any]] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    updated_by: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the JSON payload persisted for this hotel."""

        return {
            "id": self.id,
            "slug": self.slug,
            "order": self.order,
            "active": self.active,
            "available": self.available,
            "coverImageUrl": self.cover_image_url,
            "locales": self.locales,
            "createdAt": _format_timestamp(self.created_at),
            "updatedAt": _format_timestamp(self.updated_at),
            "updatedBy": self.updated_by,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> HotelEntity:
        """Build a hotel from a persisted JSON payload."""

        locales = payload.get("locales")
        order = payload.get("order")
        return cls(
            id=str(payload.get("id", "")),
            slug=str(payload.get("slug", "")),
            order=int(order) if isinstance(order, (int, float)) else 0,
            active=payload.get("active") is not False,
            available=payload.get("available") is not False,
            cover_image_url=str(payload.get("coverImageUrl") or ""),
            locales=dict(locales) if isinstance(locales, Mapping) else {},
            created_at=_parse_timestamp(payload.get("createdAt")),
            updated_at=_parse_timestamp(payload.get("updatedAt")),
            updated_by=_optional_text(payload.get("updatedBy")),
        )

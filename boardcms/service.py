"""Content access layer over a `ContentStore`.

Responsibilities:
- Read content with seed-on-first-read, normalization, legacy healing, and
  the Home cross-locale layout overlay.
- Write content through normalize-then-validate, rejecting invalid documents
  before anything is persisted, and propagate shared Home fields.
- Create, update, list, and delete hotel entities.

Key types:
- `ContentService`: the single entry point used by the CLI.
"""

from __future__ import annotations

import secrets
from dataclasses import replace
from typing import Any, Callable, Iterable, Mapping, TypeVar

from .content.coercion import as_mapping, clone_document
from .content.defaults import get_localized_default_home
from .content.formats import sanitize_slug, to_slug
from .content.home import normalize_home_content
from .content.hotels import normalize_hotel_locale_content
from .content.merge import apply_shared_home_layout, propagate_shared_home_fields
from .content.registry import ContentType, get_content_type
from .errors import ContentStageError, ContentValidationError, HotelNotFoundError, HotelOperationError
from .io.storage import ContentStore
from .migrations import MigrationOutcome, heal_home_content, migrate_home_documents
from .models.content import CONTENT_KEYS, DEFAULT_LOCALE, HOME_CONTENT_KEY, SUPPORTED_LOCALES
from .models.records import HotelEntity, utc_now
from .parsing import normalize_optional_string
from .telemetry.logger import ContentLogger


_Result = TypeVar("_Result")


class ContentService:
    """Read, write, and seed locale-scoped content and hotel entities."""

    def __init__(
        self,
        store: ContentStore,
        *,
        logger: ContentLogger | None = None,
        heal_on_read: bool = True,
        updated_by: str | None = None,
    ) -> None:
        """Initialize the service with a store and optional run logger."""

        self._store = store
        self._logger = logger
        self._heal_on_read = heal_on_read
        self._updated_by = normalize_optional_string(updated_by)

    def get_content(self, key: str, locale: str) -> dict[str, Any]:
        """Return the read-path document for a content key and locale.

        Missing records are seeded with the localized default. Home documents
        are healed when enabled and, for non-English locales, take their
        section layout and room-card media from the English document.
        """

        content_type = get_content_type(key)
        locale = self._require_locale(locale)
        return self._run("read", lambda: self._read(content_type, locale), key=key, locale=locale)

    def save_content(
        self,
        key: str,
        locale: str,
        raw: object,
        updated_by: str | None = None,
    ) -> dict[str, Any]:
        """Normalize, validate, and persist a submitted document.

        Raises:
            ContentValidationError: If the normalized document violates a rule.
                Nothing is persisted in that case.
        """

        content_type = get_content_type(key)
        locale = self._require_locale(locale)
        editor = normalize_optional_string(updated_by) or self._updated_by

        def action() -> dict[str, Any]:
            normalized, message = self._normalize_and_validate(content_type, locale, raw)
            if message is not None:
                raise ContentValidationError(key=content_type.key, locale=locale, message=message)
            self._store.upsert(content_type.key, locale, normalized, editor)
            if content_type.key == HOME_CONTENT_KEY:
                self._propagate_home(raw, normalized, locale, editor)
            return normalized

        return self._run("save", action, key=key, locale=locale)

    def validate_content(
        self, key: str, locale: str, raw: object
    ) -> tuple[dict[str, Any], str | None]:
        """Return the normalized document and the first violated rule, without persisting."""

        content_type = get_content_type(key)
        locale = self._require_locale(locale)
        return self._run(
            "validate",
            lambda: self._normalize_and_validate(content_type, locale, raw),
            key=key,
            locale=locale,
        )

    def seed_defaults(
        self,
        locales: Iterable[str] = SUPPORTED_LOCALES,
        keys: Iterable[str] = CONTENT_KEYS,
    ) -> list[tuple[str, str]]:
        """Write localized defaults for missing records and return the created pairs."""

        content_types = [get_content_type(key) for key in keys]
        resolved_locales = [self._require_locale(locale) for locale in locales]
        created = []
        for content_type in content_types:
            for locale in resolved_locales:
                if self._store.get(content_type.key, locale) is not None:
                    continue
                self._seed(content_type, locale)
                created.append((content_type.key, locale))
        return created

    def migrate_legacy_home(self) -> list[MigrationOutcome]:
        """Heal every stored Home document and write back the changed ones."""

        def action() -> list[MigrationOutcome]:
            outcomes = migrate_home_documents(self._store, updated_by=self._updated_by)
            for outcome in outcomes:
                if outcome.status == "healed" and self._logger is not None:
                    self._logger.log_healed(
                        outcome.locale,
                        healed_hero=outcome.healed_hero,
                        backfilled_rooms=outcome.backfilled_rooms,
                    )
            return outcomes

        return self._run("migrate", action, key=HOME_CONTENT_KEY)

    def list_hotels(self) -> list[HotelEntity]:
        """Return hotels with normalized locale content and a resolved cover image."""

        return [self._hotel_view(hotel) for hotel in self._store.list_hotels()]

    def create_hotel(
        self,
        locale: str,
        content: object,
        *,
        slug: str | None = None,
        order: int | float | None = None,
        active: bool | None = None,
        available: bool | None = None,
        updated_by: str | None = None,
    ) -> HotelEntity:
        """Create a hotel from one locale's content.

        The other locales start with just the hotel name. The slug derives
        from `slug` or the name, and the order defaults to the end of the list.

        Raises:
            HotelOperationError: If required fields are missing or no slug can be derived.
            DuplicateSlugError: If the slug is already used.
        """

        locale = self._require_locale(locale)

        def action() -> HotelEntity:
            normalized = normalize_hotel_locale_content(locale, content)
            if not normalized["name"] or not normalized["shortDescription"]:
                raise HotelOperationError("Name and short description are required")

            resolved_slug = to_slug(normalize_optional_string(slug) or normalized["name"])
            if not resolved_slug:
                raise HotelOperationError("A valid slug could not be generated from name")

            locales = {
                code: (
                    normalized
                    if code == locale
                    else normalize_hotel_locale_content(code, {"name": normalized["name"]})
                )
                for code in SUPPORTED_LOCALES
            }
            now = utc_now()
            hotel = HotelEntity(
                id=secrets.token_hex(12),
                slug=resolved_slug,
                order=self._resolve_new_order(order),
                active=True if active is None else active,
                available=True if available is None else available,
                cover_image_url=normalized["gallery"][0]["url"] if normalized["gallery"] else "",
                locales=locales,
                created_at=now,
                updated_at=now,
                updated_by=normalize_optional_string(updated_by) or self._updated_by,
            )
            return self._store.insert_hotel(hotel)

        return self._run("hotel-create", action, locale=locale)

    def update_hotel(
        self,
        hotel_id: str,
        locale: str,
        content: object = None,
        *,
        slug: str | None = None,
        order: int | float | None = None,
        active: bool | None = None,
        available: bool | None = None,
        cover_image_url: str | None = None,
        updated_by: str | None = None,
    ) -> HotelEntity:
        """Update one locale's content and the shared attributes of a hotel.

        Raises:
            HotelNotFoundError: If the hotel does not exist.
            HotelOperationError: If the slug sanitizes to an empty value.
            DuplicateSlugError: If the slug is used by another hotel.
        """

        locale = self._require_locale(locale)

        def action() -> HotelEntity:
            hotel = self._require_hotel(hotel_id)
            english = as_mapping(hotel.locales.get(DEFAULT_LOCALE))
            current = normalize_hotel_locale_content(locale, hotel.locales.get(locale), english)
            updated = (
                normalize_hotel_locale_content(locale, content, current)
                if content is not None
                else current
            )

            next_slug = hotel.slug if slug is None else sanitize_slug(slug)
            if not next_slug:
                raise HotelOperationError("Slug cannot be empty")

            if cover_image_url is not None:
                cover = cover_image_url.strip()
            else:
                first_url = updated["gallery"][0]["url"] if updated["gallery"] else ""
                cover = hotel.cover_image_url or first_url

            locales = clone_document(hotel.locales)
            locales[locale] = updated
            next_hotel = replace(
                hotel,
                slug=next_slug,
                order=max(1, int(order)) if order is not None else hotel.order,
                active=hotel.active if active is None else active,
                available=hotel.available if available is None else available,
                cover_image_url=cover,
                locales=locales,
                updated_at=utc_now(),
                updated_by=normalize_optional_string(updated_by) or self._updated_by,
            )
            return self._store.replace_hotel(next_hotel)

        return self._run("hotel-update", action, hotel=hotel_id, locale=locale)

    def delete_hotel(self, hotel_id: str) -> None:
        """Delete a hotel.

        Raises:
            HotelNotFoundError: If the hotel does not exist.
        """

        def action() -> None:
            if not self._store.delete_hotel(hotel_id):
                raise HotelNotFoundError("Hotel not found")

        self._run("hotel-delete", action, hotel=hotel_id)

    def delete_hotel_gallery_image(self, hotel_id: str, image_id: str) -> HotelEntity:
        """Remove a gallery image from every locale of a hotel.

        The remaining images are renumbered from 1 and the image's gallery
        metadata entry is dropped in every locale.

        Raises:
            HotelNotFoundError: If the hotel or the image does not exist.
        """

        def action() -> HotelEntity:
            hotel = self._require_hotel(hotel_id)
            english = normalize_hotel_locale_content(
                DEFAULT_LOCALE, hotel.locales.get(DEFAULT_LOCALE)
            )
            if not any(image["id"] == image_id for image in english["gallery"]):
                raise HotelNotFoundError("Image not found")

            remaining = [image for image in english["gallery"] if image["id"] != image_id]
            gallery = [
                {**image, "sortOrder": position}
                for position, image in enumerate(remaining, start=1)
            ]
            locales = {}
            for code in SUPPORTED_LOCALES:
                document = dict(as_mapping(hotel.locales.get(code)))
                meta = dict(as_mapping(document.get("galleryMeta")))
                meta.pop(image_id, None)
                document["gallery"] = clone_document(gallery)
                document["galleryMeta"] = meta
                locales[code] = document
            return self._store.replace_hotel(
                replace(hotel, locales=locales, updated_at=utc_now(), updated_by=self._updated_by)
            )

        return self._run("hotel-gallery-delete", action, hotel=hotel_id, image=image_id)

    def _read(self, content_type: ContentType, locale: str) -> dict[str, Any]:
        entry = self._store.get(content_type.key, locale)
        if entry is None:
            content = self._seed(content_type, locale)
        elif content_type.key == HOME_CONTENT_KEY:
            content = self._read_home(locale, entry.value)
        else:
            content = content_type.normalize(entry.value, content_type.default(locale))

        if content_type.key == HOME_CONTENT_KEY and locale != DEFAULT_LOCALE:
            english_entry = self._store.get(HOME_CONTENT_KEY, DEFAULT_LOCALE)
            if english_entry is not None:
                english = normalize_home_content(
                    english_entry.value, get_localized_default_home(DEFAULT_LOCALE)
                )
                content = apply_shared_home_layout(content, english)
        return content

    def _read_home(self, locale: str, stored: Mapping[str, Any]) -> dict[str, Any]:
        localized_default = get_localized_default_home(locale)
        if not self._heal_on_read:
            return normalize_home_content(stored, localized_default)

        result = heal_home_content(locale, stored, localized_default)
        if result.changed:
            self._store.upsert(HOME_CONTENT_KEY, locale, result.content, self._updated_by)
            if self._logger is not None:
                self._logger.log_healed(
                    locale,
                    healed_hero=result.healed_hero,
                    backfilled_rooms=result.backfilled_rooms,
                )
        return result.content

    def _seed(self, content_type: ContentType, locale: str) -> dict[str, Any]:
        content = content_type.default(locale)
        self._store.upsert(content_type.key, locale, content, self._updated_by)
        if self._logger is not None:
            self._logger.log_seeded(content_type.key, locale)
        return content

    def _normalize_and_validate(
        self, content_type: ContentType, locale: str, raw: object
    ) -> tuple[dict[str, Any], str | None]:
        localized_default = content_type.default(locale)
        existing = self._store.get(content_type.key, locale)
        fallback = (
            content_type.normalize(existing.value, localized_default)
            if existing is not None
            else localized_default
        )
        normalized = content_type.normalize(raw, fallback)
        return normalized, content_type.validate(normalized)

    def _propagate_home(
        self,
        submitted: object,
        saved: dict[str, Any],
        source_locale: str,
        updated_by: str | None,
    ) -> None:
        for locale in SUPPORTED_LOCALES:
            if locale == source_locale:
                continue
            localized_default = get_localized_default_home(locale)
            entry = self._store.get(HOME_CONTENT_KEY, locale)
            target = (
                normalize_home_content(entry.value, localized_default)
                if entry is not None
                else localized_default
            )
            patched = propagate_shared_home_fields(submitted, saved, target)
            if entry is not None and patched == target:
                continue
            self._store.upsert(HOME_CONTENT_KEY, locale, patched, updated_by)
            if self._logger is not None:
                self._logger.log_propagated(source_locale, locale)

    def _hotel_view(self, hotel: HotelEntity) -> HotelEntity:
        english = normalize_hotel_locale_content(DEFAULT_LOCALE, hotel.locales.get(DEFAULT_LOCALE))
        locales = {
            code: (
                english
                if code == DEFAULT_LOCALE
                else normalize_hotel_locale_content(code, hotel.locales.get(code), english)
            )
            for code in SUPPORTED_LOCALES
        }
        first_url = english["gallery"][0]["url"] if english["gallery"] else ""
        return replace(hotel, locales=locales, cover_image_url=hotel.cover_image_url or first_url)

    def _resolve_new_order(self, order: int | float | None) -> int:
        if order is not None:
            return max(1, int(order))
        hotels = self._store.list_hotels()
        last_order = max((hotel.order for hotel in hotels), default=0)
        return max(1, last_order + 1)

    def _require_hotel(self, hotel_id: str) -> HotelEntity:
        hotel = self._store.get_hotel(hotel_id)
        if hotel is None:
            raise HotelNotFoundError("Hotel not found")
        return hotel

    @staticmethod
    def _require_locale(locale: str) -> str:
        normalized = str(locale or "").strip().lower()
        if normalized not in SUPPORTED_LOCALES:
            supported = ", ".join(SUPPORTED_LOCALES)
            raise ContentStageError(
                stage="content",
                detail=f"Unsupported locale `{locale}`.",
                hint=f"Use one of: {supported}.",
            )
        return normalized

    def _run(self, op: str, action: Callable[[], _Result], **context: object) -> _Result:
        """Run one named operation and emit start/complete/failure log events."""

        if self._logger is not None:
            self._logger.log_start(op, **context)
        try:
            result = action()
        except ContentValidationError as exc:
            if self._logger is not None:
                self._logger.log_rejected(op, exc.key, exc.locale)
            raise
        except Exception as exc:
            if self._logger is not None:
                self._logger.log_failure(op, type(exc).__name__, **context)
            raise
        if self._logger is not None:
            self._logger.log_complete(op, **context)
        return result

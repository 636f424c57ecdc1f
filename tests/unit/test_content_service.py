"""Unit tests for the content access layer."""

from __future__ import annotations

import io

import pytest

from boardcms.content.coercion import clone_document
from boardcms.content.defaults import (
    DEFAULT_HOME_CONTENT,
    get_localized_default_contact,
    get_localized_default_home,
)
from boardcms.errors import (
    ContentStageError,
    ContentValidationError,
    DuplicateSlugError,
    HotelNotFoundError,
    HotelOperationError,
    UnknownContentKeyError,
)
from boardcms.io.storage import MemoryContentStore
from boardcms.models.content import CONTENT_KEYS
from boardcms.service import ContentService


def _log_events(stream: io.StringIO, event: str) -> list[str]:
    return [line for line in stream.getvalue().splitlines() if f"event={event}" in line]


def test_get_content_seeds_missing_record(
    content_service: ContentService, memory_store: MemoryContentStore, log_stream: io.StringIO
) -> None:
    """The first read should persist and return the localized default."""

    content = content_service.get_content("page.contact", "tr")

    assert content == get_localized_default_contact("tr")
    entry = memory_store.get("page.contact", "tr")
    assert entry is not None
    assert entry.value == content
    assert entry.updated_by == "editor@example.com"
    assert _log_events(log_stream, "seeded") == [
        "[content] level=INFO op=seed event=seeded key=page.contact locale=tr"
    ]


def test_get_content_rejects_unknown_key_and_locale(content_service: ContentService) -> None:
    """Unknown keys and locales should raise stage errors before touching the store."""

    with pytest.raises(UnknownContentKeyError):
        content_service.get_content("page.blog", "en")
    with pytest.raises(ContentStageError, match="Unsupported locale `fr`"):
        content_service.get_content("page.home", "fr")


def test_rejected_save_leaves_store_untouched(
    content_service: ContentService, memory_store: MemoryContentStore, log_stream: io.StringIO
) -> None:
    """A document failing validation should not be persisted or propagated."""

    with pytest.raises(ContentValidationError) as exc_info:
        content_service.save_content(
            "page.home", "en", {"hero": {"ctaQuoteHref": "javascript:alert(1)"}}
        )

    assert exc_info.value.message == 'Hero CTA links must start with "/" or "http(s)://"'
    assert exc_info.value.key == "page.home"
    assert memory_store.list_entries() == []
    assert _log_events(log_stream, "rejected") == [
        "[content] level=WARNING op=save event=rejected key=page.home locale=en"
    ]


def test_save_merges_over_existing_document(
    content_service: ContentService, memory_store: MemoryContentStore
) -> None:
    """Partial submissions should fall back to the stored document field by field."""

    content_service.save_content("page.contact", "en", {"details": {"title": "Say hello"}})
    saved = content_service.save_content("page.contact", "en", {"hero": {"title": "Reach us"}})

    assert saved["details"]["title"] == "Say hello"
    assert saved["hero"]["title"] == "Reach us"
    entry = memory_store.get("page.contact", "en")
    assert entry is not None
    assert entry.value == saved


def test_validate_content_does_not_persist(
    content_service: ContentService, memory_store: MemoryContentStore
) -> None:
    """Dry-run validation should return the message without writing."""

    normalized, message = content_service.validate_content(
        "page.home", "de", {"videoCta": {"videoUrl": "https://example.com"}}
    )

    assert message == "Video CTA URL must be a valid YouTube or Vimeo link"
    assert normalized["videoCta"]["videoUrl"] == "https://example.com"
    assert memory_store.list_entries() == []


def test_english_home_save_propagates_sections_to_other_locales(
    content_service: ContentService, memory_store: MemoryContentStore, log_stream: io.StringIO
) -> None:
    """Section layout saved in English should reach German and Turkish rows."""

    content_service.save_content("page.home", "en", {"sections": {"offers": {"enabled": False}}})

    for locale in ("de", "tr"):
        entry = memory_store.get("page.home", locale)
        assert entry is not None
        assert entry.value["sections"]["offers"]["enabled"] is False
        assert entry.value["hero"] == get_localized_default_home(locale)["hero"]
    assert len(_log_events(log_stream, "propagated")) == 2


def test_propagation_skips_unchanged_rows(
    content_service: ContentService, log_stream: io.StringIO
) -> None:
    """Saving the same shared fields twice should not rewrite the other locales."""

    submission = {"sections": {"faq": {"enabled": False}}}
    content_service.save_content("page.home", "en", submission)
    content_service.save_content("page.home", "en", submission)

    assert len(_log_events(log_stream, "propagated")) == 2


def test_german_read_uses_english_sections_and_card_images(
    content_service: ContentService,
) -> None:
    """Non-English Home reads overlay the English layout and room-card media."""

    content_service.save_content(
        "page.home",
        "en",
        {
            "sections": {"gallery": {"enabled": False}},
            "rooms": {
                "cards": [{"title": "Studio", "image": "/img/en-studio.jpg", "description": "Bright"}]
            },
        },
    )

    german = content_service.get_content("page.home", "de")

    assert german["sections"]["gallery"]["enabled"] is False
    assert len(german["rooms"]["cards"]) == 4
    assert german["rooms"]["cards"][0]["title"] == "Karte 1"
    assert german["rooms"]["cards"][0]["image"] == "/img/en-studio.jpg"
    assert german["hero"]["titleLead"] == "In Stuttgart"


def test_legacy_hero_is_healed_once(
    content_service: ContentService, memory_store: MemoryContentStore, log_stream: io.StringIO
) -> None:
    """A German row with the English hero is healed and written back a single time."""

    memory_store.upsert("page.home", "de", clone_document(DEFAULT_HOME_CONTENT))

    first = content_service.get_content("page.home", "de")
    second = content_service.get_content("page.home", "de")

    assert first["hero"]["titleLead"] == "In Stuttgart"
    assert second == first
    entry = memory_store.get("page.home", "de")
    assert entry is not None
    assert entry.value["hero"]["titleLead"] == "In Stuttgart"
    assert _log_events(log_stream, "healed") == [
        "[content] level=INFO op=heal event=healed backfilled_rooms=false healed_hero=true "
        "key=page.home locale=de"
    ]


def test_heal_on_read_can_be_disabled(memory_store: MemoryContentStore) -> None:
    """With healing disabled, reads leave legacy rows as stored."""

    memory_store.upsert("page.home", "de", clone_document(DEFAULT_HOME_CONTENT))
    service = ContentService(memory_store, heal_on_read=False)

    content = service.get_content("page.home", "de")

    assert content["hero"]["titleLead"] == DEFAULT_HOME_CONTENT["hero"]["titleLead"]
    entry = memory_store.get("page.home", "de")
    assert entry is not None
    assert entry.value["hero"]["titleLead"] == DEFAULT_HOME_CONTENT["hero"]["titleLead"]


def test_seed_defaults_creates_only_missing_rows(
    content_service: ContentService, memory_store: MemoryContentStore
) -> None:
    """Seeding should write every missing pair once and skip existing rows."""

    memory_store.upsert("page.home", "en", get_localized_default_home("en"))

    created = content_service.seed_defaults()

    assert len(created) == len(CONTENT_KEYS) * 3 - 1
    assert ("page.home", "en") not in created
    assert content_service.seed_defaults() == []
    assert content_service.seed_defaults(locales=["de"], keys=["page.home"]) == []


def test_migrate_legacy_home_logs_healed_locales(
    content_service: ContentService, memory_store: MemoryContentStore, log_stream: io.StringIO
) -> None:
    """Explicit migration should heal stored rows and log each repaired locale."""

    memory_store.upsert("page.home", "tr", {"hero": DEFAULT_HOME_CONTENT["hero"]})

    outcomes = content_service.migrate_legacy_home()

    assert [(outcome.locale, outcome.status) for outcome in outcomes] == [
        ("en", "missing"),
        ("de", "missing"),
        ("tr", "healed"),
    ]
    assert outcomes[2].healed_hero is True
    assert outcomes[2].backfilled_rooms is True
    assert len(_log_events(log_stream, "healed")) == 1


def test_create_hotel_derives_slug_order_and_locales(content_service: ContentService) -> None:
    """New hotels get an ASCII slug, the next order, and name-only sibling locales."""

    first = content_service.create_hotel(
        "en",
        {
            "name": "Haus Süd",
            "shortDescription": "Quiet rooms",
            "gallery": [{"id": "img-1", "url": "/a.jpg"}],
        },
    )
    second = content_service.create_hotel(
        "de", {"name": "Nordlicht", "shortDescription": "Hell"}, active=False
    )

    assert first.slug == "haus-sud"
    assert first.order == 1
    assert first.cover_image_url == "/a.jpg"
    assert first.locales["de"]["name"] == "Haus Süd"
    assert first.locales["de"]["shortDescription"] == ""
    assert second.order == 2
    assert second.active is False
    assert second.available is True
    assert [hotel.slug for hotel in content_service.list_hotels()] == ["haus-sud", "nordlicht"]


def test_create_hotel_rejects_incomplete_and_duplicate_hotels(
    content_service: ContentService,
) -> None:
    """Missing required fields and reused slugs should be rejected."""

    with pytest.raises(HotelOperationError, match="Name and short description are required"):
        content_service.create_hotel("en", {"name": "Only name"})
    with pytest.raises(HotelOperationError, match="valid slug"):
        content_service.create_hotel("en", {"name": "!!!", "shortDescription": "x"})

    content_service.create_hotel("en", {"name": "Haus Süd", "shortDescription": "x"})
    with pytest.raises(DuplicateSlugError, match="Slug may already exist"):
        content_service.create_hotel("en", {"name": "Haus Sud", "shortDescription": "y"})


def test_update_hotel_changes_locale_content_and_shared_fields(
    content_service: ContentService,
) -> None:
    """Updates should sanitize slugs, clamp order, and allow clearing the cover."""

    hotel = content_service.create_hotel(
        "en",
        {"name": "Haus Süd", "shortDescription": "Quiet", "gallery": [{"id": "a", "url": "/a.jpg"}]},
    )

    updated = content_service.update_hotel(
        hotel.id,
        "de",
        {"heroTitle": " Willkommen "},
        slug=" New Slug!! ",
        order=0,
        available=False,
        cover_image_url="",
    )

    assert updated.slug == "New-Slug"
    assert updated.order == 1
    assert updated.available is False
    assert updated.cover_image_url == ""
    assert updated.locales["de"]["heroTitle"] == "Willkommen"
    assert updated.locales["en"]["name"] == "Haus Süd"

    with pytest.raises(HotelOperationError, match="Slug cannot be empty"):
        content_service.update_hotel(hotel.id, "en", slug="!!!")
    with pytest.raises(HotelNotFoundError, match="Hotel not found"):
        content_service.update_hotel("missing", "en", {"name": "x"})


def test_update_hotel_rejects_slug_of_other_hotel(content_service: ContentService) -> None:
    """Renaming a hotel onto another hotel's slug should fail."""

    content_service.create_hotel("en", {"name": "Alpha", "shortDescription": "a"})
    beta = content_service.create_hotel("en", {"name": "Beta", "shortDescription": "b"})

    with pytest.raises(DuplicateSlugError, match="Slug already exists"):
        content_service.update_hotel(beta.id, "en", slug="alpha")


def test_delete_gallery_image_renumbers_and_strips_metadata(
    content_service: ContentService,
) -> None:
    """Deleting an image removes it from every locale and renumbers the rest."""

    hotel = content_service.create_hotel(
        "en",
        {
            "name": "Haus Süd",
            "shortDescription": "Quiet",
            "gallery": [
                {"id": "a", "url": "/a.jpg", "sortOrder": 1},
                {"id": "b", "url": "/b.jpg", "sortOrder": 2},
                {"id": "c", "url": "/c.jpg", "sortOrder": 3},
            ],
            "galleryMeta": {"b": {"section": "Kitchen"}, "c": {"section": "Bath"}},
        },
    )

    updated = content_service.delete_hotel_gallery_image(hotel.id, "b")

    for locale in ("en", "de", "tr"):
        gallery = updated.locales[locale]["gallery"]
        assert [(image["id"], image["sortOrder"]) for image in gallery] == [("a", 1), ("c", 2)]
        assert "b" not in updated.locales[locale]["galleryMeta"]
    assert "c" in updated.locales["en"]["galleryMeta"]

    with pytest.raises(HotelNotFoundError, match="Image not found"):
        content_service.delete_hotel_gallery_image(hotel.id, "b")


def test_delete_hotel(content_service: ContentService, log_stream: io.StringIO) -> None:
    """Deleting removes the hotel; deleting again reports a missing hotel."""

    hotel = content_service.create_hotel("en", {"name": "Alpha", "shortDescription": "a"})

    content_service.delete_hotel(hotel.id)

    assert content_service.list_hotels() == []
    with pytest.raises(HotelNotFoundError):
        content_service.delete_hotel(hotel.id)
    assert _log_events(log_stream, "failure") == [
        f"[content] level=ERROR op=hotel-delete event=failure error_type=HotelNotFoundError "
        f"hotel={hotel.id}"
    ]


def test_list_hotels_normalizes_locales_with_english_fallback(
    content_service: ContentService,
) -> None:
    """Listed hotels expose normalized locale documents and a resolved cover."""

    hotel = content_service.create_hotel(
        "en",
        {"name": "Alpha", "shortDescription": "a", "gallery": [{"id": "g", "url": "/g.jpg"}]},
    )
    content_service.update_hotel(hotel.id, "en", cover_image_url="")

    [listed] = content_service.list_hotels()

    assert listed.cover_image_url == "/g.jpg"
    assert listed.locales["tr"]["name"] == "Alpha"
    assert listed.locales["tr"]["locale"] == "tr"

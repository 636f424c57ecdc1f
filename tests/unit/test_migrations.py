"""Unit tests for legacy Home healing and migration."""

from __future__ import annotations

from boardcms.content.coercion import clone_document
from boardcms.content.defaults import (
    DEFAULT_HOME_CONTENT,
    get_localized_default_home,
    get_localized_generic_rooms_cards,
)
from boardcms.io.storage import MemoryContentStore
from boardcms.migrations import (
    MigrationOutcome,
    has_legacy_english_hero,
    heal_home_content,
    migrate_home_documents,
)


def test_has_legacy_english_hero_only_flags_non_english_locales() -> None:
    """Only non-English documents carrying the English default hero are legacy."""

    english = clone_document(DEFAULT_HOME_CONTENT)

    assert has_legacy_english_hero("de", english) is True
    assert has_legacy_english_hero("en", english) is False
    assert has_legacy_english_hero("de", get_localized_default_home("de")) is False


def test_heal_replaces_legacy_hero_with_localized_default() -> None:
    """A German document with the English hero should get the German hero."""

    result = heal_home_content("de", clone_document(DEFAULT_HOME_CONTENT), get_localized_default_home("de"))

    assert result.healed_hero is True
    assert result.backfilled_rooms is False
    assert result.changed is True
    assert result.content["hero"] == get_localized_default_home("de")["hero"]


def test_heal_backfills_missing_room_cards_and_blank_texts() -> None:
    """Documents stored without room cards get localized placeholder cards."""

    localized = get_localized_default_home("tr")

    result = heal_home_content("tr", {"rooms": {"title": ""}}, localized)

    assert result.backfilled_rooms is True
    assert result.healed_hero is False
    assert result.content["rooms"]["cards"] == get_localized_generic_rooms_cards("tr")
    assert result.content["rooms"]["title"] == localized["rooms"]["title"]


def test_heal_is_idempotent() -> None:
    """A healed document should need no further repairs."""

    localized = get_localized_default_home("de")
    first = heal_home_content("de", clone_document(DEFAULT_HOME_CONTENT), localized)

    second = heal_home_content("de", first.content, localized)

    assert second.changed is False
    assert second.content == first.content


def test_migrate_home_documents_writes_back_only_changed_locales() -> None:
    """Migration should report per-locale outcomes and persist healed documents."""

    store = MemoryContentStore()
    store.upsert("page.home", "en", get_localized_default_home("en"))
    store.upsert("page.home", "de", clone_document(DEFAULT_HOME_CONTENT))

    outcomes = migrate_home_documents(store, updated_by="migrator")

    assert outcomes == [
        MigrationOutcome(locale="en", status="unchanged"),
        MigrationOutcome(locale="de", status="healed", healed_hero=True, backfilled_rooms=False),
        MigrationOutcome(locale="tr", status="missing"),
    ]
    german = store.get("page.home", "de")
    assert german is not None
    assert german.updated_by == "migrator"
    assert german.value["hero"]["titleLead"] == "In Stuttgart"
    assert store.get("page.home", "tr") is None

    assert [outcome.status for outcome in migrate_home_documents(store)] == [
        "unchanged",
        "unchanged",
        "missing",
    ]

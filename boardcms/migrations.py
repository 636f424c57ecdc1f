"""Legacy Home document healing.

Responsibilities:
- Detect non-English Home documents still carrying the English default hero.
- Backfill Home documents stored without room cards.
- Migrate every stored Home document in one explicit pass.

Healing is idempotent: a healed document no longer matches either condition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from .content.coercion import as_list, as_mapping, clone_document
from .content.defaults import DEFAULT_HOME_CONTENT, get_localized_default_home
from .content.home import normalize_home_content
from .io.storage import ContentStore
from .models.content import DEFAULT_LOCALE, HOME_CONTENT_KEY, SUPPORTED_LOCALES, HomeCmsContent


LEGACY_HERO_FIELDS = (
    "titleLead",
    "titleHighlight",
    "titleTail",
    "description",
    "ctaLocations",
    "ctaQuote",
)

_BACKFILLED_ROOMS_TEXTS = ("subtitle", "title", "description", "allAmenities", "request")

MigrationStatus = Literal["missing", "unchanged", "healed"]


@dataclass(frozen=True, slots=True)
class HealResult:
    """Normalized Home document plus the repairs applied to it."""

    content: HomeCmsContent
    healed_hero: bool
    backfilled_rooms: bool

    @property
    def changed(self) -> bool:
        return self.healed_hero or self.backfilled_rooms


@dataclass(frozen=True, slots=True)
class MigrationOutcome:
    """Result of migrating the stored Home document of one locale."""

    locale: str
    status: MigrationStatus
    healed_hero: bool = False
    backfilled_rooms: bool = False


def has_legacy_english_hero(locale: str, content: Mapping[str, Any]) -> bool:
    """Return whether a non-English Home document still uses the English hero."""

    if locale == DEFAULT_LOCALE:
        return False
    hero = as_mapping(content.get("hero"))
    english_hero = DEFAULT_HOME_CONTENT["hero"]
    return all(hero.get(name) == english_hero[name] for name in LEGACY_HERO_FIELDS)


def _has_stored_room_cards(stored: object) -> bool:
    rooms = as_mapping(as_mapping(stored).get("rooms"))
    return bool(as_list(rooms.get("cards")))


def heal_home_content(
    locale: str, stored: object, localized_default: HomeCmsContent
) -> HealResult:
    """Normalize a stored Home document and repair legacy data.

    A legacy English hero in a non-English locale is replaced with the
    localized default hero. A document stored without room cards gets the
    localized placeholder cards, and blank rooms texts are filled from the
    localized default.
    """

    content = normalize_home_content(stored, localized_default)

    healed_hero = has_legacy_english_hero(locale, content)
    if healed_hero:
        patched = clone_document(content)
        patched["hero"] = clone_document(localized_default["hero"])
        content = normalize_home_content(patched, content)

    backfilled_rooms = not _has_stored_room_cards(stored)
    if backfilled_rooms:
        patched = clone_document(content)
        rooms = patched["rooms"]
        rooms["cards"] = clone_document(localized_default["rooms"]["cards"])
        for name in _BACKFILLED_ROOMS_TEXTS:
            rooms[name] = rooms[name] or localized_default["rooms"][name]
        content = normalize_home_content(patched, content)

    return HealResult(content=content, healed_hero=healed_hero, backfilled_rooms=backfilled_rooms)


def migrate_home_documents(
    store: ContentStore, *, updated_by: str | None = None
) -> list[MigrationOutcome]:
    """Heal every stored Home document and write back only changed ones."""

    outcomes = []
    for locale in SUPPORTED_LOCALES:
        entry = store.get(HOME_CONTENT_KEY, locale)
        if entry is None:
            outcomes.append(MigrationOutcome(locale=locale, status="missing"))
            continue
        result = heal_home_content(locale, entry.value, get_localized_default_home(locale))
        if not result.changed:
            outcomes.append(MigrationOutcome(locale=locale, status="unchanged"))
            continue
        store.upsert(HOME_CONTENT_KEY, locale, result.content, updated_by)
        outcomes.append(
            MigrationOutcome(
                locale=locale,
                status="healed",
                healed_hero=result.healed_hero,
                backfilled_rooms=result.backfilled_rooms,
            )
        )
    return outcomes

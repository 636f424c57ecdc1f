"""Cross-locale sharing of locale-independent Home fields.

Responsibilities:
- Overlay English layout and room-card media onto non-English Home reads.
- Propagate locale-independent Home fields from a saved locale to the others.

Key public functions:
- `merge_rooms_cards_with_shared_media(cards, shared_media_cards)`
- `apply_shared_home_layout(content, en_content)`
- `propagate_shared_home_fields(submitted, saved, target)`
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..models.content import HomeCmsContent, RoomCard
from .coercion import as_list, as_mapping, clone_document, to_text
from .home import DEFAULT_ROOM_CARD_ICON, normalize_home_content


def merge_rooms_cards_with_shared_media(
    cards: Sequence[Mapping[str, Any]],
    shared_media_cards: Sequence[Mapping[str, Any]],
) -> list[RoomCard]:
    """Return `cards` with icon and image taken positionally from shared cards.

    Text fields always come from `cards`. Cards without a shared counterpart
    keep their own media.
    """

    merged = []
    for index, card in enumerate(cards):
        shared = shared_media_cards[index] if index < len(shared_media_cards) else {}
        icon = to_text(shared.get("icon") or card.get("icon") or DEFAULT_ROOM_CARD_ICON).strip()
        merged_card = dict(card)
        merged_card["icon"] = icon or DEFAULT_ROOM_CARD_ICON
        merged_card["image"] = to_text(shared.get("image") or card.get("image") or "").strip()
        merged.append(merged_card)
    return merged


def apply_shared_home_layout(
    content: HomeCmsContent, en_content: HomeCmsContent
) -> HomeCmsContent:
    """Return a copy of `content` using English sections and room-card media."""

    merged = clone_document(content)
    merged["sections"] = clone_document(en_content["sections"])
    merged["rooms"]["cards"] = merge_rooms_cards_with_shared_media(
        content["rooms"]["cards"], en_content["rooms"]["cards"]
    )
    return merged


def propagate_shared_home_fields(
    submitted: object, saved: HomeCmsContent, target: HomeCmsContent
) -> HomeCmsContent:
    """Return `target` updated with the shared fields of a saved Home document.

    Only parts present in the raw `submitted` payload are propagated, so a
    save that touches one section leaves the other locales' remaining parts
    alone. The result is normalized with `target` as fallback.
    """

    source = as_mapping(submitted)
    patched = clone_document(target)
    saved = clone_document(saved)

    if source.get("sections"):
        patched["sections"] = saved["sections"]
    if source.get("videoCta"):
        patched["videoCta"]["videoUrl"] = saved["videoCta"]["videoUrl"]

    hero = as_mapping(source.get("hero"))
    if as_list(hero.get("bookingPartners")) is not None:
        patched["hero"]["bookingPartners"] = saved["hero"]["bookingPartners"]
    if isinstance(hero.get("bookingPartnersVisibility"), Mapping):
        patched["hero"]["bookingPartnersVisibility"] = saved["hero"]["bookingPartnersVisibility"]

    if as_mapping(source.get("rooms")).get("cards"):
        patched["rooms"]["cards"] = merge_rooms_cards_with_shared_media(
            target["rooms"]["cards"], saved["rooms"]["cards"]
        )
    if source.get("testimonials"):
        for name in ("apartmentsCount", "backgroundImage"):
            patched["testimonials"][name] = saved["testimonials"][name]
    if source.get("facilities"):
        for name in ("primaryImage", "secondaryImage", "statsNumbers"):
            patched["facilities"][name] = saved["facilities"][name]
    if source.get("gallery"):
        patched["gallery"]["categories"] = saved["gallery"]["categories"]
        patched["gallery"]["items"] = saved["gallery"]["items"]
    if source.get("offers"):
        patched["offers"]["cards"] = _localized_offer_cards(
            saved["offers"]["cards"], target["offers"]["cards"]
        )

    return normalize_home_content(patched, target)


def _localized_offer_cards(
    saved_cards: Sequence[Mapping[str, Any]], target_cards: Sequence[Mapping[str, Any]]
) -> list[dict[str, Any]]:
    by_id = {card["id"]: card for card in reversed(target_cards)}
    cards = []
    for card in saved_cards:
        current = by_id.get(card["id"], {})
        localized = dict(card)
        for name in ("badge", "title", "text"):
            value = current.get(name)
            localized[name] = to_text(card.get(name) if value is None else value).strip()
        localized["image"] = card.get("image") or current.get("image") or ""
        cards.append(localized)
    return cards

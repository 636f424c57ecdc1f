"""Amenities page normalization and validation."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

from ..models.content import AmenitiesCmsContent
from .coercion import (
    as_mapping,
    blank_or_text,
    coerce_bounded_list,
    coerce_string_list,
    coerce_text_fields,
    trimmed_rows,
)
from .rules import Rule, first_violation, list_bounds, missing
from .services import PAGE_HERO_FIELDS


MAX_LAYOUT_OPTIONS = 8
MAX_CARDS = 24
MAX_OVERVIEW_ITEMS = 40
MAX_HIGHLIGHTS_PER_ITEM = 10
DEFAULT_LAYOUT_ICON = "fa fa-square-o"
DEFAULT_CARD_ICON = "fa fa-home"

_BODY_TEXT_FIELDS = (
    "layoutSubtitle",
    "layoutTitle",
    "layoutDesc",
    "amenitiesSubtitle",
    "amenitiesTitle",
    "toggleLabel",
    "cardView",
    "listView",
    "switchHelp",
    "includedTitle",
    "request",
)


def normalize_amenities_content(raw: object, fallback: Mapping[str, Any]) -> AmenitiesCmsContent:
    """Return a fully populated Amenities document built from `raw` and `fallback`."""

    source = as_mapping(raw)
    base = as_mapping(fallback)
    body = as_mapping(source.get("content"))
    base_body = as_mapping(base.get("content"))
    data = as_mapping(source.get("data"))
    base_data = as_mapping(base.get("data"))

    content: dict[str, Any] = coerce_text_fields(body, base_body, _BODY_TEXT_FIELDS)
    content["layoutOptions"] = coerce_bounded_list(
        body.get("layoutOptions"),
        base_body.get("layoutOptions"),
        lambda item, _index: _normalize_titled_item(item, DEFAULT_LAYOUT_ICON, with_image=False),
        keep=lambda option: bool(option["title"] or option["description"] or option["highlights"]),
        max_items=MAX_LAYOUT_OPTIONS,
    )
    return {
        "hero": coerce_text_fields(source.get("hero"), base.get("hero"), PAGE_HERO_FIELDS),
        "content": content,
        "data": {
            "cards": coerce_bounded_list(
                data.get("cards"),
                base_data.get("cards"),
                lambda item, _index: _normalize_titled_item(item, DEFAULT_CARD_ICON, with_image=True),
                keep=lambda card: bool(
                    card["title"] or card["description"] or card["image"] or card["highlights"]
                ),
                max_items=MAX_CARDS,
            ),
            "overviewItems": coerce_string_list(
                data.get("overviewItems"), base_data.get("overviewItems"), MAX_OVERVIEW_ITEMS
            ),
        },
    }


def _normalize_titled_item(item: object, default_icon: str, *, with_image: bool) -> dict[str, Any]:
    source = as_mapping(item)
    normalized: dict[str, Any] = {
        "title": blank_or_text(source.get("title")),
        "icon": blank_or_text(source.get("icon")) or default_icon,
    }
    if with_image:
        normalized["image"] = blank_or_text(source.get("image"))
    normalized["description"] = blank_or_text(source.get("description"))
    normalized["highlights"] = trimmed_rows(source.get("highlights"), MAX_HIGHLIGHTS_PER_ITEM)
    return normalized


def validate_amenities_content(content: AmenitiesCmsContent) -> str | None:
    """Return the first violated Amenities rule message, or `None` when valid."""

    return first_violation(_amenities_rules(content))


def _highlight_rules(prefix: str, highlights: Sequence[str]) -> Iterator[Rule]:
    yield Rule(f"{prefix}: at least 1 highlight is required", lambda: len(highlights) < 1)
    yield Rule(
        f"{prefix}: highlight limit is {MAX_HIGHLIGHTS_PER_ITEM}",
        lambda: len(highlights) > MAX_HIGHLIGHTS_PER_ITEM,
    )
    yield Rule(
        f"{prefix}: highlight rows cannot be empty",
        lambda: any(not row for row in highlights),
    )


def _amenities_rules(document: AmenitiesCmsContent) -> Iterator[Rule]:
    hero = document["hero"]
    content = document["content"]
    data = document["data"]

    yield Rule(
        "Amenities hero fields are required",
        missing(hero["subtitle"], hero["title"], hero["crumb"], hero["home"]),
    )
    yield Rule("Amenities hero background image is required", missing(hero["backgroundImage"]))
    yield Rule(
        "Amenities layout title/description fields are required",
        missing(content["layoutSubtitle"], content["layoutTitle"], content["layoutDesc"]),
    )

    options = content["layoutOptions"]
    yield from list_bounds(
        options,
        empty_message="Amenities layout options are required (at least 1)",
        limit=MAX_LAYOUT_OPTIONS,
        limit_message=f"Amenities layout option limit is {MAX_LAYOUT_OPTIONS}",
    )
    for number, option in enumerate(options, start=1):
        prefix = f"Amenities layout option {number}"
        yield Rule(
            f"{prefix}: title, icon and description are required",
            missing(option["title"], option["icon"], option["description"]),
        )
        yield from _highlight_rules(prefix, option["highlights"])

    yield Rule(
        "Amenities section title fields are required",
        missing(content["amenitiesSubtitle"], content["amenitiesTitle"]),
    )
    yield Rule(
        "Amenities toggle/view fields are required",
        missing(content["toggleLabel"], content["cardView"], content["listView"], content["switchHelp"]),
    )
    yield Rule(
        "Amenities included title and request CTA are required",
        missing(content["includedTitle"], content["request"]),
    )

    cards = data["cards"]
    yield from list_bounds(
        cards,
        empty_message="Amenities cards are required (at least 1)",
        limit=MAX_CARDS,
        limit_message=f"Amenities card limit is {MAX_CARDS}",
    )
    for number, card in enumerate(cards, start=1):
        prefix = f"Amenities card {number}"
        yield Rule(
            f"{prefix}: title, icon, image and description are required",
            missing(card["title"], card["icon"], card["image"], card["description"]),
        )
        yield from _highlight_rules(prefix, card["highlights"])

    overview = data["overviewItems"]
    yield from list_bounds(
        overview,
        empty_message="Amenities overview items are required (at least 1)",
        limit=MAX_OVERVIEW_ITEMS,
        limit_message=f"Amenities overview item limit is {MAX_OVERVIEW_ITEMS}",
    )
    yield Rule(
        "Amenities overview items cannot be empty",
        lambda: any(not item for item in overview),
    )

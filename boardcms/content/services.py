"""Services page normalization and validation."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from ..models.content import ServicesCmsContent
from .coercion import (
    as_mapping,
    blank_or_text,
    coerce_bounded_list,
    coerce_string_list,
    coerce_text_fields,
)
from .rules import Rule, first_violation, list_bounds, missing


MAX_STATS = 6
MAX_HIGHLIGHTS = 12
MAX_SUPPORT_ITEMS = 20
DEFAULT_HIGHLIGHT_ICON = "fa fa-home"

PAGE_HERO_FIELDS = ("subtitle", "title", "home", "crumb", "backgroundImage")

_BODY_TEXT_FIELDS = (
    "heroSubtitle",
    "heroTitle",
    "heroDescription",
    "ctaAvailability",
    "ctaContact",
    "statsImage",
    "essentialsSubtitle",
    "essentialsTitle",
    "supportSubtitle",
    "supportTitle",
    "supportDescription",
    "ctaStart",
)


def normalize_services_content(raw: object, fallback: Mapping[str, Any]) -> ServicesCmsContent:
    """Return a fully populated Services document built from `raw` and `fallback`."""

    source = as_mapping(raw)
    base = as_mapping(fallback)
    body = as_mapping(source.get("content"))
    base_body = as_mapping(base.get("content"))

    content: dict[str, Any] = coerce_text_fields(body, base_body, _BODY_TEXT_FIELDS)
    content["stats"] = coerce_bounded_list(
        body.get("stats"),
        base_body.get("stats"),
        lambda item, _index: {
            "label": blank_or_text(as_mapping(item).get("label")),
            "value": blank_or_text(as_mapping(item).get("value")),
            "note": blank_or_text(as_mapping(item).get("note")),
        },
        keep=lambda stat: any(stat.values()),
        max_items=MAX_STATS,
    )
    # The icon always defaults, so only title and description make a highlight.
    content["highlights"] = coerce_bounded_list(
        body.get("highlights"),
        base_body.get("highlights"),
        lambda item, _index: {
            "icon": blank_or_text(as_mapping(item).get("icon")) or DEFAULT_HIGHLIGHT_ICON,
            "title": blank_or_text(as_mapping(item).get("title")),
            "description": blank_or_text(as_mapping(item).get("description")),
        },
        keep=lambda highlight: bool(highlight["title"] or highlight["description"]),
        max_items=MAX_HIGHLIGHTS,
    )
    content["supportList"] = coerce_string_list(
        body.get("supportList"), base_body.get("supportList"), MAX_SUPPORT_ITEMS
    )
    return {
        "hero": coerce_text_fields(source.get("hero"), base.get("hero"), PAGE_HERO_FIELDS),
        "content": content,
    }


def validate_services_content(content: ServicesCmsContent) -> str | None:
    """Return the first violated Services rule message, or `None` when valid."""

    return first_violation(_services_rules(content))


def _services_rules(document: ServicesCmsContent) -> Iterator[Rule]:
    hero = document["hero"]
    content = document["content"]
    yield Rule(
        "Services hero fields are required",
        missing(hero["subtitle"], hero["title"], hero["home"], hero["crumb"]),
    )
    yield Rule("Services hero background image is required", missing(hero["backgroundImage"]))
    yield Rule(
        "Services intro title/description fields are required",
        missing(content["heroSubtitle"], content["heroTitle"], content["heroDescription"]),
    )
    yield Rule(
        "Services CTA fields are required",
        missing(content["ctaAvailability"], content["ctaContact"], content["ctaStart"]),
    )

    stats = content["stats"]
    yield from list_bounds(
        stats,
        empty_message="Services stats are required (at least 1)",
        limit=MAX_STATS,
        limit_message=f"Services stats limit is {MAX_STATS}",
    )
    for number, stat in enumerate(stats, start=1):
        yield Rule(
            f"Services stat {number}: label, value and note are required",
            missing(stat["label"], stat["value"], stat["note"]),
        )
    yield Rule("Services stats image is required", missing(content["statsImage"]))

    yield Rule(
        "Services essentials title fields are required",
        missing(content["essentialsSubtitle"], content["essentialsTitle"]),
    )
    highlights = content["highlights"]
    yield from list_bounds(
        highlights,
        empty_message="Services highlights are required (at least 1)",
        limit=MAX_HIGHLIGHTS,
        limit_message=f"Services highlights limit is {MAX_HIGHLIGHTS}",
    )
    for number, highlight in enumerate(highlights, start=1):
        yield Rule(
            f"Services highlight {number}: icon, title and description are required",
            missing(highlight["icon"], highlight["title"], highlight["description"]),
        )

    yield Rule(
        "Services support title/description fields are required",
        missing(content["supportSubtitle"], content["supportTitle"], content["supportDescription"]),
    )
    support = content["supportList"]
    yield from list_bounds(
        support,
        empty_message="Services support list is required (at least 1)",
        limit=MAX_SUPPORT_ITEMS,
        limit_message=f"Services support list item limit is {MAX_SUPPORT_ITEMS}",
    )
    for number, item in enumerate(support, start=1):
        yield Rule(f"Services support item {number} is required", missing(item))

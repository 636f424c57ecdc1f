"""Contact page normalization and validation."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from ..models.content import ContactCmsContent
from .coercion import as_mapping, blank_or_text, coerce_bounded_list, coerce_text_fields
from .rules import Rule, first_violation, list_bounds, missing
from .services import PAGE_HERO_FIELDS


MAX_DETAIL_ITEMS = 12
MAX_SOCIAL_LINKS = 12
DEFAULT_DETAIL_ICON = "icofont-info-circle"
DEFAULT_SOCIAL_ICON = "fa-brands fa-linkedin-in"

FORM_FIELDS = (
    "action",
    "name",
    "email",
    "phone",
    "message",
    "send",
    "success",
    "error",
    "namePlaceholder",
    "emailPlaceholder",
    "phonePlaceholder",
    "messagePlaceholder",
)


def normalize_contact_content(raw: object, fallback: Mapping[str, Any]) -> ContactCmsContent:
    """Return a fully populated Contact document built from `raw` and `fallback`."""

    source = as_mapping(raw)
    base = as_mapping(fallback)
    details = as_mapping(source.get("details"))
    base_details = as_mapping(base.get("details"))

    normalized_details: dict[str, Any] = coerce_text_fields(
        details, base_details, ("subtitle", "title", "description")
    )
    normalized_details["items"] = coerce_bounded_list(
        details.get("items"),
        base_details.get("items"),
        lambda item, _index: {
            "icon": blank_or_text(as_mapping(item).get("icon")) or DEFAULT_DETAIL_ICON,
            "title": blank_or_text(as_mapping(item).get("title")),
            "value": blank_or_text(as_mapping(item).get("value")),
        },
        keep=lambda item: bool(item["title"] or item["value"]),
        max_items=MAX_DETAIL_ITEMS,
    )
    normalized_details["socials"] = coerce_bounded_list(
        details.get("socials"),
        base_details.get("socials"),
        lambda item, _index: {
            "icon": blank_or_text(as_mapping(item).get("icon")) or DEFAULT_SOCIAL_ICON,
            "label": blank_or_text(as_mapping(item).get("label")),
            "url": blank_or_text(as_mapping(item).get("url")),
        },
        keep=lambda social: bool(social["label"] or social["url"]),
        max_items=MAX_SOCIAL_LINKS,
    )
    return {
        "hero": coerce_text_fields(source.get("hero"), base.get("hero"), PAGE_HERO_FIELDS),
        "details": normalized_details,
        "form": coerce_text_fields(source.get("form"), base.get("form"), FORM_FIELDS),
    }


def validate_contact_content(content: ContactCmsContent) -> str | None:
    """Return the first violated Contact rule message, or `None` when valid."""

    return first_violation(_contact_rules(content))


def _contact_rules(document: ContactCmsContent) -> Iterator[Rule]:
    hero = document["hero"]
    details = document["details"]
    form = document["form"]

    yield Rule(
        "Contact hero fields are required",
        missing(hero["subtitle"], hero["title"], hero["crumb"], hero["home"]),
    )
    yield Rule("Contact hero background image is required", missing(hero["backgroundImage"]))
    yield Rule(
        "Contact details section fields are required",
        missing(details["subtitle"], details["title"], details["description"]),
    )

    items = details["items"]
    yield from list_bounds(
        items,
        empty_message="Contact detail items are required (at least 1)",
        limit=MAX_DETAIL_ITEMS,
        limit_message=f"Contact detail item limit is {MAX_DETAIL_ITEMS}",
    )
    for number, item in enumerate(items, start=1):
        yield Rule(
            f"Contact detail item {number}: icon, title and value are required",
            missing(item["icon"], item["title"], item["value"]),
        )

    socials = details["socials"]
    yield from list_bounds(
        socials,
        empty_message="Contact social links are required (at least 1)",
        limit=MAX_SOCIAL_LINKS,
        limit_message=f"Contact social link limit is {MAX_SOCIAL_LINKS}",
    )
    for number, social in enumerate(socials, start=1):
        yield Rule(
            f"Contact social link {number}: icon, label and URL are required",
            missing(social["icon"], social["label"], social["url"]),
        )

    yield Rule("Contact form fields are required", missing(*(form[name] for name in FORM_FIELDS)))

"""Reservation page normalization and validation.

The Reservation document carries the most string-list fields of any page:
form options, bullets, and office hours. Each list is trimmed, stripped of
blank rows, and capped, then falls back to the fallback list when empty.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from ..models.content import ReservationCmsContent
from .coercion import (
    as_mapping,
    blank_or_text,
    coerce_bounded_list,
    coerce_string_list,
    coerce_text_fields,
)
from .rules import Rule, first_violation, list_bounds, missing, string_rows


MAX_OPTION_ROWS = 20
MAX_BULLETS = 20
MAX_HELP_CONTACTS = 10
MAX_HELP_HOURS = 10
MAX_STAY_PURPOSES = 15
DEFAULT_HELP_CONTACT_ICON = "fa fa-info-circle"

FORM_LABEL_FIELDS = (
    "action",
    "checkIn",
    "checkOut",
    "boarding",
    "select",
    "rooms",
    "guests",
    "availability",
)

INQUIRY_LABEL_FIELDS = (
    "action",
    "subtitle",
    "title",
    "firstName",
    "lastName",
    "company",
    "email",
    "phone",
    "purpose",
    "nationality",
    "guests",
    "rooms",
    "boarding",
    "moveIn",
    "message",
    "select",
    "send",
    "policy",
    "policyLink",
    "moveInPlaceholder",
)


def normalize_reservation_content(
    raw: object, fallback: Mapping[str, Any]
) -> ReservationCmsContent:
    """Return a fully populated Reservation document built from `raw` and `fallback`."""

    source = as_mapping(raw)
    base = as_mapping(fallback)

    def section(name: str) -> tuple[Mapping[str, Any], Mapping[str, Any]]:
        return as_mapping(source.get(name)), as_mapping(base.get(name))

    form, base_form = section("form")
    normalized_form: dict[str, Any] = coerce_text_fields(form, base_form, FORM_LABEL_FIELDS)
    for name in ("boardingOptions", "roomOptions", "guestOptions"):
        normalized_form[name] = coerce_string_list(form.get(name), base_form.get(name), MAX_OPTION_ROWS)

    long_stay, base_long_stay = section("longStay")
    normalized_long_stay: dict[str, Any] = coerce_text_fields(
        long_stay, base_long_stay, ("title", "description", "ctaQuote", "ctaContact")
    )
    normalized_long_stay["bullets"] = coerce_string_list(
        long_stay.get("bullets"), base_long_stay.get("bullets"), MAX_BULLETS
    )

    help_card, base_help = section("help")
    normalized_help: dict[str, Any] = coerce_text_fields(
        help_card, base_help, ("title", "description", "hoursTitle", "hoursDay")
    )
    normalized_help["contacts"] = coerce_bounded_list(
        help_card.get("contacts"),
        base_help.get("contacts"),
        lambda item, _index: {
            "icon": blank_or_text(as_mapping(item).get("icon")) or DEFAULT_HELP_CONTACT_ICON,
            "value": blank_or_text(as_mapping(item).get("value")),
        },
        keep=lambda contact: bool(contact["value"]),
        max_items=MAX_HELP_CONTACTS,
    )
    normalized_help["hours"] = coerce_string_list(
        help_card.get("hours"), base_help.get("hours"), MAX_HELP_HOURS
    )

    why, base_why = section("why")
    normalized_why: dict[str, Any] = coerce_text_fields(why, base_why, ("title",))
    normalized_why["bullets"] = coerce_string_list(why.get("bullets"), base_why.get("bullets"), MAX_BULLETS)

    inquiry, base_inquiry = section("inquiry")
    normalized_inquiry: dict[str, Any] = coerce_text_fields(inquiry, base_inquiry, INQUIRY_LABEL_FIELDS)
    normalized_inquiry["stayPurposes"] = coerce_bounded_list(
        inquiry.get("stayPurposes"),
        base_inquiry.get("stayPurposes"),
        lambda item, _index: {
            "value": blank_or_text(as_mapping(item).get("value")),
            "label": blank_or_text(as_mapping(item).get("label")),
        },
        keep=lambda purpose: bool(purpose["value"] or purpose["label"]),
        max_items=MAX_STAY_PURPOSES,
    )
    for name in ("boardingOptions", "roomOptions"):
        normalized_inquiry[name] = coerce_string_list(
            inquiry.get(name), base_inquiry.get(name), MAX_OPTION_ROWS
        )

    return {
        "hero": coerce_text_fields(
            source.get("hero"), base.get("hero"), ("subtitle", "title", "description", "backgroundImage")
        ),
        "crumb": coerce_text_fields(source.get("crumb"), base.get("crumb"), ("home", "current")),
        "shortStay": coerce_text_fields(
            source.get("shortStay"), base.get("shortStay"), ("subtitle", "title", "description", "helper")
        ),
        "form": normalized_form,
        "longStay": normalized_long_stay,
        "help": normalized_help,
        "why": normalized_why,
        "inquiry": normalized_inquiry,
    }


def validate_reservation_content(content: ReservationCmsContent) -> str | None:
    """Return the first violated Reservation rule message, or `None` when valid."""

    return first_violation(_reservation_rules(content))


def _reservation_rules(document: ReservationCmsContent) -> Iterator[Rule]:
    hero = document["hero"]
    crumb = document["crumb"]
    short_stay = document["shortStay"]
    form = document["form"]
    long_stay = document["longStay"]
    help_card = document["help"]
    why = document["why"]
    inquiry = document["inquiry"]

    yield Rule(
        "Reservation hero fields are required",
        missing(hero["subtitle"], hero["title"], hero["description"]),
    )
    yield Rule("Reservation hero background image is required", missing(hero["backgroundImage"]))
    yield Rule("Reservation breadcrumb fields are required", missing(crumb["home"], crumb["current"]))
    yield Rule(
        "Short stay fields are required",
        missing(
            short_stay["subtitle"], short_stay["title"], short_stay["description"], short_stay["helper"]
        ),
    )
    yield Rule(
        "Reservation form labels are required",
        missing(*(form[name] for name in FORM_LABEL_FIELDS)),
    )
    yield from string_rows(
        form["boardingOptions"],
        singular="Reservation form boarding option",
        plural="Reservation form boarding options",
        limit=MAX_OPTION_ROWS,
    )
    yield from string_rows(
        form["roomOptions"],
        singular="Reservation form room option",
        plural="Reservation form room options",
        limit=MAX_OPTION_ROWS,
    )
    yield from string_rows(
        form["guestOptions"],
        singular="Reservation form guest option",
        plural="Reservation form guest options",
        limit=MAX_OPTION_ROWS,
    )

    yield Rule(
        "Long stay fields are required",
        missing(
            long_stay["title"], long_stay["description"], long_stay["ctaQuote"], long_stay["ctaContact"]
        ),
    )
    yield from string_rows(
        long_stay["bullets"],
        singular="Long stay bullet",
        plural="Long stay bullets",
        limit=MAX_BULLETS,
    )

    yield Rule(
        "Help card fields are required",
        missing(
            help_card["title"], help_card["description"], help_card["hoursTitle"], help_card["hoursDay"]
        ),
    )
    contacts = help_card["contacts"]
    yield from list_bounds(
        contacts,
        empty_message="Help contacts are required (at least 1)",
        limit=MAX_HELP_CONTACTS,
        limit_message=f"Help contact limit is {MAX_HELP_CONTACTS}",
    )
    for number, contact in enumerate(contacts, start=1):
        yield Rule(
            f"Help contact {number}: icon and value are required",
            missing(contact["icon"], contact["value"]),
        )
    yield from string_rows(
        help_card["hours"],
        singular="Help hours row",
        plural="Help hours rows",
        limit=MAX_HELP_HOURS,
    )

    yield Rule("Why section title is required", missing(why["title"]))
    yield from string_rows(
        why["bullets"],
        singular="Why section bullet",
        plural="Why section bullets",
        limit=MAX_BULLETS,
    )

    yield Rule(
        "Inquiry form fields are required",
        missing(*(inquiry[name] for name in INQUIRY_LABEL_FIELDS)),
    )
    purposes = inquiry["stayPurposes"]
    yield from list_bounds(
        purposes,
        empty_message="Inquiry stay purposes are required (at least 1)",
        limit=MAX_STAY_PURPOSES,
        limit_message=f"Inquiry stay purpose limit is {MAX_STAY_PURPOSES}",
    )
    for number, purpose in enumerate(purposes, start=1):
        yield Rule(
            f"Inquiry stay purpose {number}: value and label are required",
            missing(purpose["value"], purpose["label"]),
        )
    yield from string_rows(
        inquiry["boardingOptions"],
        singular="Inquiry boarding option",
        plural="Inquiry boarding options",
        limit=MAX_OPTION_ROWS,
    )
    yield from string_rows(
        inquiry["roomOptions"],
        singular="Inquiry room option",
        plural="Inquiry room options",
        limit=MAX_OPTION_ROWS,
    )

"""Home page normalization and validation.

Responsibilities:
- Shape arbitrary Home input into a fully populated `HomeCmsContent`.
- Validate a normalized Home document with ordered, first-error-wins rules.

Key public functions:
- `normalize_home_content(raw, fallback)`
- `validate_home_content(content)`
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterator, Mapping

from ..models.content import (
    GalleryCategory,
    GalleryItem,
    HomeCmsContent,
    HOME_SECTION_KEYS,
    OfferCard,
)
from .coercion import (
    as_list,
    as_mapping,
    blank_or_text,
    coerce_bounded_list,
    coerce_flag,
    coerce_number_or,
    coerce_text_fields,
    coerce_trimmed_string,
    trimmed_rows,
)
from .formats import (
    is_supported_video_url,
    is_valid_background_position,
    is_valid_link,
    sanitize_gallery_category_key,
    sanitize_offer_id,
)
from .rules import Rule, first_violation, list_bounds, missing


MAX_HERO_SLIDES = 8
MAX_BOOKING_PARTNERS = 12
MAX_BOOKING_PARTNERS_TITLE = 120
MAX_BOOKING_PARTNERS_DESCRIPTION = 320
MAX_BOOKING_PARTNER_DESCRIPTION = 300
MAX_ROOM_CARDS = 8
MAX_TESTIMONIAL_SLIDES = 8
FACILITY_STAT_COUNT = 3
MAX_GALLERY_ITEMS = 24
MAX_GALLERY_ITEMS_PER_CATEGORY = 8
MAX_OFFER_CARDS = 4
MAX_FAQ_ITEMS = 20

DEFAULT_SLIDE_POSITION = "center center"
DEFAULT_ROOM_CARD_ICON = "fa fa-home"
DEFAULT_APARTMENTS_COUNT = 256
DEFAULT_GALLERY_CATEGORY = "general"

_LINK_FORMAT_HINT = 'must start with "/" or "http(s)://"'


def normalize_home_content(raw: object, fallback: Mapping[str, Any]) -> HomeCmsContent:
    """Return a fully populated Home document built from `raw` and `fallback`.

    Scalar fields fall back field by field. List fields are replaced wholesale
    when `raw` supplies a list and fall back to the fallback list when they
    would end up empty. Never raises for malformed input.
    """

    source = as_mapping(raw)
    base = as_mapping(fallback)
    return {
        "sections": _normalize_sections(source.get("sections"), base.get("sections")),
        "hero": _normalize_hero(source.get("hero"), base.get("hero")),
        "rooms": _normalize_rooms(source.get("rooms"), base.get("rooms")),
        "testimonials": _normalize_testimonials(source.get("testimonials"), base.get("testimonials")),
        "facilities": _normalize_facilities(source.get("facilities"), base.get("facilities")),
        "gallery": _normalize_gallery(source.get("gallery"), base.get("gallery")),
        "offers": _normalize_offers(source.get("offers"), base.get("offers")),
        "faq": _normalize_faq(source.get("faq"), base.get("faq")),
        "videoCta": {
            "videoUrl": coerce_trimmed_string(
                as_mapping(source.get("videoCta")).get("videoUrl"),
                as_mapping(base.get("videoCta")).get("videoUrl"),
            ),
        },
    }


def _normalize_sections(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    sections: dict[str, Any] = {}
    for index, key in enumerate(HOME_SECTION_KEYS):
        raw_state = as_mapping(raw.get(key))
        fallback_state = as_mapping(fallback.get(key))
        sections[key] = {
            "enabled": coerce_flag(raw_state.get("enabled"), fallback_state.get("enabled"), True),
            "order": coerce_number_or(raw_state.get("order"), fallback_state.get("order"), index + 1),
        }
    return sections


def _normalize_hero(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    raw_visibility = as_mapping(raw.get("bookingPartnersVisibility"))
    fallback_visibility = as_mapping(fallback.get("bookingPartnersVisibility"))

    hero: dict[str, Any] = coerce_text_fields(
        raw,
        fallback,
        (
            "titleLead",
            "titleHighlight",
            "titleTail",
            "description",
            "ctaLocations",
            "ctaLocationsHref",
            "ctaQuote",
            "ctaQuoteHref",
        ),
    )
    hero["bookingPartnersTitle"] = coerce_trimmed_string(
        raw.get("bookingPartnersTitle"),
        fallback.get("bookingPartnersTitle"),
        MAX_BOOKING_PARTNERS_TITLE,
    )
    hero["bookingPartnersDescription"] = coerce_trimmed_string(
        raw.get("bookingPartnersDescription"),
        fallback.get("bookingPartnersDescription"),
        MAX_BOOKING_PARTNERS_DESCRIPTION,
    )
    hero["bookingPartnersVisibility"] = {
        "hotelsPage": coerce_flag(
            raw_visibility.get("hotelsPage"), fallback_visibility.get("hotelsPage"), True
        ),
        "hotelDetailPage": coerce_flag(
            raw_visibility.get("hotelDetailPage"), fallback_visibility.get("hotelDetailPage"), True
        ),
    }
    hero["bookingPartners"] = coerce_bounded_list(
        raw.get("bookingPartners"),
        fallback.get("bookingPartners"),
        _normalize_booking_partner,
        keep=lambda partner: any(partner.values()),
        max_items=MAX_BOOKING_PARTNERS,
        fallback_on_empty=False,
    )
    hero["slides"] = coerce_bounded_list(
        raw.get("slides"),
        fallback.get("slides"),
        _normalize_hero_slide,
        keep=lambda slide: bool(slide["image"]),
        max_items=MAX_HERO_SLIDES,
    )
    return hero


def _normalize_booking_partner(item: object, _index: int) -> dict[str, str]:
    raw = as_mapping(item)
    return {
        "name": blank_or_text(raw.get("name")),
        "logo": blank_or_text(raw.get("logo")),
        "url": blank_or_text(raw.get("url")),
        "description": blank_or_text(raw.get("description"))[
            :MAX_BOOKING_PARTNER_DESCRIPTION
        ].rstrip(),
    }


def _normalize_hero_slide(item: object, _index: int) -> dict[str, str]:
    raw = as_mapping(item)
    return {
        "image": blank_or_text(raw.get("image")),
        "position": blank_or_text(raw.get("position")) or DEFAULT_SLIDE_POSITION,
    }


def _normalize_rooms(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    rooms: dict[str, Any] = coerce_text_fields(
        raw,
        fallback,
        (
            "subtitle",
            "title",
            "description",
            "allAmenities",
            "allAmenitiesHref",
            "request",
            "requestHref",
        ),
    )
    rooms["cards"] = coerce_bounded_list(
        raw.get("cards"),
        fallback.get("cards"),
        _normalize_room_card,
        keep=lambda card: bool(card["title"] or card["image"] or card["description"]),
        max_items=MAX_ROOM_CARDS,
    )
    return rooms


def _normalize_room_card(item: object, _index: int) -> dict[str, Any]:
    raw = as_mapping(item)
    return {
        "title": blank_or_text(raw.get("title")),
        "icon": blank_or_text(raw.get("icon")) or DEFAULT_ROOM_CARD_ICON,
        "image": blank_or_text(raw.get("image")),
        "description": blank_or_text(raw.get("description")),
        "highlights": trimmed_rows(raw.get("highlights")),
    }


def _normalize_testimonials(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    testimonials: dict[str, Any] = {
        "apartmentsCount": coerce_number_or(
            raw.get("apartmentsCount"), fallback.get("apartmentsCount"), DEFAULT_APARTMENTS_COUNT
        ),
    }
    testimonials.update(coerce_text_fields(raw, fallback, ("backgroundImage", "apartments", "locations")))
    testimonials["slides"] = coerce_bounded_list(
        raw.get("slides"),
        fallback.get("slides"),
        lambda item, _index: {
            "badge": blank_or_text(as_mapping(item).get("badge")),
            "text": blank_or_text(as_mapping(item).get("text")),
        },
        keep=lambda slide: bool(slide["badge"] or slide["text"]),
        max_items=MAX_TESTIMONIAL_SLIDES,
    )
    return testimonials


def _normalize_facilities(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    fallback_stats = as_list(fallback.get("stats")) or []
    stats_source = as_list(raw.get("stats"))
    if stats_source is None:
        stats_source = fallback_stats
    fallback_numbers = as_list(fallback.get("statsNumbers")) or []
    numbers_source = as_list(raw.get("statsNumbers"))
    if numbers_source is None:
        numbers_source = fallback_numbers

    stats = []
    numbers = []
    for index in range(FACILITY_STAT_COUNT):
        stat = as_mapping(_item_at(stats_source, index))
        fallback_stat = as_mapping(_item_at(fallback_stats, index))
        stats.append(
            {
                "label": coerce_trimmed_string(stat.get("label"), fallback_stat.get("label")),
                "suffix": coerce_trimmed_string(stat.get("suffix"), fallback_stat.get("suffix")),
            }
        )
        numbers.append(
            coerce_number_or(_item_at(numbers_source, index), _item_at(fallback_numbers, index), 0)
        )

    facilities: dict[str, Any] = coerce_text_fields(raw, fallback, ("subtitle", "title", "description"))
    facilities["stats"] = stats
    facilities.update(coerce_text_fields(raw, fallback, ("primaryImage", "secondaryImage")))
    facilities["statsNumbers"] = numbers
    return facilities


def _item_at(items: list[Any], index: int) -> Any:
    if index < len(items):
        return items[index]
    return None


def _normalize_gallery(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)

    categories = (
        _unique_categories(raw.get("categories"))
        or _unique_categories(fallback.get("categories"))
        or []
    )
    category_keys = [category["key"] for category in categories]
    default_category = category_keys[0] if category_keys else DEFAULT_GALLERY_CATEGORY

    def normalize_item(item: object, _index: int) -> GalleryItem:
        source = as_mapping(item)
        category = sanitize_gallery_category_key(source.get("category"))
        return {
            "image": blank_or_text(source.get("image")),
            "category": category if category in category_keys else default_category,
            "alt": blank_or_text(source.get("alt")),
        }

    items = coerce_bounded_list(
        raw.get("items"),
        fallback.get("items"),
        normalize_item,
        keep=lambda item: bool(item["image"]),
        max_items=MAX_GALLERY_ITEMS,
    )

    gallery: dict[str, Any] = coerce_text_fields(raw, fallback, ("subtitle", "title", "description", "view"))
    gallery["categories"] = categories
    gallery["items"] = _cap_items_per_category(items, MAX_GALLERY_ITEMS_PER_CATEGORY)
    return gallery


def _unique_categories(value: object) -> list[GalleryCategory] | None:
    """Return sanitized categories keeping the first occurrence of each key."""

    items = as_list(value)
    if items is None:
        return None
    categories: list[GalleryCategory] = []
    seen: set[str] = set()
    for item in items:
        source = as_mapping(item)
        key = sanitize_gallery_category_key(source.get("key"))
        label = blank_or_text(source.get("label"))
        if not label or key in seen:
            continue
        seen.add(key)
        categories.append({"key": key, "label": label})
    return categories


def _cap_items_per_category(items: list[GalleryItem], limit: int) -> list[GalleryItem]:
    counts: Counter[str] = Counter()
    capped = []
    for item in items:
        counts[item["category"]] += 1
        if counts[item["category"]] <= limit:
            capped.append(item)
    return capped


def _normalize_offers(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    fallback_cards = as_list(fallback.get("cards")) or []

    def normalize_card(item: object, index: int) -> OfferCard:
        source = as_mapping(item)
        fallback_card = as_mapping(
            _item_at(fallback_cards, index) or _item_at(fallback_cards, 0)
        )
        return {
            "id": sanitize_offer_id(source.get("id"), index),
            "badge": coerce_trimmed_string(source.get("badge"), fallback_card.get("badge")),
            "title": coerce_trimmed_string(source.get("title"), fallback_card.get("title")),
            "text": coerce_trimmed_string(source.get("text"), fallback_card.get("text")),
            "image": blank_or_text(source.get("image")),
        }

    offers: dict[str, Any] = coerce_text_fields(raw, fallback, ("subtitle", "title"))
    offers["cards"] = coerce_bounded_list(
        raw.get("cards"),
        fallback_cards,
        normalize_card,
        keep=lambda card: bool(card["title"] or card["text"] or card["image"]),
        max_items=MAX_OFFER_CARDS,
    )
    return offers


def _normalize_faq(raw_value: object, fallback_value: object) -> dict[str, Any]:
    raw = as_mapping(raw_value)
    fallback = as_mapping(fallback_value)
    faq: dict[str, Any] = coerce_text_fields(raw, fallback, ("subtitle", "title", "cta"))
    faq["items"] = coerce_bounded_list(
        raw.get("items"),
        fallback.get("items"),
        lambda item, _index: {
            "title": blank_or_text(as_mapping(item).get("title")),
            "body": blank_or_text(as_mapping(item).get("body")),
        },
        keep=lambda item: bool(item["title"] or item["body"]),
        max_items=MAX_FAQ_ITEMS,
    )
    return faq


def validate_home_content(content: HomeCmsContent) -> str | None:
    """Return the first violated Home rule message, or `None` when valid."""

    return first_violation(_home_rules(content))


def _home_rules(content: HomeCmsContent) -> Iterator[Rule]:
    yield from _hero_rules(content["hero"])
    yield from _rooms_rules(content["rooms"])
    yield from _testimonials_rules(content["testimonials"])
    yield from _facilities_rules(content["facilities"])
    yield from _gallery_rules(content["gallery"])
    yield from _offers_rules(content["offers"])
    yield from _faq_rules(content["faq"])
    video_url = content["videoCta"]["videoUrl"]
    yield Rule(
        "Video CTA URL must be a valid YouTube or Vimeo link",
        lambda: not is_supported_video_url(video_url),
    )


def _hero_rules(hero: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule(
        "Hero title fields are required",
        missing(hero["titleLead"], hero["titleHighlight"], hero["titleTail"]),
    )
    yield Rule(
        "Hero description and CTA fields are required",
        missing(hero["description"], hero["ctaLocations"], hero["ctaQuote"]),
    )
    yield Rule(
        "Hero CTA link fields are required",
        missing(hero["ctaLocationsHref"], hero["ctaQuoteHref"]),
    )
    yield Rule(
        f"Hero CTA links {_LINK_FORMAT_HINT}",
        lambda: not (is_valid_link(hero["ctaLocationsHref"]) and is_valid_link(hero["ctaQuoteHref"])),
    )

    slides = hero["slides"]
    yield from list_bounds(
        slides,
        empty_message="At least one hero slide is required",
        limit=MAX_HERO_SLIDES,
        limit_message=f"Hero slide limit is {MAX_HERO_SLIDES}",
    )
    for slide in slides:
        yield Rule("Hero slide image is required", missing(slide["image"]))
        yield Rule(
            'Hero slide position is invalid. Example: "center 35%"',
            lambda position=slide["position"]: not is_valid_background_position(position),
        )

    partners = hero["bookingPartners"]
    yield Rule(
        "Hero booking partners must be an array",
        lambda: not isinstance(partners, list),
    )
    yield Rule(
        f"Hero booking partner limit is {MAX_BOOKING_PARTNERS}",
        lambda: len(partners) > MAX_BOOKING_PARTNERS,
    )
    yield Rule(
        f"Booking partners title must be at most {MAX_BOOKING_PARTNERS_TITLE} characters",
        lambda: len(hero["bookingPartnersTitle"].strip()) > MAX_BOOKING_PARTNERS_TITLE,
    )
    yield Rule(
        f"Booking partners description must be at most {MAX_BOOKING_PARTNERS_DESCRIPTION} characters",
        lambda: len(hero["bookingPartnersDescription"].strip()) > MAX_BOOKING_PARTNERS_DESCRIPTION,
    )
    for number, partner in enumerate(partners, start=1):
        yield Rule(
            f"Booking partner {number}: name, logo and link are required",
            missing(partner["name"], partner["logo"], partner["url"]),
        )
        yield Rule(
            f"Booking partner {number}: link {_LINK_FORMAT_HINT}",
            lambda url=partner["url"]: not is_valid_link(url),
        )
        yield Rule(
            f"Booking partner {number}: description must be at most "
            f"{MAX_BOOKING_PARTNER_DESCRIPTION} characters",
            lambda text=partner["description"]: len(text.strip()) > MAX_BOOKING_PARTNER_DESCRIPTION,
        )


def _rooms_rules(rooms: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule(
        "Rooms section title/description fields are required",
        missing(rooms["subtitle"], rooms["title"], rooms["description"]),
    )
    yield Rule("Rooms CTA text fields are required", missing(rooms["allAmenities"], rooms["request"]))
    yield Rule(
        "Rooms CTA link fields are required",
        missing(rooms["allAmenitiesHref"], rooms["requestHref"]),
    )
    yield Rule(
        f"Rooms CTA links {_LINK_FORMAT_HINT}",
        lambda: not (is_valid_link(rooms["allAmenitiesHref"]) and is_valid_link(rooms["requestHref"])),
    )
    cards = rooms["cards"]
    yield from list_bounds(
        cards,
        empty_message="Rooms cards are required (at least 1)",
        limit=MAX_ROOM_CARDS,
        limit_message=f"Rooms card limit is {MAX_ROOM_CARDS}",
    )
    for number, card in enumerate(cards, start=1):
        yield Rule(
            f"Rooms card {number}: title, image and description are required",
            missing(card["title"], card["image"], card["description"]),
        )


def _testimonials_rules(testimonials: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule("Testimonials background image is required", missing(testimonials["backgroundImage"]))
    yield Rule(
        "Testimonials label fields are required",
        missing(testimonials["apartments"], testimonials["locations"]),
    )
    slides = testimonials["slides"]
    yield from list_bounds(
        slides,
        empty_message="Testimonials slides are required (at least 1)",
        limit=MAX_TESTIMONIAL_SLIDES,
        limit_message=f"Testimonials slide limit is {MAX_TESTIMONIAL_SLIDES}",
    )
    for number, slide in enumerate(slides, start=1):
        yield Rule(
            f"Testimonials slide {number}: badge and text are required",
            missing(slide["badge"], slide["text"]),
        )


def _facilities_rules(facilities: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule(
        "Facilities header fields are required",
        missing(facilities["subtitle"], facilities["title"], facilities["description"]),
    )
    stats = facilities["stats"]
    yield Rule(
        f"Facilities stats must include exactly {FACILITY_STAT_COUNT} items",
        lambda: len(stats) != FACILITY_STAT_COUNT,
    )
    for number, stat in enumerate(stats, start=1):
        yield Rule(
            f"Facilities stat {number}: label and suffix are required",
            missing(stat["label"], stat["suffix"]),
        )
    yield Rule(
        "Facilities images are required",
        missing(facilities["primaryImage"], facilities["secondaryImage"]),
    )


def _gallery_rules(gallery: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule(
        "Gallery text fields are required",
        missing(gallery["subtitle"], gallery["title"], gallery["description"], gallery["view"]),
    )
    categories = gallery["categories"]
    yield Rule("Gallery categories are required (at least 1)", lambda: len(categories) < 1)
    keys = [category["key"] for category in categories]
    for position, category in enumerate(categories):
        yield Rule(
            f"Gallery category {position + 1}: key and label are required",
            missing(category["key"], category["label"]),
        )
        yield Rule(
            f'Gallery category {position + 1}: duplicate key "{category["key"]}"',
            lambda key=category["key"], earlier=keys[:position]: key in earlier,
        )

    items = gallery["items"]
    yield from list_bounds(
        items,
        empty_message="Gallery items are required (at least 1)",
        limit=MAX_GALLERY_ITEMS,
        limit_message=f"Gallery item limit is {MAX_GALLERY_ITEMS}",
    )
    for number, item in enumerate(items, start=1):
        yield Rule(f"Gallery item {number}: image is required", missing(item["image"]))
        yield Rule(
            f"Gallery item {number}: category is invalid",
            lambda category=item["category"]: not category or category not in keys,
        )
    overfull = _first_overfull_category(items, MAX_GALLERY_ITEMS_PER_CATEGORY)
    yield Rule(
        f'Gallery category "{overfull}" can contain at most {MAX_GALLERY_ITEMS_PER_CATEGORY} images',
        lambda: overfull is not None,
    )


def _first_overfull_category(items: list[Mapping[str, Any]], limit: int) -> str | None:
    counts: Counter[str] = Counter()
    for item in items:
        counts[item["category"]] += 1
        if counts[item["category"]] > limit:
            return item["category"]
    return None


def _offers_rules(offers: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule("Offers subtitle and title are required", missing(offers["subtitle"], offers["title"]))
    cards = offers["cards"]
    yield from list_bounds(
        cards,
        empty_message="Offers must include at least 1 card",
        limit=MAX_OFFER_CARDS,
        limit_message=f"Offers card limit is {MAX_OFFER_CARDS}",
    )
    ids = [card["id"] for card in cards]
    for position, card in enumerate(cards):
        number = position + 1
        yield Rule(f"Offers card {number}: id is required", missing(card["id"]))
        yield Rule(
            f'Offers card {number}: duplicate id "{card["id"]}"',
            lambda card_id=card["id"], earlier=ids[:position]: card_id in earlier,
        )
        yield Rule(
            f"Offers card {number}: title, text and image are required",
            missing(card["title"], card["text"], card["image"]),
        )


def _faq_rules(faq: Mapping[str, Any]) -> Iterator[Rule]:
    yield Rule(
        "FAQ subtitle, title and CTA are required",
        missing(faq["subtitle"], faq["title"], faq["cta"]),
    )
    items = faq["items"]
    yield from list_bounds(
        items,
        empty_message="FAQ must include at least 1 item",
        limit=MAX_FAQ_ITEMS,
        limit_message=f"FAQ item limit is {MAX_FAQ_ITEMS}",
    )
    for number, item in enumerate(items, start=1):
        yield Rule(
            f"FAQ item {number}: title and body are required",
            missing(item["title"], item["body"]),
        )

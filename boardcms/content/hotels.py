"""Hotel locale content normalization.

Responsibilities:
- Normalize one locale's hotel document (facts, text rows, gallery, gallery metadata).
- Upgrade the legacy single-section gallery metadata shape.
- Provide the empty per-locale hotel document used when no fallback exists.

Key public functions:
- `normalize_hotel_locale_content(locale, raw, fallback=None)`
- `normalize_hotel_fact(raw)`, `normalize_gallery_meta(raw)`, `normalize_gallery_meta_map(raw)`
"""

from __future__ import annotations

import math
import secrets
from typing import Any, Mapping

from ..models.content import (
    HotelFact,
    HotelGalleryImage,
    HotelGalleryMeta,
    HotelLocaleContent,
)
from .coercion import as_list, as_mapping, blank_or_text, coerce_text_fields, to_text, trimmed_rows
from .formats import parse_gallery_category, parse_locale


DEFAULT_FACT_ICON = "fa fa-check"

_TEXT_FIELDS = ("name", "location", "shortDescription", "heroTitle", "heroSubtitle", "amenitiesTitle")
_MISSING_URLS = frozenset({"", "undefined", "null"})


def empty_hotel_locale_content(locale: str) -> HotelLocaleContent:
    """Return an empty hotel document for a locale."""

    return {
        "locale": parse_locale(locale),
        "name": "",
        "location": "",
        "shortDescription": "",
        "facts": [],
        "heroTitle": "",
        "heroSubtitle": "",
        "description": [],
        "amenitiesTitle": "",
        "highlights": [],
        "gallery": [],
        "galleryMeta": {},
    }


def normalize_hotel_fact(raw: object) -> HotelFact:
    """Return a `{text, icon}` fact from a plain string or a fact mapping.

    Mappings may carry the text under `text` or the older `value` key. Any
    other input yields an empty fact that callers filter out.
    """

    if isinstance(raw, str):
        return {"text": raw.strip(), "icon": DEFAULT_FACT_ICON}
    if isinstance(raw, Mapping):
        text = raw.get("text")
        if text is None:
            text = raw.get("value")
        return {
            "text": to_text(text).strip(),
            "icon": to_text(raw.get("icon")).strip() or DEFAULT_FACT_ICON,
        }
    return {"text": "", "icon": DEFAULT_FACT_ICON}


def normalize_gallery_meta(raw: object) -> HotelGalleryMeta:
    """Return gallery metadata in the `{sections: [...]}` shape.

    Sections without a title and without features are dropped. When no
    section survives, the legacy `{section, features}` shape is upgraded to a
    single section.
    """

    if not isinstance(raw, Mapping):
        return {"sections": []}

    sections = []
    for item in as_list(raw.get("sections")) or []:
        if not isinstance(item, Mapping):
            continue
        title = to_text(item.get("title")).strip()
        features = trimmed_rows(item.get("features"))
        if title or features:
            sections.append({"title": title, "features": features})

    if not sections:
        title = to_text(raw.get("section")).strip()
        features = trimmed_rows(raw.get("features"))
        if title or features:
            return {"sections": [{"title": title, "features": features}]}
    return {"sections": sections}


def normalize_gallery_meta_map(raw: object) -> dict[str, HotelGalleryMeta]:
    """Normalize a gallery-image-id keyed metadata map, skipping blank ids."""

    if not isinstance(raw, Mapping):
        return {}
    normalized: dict[str, HotelGalleryMeta] = {}
    for key, value in raw.items():
        image_id = to_text(key).strip()
        if image_id:
            normalized[image_id] = normalize_gallery_meta(value)
    return normalized


def _sort_order(value: object, index: int) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return index + 1
    if not math.isfinite(value):
        return index + 1
    return value


def _normalize_gallery_image(item: object, index: int) -> HotelGalleryImage:
    source = as_mapping(item)
    return {
        "id": blank_or_text(source.get("id")) or secrets.token_hex(12),
        "url": blank_or_text(source.get("url")),
        "thumbnailUrl": blank_or_text(source.get("thumbnailUrl")),
        "category": parse_gallery_category(source.get("category")),
        "alt": blank_or_text(source.get("alt")),
        "sortOrder": _sort_order(source.get("sortOrder"), index),
    }


def _list_or_base(raw: Mapping[str, Any], base: Mapping[str, Any], name: str) -> list[Any]:
    value = as_list(raw.get(name))
    if value is None:
        return as_list(base.get(name)) or []
    return value


def normalize_hotel_locale_content(
    locale: str, raw: object, fallback: Mapping[str, Any] | None = None
) -> HotelLocaleContent:
    """Return a normalized hotel document for `locale`.

    List fields replace the fallback wholesale when `raw` supplies a list and
    may end up empty. Gallery images without a usable URL are dropped and the
    rest are sorted by `sortOrder`, keeping input order for ties.
    """

    source = as_mapping(raw)
    base = as_mapping(fallback) if fallback is not None else empty_hotel_locale_content(locale)

    facts = (normalize_hotel_fact(item) for item in _list_or_base(source, base, "facts"))
    gallery = [
        _normalize_gallery_image(item, index)
        for index, item in enumerate(_list_or_base(source, base, "gallery"))
    ]
    gallery = [image for image in gallery if image["url"] not in _MISSING_URLS]
    gallery.sort(key=lambda image: image["sortOrder"])

    meta = source.get("galleryMeta")
    if meta is None:
        meta = base.get("galleryMeta")

    texts = coerce_text_fields(source, base, _TEXT_FIELDS)
    return {
        "locale": parse_locale(locale),
        "name": texts["name"],
        "location": texts["location"],
        "shortDescription": texts["shortDescription"],
        "facts": [fact for fact in facts if fact["text"]],
        "heroTitle": texts["heroTitle"],
        "heroSubtitle": texts["heroSubtitle"],
        "description": trimmed_rows(_list_or_base(source, base, "description")),
        "amenitiesTitle": texts["amenitiesTitle"],
        "highlights": trimmed_rows(_list_or_base(source, base, "highlights")),
        "gallery": gallery,
        "galleryMeta": normalize_gallery_meta_map(meta),
    }

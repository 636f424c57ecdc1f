"""Format predicates and key sanitizers used by normalizers and validators.

Responsibilities:
- Check link, background-position, and video URL formats.
- Derive stable keys, ids, and slugs from free-form admin input.
"""

from __future__ import annotations

import re
import unicodedata
from urllib.parse import urlsplit

from ..models.content import DEFAULT_LOCALE, HOTEL_GALLERY_CATEGORIES, SUPPORTED_LOCALES


MAX_LINK_LENGTH = 400
MAX_BACKGROUND_POSITION_LENGTH = 48
MAX_GALLERY_CATEGORY_KEY_LENGTH = 32
MAX_OFFER_ID_LENGTH = 40

SUPPORTED_VIDEO_HOSTS = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "youtu.be",
        "vimeo.com",
        "www.vimeo.com",
        "player.vimeo.com",
    }
)

_HTTP_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
_POSITION_TOKEN = re.compile(
    r"^(left|center|right|top|bottom|\d{1,3}%|\d{1,4}px)$", re.IGNORECASE | re.ASCII
)
_CATEGORY_KEY_DISALLOWED = re.compile(r"[^a-z0-9]+")
_OFFER_ID_DISALLOWED = re.compile(r"[^a-z0-9-]+")
_SLUG_DISALLOWED = re.compile(r"[^a-zA-Z0-9-]")
_REPEATED_DASHES = re.compile(r"-+")


def is_valid_link(value: str) -> bool:
    """Return whether a link is site-relative or an absolute http(s) URL."""

    text = str(value or "").strip()
    if not text or len(text) > MAX_LINK_LENGTH:
        return False
    if text.startswith("/"):
        return True
    return bool(_HTTP_PREFIX.match(text))


def is_valid_background_position(value: str) -> bool:
    """Return whether a CSS background position uses the supported tokens.

    Accepted values hold one or two whitespace-separated tokens from
    `left|center|right|top|bottom|NN%|NNpx`, for example `center 35%`.
    """

    text = str(value or "").strip()
    if not text or len(text) > MAX_BACKGROUND_POSITION_LENGTH:
        return False
    parts = text.split()
    if not 1 <= len(parts) <= 2:
        return False
    return all(_POSITION_TOKEN.match(part) for part in parts)


def is_supported_video_url(value: str) -> bool:
    """Return whether a URL points at an allowed YouTube or Vimeo host."""

    text = str(value or "").strip()
    if not text:
        return False
    try:
        parts = urlsplit(text)
        hostname = parts.hostname
    except ValueError:
        return False
    if parts.scheme.lower() not in {"http", "https"} or not hostname:
        return False
    return hostname.lower() in SUPPORTED_VIDEO_HOSTS


def sanitize_gallery_category_key(value: object) -> str:
    """Return a lowercase dash-separated Home gallery category key."""

    lowered = str(value or "").strip().lower()
    key = _CATEGORY_KEY_DISALLOWED.sub("-", lowered)[:MAX_GALLERY_CATEGORY_KEY_LENGTH]
    return key.strip("-") or "general"


def sanitize_offer_id(value: object, index: int) -> str:
    """Return a stable offer card id, defaulting to `offer-<index+1>`."""

    fallback_id = f"offer-{index + 1}"
    lowered = str(value or fallback_id).strip().lower()
    offer_id = _OFFER_ID_DISALLOWED.sub("-", lowered)[:MAX_OFFER_ID_LENGTH]
    return offer_id.strip("-") or fallback_id


def parse_gallery_category(value: object) -> str:
    """Return a hotel gallery category, mapping unknown values to `other`."""

    normalized = str(value or "").strip().lower()
    if normalized in HOTEL_GALLERY_CATEGORIES:
        return normalized
    return "other"


def parse_locale(value: object) -> str:
    """Return a supported locale code, defaulting to English."""

    normalized = str(value or "").strip().lower()
    if normalized in SUPPORTED_LOCALES:
        return normalized
    return DEFAULT_LOCALE


def sanitize_slug(value: object) -> str:
    """Replace disallowed slug characters and collapse dash runs."""

    replaced = _SLUG_DISALLOWED.sub("-", str(value or "").strip())
    return _REPEATED_DASHES.sub("-", replaced).strip("-")


def to_slug(value: str) -> str:
    """Return an ASCII, lowercase URL slug derived from a display name."""

    decomposed = unicodedata.normalize("NFD", value)
    without_marks = "".join(
        character for character in decomposed if not unicodedata.combining(character)
    )
    return sanitize_slug(without_marks).lower()

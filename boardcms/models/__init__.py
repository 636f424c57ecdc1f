"""Shared typed data models for boardcms.

This package holds locale constants, document shape declarations, and stored
record dataclasses so content, storage, and service modules avoid importing
each other.
"""

from .content import (
    CONTENT_KEYS,
    DEFAULT_LOCALE,
    HOME_CONTENT_KEY,
    HOME_SECTION_KEYS,
    SUPPORTED_LOCALES,
    ContentLocale,
)
from .records import ContentEntry, HotelEntity

__all__ = [
    "CONTENT_KEYS",
    "ContentEntry",
    "ContentLocale",
    "DEFAULT_LOCALE",
    "HOME_CONTENT_KEY",
    "HOME_SECTION_KEYS",
    "HotelEntity",
    "SUPPORTED_LOCALES",
]

"""Content type registry keyed by content key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..errors import UnknownContentKeyError
from ..models.content import (
    AMENITIES_CONTENT_KEY,
    CONTACT_CONTENT_KEY,
    HOME_CONTENT_KEY,
    RESERVATION_CONTENT_KEY,
    SERVICES_CONTENT_KEY,
)
from .amenities import normalize_amenities_content, validate_amenities_content
from .contact import normalize_contact_content, validate_contact_content
from .defaults import (
    get_localized_default_amenities,
    get_localized_default_contact,
    get_localized_default_home,
    get_localized_default_reservation,
    get_localized_default_services,
)
from .home import normalize_home_content, validate_home_content
from .reservation import normalize_reservation_content, validate_reservation_content
from .services import normalize_services_content, validate_services_content


@dataclass(frozen=True, slots=True)
class ContentType:
    """Normalizer, validator, and default factory for one content key."""

    key: str
    normalize: Callable[[object, Mapping[str, Any]], Any]
    validate: Callable[[Any], str | None]
    default: Callable[[str], Any]


_CONTENT_TYPES = {
    content_type.key: content_type
    for content_type in (
        ContentType(
            HOME_CONTENT_KEY,
            normalize_home_content,
            validate_home_content,
            get_localized_default_home,
        ),
        ContentType(
            SERVICES_CONTENT_KEY,
            normalize_services_content,
            validate_services_content,
            get_localized_default_services,
        ),
        ContentType(
            AMENITIES_CONTENT_KEY,
            normalize_amenities_content,
            validate_amenities_content,
            get_localized_default_amenities,
        ),
        ContentType(
            CONTACT_CONTENT_KEY,
            normalize_contact_content,
            validate_contact_content,
            get_localized_default_contact,
        ),
        ContentType(
            RESERVATION_CONTENT_KEY,
            normalize_reservation_content,
            validate_reservation_content,
            get_localized_default_reservation,
        ),
    )
}


def get_content_type(key: str) -> ContentType:
    """Return the registered content type for a key.

    Raises:
        UnknownContentKeyError: If the key is not one of `CONTENT_KEYS`.
    """

    content_type = _CONTENT_TYPES.get(str(key or "").strip())
    if content_type is None:
        raise UnknownContentKeyError(key)
    return content_type

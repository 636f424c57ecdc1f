"""Content normalization, validation, defaults, and cross-locale merging.

Each content type has a total normalizer that shapes arbitrary input into a
complete document and a validator that returns the first violated rule.
"""

from .amenities import normalize_amenities_content, validate_amenities_content
from .contact import normalize_contact_content, validate_contact_content
from .defaults import (
    get_localized_default,
    get_localized_default_amenities,
    get_localized_default_contact,
    get_localized_default_home,
    get_localized_default_reservation,
    get_localized_default_services,
    get_localized_generic_rooms_cards,
)
from .home import normalize_home_content, validate_home_content
from .hotels import (
    normalize_gallery_meta,
    normalize_gallery_meta_map,
    normalize_hotel_fact,
    normalize_hotel_locale_content,
)
from .merge import (
    apply_shared_home_layout,
    merge_rooms_cards_with_shared_media,
    propagate_shared_home_fields,
)
from .registry import ContentType, get_content_type
from .reservation import normalize_reservation_content, validate_reservation_content
from .services import normalize_services_content, validate_services_content

__all__ = [
    "ContentType",
    "get_content_type",
    "get_localized_default",
    "get_localized_default_home",
    "get_localized_default_services",
    "get_localized_default_amenities",
    "get_localized_default_contact",
    "get_localized_default_reservation",
    "get_localized_generic_rooms_cards",
    "normalize_home_content",
    "validate_home_content",
    "normalize_services_content",
    "validate_services_content",
    "normalize_amenities_content",
    "validate_amenities_content",
    "normalize_contact_content",
    "validate_contact_content",
    "normalize_reservation_content",
    "validate_reservation_content",
    "normalize_hotel_locale_content",
    "normalize_hotel_fact",
    "normalize_gallery_meta",
    "normalize_gallery_meta_map",
    "merge_rooms_cards_with_shared_media",
    "apply_shared_home_layout",
    "propagate_shared_home_fields",
]

"""Unit tests for coercion helpers and format predicates."""

from __future__ import annotations

import pytest

from boardcms.content.coercion import (
    coerce_bounded_list,
    coerce_flag,
    coerce_number,
    coerce_number_or,
    coerce_string_list,
    coerce_text_fields,
    coerce_trimmed_string,
    to_text,
    trimmed_rows,
)
from boardcms.content.defaults import DEFAULT_VIDEO_URL
from boardcms.content.formats import (
    is_supported_video_url,
    is_valid_background_position,
    is_valid_link,
    parse_gallery_category,
    parse_locale,
    sanitize_gallery_category_key,
    sanitize_offer_id,
    sanitize_slug,
    to_slug,
)


def test_coerce_trimmed_string_only_falls_back_for_missing_values() -> None:
    """Only `None` should fall through; an explicit empty string stays empty."""

    assert coerce_trimmed_string(None, "  Fallback ") == "Fallback"
    assert coerce_trimmed_string("", "Fallback") == ""
    assert coerce_trimmed_string("  Value  ", "Fallback") == "Value"
    assert coerce_trimmed_string("abcdef", None, max_length=3) == "abc"
    assert coerce_trimmed_string("ab cdef", None, max_length=3) == "ab"
    assert coerce_trimmed_string(None, None) == ""


def test_to_text_stringifies_json_scalars() -> None:
    """Numbers and booleans should stringify the way JSON documents expect."""

    assert to_text(None) == ""
    assert to_text(True) == "true"
    assert to_text(3.0) == "3"
    assert to_text(2.5) == "2.5"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("12", 12),
        (" 1.5 ", 1.5),
        (4.0, 4),
        (float("nan"), 0),
        (float("inf"), 0),
        ("abc", 0),
        (None, 0),
        ([], 0),
    ],
)
def test_coerce_number_maps_unparsable_values_to_zero(value: object, expected: float) -> None:
    """Number coercion should be total and finite."""

    assert coerce_number(value) == expected


def test_coerce_number_or_treats_zero_as_absent() -> None:
    """A zero or unparsable value should fall through to the fallback and default."""

    assert coerce_number_or(0, 5, 9) == 5
    assert coerce_number_or("x", None, 7) == 7
    assert coerce_number_or("3", 5, 9) == 3


def test_coerce_flag_parses_permissive_tokens() -> None:
    """Flags should accept boolean-like strings and fall back when absent."""

    assert coerce_flag("no", True, True) is False
    assert coerce_flag("on", False, False) is True
    assert coerce_flag(None, False, True) is False
    assert coerce_flag(None, None, True) is True


def test_coerce_string_list_replaces_filters_and_falls_back() -> None:
    """String lists should trim, drop blanks, cap, and fall back when empty."""

    assert coerce_string_list([" a ", "", None, "b"], ["z"], 5) == ["a", "b"]
    assert coerce_string_list([], [" z "], 5) == ["z"]
    assert coerce_string_list(["", "   "], ["z"], 5) == ["z"]
    assert coerce_string_list("not-a-list", ["y"], 5) == ["y"]
    assert coerce_string_list([str(index) for index in range(10)], [], 3) == ["0", "1", "2"]
    assert coerce_string_list([], ["z"], 5, fallback_on_empty=False) == []


def test_coerce_bounded_list_normalizes_fallback_items() -> None:
    """Fallback items should pass through the same item normalizer."""

    result = coerce_bounded_list(
        [{"name": ""}],
        [{"name": " Kept "}, {"name": ""}],
        lambda item, index: {"name": str(item.get("name", "")).strip(), "position": index},
        keep=lambda item: bool(item["name"]),
        max_items=4,
    )

    assert result == [{"name": "Kept", "position": 0}]


def test_trimmed_rows_and_text_fields() -> None:
    """Row and field helpers should ignore non-list and non-mapping input."""

    assert trimmed_rows("nope") == []
    assert trimmed_rows([" a ", "", "b"], max_items=1) == ["a"]
    assert coerce_text_fields("nope", {"title": " T "}, ("title", "subtitle")) == {
        "title": "T",
        "subtitle": "",
    }


def test_link_and_image_predicates() -> None:
    """Links should be site-relative or absolute http(s) URLs."""

    assert is_valid_link("/contact")
    assert is_valid_link("https://example.com/path")
    assert is_valid_link("HTTP://EXAMPLE.COM")
    assert not is_valid_link("ftp://example.com")
    assert not is_valid_link("javascript:alert(1)")
    assert not is_valid_link("")
    assert not is_valid_link("/" + "a" * 400)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("center 35%", True),
        ("center", True),
        ("10px 20%", True),
        ("left top", True),
        ("left top bottom", False),
        ("middle", False),
        ("", False),
    ],
)
def test_background_position_tokens(value: str, expected: bool) -> None:
    """Background positions should hold one or two supported tokens."""

    assert is_valid_background_position(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (DEFAULT_VIDEO_URL, True),
        ("https://youtu.be/abc123", True),
        ("https://player.vimeo.com/video/1", True),
        ("http://vimeo.com/42", True),
        ("https://example.com/watch?v=1", False),
        ("youtube.com/watch?v=1", False),
        ("ftp://youtube.com/watch?v=1", False),
        ("", False),
    ],
)
def test_supported_video_url_requires_scheme_and_allowed_host(value: str, expected: bool) -> None:
    """Video URLs should use http(s) and a YouTube or Vimeo host."""

    assert is_supported_video_url(value) is expected


def test_key_sanitizers() -> None:
    """Category keys, offer ids, and hotel categories should sanitize deterministically."""

    assert sanitize_gallery_category_key("  Fine Dining! ") == "fine-dining"
    assert sanitize_gallery_category_key("!!!") == "general"
    assert len(sanitize_gallery_category_key("a" * 40)) == 32
    assert sanitize_offer_id(None, 2) == "offer-3"
    assert sanitize_offer_id("Summer Deal", 0) == "summer-deal"
    assert sanitize_offer_id("***", 0) == "offer-1"
    assert parse_gallery_category(" Rooms ") == "rooms"
    assert parse_gallery_category("spa") == "other"
    assert parse_locale("DE") == "de"
    assert parse_locale("fr") == "en"


def test_key_sanitizers_drop_dashes_left_by_truncation() -> None:
    """A cut at the length limit should not leave a trailing dash behind."""

    category_key = sanitize_gallery_category_key("a" * 31 + " b")
    offer_id = sanitize_offer_id("o" * 39 + " z", 0)

    assert category_key == "a" * 31
    assert sanitize_gallery_category_key(category_key) == category_key
    assert offer_id == "o" * 39
    assert sanitize_offer_id(offer_id, 0) == offer_id


def test_background_position_rejects_non_ascii_digits() -> None:
    """Only ASCII digits should count as percentage or pixel values."""

    assert is_valid_background_position("center 35%")
    assert not is_valid_background_position("center \u0663\u0665%")
    assert not is_valid_background_position("\uff11\uff10px")


def test_slug_helpers() -> None:
    """Display names should become ASCII lowercase slugs; update slugs keep case."""

    assert to_slug("Haus Süd") == "haus-sud"
    assert to_slug("Hôtel Über") == "hotel-uber"
    assert sanitize_slug("  My  Hotel ") == "My-Hotel"
    assert sanitize_slug(" New Slug!! ") == "New-Slug"
    assert sanitize_slug("!!!") == ""

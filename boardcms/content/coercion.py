"""Coerce-or-fallback helpers shared by every content normalizer.

Responsibilities:
- Turn arbitrary decoded JSON values into trimmed strings, numbers, and flags.
- Apply replace-or-keep-fallback list semantics with filtering and caps.

All helpers are total: they accept any input and never raise for content values.
"""

from __future__ import annotations

import copy
import math
from typing import Any, Callable, Mapping, Sequence, TypeVar

from ..parsing import parse_permissive_boolean


T = TypeVar("T")

_EMPTY_MAPPING: Mapping[str, Any] = {}


def as_mapping(value: object) -> Mapping[str, Any]:
    """Return `value` when it is a mapping, otherwise an empty mapping."""

    if isinstance(value, Mapping):
        return value
    return _EMPTY_MAPPING


def as_list(value: object) -> list[Any] | None:
    """Return `value` when it is a list, otherwise `None`."""

    if isinstance(value, list):
        return value
    return None


def to_text(value: object) -> str:
    """Stringify a decoded JSON value the way the persisted documents expect.

    `None` becomes an empty string, booleans become `true`/`false`, and
    integral floats lose their trailing `.0`.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def first_present(*values: object) -> object:
    """Return the first value that is not `None`."""

    for value in values:
        if value is not None:
            return value
    return None


def coerce_trimmed_string(
    raw: object, fallback: object, max_length: int | None = None
) -> str:
    """Return `raw`, else `fallback`, as a trimmed string.

    Only `None` falls through to the fallback, so a submitted empty string
    stays empty.
    """

    text = to_text(first_present(raw, fallback, "")).strip()
    if max_length is not None:
        return text[:max_length].rstrip()
    return text


def blank_or_text(value: object) -> str:
    """Return a trimmed string for truthy values and an empty string otherwise."""

    if not value:
        return ""
    return to_text(value).strip()


def coerce_number(value: object) -> int | float:
    """Convert a value to a finite number, mapping unparsable input to `0`."""

    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return 0
        return coerce_number(parsed)
    return 0


def coerce_number_or(raw: object, fallback: object, default: int | float) -> int | float:
    """Return the first non-zero number of `raw`, `fallback`, and `default`.

    A submitted `0` counts as absent and falls through to the fallback.
    """

    return coerce_number(raw) or coerce_number(fallback) or default


def coerce_flag(raw: object, fallback: object, default: bool) -> bool:
    """Return the first present flag of `raw`, `fallback`, and `default`."""

    value = first_present(raw, fallback, default)
    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed
    return bool(value)


def coerce_bounded_list(
    raw: object,
    fallback_items: object,
    normalize_item: Callable[[Any, int], T],
    *,
    keep: Callable[[T], bool],
    max_items: int,
    fallback_on_empty: bool = True,
) -> list[T]:
    """Normalize a list field with replace-or-keep-fallback semantics.

    The raw list replaces the fallback list wholesale when it is a list. Items
    are normalized, structurally empty items are dropped, and the result is
    capped at `max_items`. An empty result is replaced by the normalized
    fallback list when `fallback_on_empty` is set.
    """

    fallback_list = as_list(fallback_items) or []
    source = as_list(raw)
    if source is None:
        source = fallback_list

    items = _normalize_items(source, normalize_item, keep, max_items)
    if items or not fallback_on_empty or source is fallback_list:
        return items
    return _normalize_items(fallback_list, normalize_item, keep, max_items)


def _normalize_items(
    source: Sequence[Any],
    normalize_item: Callable[[Any, int], T],
    keep: Callable[[T], bool],
    max_items: int,
) -> list[T]:
    normalized = (normalize_item(item, index) for index, item in enumerate(source))
    return [item for item in normalized if keep(item)][:max_items]


def coerce_string_list(
    raw: object,
    fallback_items: object,
    max_items: int,
    *,
    fallback_on_empty: bool = True,
) -> list[str]:
    """Normalize a list of plain strings to trimmed, non-empty, capped rows."""

    return coerce_bounded_list(
        raw,
        fallback_items,
        lambda item, _index: blank_or_text(item),
        keep=bool,
        max_items=max_items,
        fallback_on_empty=fallback_on_empty,
    )


def trimmed_rows(value: object, max_items: int | None = None) -> list[str]:
    """Return trimmed non-empty strings of a raw list, or `[]` for non-lists."""

    rows = [blank_or_text(item) for item in as_list(value) or []]
    kept = [row for row in rows if row]
    if max_items is not None:
        return kept[:max_items]
    return kept


def clone_document(value: T) -> T:
    """Return a deep copy of a JSON-compatible document."""

    return copy.deepcopy(value)


def coerce_text_fields(
    raw: object, fallback: object, names: Sequence[str], max_length: int | None = None
) -> dict[str, str]:
    """Coerce each named field of a section to a trimmed string with fallback."""

    source = as_mapping(raw)
    base = as_mapping(fallback)
    return {
        name: coerce_trimmed_string(source.get(name), base.get(name), max_length)
        for name in names
    }

"""Shared parsing helpers for configuration, CLI options, and input files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models.content import SUPPORTED_LOCALES


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_strict_locale(value: object, field_name: str) -> str:
    """Parse a locale code and reject unsupported values.

    Raises:
        ValueError: If the value is not one of the supported locale codes.
    """

    normalized = (normalize_optional_string(value) or "").lower()
    if normalized in SUPPORTED_LOCALES:
        return normalized
    supported = ", ".join(SUPPORTED_LOCALES)
    raise ValueError(f"`{field_name}` must be one of: {supported}.")


def parse_locale_list(values: list[str] | None) -> tuple[str, ...]:
    """Parse repeated or comma-separated locale options in supported order."""

    if not values:
        return SUPPORTED_LOCALES
    requested: set[str] = set()
    for value in values:
        for token in value.split(","):
            if token.strip():
                requested.add(parse_strict_locale(token, "locale"))
    return tuple(locale for locale in SUPPORTED_LOCALES if locale in requested)


def load_json_document(path: Path) -> Any:
    """Load a UTF-8 JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON.
    """

    raw_text = path.read_text(encoding="utf-8")
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc

"""Structured content operation logging.

Responsibilities:
- Emit concise, deterministic operation-level log lines through `loguru`.
- Keep document payloads out of log output.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
        if context[key] is not None
    ]
    if not tokens:
        return ""
    return " " + " ".join(tokens)


class ContentLogger:
    """Emit deterministic `[content]` lines for store-observable operations."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize the logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level.upper(), colorize=False)

    def _emit(self, level: str, event: str, op: str, **context: object) -> None:
        """Emit one structured content log line."""

        line = f"[content] level={level} op={op} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_start(self, op: str, **context: object) -> None:
        """Emit an operation-start event."""

        self._emit("DEBUG", "start", op, **context)

    def log_complete(self, op: str, **context: object) -> None:
        """Emit an operation-complete event."""

        self._emit("INFO", "complete", op, **context)

    def log_seeded(self, key: str, locale: str) -> None:
        """Emit an event for a default document written on first access."""

        self._emit("INFO", "seeded", "seed", key=key, locale=locale)

    def log_healed(self, locale: str, *, healed_hero: bool, backfilled_rooms: bool) -> None:
        """Emit an event for a legacy Home document written back after healing."""

        self._emit(
            "INFO",
            "healed",
            "heal",
            backfilled_rooms=str(backfilled_rooms).lower(),
            healed_hero=str(healed_hero).lower(),
            key="page.home",
            locale=locale,
        )

    def log_propagated(self, source_locale: str, target_locale: str) -> None:
        """Emit an event for shared Home fields copied to another locale."""

        self._emit(
            "INFO",
            "propagated",
            "save",
            key="page.home",
            locale=target_locale,
            source=source_locale,
        )

    def log_rejected(self, op: str, key: str, locale: str) -> None:
        """Emit a validation-rejection event without the document or message."""

        self._emit("WARNING", "rejected", op, key=key, locale=locale)

    def log_failure(self, op: str, error_type: str, **context: object) -> None:
        """Emit an operation-failure event without sensitive payload details."""

        self._emit("ERROR", "failure", op, error_type=error_type, **context)

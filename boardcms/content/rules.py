"""Ordered validation rules with first-violation-wins evaluation.

Validators describe their checks as an ordered sequence of `Rule` values. The
sequence is evaluated lazily, so per-item rules for later sections are only
built once earlier sections pass. The first violated rule's message is the
validation result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence


@dataclass(frozen=True, slots=True)
class Rule:
    """One validation check.

    Attributes:
        message: Human-readable error returned when the check fails.
        failed: Zero-argument predicate returning `True` on violation.
    """

    message: str
    failed: Callable[[], bool]


def first_violation(rules: Iterable[Rule]) -> str | None:
    """Return the message of the first violated rule, or `None`."""

    for rule in rules:
        if rule.failed():
            return rule.message
    return None


def missing(*values: object) -> Callable[[], bool]:
    """Build a predicate that fails when any value is blank."""

    return lambda: not all(values)


def list_bounds(
    items: Sequence[object], *, empty_message: str, limit: int, limit_message: str
) -> Iterator[Rule]:
    """Yield the minimum-one and maximum-length rules for a list field."""

    yield Rule(empty_message, lambda: len(items) < 1)
    yield Rule(limit_message, lambda: len(items) > limit)


def string_rows(
    rows: Sequence[str], *, singular: str, plural: str, limit: int
) -> Iterator[Rule]:
    """Yield bounds and blank-row rules for a list of strings.

    Messages read `<plural> are required (at least 1)`,
    `<singular> limit is N`, and `<plural> cannot be empty`.
    """

    yield from list_bounds(
        rows,
        empty_message=f"{plural} are required (at least 1)",
        limit=limit,
        limit_message=f"{singular} limit is {limit}",
    )
    yield Rule(f"{plural} cannot be empty", lambda: any(not row for row in rows))

"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
JSON documents, hotel rows, and migration outcomes.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import ContentStageError
from .migrations import MigrationOutcome
from .models.records import HotelEntity


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ContentStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_json(payload: object) -> None:
    """Print a JSON document with stable key order."""

    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


def echo_hotel_rows(hotels: list[HotelEntity]) -> None:
    """Print one compact row per hotel in listing order."""

    if not hotels:
        typer.echo("No hotels.")
        return
    for hotel in hotels:
        name = hotel.locales.get("en", {}).get("name", "")
        flags = []
        if not hotel.active:
            flags.append("inactive")
        if not hotel.available:
            flags.append("unavailable")
        suffix = f" ({', '.join(flags)})" if flags else ""
        typer.echo(f"{hotel.order}. {hotel.slug} [{hotel.id}] {name}{suffix}")


def echo_migration_outcomes(outcomes: list[MigrationOutcome]) -> None:
    """Print one line per locale describing the legacy Home migration."""

    for outcome in outcomes:
        line = f"{outcome.locale}: {outcome.status}"
        if outcome.status == "healed":
            repairs = []
            if outcome.healed_hero:
                repairs.append("hero")
            if outcome.backfilled_rooms:
                repairs.append("rooms cards")
            line += f" ({', '.join(repairs)})"
        typer.echo(line)

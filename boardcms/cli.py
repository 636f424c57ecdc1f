"""Command-line interface for boardcms.

Responsibilities:
- Expose user-facing commands for reading, saving, validating, and seeding content.
- Expose hotel entity commands as the `hotels` sub-application.
- Convert CLI arguments into `CmsConfig` and a configured `ContentService`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from .cli_rendering import (
    echo_hotel_rows,
    echo_json,
    echo_migration_outcomes,
    exit_with_command_error,
)
from .config import CmsConfig, ConfigLoader
from .content.registry import get_content_type
from .errors import ContentStageError, ContentValidationError
from .io.storage import JsonContentStore
from .parsing import load_json_document, parse_locale_list, parse_strict_locale
from .service import ContentService
from .telemetry.logger import ContentLogger

app = typer.Typer(
    name="boardcms",
    no_args_is_help=True,
    help="Boarding-house CMS content CLI.",
)
hotels_app = typer.Typer(no_args_is_help=True, help="Manage hotel entities.")
app.add_typer(hotels_app, name="hotels")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
StoreOption = Annotated[
    Path | None,
    typer.Option("--store", help="Content store directory (overrides config value)."),
]
LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", help="Content locale: en, de, or tr."),
]
UpdatedByOption = Annotated[
    str | None,
    typer.Option("--updated-by", help="Editor identifier recorded on writes."),
]


def _load_config(config_path: Path | None) -> CmsConfig:
    """Load config from YAML when requested, else from the environment."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise ContentStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix the `BOARDCMS_*` environment variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ContentStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ContentStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_config(
    config_path: Path | None,
    store: Path | None,
    updated_by: str | None = None,
) -> CmsConfig:
    """Resolve effective config from file/env defaults and explicit CLI overrides."""

    return _load_config(config_path).with_overrides(store_dir=store, updated_by=updated_by)


def _build_service(config: CmsConfig) -> ContentService:
    """Create a content service over the configured JSON store."""

    return ContentService(
        JsonContentStore(config.store_dir),
        logger=ContentLogger(sink=sys.stderr, level=config.log_level),
        heal_on_read=config.heal_on_read,
        updated_by=config.updated_by,
    )


def _resolve_locale(locale: str | None, config: CmsConfig) -> str:
    """Return the explicit `--locale` value or the configured default locale."""

    if locale is None:
        return config.default_locale
    return parse_strict_locale(locale, "--locale")


def _read_input_file(path: Path) -> Any:
    """Load a JSON input file and map failures to stage errors."""

    try:
        return load_json_document(path)
    except FileNotFoundError as exc:
        raise ContentStageError(
            stage="input",
            detail=f"Input file not found: `{path}`.",
            hint="Provide an existing JSON document path.",
        ) from exc
    except ValueError as exc:
        raise ContentStageError(
            stage="input",
            detail=f"Input file `{path}` is not valid JSON: {exc}",
            hint="Fix the JSON syntax and rerun.",
        ) from exc


def _split_submission(payload: Any) -> tuple[str | None, Any]:
    """Split a `{locale, content}` envelope, or return the payload as content."""

    if isinstance(payload, dict) and "content" in payload and set(payload) <= {"locale", "content"}:
        locale = payload.get("locale")
        return (str(locale) if locale is not None else None), payload["content"]
    return None, payload


@app.command("show")
def show_command(
    key: Annotated[str, typer.Argument(help="Content key, for example `page.home`.")],
    locale: LocaleOption = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Print the read-path document for a content key and locale as JSON."""

    try:
        config = _resolve_config(config_file, store)
        content = _build_service(config).get_content(key, _resolve_locale(locale, config))
    except Exception as exc:
        exit_with_command_error("show", exc)

    echo_json(content)


@app.command("save")
def save_command(
    key: Annotated[str, typer.Argument(help="Content key, for example `page.home`.")],
    input_file: Annotated[Path, typer.Argument(help="JSON document or `{locale, content}` envelope.")],
    locale: LocaleOption = None,
    updated_by: UpdatedByOption = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Normalize, validate, and persist a submitted content document."""

    try:
        config = _resolve_config(config_file, store, updated_by)
        envelope_locale, content = _split_submission(_read_input_file(input_file))
        resolved_locale = _resolve_locale(locale if locale is not None else envelope_locale, config)
        _build_service(config).save_content(key, resolved_locale, content)
    except Exception as exc:
        exit_with_command_error("save", exc)

    typer.echo(f"Saved {key} ({resolved_locale}).")


@app.command("validate")
def validate_command(
    key: Annotated[str, typer.Argument(help="Content key, for example `page.home`.")],
    input_file: Annotated[Path, typer.Argument(help="JSON document or `{locale, content}` envelope.")],
    locale: LocaleOption = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Dry-run normalization and validation without persisting anything."""

    try:
        config = _resolve_config(config_file, store)
        envelope_locale, content = _split_submission(_read_input_file(input_file))
        resolved_locale = _resolve_locale(locale if locale is not None else envelope_locale, config)
        _normalized, message = _build_service(config).validate_content(
            key, resolved_locale, content
        )
        if message is not None:
            raise ContentValidationError(key=key, locale=resolved_locale, message=message)
    except Exception as exc:
        exit_with_command_error("validate", exc)

    typer.echo("valid")


@app.command("defaults")
def defaults_command(
    key: Annotated[str, typer.Argument(help="Content key, for example `page.home`.")],
    locale: Annotated[str, typer.Option("--locale", help="Content locale: en, de, or tr.")] = "en",
) -> None:
    """Print the localized default document for a content key."""

    try:
        content = get_content_type(key).default(parse_strict_locale(locale, "--locale"))
    except Exception as exc:
        exit_with_command_error("defaults", exc)

    echo_json(content)


@app.command("seed")
def seed_command(
    locales: Annotated[
        list[str] | None,
        typer.Option("--locale", help="Locale to seed; repeat or comma-separate. Defaults to all."),
    ] = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Write localized default documents for records that do not exist yet."""

    try:
        config = _resolve_config(config_file, store)
        created = _build_service(config).seed_defaults(locales=parse_locale_list(locales))
    except Exception as exc:
        exit_with_command_error("seed", exc)

    if not created:
        typer.echo("Nothing to seed.")
    for key, locale in created:
        typer.echo(f"Seeded {key} ({locale}).")


@app.command("migrate")
def migrate_command(
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Heal legacy Home documents and write back the changed ones."""

    try:
        config = _resolve_config(config_file, store)
        outcomes = _build_service(config).migrate_legacy_home()
    except Exception as exc:
        exit_with_command_error("migrate", exc)

    echo_migration_outcomes(outcomes)


@hotels_app.command("list")
def hotels_list_command(
    as_json: Annotated[bool, typer.Option("--json", help="Print hotels as JSON.")] = False,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """List hotels in display order."""

    try:
        config = _resolve_config(config_file, store)
        hotels = _build_service(config).list_hotels()
    except Exception as exc:
        exit_with_command_error("hotels list", exc)

    if as_json:
        echo_json([hotel.to_payload() for hotel in hotels])
        return
    echo_hotel_rows(hotels)


@hotels_app.command("create")
def hotels_create_command(
    input_file: Annotated[Path, typer.Argument(help="JSON hotel content for one locale.")],
    locale: LocaleOption = None,
    slug: Annotated[str | None, typer.Option("--slug", help="Explicit hotel slug.")] = None,
    order: Annotated[int | None, typer.Option("--order", help="1-based listing order.")] = None,
    active: Annotated[bool | None, typer.Option("--active/--inactive")] = None,
    available: Annotated[bool | None, typer.Option("--available/--unavailable")] = None,
    updated_by: UpdatedByOption = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Create a hotel from one locale's content."""

    try:
        config = _resolve_config(config_file, store, updated_by)
        envelope_locale, content = _split_submission(_read_input_file(input_file))
        hotel = _build_service(config).create_hotel(
            _resolve_locale(locale if locale is not None else envelope_locale, config),
            content,
            slug=slug,
            order=order,
            active=active,
            available=available,
        )
    except Exception as exc:
        exit_with_command_error("hotels create", exc)

    typer.echo(f"Created hotel {hotel.slug} [{hotel.id}] at order {hotel.order}.")


@hotels_app.command("update")
def hotels_update_command(
    hotel_id: Annotated[str, typer.Argument(help="Hotel id.")],
    input_file: Annotated[
        Path | None, typer.Argument(help="Optional JSON hotel content for the locale.")
    ] = None,
    locale: LocaleOption = None,
    slug: Annotated[str | None, typer.Option("--slug", help="New hotel slug.")] = None,
    order: Annotated[int | None, typer.Option("--order", help="1-based listing order.")] = None,
    active: Annotated[bool | None, typer.Option("--active/--inactive")] = None,
    available: Annotated[bool | None, typer.Option("--available/--unavailable")] = None,
    cover: Annotated[str | None, typer.Option("--cover", help="Cover image URL.")] = None,
    updated_by: UpdatedByOption = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Update a hotel's locale content and shared attributes."""

    try:
        config = _resolve_config(config_file, store, updated_by)
        envelope_locale: str | None = None
        content: Any = None
        if input_file is not None:
            envelope_locale, content = _split_submission(_read_input_file(input_file))
        hotel = _build_service(config).update_hotel(
            hotel_id,
            _resolve_locale(locale if locale is not None else envelope_locale, config),
            content,
            slug=slug,
            order=order,
            active=active,
            available=available,
            cover_image_url=cover,
        )
    except Exception as exc:
        exit_with_command_error("hotels update", exc)

    typer.echo(f"Updated hotel {hotel.slug} [{hotel.id}].")


@hotels_app.command("delete")
def hotels_delete_command(
    hotel_id: Annotated[str, typer.Argument(help="Hotel id.")],
    image: Annotated[
        str | None,
        typer.Option("--image", help="Delete only this gallery image from every locale."),
    ] = None,
    config_file: ConfigOption = None,
    store: StoreOption = None,
) -> None:
    """Delete a hotel, or one gallery image of a hotel."""

    try:
        config = _resolve_config(config_file, store)
        service = _build_service(config)
        if image is not None:
            service.delete_hotel_gallery_image(hotel_id, image)
        else:
            service.delete_hotel(hotel_id)
    except Exception as exc:
        exit_with_command_error("hotels delete", exc)

    if image is not None:
        typer.echo(f"Deleted image {image} from hotel {hotel_id}.")
    else:
        typer.echo(f"Deleted hotel {hotel_id}.")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()

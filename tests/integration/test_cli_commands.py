"""Integration tests for content CLI commands against a JSON store."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from boardcms.cli import app
from boardcms.content.coercion import clone_document
from boardcms.content.defaults import DEFAULT_HOME_CONTENT
from boardcms.io.storage import JsonContentStore


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_cli_help_lists_commands() -> None:
    """Root help should list the content and hotel commands."""

    runner = CliRunner()

    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("show", "save", "validate", "defaults", "seed", "migrate", "hotels"):
        assert command in result.output


def test_show_seeds_and_prints_localized_document(store_dir: Path) -> None:
    """`show` should print the read-path document and persist the seeded row."""

    runner = CliRunner()

    result = runner.invoke(app, ["show", "page.home", "--locale", "de"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["hero"]["titleLead"] == "In Stuttgart"
    assert (store_dir / "content" / "page.home" / "de.json").exists()


def test_save_accepts_envelope_and_persists(store_dir: Path, tmp_path: Path) -> None:
    """`save` should read a `{locale, content}` envelope and persist the document."""

    runner = CliRunner()
    submission = _write_json(
        tmp_path / "home.json",
        {"locale": "de", "content": {"hero": {"titleLead": "Neu in Stuttgart"}}},
    )

    saved = runner.invoke(app, ["save", "page.home", str(submission), "--updated-by", "anna"])

    assert saved.exit_code == 0, saved.output
    assert "Saved page.home (de)." in saved.output
    stored = json.loads(
        (store_dir / "content" / "page.home" / "de.json").read_text(encoding="utf-8")
    )
    assert stored["updatedBy"] == "anna"
    assert stored["value"]["hero"]["titleLead"] == "Neu in Stuttgart"

    shown = runner.invoke(app, ["show", "page.home", "--locale", "de"])
    assert json.loads(shown.output)["hero"]["titleLead"] == "Neu in Stuttgart"


def test_save_rejects_invalid_document_without_writing(store_dir: Path, tmp_path: Path) -> None:
    """An invalid submission should exit 1 with the rule message and write nothing."""

    runner = CliRunner()
    submission = _write_json(tmp_path / "home.json", {"videoCta": {"videoUrl": "https://example.com"}})

    result = runner.invoke(app, ["save", "page.home", str(submission), "--locale", "en"])

    assert result.exit_code == 1
    assert "Video CTA URL must be a valid YouTube or Vimeo link" in result.output
    assert not (store_dir / "content").exists()


def test_validate_reports_valid_and_invalid_documents(store_dir: Path, tmp_path: Path) -> None:
    """`validate` should print `valid` or the first message without persisting."""

    runner = CliRunner()
    valid = _write_json(tmp_path / "valid.json", {"details": {"title": "Hello"}})
    invalid = _write_json(tmp_path / "invalid.json", {"details": {"socials": [{"label": "X"}]}})

    ok = runner.invoke(app, ["validate", "page.contact", str(valid)])
    failed = runner.invoke(app, ["validate", "page.contact", str(invalid), "--locale", "tr"])

    assert ok.exit_code == 0, ok.output
    assert ok.output.strip() == "valid"
    assert failed.exit_code == 1
    assert "Contact social link 1: icon, label and URL are required" in failed.output
    assert not store_dir.exists()


def test_defaults_prints_document_without_store(store_dir: Path) -> None:
    """`defaults` should print the localized default and never touch the store."""

    runner = CliRunner()

    result = runner.invoke(app, ["defaults", "page.home", "--locale", "tr"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["rooms"]["cards"][0]["title"] == "Kart 1"
    assert not store_dir.exists()


def test_seed_writes_missing_rows_once(store_dir: Path) -> None:
    """`seed` should create the requested rows and report nothing on the second run."""

    runner = CliRunner()

    first = runner.invoke(app, ["seed", "--locale", "tr"])
    second = runner.invoke(app, ["seed", "--locale", "tr"])

    assert first.exit_code == 0, first.output
    assert first.output.count("Seeded ") == 5
    assert "Seeded page.reservation (tr)." in first.output
    assert second.output.strip() == "Nothing to seed."
    assert len(list((store_dir / "content").glob("*/tr.json"))) == 5


def test_migrate_heals_legacy_rows(store_dir: Path) -> None:
    """`migrate` should report per-locale outcomes and heal legacy rows."""

    JsonContentStore(store_dir).upsert("page.home", "de", clone_document(DEFAULT_HOME_CONTENT))
    runner = CliRunner()

    result = runner.invoke(app, ["migrate"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["en: missing", "de: healed (hero)", "tr: missing"]
    entry = JsonContentStore(store_dir).get("page.home", "de")
    assert entry is not None
    assert entry.value["hero"]["titleLead"] == "In Stuttgart"


def test_cli_reports_unknown_key_locale_and_input_errors(store_dir: Path, tmp_path: Path) -> None:
    """Unknown keys, locales, and unreadable inputs should exit 1 with diagnostics."""

    runner = CliRunner()
    broken = tmp_path / "broken.json"
    broken.write_text('{"hero": ', encoding="utf-8")

    unknown_key = runner.invoke(app, ["show", "page.blog"])
    unknown_locale = runner.invoke(app, ["show", "page.home", "--locale", "fr"])
    missing_file = runner.invoke(app, ["save", "page.home", str(tmp_path / "missing.json")])
    broken_file = runner.invoke(app, ["save", "page.home", str(broken)])

    assert unknown_key.exit_code == 1
    assert "show failed at stage `content`: Unsupported content key `page.blog`." in unknown_key.output
    assert unknown_locale.exit_code == 1
    assert "`--locale` must be one of: en, de, tr." in unknown_locale.output
    assert missing_file.exit_code == 1
    assert "save failed at stage `input`" in missing_file.output
    assert broken_file.exit_code == 1
    assert "is not valid JSON" in broken_file.output


def test_cli_uses_yaml_config_and_rejects_invalid_config(tmp_path: Path, store_dir: Path) -> None:
    """`--config` should supply the store and default locale, and bad files should fail."""

    runner = CliRunner()
    config_store = tmp_path / "from-config"
    config_path = tmp_path / "boardcms.yml"
    config_path.write_text(
        f"store_dir: {config_store}\ndefault_locale: de\nlog_level: ERROR\n", encoding="utf-8"
    )
    bad_config = tmp_path / "bad.yml"
    bad_config.write_text("unknown: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["show", "page.home", "--config", str(config_path)])
    bad = runner.invoke(app, ["show", "page.home", "--config", str(bad_config)])
    missing = runner.invoke(app, ["show", "page.home", "--config", str(tmp_path / "none.yml")])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["hero"]["titleLead"] == "In Stuttgart"
    assert (config_store / "content" / "page.home" / "de.json").exists()
    assert not store_dir.exists()
    assert bad.exit_code == 1
    assert "show failed at stage `config`" in bad.output
    assert "unsupported key(s): unknown" in bad.output
    assert missing.exit_code == 1
    assert "Config file not found" in missing.output

"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from boardcms.config import CmsConfig, ConfigLoader


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "boardcms.yml"
    config_path.write_text(
        """
store_dir: " data/cms "
default_locale: " DE "
heal_on_read: " no "
updated_by: " editor@example.com "
log_level: " debug "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config == CmsConfig(
        store_dir=Path("data/cms"),
        default_locale="de",
        heal_on_read=False,
        updated_by="editor@example.com",
        log_level="DEBUG",
    )


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML file should produce the default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == CmsConfig()


def test_config_loader_from_yaml_rejects_invalid_payloads(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown keys and invalid values."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("store_dir: data\nlanguage: de\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"unsupported key\(s\): language"):
        ConfigLoader.from_yaml(unknown_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)

    locale_path = tmp_path / "locale.yml"
    locale_path.write_text("default_locale: fr\n", encoding="utf-8")
    with pytest.raises(ValueError, match="default_locale"):
        ConfigLoader.from_yaml(locale_path)

    boolean_path = tmp_path / "boolean.yml"
    boolean_path.write_text("heal_on_read: maybe\n", encoding="utf-8")
    with pytest.raises(ValueError, match="heal_on_read"):
        ConfigLoader.from_yaml(boolean_path)

    broken_path = tmp_path / "broken.yml"
    broken_path.write_text("store_dir: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="could not be parsed"):
        ConfigLoader.from_yaml(broken_path)


def test_config_loader_from_yaml_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing config files should surface as `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader.from_yaml(tmp_path / "missing.yml")


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader should read `BOARDCMS_*` variables and keep defaults otherwise."""

    config = ConfigLoader.from_env(
        {
            "BOARDCMS_STORE_DIR": " /srv/cms ",
            "BOARDCMS_DEFAULT_LOCALE": "TR",
            "BOARDCMS_HEAL_ON_READ": "0",
            "BOARDCMS_UPDATED_BY": " ",
            "BOARDCMS_LOG_LEVEL": "warning",
        }
    )

    assert config.store_dir == Path("/srv/cms")
    assert config.default_locale == "tr"
    assert config.heal_on_read is False
    assert config.updated_by is None
    assert config.log_level == "WARNING"
    assert ConfigLoader.from_env({}) == CmsConfig()

    with pytest.raises(ValueError, match="BOARDCMS_HEAL_ON_READ"):
        ConfigLoader.from_env({"BOARDCMS_HEAL_ON_READ": "sometimes"})


def test_with_overrides_prefers_explicit_values() -> None:
    """CLI overrides should win over loaded values and blank overrides should be ignored."""

    base = CmsConfig(store_dir=Path("a"), updated_by="loaded")

    assert base.with_overrides(store_dir=Path("b")).store_dir == Path("b")
    assert base.with_overrides(updated_by="cli").updated_by == "cli"
    assert base.with_overrides(updated_by="  ").updated_by == "loaded"
    assert base.with_overrides() == base

"""Configuration model and loaders for boardcms.

Responsibilities:
- Define CLI/runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Merge explicit CLI overrides over loaded values.

Key types:
- `CmsConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `CmsConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.content import SUPPORTED_LOCALES
from .parsing import normalize_optional_string, parse_permissive_boolean


_DEFAULT_STORE_DIR = Path("cms-data")
_SUPPORTED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclass(frozen=True, slots=True)
class CmsConfig:
    """Runtime configuration for content commands.

    Attributes:
        store_dir: Root directory of the JSON content store.
        default_locale: Locale used when a command does not pass `--locale`.
        heal_on_read: Whether reads heal and write back legacy Home documents.
        updated_by: Optional editor identifier recorded on writes.
        log_level: Minimum level of emitted `[content]` log lines.
    """

    store_dir: Path = _DEFAULT_STORE_DIR
    default_locale: str = "en"
    heal_on_read: bool = True
    updated_by: str | None = None
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate configuration values before use."""

        if not str(self.store_dir).strip():
            raise ValueError("`store_dir` must be a non-empty path.")
        if self.default_locale not in SUPPORTED_LOCALES:
            supported = ", ".join(SUPPORTED_LOCALES)
            raise ValueError(
                f"Unsupported `default_locale` value `{self.default_locale}`; supported: {supported}."
            )
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )

    def with_overrides(
        self,
        *,
        store_dir: Path | None = None,
        updated_by: str | None = None,
    ) -> CmsConfig:
        """Return a copy with explicit CLI values taking precedence."""

        resolved = replace(
            self,
            store_dir=store_dir if store_dir is not None else self.store_dir,
            updated_by=normalize_optional_string(updated_by) or self.updated_by,
        )
        resolved.validate()
        return resolved


class ConfigLoader:
    """Factory methods for creating `CmsConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "store_dir",
            "default_locale",
            "heal_on_read",
            "updated_by",
            "log_level",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> CmsConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CmsConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        store_dir = ConfigLoader._optional_env_string(env_map, "BOARDCMS_STORE_DIR")
        default_locale = ConfigLoader._optional_env_string(env_map, "BOARDCMS_DEFAULT_LOCALE")
        heal_on_read = ConfigLoader._optional_env_boolean(env_map, "BOARDCMS_HEAL_ON_READ")
        log_level = ConfigLoader._optional_env_string(env_map, "BOARDCMS_LOG_LEVEL")

        config = CmsConfig(
            store_dir=Path(store_dir) if store_dir is not None else _DEFAULT_STORE_DIR,
            default_locale=(default_locale or "en").lower(),
            heal_on_read=True if heal_on_read is None else heal_on_read,
            updated_by=ConfigLoader._optional_env_string(env_map, "BOARDCMS_UPDATED_BY"),
            log_level=(log_level or "INFO").upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> CmsConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        store_dir = normalize_optional_string(payload.get("store_dir"))
        default_locale = normalize_optional_string(payload.get("default_locale"))
        log_level = normalize_optional_string(payload.get("log_level"))

        config = CmsConfig(
            store_dir=Path(store_dir) if store_dir is not None else _DEFAULT_STORE_DIR,
            default_locale=(default_locale or "en").lower(),
            heal_on_read=ConfigLoader._optional_boolean(
                payload, "heal_on_read", source_label, default=True
            ),
            updated_by=normalize_optional_string(payload.get("updated_by")),
            log_level=(log_level or "INFO").upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

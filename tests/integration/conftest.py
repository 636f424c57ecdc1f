"""Integration-test fixtures for CLI runs against a temporary store."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def store_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a temporary store and keep log output quiet."""

    path = tmp_path / "cms-data"
    monkeypatch.setenv("BOARDCMS_STORE_DIR", str(path))
    monkeypatch.setenv("BOARDCMS_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("BOARDCMS_DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("BOARDCMS_HEAL_ON_READ", raising=False)
    monkeypatch.delenv("BOARDCMS_UPDATED_BY", raising=False)
    return path

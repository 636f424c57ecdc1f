"""Shared pytest fixtures for the boardcms test suite."""

from __future__ import annotations

import io

import pytest

from boardcms.io.storage import MemoryContentStore
from boardcms.service import ContentService
from boardcms.telemetry.logger import ContentLogger


@pytest.fixture
def memory_store() -> MemoryContentStore:
    """Provide an empty in-memory content store."""

    return MemoryContentStore()


@pytest.fixture
def log_stream() -> io.StringIO:
    """Provide a text buffer receiving `[content]` log lines."""

    return io.StringIO()


@pytest.fixture
def content_service(memory_store: MemoryContentStore, log_stream: io.StringIO) -> ContentService:
    """Provide a content service over the in-memory store with captured logging."""

    return ContentService(
        memory_store,
        logger=ContentLogger(sink=log_stream, level="INFO"),
        updated_by="editor@example.com",
    )

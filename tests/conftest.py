"""Shared pytest fixtures.

The settings provider is ``lru_cache``d, so every test starts from a clean
cache and an environment without ``PORT`` / ``LOG_LEVEL`` leaking in from
the host shell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from order_processor.deps import get_settings
from order_processor.main import app


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in ("PORT", "HOST", "LOG_LEVEL", "ROOT_PATH"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def test_client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def root_logger() -> Iterator[logging.Logger]:
    """Root logger whose handlers and level are restored after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)

# tests/conftest.py

"""Shared pytest fixtures for all price_monitor tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Keep state files, logs and webhooks away from the real environment."""
    monkeypatch.setattr(Settings, "STATE_DIR", tmp_path / "state")
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr(Settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(Settings, "LOG_LEVEL", "INFO")
    yield

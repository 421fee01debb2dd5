"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_humanize_env(monkeypatch, tmp_path):
    """Keep a developer's HUMANIZE_* variables (or .env file) out of the tests."""
    for name in ("HUMANIZE_ENGLISH_TEENS", "HUMANIZE_DEFAULT_WIDTH", "HUMANIZE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield

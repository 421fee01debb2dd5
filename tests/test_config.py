"""Settings loaded from HUMANIZE_* variables and .env files."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from humanize_numbers.config import Settings
from humanize_numbers.models import IntegerWidth


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.english_teens is False
        assert s.default_width is None
        assert s.log_level == "WARNING"

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("HUMANIZE_ENGLISH_TEENS", "yes")
        monkeypatch.setenv("HUMANIZE_DEFAULT_WIDTH", "U32")
        monkeypatch.setenv("HUMANIZE_LOG_LEVEL", "debug")
        s = Settings()
        assert s.english_teens is True
        assert s.default_width is IntegerWidth.U32
        assert s.log_level == "DEBUG"

    def test_empty_width_means_none(self, monkeypatch):
        monkeypatch.setenv("HUMANIZE_DEFAULT_WIDTH", "")
        assert Settings().default_width is None

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("HUMANIZE_ENGLISH_TEENS=1\nHUMANIZE_DEFAULT_WIDTH=i16\n")
        s = Settings()
        assert s.english_teens is True
        assert s.default_width is IntegerWidth.I16

    def test_environment_beats_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("HUMANIZE_ENGLISH_TEENS=1\n")
        monkeypatch.setenv("HUMANIZE_ENGLISH_TEENS", "0")
        assert Settings().english_teens is False

    def test_keyword_arguments(self):
        assert Settings(default_width=IntegerWidth.I8).default_width is IntegerWidth.I8

    def test_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("HUMANIZE_ENGLISH_TEENS", "maybe")
        with pytest.raises(ValidationError, match="english_teens"):
            Settings()

    def test_bad_width(self, monkeypatch):
        monkeypatch.setenv("HUMANIZE_DEFAULT_WIDTH", "i128")
        with pytest.raises(ValidationError, match="default_width"):
            Settings()

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("HUMANIZE_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError, match="log_level"):
            Settings()

    def test_frozen(self):
        s = Settings()
        with pytest.raises(ValidationError):
            s.english_teens = True  # type: ignore[misc]

    def test_copy_with_override(self):
        s = Settings().model_copy(update={"english_teens": True})
        assert s.english_teens is True

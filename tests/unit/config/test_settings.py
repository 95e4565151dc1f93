"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError
from date_entry.config import Settings
from date_entry.models.locale import Granularity


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATE_ENTRY_DEFAULT_LOCALE", raising=False)
        settings = Settings()
        assert settings.default_locale == "pt-BR"
        assert settings.commit_on == "change"
        assert settings.default_granularity == Granularity.DAY

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DATE_ENTRY_DEFAULT_LOCALE", "en-US")
        monkeypatch.setenv("DATE_ENTRY_COMMIT_ON", "blur")
        settings = Settings()
        assert settings.default_locale == "en-US"
        assert settings.commit_on == "blur"

    def test_invalid_commit_mode(self):
        with pytest.raises(ValidationError):
            Settings(commit_on="keystroke")

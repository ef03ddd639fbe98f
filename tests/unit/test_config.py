"""Tests for application settings."""

import pytest

from lexicard.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NINJAS_API_KEY", raising=False)
        monkeypatch.delenv("REDIS_URL", raising=False)

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.SYNONYM_CACHE_TTL_SECONDS == 86400
        assert settings.MAX_SYNONYMS == 10
        assert settings.redis_enabled is False
        assert settings.thesaurus_enabled is False

    def test_blank_values_treated_as_unset(self) -> None:
        settings = Settings(_env_file=None, NINJAS_API_KEY="  ", REDIS_URL="")  # type: ignore[call-arg]

        assert settings.NINJAS_API_KEY is None
        assert settings.REDIS_URL is None

    def test_values_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NINJAS_API_KEY", "secret")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
        monkeypatch.setenv("DEFAULT_TARGET_LANG", " DE ")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.thesaurus_enabled is True
        assert settings.redis_enabled is True
        assert settings.DEFAULT_TARGET_LANG == "de"

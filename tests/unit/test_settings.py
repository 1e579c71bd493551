"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from mev_academy.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ETHERSCAN_API_KEY", "PORT", "ENVIRONMENT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3001
        assert settings.explorer_chain_id == 1
        assert settings.explorer_base_url == "https://api.etherscan.io/v2/api"
        assert settings.explorer_requests_per_second == 5
        assert settings.rate_limit_requests == 100
        assert settings.rate_limit_window_seconds == 900
        assert settings.environment == "development"
        assert settings.explorer_api_key == ""

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ETHERSCAN_API_KEY", "sk-test-123")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.explorer_api_key == "sk-test-123"
        assert "sk-test-123" not in repr(settings)
        assert settings.log_level == "DEBUG"

    def test_url_requires_scheme(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, frontend_url="localhost:3000")

    def test_url_trailing_slash_stripped(self) -> None:
        settings = Settings(_env_file=None, frontend_url="http://localhost:3000/")
        assert settings.frontend_url == "http://localhost:3000"

    def test_rate_limit_toggle(self) -> None:
        assert Settings(_env_file=None, rate_limit_requests=0).rate_limit_enabled is False
        assert Settings(_env_file=None, rate_limit_requests=10).rate_limit_enabled is True

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

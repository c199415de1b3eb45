"""
Unit tests for Settings.
"""

import pytest

from config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "ENVIRONMENT", "XKCD_BASE_URL"):
            monkeypatch.delenv(name, raising=False)

        s = Settings()

        assert s.port == 8000
        assert s.host == "0.0.0.0"
        assert s.xkcd_base_url == "https://xkcd.com"
        assert s.is_production is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "3000")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("XKCD_BASE_URL", "http://mirror.local:8080/")

        s = Settings()

        assert s.port == 3000
        assert s.is_production is True
        assert s.xkcd_base_url == "http://mirror.local:8080"

    @pytest.mark.parametrize("raw", ["", "eighty", "80.5"])
    def test_bad_port(self, monkeypatch, raw):
        monkeypatch.setenv("PORT", raw)

        with pytest.raises(ValueError, match="PORT must be an integer"):
            Settings()

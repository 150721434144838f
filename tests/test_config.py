"""Tests for settings and startup checks."""

import logging

import pytest

from pixelcaster.config import DEFAULT_BASE_URL, Settings, warn_if_default_base_url


class TestSettings:
    def test_defaults(self) -> None:
        current = Settings(_env_file=None)

        assert current.collection_name == "PixelCaster AI"
        assert current.metadata_cache_seconds == 3600

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BASE_URL", "https://pixels.example")
        monkeypatch.setenv("METADATA_CACHE_SECONDS", "60")

        current = Settings(_env_file=None)

        assert current.base_url == "https://pixels.example"
        assert current.metadata_cache_seconds == 60


class TestDefaultBaseUrlWarning:
    def test_warns_on_default(self, caplog: pytest.LogCaptureFixture) -> None:
        current = Settings(_env_file=None, base_url=DEFAULT_BASE_URL, debug=False)

        with caplog.at_level(logging.WARNING, logger="pixelcaster.config"):
            assert warn_if_default_base_url(current) is True

        assert "BASE_URL" in caplog.text

    def test_silent_in_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        current = Settings(_env_file=None, base_url=DEFAULT_BASE_URL, debug=True)

        with caplog.at_level(logging.WARNING, logger="pixelcaster.config"):
            assert warn_if_default_base_url(current) is False

        assert caplog.text == ""

    def test_silent_with_custom_url(self) -> None:
        current = Settings(_env_file=None, base_url="https://pixels.example", debug=False)
        assert warn_if_default_base_url(current) is False

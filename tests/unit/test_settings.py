"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from htmx_directives.settings import (
    HtmxSettings,
    get_settings,
    load_settings,
    reset_settings,
)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.vary is True
        assert settings.log_headers is False

    @pytest.mark.parametrize("raw", ["0", "false", "No", " off ", ""])
    def test_falsy_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("HTMX_DIRECTIVES_VARY", raw)
        assert load_settings().vary is False

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", "on"])
    def test_truthy_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("HTMX_DIRECTIVES_LOG_HEADERS", raw)
        assert load_settings().log_headers is True

    def test_unknown_value_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("HTMX_DIRECTIVES_VARY", "sometimes")
        with caplog.at_level("WARNING", logger="htmx_directives.settings"):
            assert load_settings().vary is True
        assert "Unknown HTMX_DIRECTIVES_VARY value 'sometimes'" in caplog.text


class TestCache:
    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("HTMX_DIRECTIVES_VARY", "false")
        assert get_settings() is first
        reset_settings()
        assert get_settings().vary is False

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            HtmxSettings().vary = False  # type: ignore[misc]

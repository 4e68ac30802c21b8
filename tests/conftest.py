"""Shared pytest fixtures for htmx-directives tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from htmx_directives.settings import LOG_HEADERS_ENV_VAR, VARY_ENV_VAR, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings, whatever the outer environment."""
    monkeypatch.delenv(VARY_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_HEADERS_ENV_VAR, raising=False)
    reset_settings()
    yield
    reset_settings()

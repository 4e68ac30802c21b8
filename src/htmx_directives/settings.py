"""
Runtime settings for htmx-directives.

Settings are read once from environment variables:

    HTMX_DIRECTIVES_VARY          add ``Vary: HX-Request`` to HTMX responses
                                  (default: true)
    HTMX_DIRECTIVES_LOG_HEADERS   log every header written by
                                  ``HtmxResponse.write`` at INFO (default: false)

Usage:
    from htmx_directives.settings import get_settings

    if get_settings().vary:
        ...
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

VARY_ENV_VAR = "HTMX_DIRECTIVES_VARY"
LOG_HEADERS_ENV_VAR = "HTMX_DIRECTIVES_LOG_HEADERS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class HtmxSettings(BaseModel):
    """Package-wide behaviour switches."""

    vary: bool = True
    log_headers: bool = False

    model_config = ConfigDict(frozen=True)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default

    value = raw.lower().strip()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False

    logger.warning("Unknown %s value '%s'. Using default: %s", name, raw, default)
    return default


def load_settings() -> HtmxSettings:
    """Build settings from the current environment."""
    defaults = HtmxSettings()
    return HtmxSettings(
        vary=_env_flag(VARY_ENV_VAR, defaults.vary),
        log_headers=_env_flag(LOG_HEADERS_ENV_VAR, defaults.log_headers),
    )


_settings: HtmxSettings | None = None


def get_settings() -> HtmxSettings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None

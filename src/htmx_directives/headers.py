"""
HTMX header names and status codes.

https://htmx.org/reference/#request_headers
https://htmx.org/reference/#response_headers
"""

from __future__ import annotations

from enum import StrEnum


class HtmxHeader(StrEnum):
    """Canonical names of the HX-* headers."""

    # Request headers
    BOOSTED = "HX-Boosted"
    CURRENT_URL = "HX-Current-URL"
    HISTORY_RESTORE_REQUEST = "HX-History-Restore-Request"
    PROMPT = "HX-Prompt"
    REQUEST = "HX-Request"
    TARGET = "HX-Target"
    TRIGGER_NAME = "HX-Trigger-Name"

    # Request: id of the triggered element. Response: client-side events.
    TRIGGER = "HX-Trigger"

    # Response headers
    LOCATION = "HX-Location"
    PUSH_URL = "HX-Push-Url"
    REDIRECT = "HX-Redirect"
    REFRESH = "HX-Refresh"
    REPLACE_URL = "HX-Replace-Url"
    RESWAP = "HX-Reswap"
    RETARGET = "HX-Retarget"
    RESELECT = "HX-Reselect"
    TRIGGER_AFTER_SETTLE = "HX-Trigger-After-Settle"
    TRIGGER_AFTER_SWAP = "HX-Trigger-After-Swap"


REQUEST_HEADERS = frozenset(
    {
        HtmxHeader.BOOSTED,
        HtmxHeader.CURRENT_URL,
        HtmxHeader.HISTORY_RESTORE_REQUEST,
        HtmxHeader.PROMPT,
        HtmxHeader.REQUEST,
        HtmxHeader.TARGET,
        HtmxHeader.TRIGGER,
        HtmxHeader.TRIGGER_NAME,
    }
)

RESPONSE_HEADERS = frozenset(h for h in HtmxHeader if h not in REQUEST_HEADERS) | {
    HtmxHeader.TRIGGER
}

# Tells htmx to stop polling (https://htmx.org/docs/#load_polling).
STATUS_STOP_POLLING = 286

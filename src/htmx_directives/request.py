"""
HTMX request inspection.

All helpers accept a Starlette/FastAPI ``Request``, any object with a
``headers`` mapping, or a plain header mapping.  Header names are matched
case-insensitively.

https://htmx.org/reference/#request_headers
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from htmx_directives.headers import HtmxHeader


def _headers_of(source: Any) -> Mapping[str, str] | None:
    # Starlette requests are themselves Mappings (over the scope), so look
    # for a headers attribute first.
    headers = getattr(source, "headers", None)
    if isinstance(headers, Mapping):
        return headers
    if isinstance(source, Mapping):
        return source
    return None


def _get_header(source: Any, name: str) -> str | None:
    headers = _headers_of(source)
    if headers is None:
        return None

    value = headers.get(name)
    if value is not None:
        return value
    # Plain dicts are case-sensitive; Starlette's Headers already are not.
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def _is_true(source: Any, name: str) -> bool:
    return _get_header(source, name) == "true"


def is_htmx_request(request: Any) -> bool:
    """True if the request was sent by htmx (``HX-Request: true``)."""
    return _is_true(request, HtmxHeader.REQUEST)


def is_boosted(request: Any) -> bool:
    """True if the request came from an element using ``hx-boost``."""
    return _is_true(request, HtmxHeader.BOOSTED)


def is_history_restore_request(request: Any) -> bool:
    """True if the request restores history after a local cache miss."""
    return _is_true(request, HtmxHeader.HISTORY_RESTORE_REQUEST)


def get_current_url(request: Any) -> str | None:
    """Current URL of the browser, or None if ``HX-Current-URL`` is absent."""
    return _get_header(request, HtmxHeader.CURRENT_URL)


def get_prompt(request: Any) -> str | None:
    """User response to an ``hx-prompt``, or None if absent."""
    return _get_header(request, HtmxHeader.PROMPT)


def get_target(request: Any) -> str | None:
    """Id of the target element, or None if absent."""
    return _get_header(request, HtmxHeader.TARGET)


def get_trigger_name(request: Any) -> str | None:
    """``name`` of the triggered element, or None if absent."""
    return _get_header(request, HtmxHeader.TRIGGER_NAME)


def get_trigger(request: Any) -> str | None:
    """Id of the triggered element, or None if absent."""
    return _get_header(request, HtmxHeader.TRIGGER)


@dataclass(frozen=True, slots=True)
class HtmxDetails:
    """Parsed HTMX request headers -- single source of truth.

    Parses all 8 HX-* request headers sent by htmx.  Missing headers are
    left at their empty defaults.
    """

    is_htmx: bool = False
    is_boosted: bool = False
    current_url: str = ""
    is_history_restore: bool = False
    prompt: str = ""
    target: str = ""
    trigger_id: str = ""
    trigger_name: str = ""

    @classmethod
    def from_request(cls, request: Any) -> HtmxDetails:
        """Construct from a request or a header mapping."""
        if _headers_of(request) is None:
            return cls()
        return cls(
            is_htmx=is_htmx_request(request),
            is_boosted=is_boosted(request),
            current_url=get_current_url(request) or "",
            is_history_restore=is_history_restore_request(request),
            prompt=get_prompt(request) or "",
            target=get_target(request) or "",
            trigger_id=get_trigger(request) or "",
            trigger_name=get_trigger_name(request) or "",
        )

    @classmethod
    def from_scope(cls, scope: Mapping[str, Any]) -> HtmxDetails:
        """Construct from a raw ASGI scope (latin-1 encoded header pairs)."""
        headers = {
            key.decode("latin-1"): value.decode("latin-1")
            for key, value in scope.get("headers", [])
        }
        return cls.from_request(headers)

    @property
    def wants_partial(self) -> bool:
        """Boosted navigation that is NOT a history restore -> body-only."""
        return self.is_boosted and not self.is_history_restore

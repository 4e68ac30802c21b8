"""
HTMX-aware response building.

:class:`HtmxResponse` collects HX-* response headers through chained calls
and applies them to a Starlette/FastAPI response::

    HtmxResponse()
        .reswap(SWAP_BEFORE_END.scroll(Direction.BOTTOM))
        .retarget("#messages")
        .add_trigger(Trigger("messageAdded"))
        .render_html("<li>hello</li>")

Calls that write the same header overwrite each other (``push_url`` and
``prevent_push_url`` share ``HX-Push-Url``); trigger calls accumulate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any, Protocol, TypeVar

from fastapi.responses import HTMLResponse

from htmx_directives.headers import HtmxHeader
from htmx_directives.location import LocationContext
from htmx_directives.settings import get_settings
from htmx_directives.swap import SwapStrategy, SwapStyle, as_swap_string
from htmx_directives.triggers import EventTrigger, Trigger, TriggerObject, triggers_to_string

logger = logging.getLogger(__name__)


class HeaderSink(Protocol):
    """Anything with mutable headers and a status code (e.g. a Starlette Response)."""

    headers: MutableMapping[str, str]
    status_code: int


class Renderable(Protocol):
    """A template-like object, e.g. ``jinja2.Template``."""

    def render(self, *args: Any, **kwargs: Any) -> str: ...


SinkT = TypeVar("SinkT", bound=HeaderSink)


def patch_vary(headers: MutableMapping[str, str], header: str = HtmxHeader.REQUEST) -> None:
    """Add ``header`` to the Vary header unless it is already listed."""
    existing = headers.get("Vary", "")
    listed = {h.strip().lower() for h in existing.split(",") if h.strip()}
    if "*" in listed or header.lower() in listed:
        return
    headers["Vary"] = f"{existing}, {header}" if existing else header


class HtmxResponse:
    """Chainable builder for HTMX response headers."""

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}
        self._status_code: int | None = None
        self._triggers: list[EventTrigger] = []
        self._triggers_after_settle: list[EventTrigger] = []
        self._triggers_after_swap: list[EventTrigger] = []

    def __repr__(self) -> str:
        return f"HtmxResponse(headers={self._headers!r}, status_code={self._status_code!r})"

    def clone(self) -> HtmxResponse:
        """Independent copy; changes to either do not affect the other."""
        other = HtmxResponse()
        other._headers = dict(self._headers)
        other._status_code = self._status_code
        other._triggers = list(self._triggers)
        other._triggers_after_settle = list(self._triggers_after_settle)
        other._triggers_after_swap = list(self._triggers_after_swap)
        return other

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def status_code(self, status_code: int) -> HtmxResponse:
        """HTTP status to write.  Left unset, the response keeps its own (200)."""
        self._status_code = status_code
        return self

    def location(self, path: str) -> HtmxResponse:
        """Client-side redirect without a full page reload (``HX-Location``)."""
        self._headers[HtmxHeader.LOCATION] = path
        return self

    def location_with_context(self, path: str, context: LocationContext) -> HtmxResponse:
        """Like :meth:`location`, with ``htmx.ajax()`` options such as a target.

        Raises:
            HeaderSerializationError: if the context values cannot be JSON encoded.
        """
        self._headers[HtmxHeader.LOCATION] = context.to_header(path)
        return self

    def push_url(self, url: str) -> HtmxResponse:
        """Push ``url`` into the browser history (``HX-Push-Url``)."""
        self._headers[HtmxHeader.PUSH_URL] = url
        return self

    def prevent_push_url(self) -> HtmxResponse:
        """Prevent the browser history from being updated (``HX-Push-Url: false``)."""
        self._headers[HtmxHeader.PUSH_URL] = "false"
        return self

    def redirect(self, path: str) -> HtmxResponse:
        """Client-side redirect to a new location (``HX-Redirect``)."""
        self._headers[HtmxHeader.REDIRECT] = path
        return self

    def refresh(self, should_refresh: bool) -> HtmxResponse:
        """Ask the client to do a full page refresh (``HX-Refresh``)."""
        self._headers[HtmxHeader.REFRESH] = "true" if should_refresh else "false"
        return self

    def replace_url(self, url: str) -> HtmxResponse:
        """Replace the current URL in the location bar (``HX-Replace-Url``)."""
        self._headers[HtmxHeader.REPLACE_URL] = url
        return self

    def prevent_replace_url(self) -> HtmxResponse:
        """Keep the current URL as it is (``HX-Replace-Url: false``)."""
        self._headers[HtmxHeader.REPLACE_URL] = "false"
        return self

    def reswap(self, swap: SwapStrategy | SwapStyle) -> HtmxResponse:
        """Override how the response is swapped in (``HX-Reswap``)."""
        self._headers[HtmxHeader.RESWAP] = as_swap_string(swap)
        return self

    def retarget(self, css_selector: str) -> HtmxResponse:
        """Swap into a different element than the triggering one (``HX-Retarget``)."""
        self._headers[HtmxHeader.RETARGET] = css_selector
        return self

    def reselect(self, css_selector: str) -> HtmxResponse:
        """Choose which part of the response is swapped in (``HX-Reselect``).

        Overrides an existing ``hx-select`` on the triggering element.
        """
        self._headers[HtmxHeader.RESELECT] = css_selector
        return self

    def add_trigger(self, *triggers: EventTrigger) -> HtmxResponse:
        """Fire events as soon as the response is received (``HX-Trigger``)."""
        self._triggers.extend(triggers)
        return self

    def add_trigger_after_settle(self, *triggers: EventTrigger) -> HtmxResponse:
        """Fire events after the settle step (``HX-Trigger-After-Settle``)."""
        self._triggers_after_settle.extend(triggers)
        return self

    def add_trigger_after_swap(self, *triggers: EventTrigger) -> HtmxResponse:
        """Fire events after the swap step (``HX-Trigger-After-Swap``)."""
        self._triggers_after_swap.extend(triggers)
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def headers(self) -> dict[str, str]:
        """Copy of every header this response will write, triggers encoded.

        Raises:
            HeaderSerializationError: if a trigger detail cannot be JSON encoded.
        """
        headers = {str(k): v for k, v in self._headers.items()}
        for name, triggers in (
            (HtmxHeader.TRIGGER, self._triggers),
            (HtmxHeader.TRIGGER_AFTER_SETTLE, self._triggers_after_settle),
            (HtmxHeader.TRIGGER_AFTER_SWAP, self._triggers_after_swap),
        ):
            if triggers:
                headers[str(name)] = triggers_to_string(triggers, name)
        return headers

    def write(self, response: SinkT) -> SinkT:
        """Apply the headers (and status code, if set) to ``response``."""
        settings = get_settings()
        level = logging.INFO if settings.log_headers else logging.DEBUG

        for name, value in self.headers().items():
            logger.log(level, "Setting %s: %s", name, value)
            response.headers[name] = value

        if settings.vary:
            patch_vary(response.headers)

        if self._status_code is not None:
            response.status_code = self._status_code
        return response

    def render_html(self, content: str) -> HTMLResponse:
        """HTML fragment response carrying these headers."""
        return self.write(HTMLResponse(content=content))

    def render_template(self, template: Renderable, **context: Any) -> HTMLResponse:
        """Render a Jinja2 template (or anything with ``render``) with these headers."""
        return self.render_html(template.render(**context))


def _as_triggers(value: dict[str, Any] | list[str]) -> Iterable[EventTrigger]:
    if isinstance(value, dict):
        return [TriggerObject(name, detail) for name, detail in value.items()]
    return [Trigger(name) for name in value]


def htmx_response(
    content: str,
    *,
    status_code: int = 200,
    triggers: dict[str, Any] | list[str] | None = None,
    trigger_after_swap: dict[str, Any] | list[str] | None = None,
    retarget: str | None = None,
    reswap: SwapStrategy | SwapStyle | None = None,
    redirect: str | None = None,
) -> HTMLResponse:
    """Create an HTMLResponse with HTMX headers in one call.

    Args:
        content: HTML body content.
        status_code: HTTP status code (default 200).
        triggers: Events to fire on the client via HX-Trigger.
            - list[str]: simple event names (no payload)
            - dict[str, Any]: event names with JSON payloads
        trigger_after_swap: Events fired after the swap completes.
        retarget: CSS selector to override the triggering element's hx-target.
        reswap: Override the triggering element's hx-swap strategy.  A plain
            string must name a base style (``"innerHTML"``); build modifiers
            with :class:`SwapStrategy`, otherwise ``ValueError`` is raised.
        redirect: URL to redirect the client to via HX-Redirect.

    Returns:
        HTMLResponse with appropriate HX-* headers set.
    """
    builder = HtmxResponse().status_code(status_code)

    if triggers:
        builder.add_trigger(*_as_triggers(triggers))
    if trigger_after_swap:
        builder.add_trigger_after_swap(*_as_triggers(trigger_after_swap))
    if retarget:
        builder.retarget(retarget)
    if reswap is not None:
        builder.reswap(reswap)
    if redirect:
        builder.redirect(redirect)

    return builder.render_html(content)

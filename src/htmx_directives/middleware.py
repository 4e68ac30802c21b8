"""
ASGI middleware for HTMX applications.

Parses the HX-* request headers once per request into
``scope["htmx"]`` (an :class:`HtmxDetails`) and adds ``Vary: HX-Request``
to every HTTP response.  Views that return a partial for htmx requests and
a full page otherwise need the Vary header, or browser caches serve the
wrong one on Back navigation.

Usage:
    app = FastAPI()
    app.add_middleware(HtmxMiddleware)

    @app.get("/")
    async def index(request: Request):
        if request.scope["htmx"].is_htmx:
            ...
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from htmx_directives.request import HtmxDetails
from htmx_directives.response import patch_vary
from htmx_directives.settings import get_settings

logger = logging.getLogger(__name__)


class HtmxMiddleware:
    """Attach HtmxDetails to the scope and mark responses as varying on HX-Request."""

    def __init__(self, app: ASGIApp, vary: bool | None = None) -> None:
        self.app = app
        # None defers to HTMX_DIRECTIVES_VARY
        self.vary = get_settings().vary if vary is None else vary

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        details = HtmxDetails.from_scope(scope)
        scope["htmx"] = details
        logger.debug("HTMX request details for %s: %s", scope.get("path"), details)

        if scope["type"] != "http" or not self.vary:
            await self.app(scope, receive, send)
            return

        async def send_with_vary(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                patch_vary(MutableHeaders(scope=message))
            await send(message)

        await self.app(scope, receive, send_with_vary)

"""
htmx-directives

Typed HTMX response directives and request inspection for Starlette/FastAPI.

This package provides:
- Swap strategy expressions (hx-swap / HX-Reswap values)
- A chainable response header builder
- HX-Trigger event encoding and HX-Location contexts
- Request header inspection and an ASGI middleware

Example usage:
    >>> from htmx_directives import SWAP_INNER_HTML, HtmxResponse
    >>>
    >>> swap = SWAP_INNER_HTML.transition(True).after(5)
    >>> HtmxResponse().reswap(swap).retarget("#list").headers()
    {'HX-Reswap': 'innerHTML transition:true swap:5s', 'HX-Retarget': '#list'}
"""

from htmx_directives._version import __version__
from htmx_directives.errors import HeaderSerializationError, HtmxError
from htmx_directives.headers import STATUS_STOP_POLLING, HtmxHeader
from htmx_directives.location import LocationContext
from htmx_directives.middleware import HtmxMiddleware
from htmx_directives.request import (
    HtmxDetails,
    get_current_url,
    get_prompt,
    get_target,
    get_trigger,
    get_trigger_name,
    is_boosted,
    is_history_restore_request,
    is_htmx_request,
)
from htmx_directives.response import HtmxResponse, htmx_response
from htmx_directives.swap import (
    SWAP_AFTER_BEGIN,
    SWAP_AFTER_END,
    SWAP_BEFORE_BEGIN,
    SWAP_BEFORE_END,
    SWAP_DEFAULT,
    SWAP_DELETE,
    SWAP_INNER_HTML,
    SWAP_NONE,
    SWAP_OUTER_HTML,
    Direction,
    SwapStrategy,
    SwapStyle,
    format_duration,
)
from htmx_directives.triggers import Trigger, TriggerDetail, TriggerObject, triggers_to_string

__all__ = [
    "__version__",
    # Errors
    "HtmxError",
    "HeaderSerializationError",
    # Headers
    "HtmxHeader",
    "STATUS_STOP_POLLING",
    # Swap
    "Direction",
    "SwapStrategy",
    "SwapStyle",
    "format_duration",
    "SWAP_INNER_HTML",
    "SWAP_OUTER_HTML",
    "SWAP_BEFORE_BEGIN",
    "SWAP_AFTER_BEGIN",
    "SWAP_BEFORE_END",
    "SWAP_AFTER_END",
    "SWAP_DELETE",
    "SWAP_NONE",
    "SWAP_DEFAULT",
    # Triggers
    "Trigger",
    "TriggerDetail",
    "TriggerObject",
    "triggers_to_string",
    # Location
    "LocationContext",
    # Request
    "HtmxDetails",
    "is_htmx_request",
    "is_boosted",
    "is_history_restore_request",
    "get_current_url",
    "get_prompt",
    "get_target",
    "get_trigger",
    "get_trigger_name",
    # Response
    "HtmxResponse",
    "htmx_response",
    "HtmxMiddleware",
]

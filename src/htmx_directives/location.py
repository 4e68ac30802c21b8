"""
Context for HX-Location redirects.

``HX-Location`` performs a client-side redirect without a full page reload.
With a bare path htmx swaps into ``document.body``; a :class:`LocationContext`
adds the same options ``htmx.ajax()`` accepts (target, swap, values, ...).

https://htmx.org/headers/hx-location/
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from htmx_directives.errors import HeaderSerializationError
from htmx_directives.headers import HtmxHeader
from htmx_directives.swap import SwapStrategy, SwapStyle, as_swap_string


class LocationContext(BaseModel):
    """Options sent alongside the path in an HX-Location header."""

    # The source element of the request.
    source: str = ""
    # An event that "triggered" the request.
    event: str = ""
    # A JavaScript callback that will handle the response HTML.
    handler: str = ""
    # The target to swap the response into.
    target: str = ""
    # How the response will be swapped in relative to the target.
    swap: str | None = None
    # Values to submit with the request.
    values: dict[str, Any] | None = None
    # Headers to submit with the request.
    headers: dict[str, str] | None = None
    # Selects the part of the response to swap in.
    select: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("swap", mode="before")
    @classmethod
    def swap_to_string(cls, swap: Any) -> Any:
        if isinstance(swap, SwapStrategy | SwapStyle):
            return as_swap_string(swap)
        return swap

    def to_header(self, path: str) -> str:
        """Render the HX-Location JSON value for ``path``.

        Empty and unset fields are left out.

        Raises:
            HeaderSerializationError: if ``values`` cannot be JSON encoded.
        """
        fields = {k: v for k, v in self.model_dump(mode="python").items() if v}
        try:
            return json.dumps(
                {"path": path, **fields}, separators=(",", ":"), allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise HeaderSerializationError(
                f"cannot encode location context: {e}", HtmxHeader.LOCATION
            ) from e

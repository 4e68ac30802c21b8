"""
Client-side event triggers for the HX-Trigger family of response headers.

Three trigger kinds are supported:

    Trigger("myEvent")                       -> HX-Trigger: myEvent
    TriggerDetail("showMessage", "Hello")    -> HX-Trigger: {"showMessage":"Hello"}
    TriggerObject("showMessage", {"level": "info"})
        -> HX-Trigger: {"showMessage":{"level":"info"}}

When every trigger in a header is a bare :class:`Trigger` the names are
comma-joined; otherwise the whole header becomes one JSON object and bare
events map to an empty string.

https://htmx.org/headers/hx-trigger/
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from htmx_directives.errors import HeaderSerializationError


@dataclass(frozen=True, slots=True)
class Trigger:
    """An event with no detail."""

    event_name: str


@dataclass(frozen=True, slots=True)
class TriggerDetail:
    """An event whose detail is a plain string."""

    event_name: str
    detail: str


@dataclass(frozen=True, slots=True)
class TriggerObject:
    """An event whose detail is any JSON-serializable value."""

    event_name: str
    detail: Any


EventTrigger = Trigger | TriggerDetail | TriggerObject


def _detail(trigger: EventTrigger) -> Any:
    if isinstance(trigger, Trigger):
        return ""
    return trigger.detail


def triggers_to_string(triggers: Iterable[EventTrigger], header: str | None = None) -> str:
    """Encode triggers as an HX-Trigger header value.

    Raises:
        HeaderSerializationError: if a detail cannot be JSON encoded.
    """
    triggers = list(triggers)
    if all(isinstance(t, Trigger) for t in triggers):
        return ", ".join(t.event_name for t in triggers)

    payload = {t.event_name: _detail(t) for t in triggers}
    try:
        return json.dumps(payload, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise HeaderSerializationError(f"cannot encode trigger details: {e}", header) from e

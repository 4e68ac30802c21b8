"""
``hx-swap`` strategy expressions.

A :class:`SwapStrategy` is an immutable value made of a base swap style
(``innerHTML``, ``beforeend``, ...) and an ordered set of ``key:value``
modifiers.  Every modifier method returns a new strategy, so shared
constants such as :data:`SWAP_INNER_HTML` can be derived from freely::

    >>> SWAP_INNER_HTML.transition(True).after(5).serialize()
    'innerHTML transition:true swap:5s'

Each modifier key appears at most once.  Setting a key that is already
present drops the old token and appends the new one, so the last write wins
per key (``scroll_on`` after ``scroll`` replaces the earlier ``scroll``
token).

See https://htmx.org/attributes/hx-swap/
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta
from enum import StrEnum

Duration = timedelta | int | float


class SwapStyle(StrEnum):
    """Base swap styles accepted by ``hx-swap`` and ``HX-Reswap``."""

    # Replace the inner html of the target element.
    INNER_HTML = "innerHTML"
    # Replace the entire target element with the response.
    OUTER_HTML = "outerHTML"
    # Insert the response before the target element.
    BEFORE_BEGIN = "beforebegin"
    # Insert the response before the first child of the target element.
    AFTER_BEGIN = "afterbegin"
    # Insert the response after the last child of the target element.
    BEFORE_END = "beforeend"
    # Insert the response after the target element.
    AFTER_END = "afterend"
    # Delete the target element regardless of the response.
    DELETE = "delete"
    # Do not append content (out of band items are still processed).
    NONE = "none"
    # Keep the element's configured style; only carries modifiers.
    DEFAULT = ""


class Direction(StrEnum):
    """Direction for the ``scroll`` and ``show`` modifiers."""

    TOP = "top"
    BOTTOM = "bottom"


def format_duration(duration: Duration) -> str:
    """Render a duration the way htmx parses swap/settle delays.

    Whole seconds render as ``"5s"``, whole milliseconds as ``"500ms"`` and
    anything finer as fractional milliseconds (``"0.25ms"``).  Plain numbers
    are taken as seconds.
    """
    if not isinstance(duration, timedelta):
        duration = timedelta(seconds=duration)

    micros = duration // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros % 1_000_000 == 0:
        return f"{sign}{micros // 1_000_000}s"
    if micros % 1_000 == 0:
        return f"{sign}{micros // 1_000}ms"
    millis = f"{micros / 1_000:.3f}".rstrip("0").rstrip(".")
    return f"{sign}{millis}ms"


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class SwapStrategy:
    """An ``hx-swap`` value: a base style plus ordered modifiers.

    ``modifiers`` holds ``(key, value)`` pairs in last-set order with unique
    keys.  Build strategies through the modifier methods; constructing one
    directly with an unknown style or a repeated key raises ``ValueError``.
    """

    style: SwapStyle = SwapStyle.DEFAULT
    modifiers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", SwapStyle(self.style))
        keys = [k for k, _ in self.modifiers]
        if len(keys) != len(set(keys)):
            raise ValueError(f"duplicate swap modifier keys: {keys}")

    def _with_modifier(self, key: str, value: str) -> SwapStrategy:
        """Return a copy with modifier ``key`` set to ``value``.

        Any existing token for ``key`` is removed and the new one appended.
        """
        kept = tuple((k, v) for k, v in self.modifiers if k != key)
        return replace(self, modifiers=kept + ((key, value),))

    def modifier(self, key: str) -> str | None:
        """Current value of modifier ``key``, or None if unset."""
        for k, v in self.modifiers:
            if k == key:
                return v
        return None

    def serialize(self) -> str:
        """Render the ``hx-swap`` string, e.g. ``"beforeend scroll:#div:bottom"``."""
        tokens = [f"{k}:{v}" for k, v in self.modifiers]
        if self.style:
            tokens.insert(0, str(self.style))
        return " ".join(tokens)

    def __str__(self) -> str:
        return self.serialize()

    # ------------------------------------------------------------------
    # Boolean modifiers
    # ------------------------------------------------------------------

    def transition(self, should_transition: bool) -> SwapStrategy:
        """Use the View Transitions API for the swap (``transition:<bool>``)."""
        return self._with_modifier("transition", _bool(should_transition))

    def ignore_title(self, should_ignore: bool) -> SwapStrategy:
        """Stop htmx updating the page title from a ``<title>`` in the response.

        Adds ``ignoreTitle:<bool>``.  By default htmx updates the title.
        """
        return self._with_modifier("ignoreTitle", _bool(should_ignore))

    def focus_scroll(self, should_focus: bool) -> SwapStrategy:
        """Scroll to the focused element after the request (``focusScroll:<bool>``)."""
        return self._with_modifier("focusScroll", _bool(should_focus))

    # ------------------------------------------------------------------
    # Timing modifiers
    # ------------------------------------------------------------------

    def after(self, duration: Duration) -> SwapStrategy:
        """Delay between receiving the response and swapping (``swap:<duration>``)."""
        return self._with_modifier("swap", format_duration(duration))

    def settle_after(self, duration: Duration) -> SwapStrategy:
        """Delay between the swap and the settle step (``settle:<duration>``)."""
        return self._with_modifier("settle", format_duration(duration))

    # ------------------------------------------------------------------
    # Scroll / show modifiers
    #
    # The three variants of each share one key, so whichever was called
    # last is the one that is emitted.
    # ------------------------------------------------------------------

    def scroll(self, direction: Direction) -> SwapStrategy:
        """Scroll to the top or bottom of the swapped-in element (``scroll:<dir>``)."""
        return self._with_modifier("scroll", Direction(direction).value)

    def scroll_on(self, css_selector: str, direction: Direction) -> SwapStrategy:
        """Scroll the element found by ``css_selector`` (``scroll:<sel>:<dir>``).

        The selector is passed through as-is.
        """
        return self._with_modifier("scroll", f"{css_selector}:{Direction(direction).value}")

    def scroll_window(self, direction: Direction) -> SwapStrategy:
        """Scroll to the very top or bottom of the window (``scroll:window:<dir>``)."""
        return self.scroll_on("window", direction)

    def show(self, direction: Direction) -> SwapStrategy:
        """Show the top or bottom of the swapped-in element (``show:<dir>``)."""
        return self._with_modifier("show", Direction(direction).value)

    def show_on(self, css_selector: str, direction: Direction) -> SwapStrategy:
        """Show the element found by ``css_selector`` (``show:<sel>:<dir>``)."""
        return self._with_modifier("show", f"{css_selector}:{Direction(direction).value}")

    def show_window(self, direction: Direction) -> SwapStrategy:
        """Show the very top or bottom of the window (``show:window:<dir>``)."""
        return self.show_on("window", direction)

    def show_none(self) -> SwapStrategy:
        """Disable showing altogether (``show:none``)."""
        return self._with_modifier("show", "none")


def as_swap_string(swap: SwapStrategy | SwapStyle) -> str:
    """Serialize either a full strategy or a bare style."""
    if isinstance(swap, SwapStrategy):
        return swap.serialize()
    return str(SwapStyle(swap))


SWAP_INNER_HTML = SwapStrategy(SwapStyle.INNER_HTML)
SWAP_OUTER_HTML = SwapStrategy(SwapStyle.OUTER_HTML)
SWAP_BEFORE_BEGIN = SwapStrategy(SwapStyle.BEFORE_BEGIN)
SWAP_AFTER_BEGIN = SwapStrategy(SwapStyle.AFTER_BEGIN)
SWAP_BEFORE_END = SwapStrategy(SwapStyle.BEFORE_END)
SWAP_AFTER_END = SwapStrategy(SwapStyle.AFTER_END)
SWAP_DELETE = SwapStrategy(SwapStyle.DELETE)
SWAP_NONE = SwapStrategy(SwapStyle.NONE)
SWAP_DEFAULT = SwapStrategy(SwapStyle.DEFAULT)

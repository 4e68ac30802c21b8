"""
htmx-directives CLI.

Commands:
- swap: Build and print an hx-swap / HX-Reswap value
- headers-list: Show every HX-* header name
"""

from __future__ import annotations

import re
from datetime import timedelta

import typer

from htmx_directives._version import get_version
from htmx_directives.headers import REQUEST_HEADERS, RESPONSE_HEADERS, HtmxHeader
from htmx_directives.swap import Direction, SwapStrategy, SwapStyle

app = typer.Typer(help="Build HTMX response directives", no_args_is_help=True)

_DURATION_RE = re.compile(r"^(?P<amount>\d+(?:\.\d+)?)(?P<unit>ms|s|m)?$")
_UNITS = {"ms": "milliseconds", "s": "seconds", "m": "minutes", None: "seconds"}


def parse_duration(text: str) -> timedelta:
    """Parse ``500ms``, ``5s``, ``2m`` or a bare number of seconds."""
    match = _DURATION_RE.match(text.strip())
    if not match:
        raise typer.BadParameter(f"invalid duration '{text}' (use e.g. 500ms, 5s, 2m)")
    unit = _UNITS[match.group("unit")]
    return timedelta(**{unit: float(match.group("amount"))})


def parse_bool(text: str, option: str) -> bool:
    value = text.lower().strip()
    if value in ("true", "yes", "1", "on"):
        return True
    if value in ("false", "no", "0", "off"):
        return False
    raise typer.BadParameter(f"expected true or false, got '{text}'", param_hint=option)


def parse_style(text: str) -> SwapStyle:
    """Parse a swap style name; ``default`` selects the empty style."""
    if text.lower() == "default":
        return SwapStyle.DEFAULT
    for style in SwapStyle:
        if style.value and style.value.lower() == text.lower():
            return style
    choices = ", ".join(s.value for s in SwapStyle if s.value)
    raise typer.BadParameter(f"unknown swap style '{text}' (choose from {choices}, default)")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"htmx-directives {get_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Build HTMX response directives."""


@app.command("swap")
def swap_command(
    style: str = typer.Argument(..., help="Base swap style, e.g. innerHTML or default"),
    transition: str | None = typer.Option(None, "--transition", help="true or false"),
    ignore_title: str | None = typer.Option(None, "--ignore-title", help="true or false"),
    focus_scroll: str | None = typer.Option(None, "--focus-scroll", help="true or false"),
    after: str | None = typer.Option(None, "--after", help="Swap delay, e.g. 500ms"),
    settle: str | None = typer.Option(None, "--settle", help="Settle delay, e.g. 1s"),
    scroll: Direction | None = typer.Option(None, "--scroll", help="Scroll direction"),
    scroll_target: str | None = typer.Option(
        None, "--scroll-target", help="CSS selector to scroll, or 'window'"
    ),
    show: Direction | None = typer.Option(None, "--show", help="Show direction"),
    show_target: str | None = typer.Option(
        None, "--show-target", help="CSS selector to show, or 'window'"
    ),
    show_none: bool = typer.Option(False, "--show-none", help="Disable show"),
) -> None:
    """Print the serialized hx-swap value for the given modifiers."""
    strategy = SwapStrategy(parse_style(style))

    if transition is not None:
        strategy = strategy.transition(parse_bool(transition, "--transition"))
    if ignore_title is not None:
        strategy = strategy.ignore_title(parse_bool(ignore_title, "--ignore-title"))
    if focus_scroll is not None:
        strategy = strategy.focus_scroll(parse_bool(focus_scroll, "--focus-scroll"))
    if after is not None:
        strategy = strategy.after(parse_duration(after))
    if settle is not None:
        strategy = strategy.settle_after(parse_duration(settle))

    if scroll_target and scroll is None:
        raise typer.BadParameter("--scroll-target needs --scroll", param_hint="--scroll-target")
    if scroll is not None:
        if scroll_target == "window":
            strategy = strategy.scroll_window(scroll)
        elif scroll_target:
            strategy = strategy.scroll_on(scroll_target, scroll)
        else:
            strategy = strategy.scroll(scroll)

    if show_none and show is not None:
        raise typer.BadParameter("--show-none conflicts with --show", param_hint="--show-none")
    if show_target and show is None:
        raise typer.BadParameter("--show-target needs --show", param_hint="--show-target")
    if show_none:
        strategy = strategy.show_none()
    elif show is not None:
        if show_target == "window":
            strategy = strategy.show_window(show)
        elif show_target:
            strategy = strategy.show_on(show_target, show)
        else:
            strategy = strategy.show(show)

    typer.echo(strategy.serialize())


@app.command("headers-list")
def headers_list_command() -> None:
    """Show every HX-* header and whether htmx sends or reads it."""
    for header in HtmxHeader:
        directions = []
        if header in REQUEST_HEADERS:
            directions.append("request")
        if header in RESPONSE_HEADERS:
            directions.append("response")
        typer.echo(f"{header.value:<28} {'/'.join(directions)}")


if __name__ == "__main__":
    app()

"""Tests for CLI commands."""

from datetime import timedelta

import pytest
import typer
from typer.testing import CliRunner

from htmx_directives.cli import app, parse_duration, parse_style
from htmx_directives.swap import SwapStyle


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_swap_style_only(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["swap", "innerHTML"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "innerHTML"


def test_swap_with_modifiers(cli_runner: CliRunner):
    result = cli_runner.invoke(
        app, ["swap", "innerHTML", "--transition", "true", "--after", "5s", "--settle", "500ms"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "innerHTML transition:true swap:5s settle:500ms"


def test_swap_scroll_targets(cli_runner: CliRunner):
    result = cli_runner.invoke(
        app, ["swap", "beforeend", "--scroll", "bottom", "--scroll-target", "#div"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "beforeend scroll:#div:bottom"


def test_swap_window_and_show_none(cli_runner: CliRunner):
    result = cli_runner.invoke(
        app, ["swap", "default", "--scroll", "top", "--scroll-target", "window", "--show-none"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "scroll:window:top show:none"


def test_swap_unknown_style(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["swap", "sideways"])
    assert result.exit_code == 2


def test_swap_bad_duration(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["swap", "innerHTML", "--after", "soon"])
    assert result.exit_code == 2


def test_swap_show_none_conflicts_with_show(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["swap", "innerHTML", "--show", "top", "--show-none"])
    assert result.exit_code == 2


def test_headers_list(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["headers-list"])
    assert result.exit_code == 0
    assert "HX-Reswap" in result.stdout
    assert "request/response" in result.stdout  # HX-Trigger goes both ways


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("htmx-directives ")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("500ms", timedelta(milliseconds=500)),
        ("5s", timedelta(seconds=5)),
        ("2m", timedelta(minutes=2)),
        ("1.5", timedelta(seconds=1.5)),
    ],
)
def test_parse_duration(text: str, expected: timedelta):
    assert parse_duration(text) == expected


def test_parse_style_case_insensitive():
    assert parse_style("OUTERHTML") is SwapStyle.OUTER_HTML
    assert parse_style("default") is SwapStyle.DEFAULT
    with pytest.raises(typer.BadParameter):
        parse_style("")

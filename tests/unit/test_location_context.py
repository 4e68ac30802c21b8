"""Unit tests for HX-Location contexts."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from htmx_directives.errors import HeaderSerializationError
from htmx_directives.location import LocationContext
from htmx_directives.swap import SWAP_BEFORE_END, Direction, SwapStyle


class TestToHeader:
    def test_path_only(self) -> None:
        assert LocationContext().to_header("/hello") == '{"path":"/hello"}'

    def test_empty_fields_omitted(self) -> None:
        value = LocationContext(target="#testdiv", source="HELLO").to_header("/hello")
        assert json.loads(value) == {"path": "/hello", "source": "HELLO", "target": "#testdiv"}

    def test_field_order(self) -> None:
        ctx = LocationContext(select="#a", target="#b", event="click")
        assert list(json.loads(ctx.to_header("/x"))) == ["path", "event", "target", "select"]

    def test_swap_strategy_serialized(self) -> None:
        ctx = LocationContext(swap=SWAP_BEFORE_END.scroll(Direction.BOTTOM))
        assert json.loads(ctx.to_header("/x"))["swap"] == "beforeend scroll:bottom"

    def test_swap_style_serialized(self) -> None:
        ctx = LocationContext(swap=SwapStyle.OUTER_HTML)
        assert json.loads(ctx.to_header("/x"))["swap"] == "outerHTML"

    def test_values_and_headers(self) -> None:
        ctx = LocationContext(values={"page": 2}, headers={"X-Token": "abc"})
        assert json.loads(ctx.to_header("/x")) == {
            "path": "/x",
            "values": {"page": 2},
            "headers": {"X-Token": "abc"},
        }

    def test_unserializable_values(self) -> None:
        ctx = LocationContext(values={"when": object()})
        with pytest.raises(HeaderSerializationError):
            ctx.to_header("/x")

    def test_non_finite_values(self) -> None:
        ctx = LocationContext(values={"n": float("inf")})
        with pytest.raises(HeaderSerializationError):
            ctx.to_header("/x")


class TestModel:
    def test_frozen(self) -> None:
        ctx = LocationContext(target="#a")
        with pytest.raises(ValidationError):
            ctx.target = "#b"  # type: ignore[misc]

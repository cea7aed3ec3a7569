# tests/test_literals.py

from __future__ import annotations

import pytest

from sassy_export.loader import build_value, parse_color, parse_literal, parse_number
from sassy_export.values import (
    NULL,
    Opaque,
    SassBool,
    SassColor,
    SassList,
    SassMap,
    SassNumber,
    SassString,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10px", SassNumber(10, "px")),
        ("50%", SassNumber(50, "%")),
        ("-1.5em", SassNumber(-1.5, "em")),
        (".5rem", SassNumber(0.5, "rem")),
        ("3", SassNumber(3)),
        ("1e3", SassNumber(1000.0)),
    ],
)
def test_parse_number(text: str, expected: SassNumber) -> None:
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["px", "10 px", "1.2.3", "#fff", ""])
def test_parse_number_rejects_non_numbers(text: str) -> None:
    assert parse_number(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#fff", "#ffffff"),
        ("#C0FFEE", "#c0ffee"),
        ("#00000080", "rgba(0, 0, 0, 0.50196)"),
        ("rgb(255, 0, 0)", "#ff0000"),
        ("rgba(0, 0, 0, 0.5)", "rgba(0, 0, 0, 0.5)"),
        ("rgba(100%, 0%, 0%, 1)", "#ff0000"),
    ],
)
def test_parse_color(text: str, expected: str) -> None:
    color = parse_color(text)
    assert isinstance(color, SassColor)
    assert color.canonical() == expected


@pytest.mark.parametrize("text", ["#ggg", "#12345", "rgb(1, 2)", "rgb(300, 0, 0)", "rgb(a, b, c)", "red"])
def test_parse_color_rejects_invalid(text: str) -> None:
    assert parse_color(text) is None


def test_quoted_text_is_never_reinterpreted() -> None:
    value = parse_literal('"10px"')
    assert value == SassString("10px", quoted=True)

    value = parse_literal("'true'")
    assert isinstance(value, SassString)
    assert value.value == "true"


def test_parse_literal_dispatch() -> None:
    assert parse_literal("true") == SassBool(True)
    assert parse_literal("false") == SassBool(False)
    assert parse_literal("null") is NULL
    assert parse_literal("#000") == SassColor(0, 0, 0)
    assert parse_literal("12px") == SassNumber(12, "px")
    assert parse_literal("Helvetica Neue") == SassString("Helvetica Neue")


def test_build_value_from_document() -> None:
    doc = {
        "colors": {"primary": "#336699", "overlay": "rgba(0, 0, 0, 0.5)"},
        "sizes": ["10px", 2, 1.5],
        "debug": False,
        "empty": None,
        1: "numeric key",
    }

    value = build_value(doc)

    assert isinstance(value, SassMap)
    assert value["colors"]["primary"] == SassColor(51, 102, 153)
    assert value["sizes"] == SassList([SassNumber(10, "px"), SassNumber(2), SassNumber(1.5)])
    assert value["debug"] == SassBool(False)
    assert value["empty"] is NULL
    assert value["1"] == SassString("numeric key")


def test_build_value_wraps_unknown_objects() -> None:
    import datetime

    day = datetime.date(2014, 8, 18)
    assert build_value(day) == Opaque(day)

# tests/test_values.py

from __future__ import annotations

import pytest

from sassy_export.values import (
    NULL,
    Opaque,
    SassBool,
    SassColor,
    SassList,
    SassMap,
    SassNull,
    SassNumber,
    SassString,
    format_number,
    from_python,
    map_key,
    unquote,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"foo"', "foo"),
        ("'foo'", "foo"),
        ("foo", "foo"),
        ('"foo', '"foo'),
        ("'foo\"", "'foo\""),
        ('""', ""),
        ('"', '"'),
    ],
)
def test_unquote(raw: str, expected: str) -> None:
    assert unquote(raw) == expected


def test_string_is_unquoted_once_on_construction() -> None:
    s = SassString('"hello"')
    assert s.value == "hello"
    assert s.quoted is True

    plain = SassString("hello")
    assert plain.value == "hello"
    assert plain.quoted is False


def test_nested_quotes_only_lose_the_outer_pair() -> None:
    assert SassString("\"'inner'\"").value == "'inner'"


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, "10"),
        (10.0, "10"),
        (1.5, "1.5"),
        (0.333333333, "0.33333"),
        (-2.25, "-2.25"),
        (True, "1"),
    ],
)
def test_format_number(value, expected: str) -> None:
    assert format_number(value) == expected


def test_number_text_includes_unit() -> None:
    assert str(SassNumber(10, "px")) == "10px"
    assert str(SassNumber(50, "%")) == "50%"
    assert str(SassNumber(1.5, "em")) == "1.5em"
    assert str(SassNumber(3)) == "3"


def test_number_unitless() -> None:
    assert SassNumber(3).unitless
    assert SassNumber(3, "").unitless
    assert not SassNumber(3, "px").unitless


def test_color_canonical_forms() -> None:
    assert SassColor(255, 0, 0).canonical() == "#ff0000"
    assert SassColor(0, 0, 0, 0.5).canonical() == "rgba(0, 0, 0, 0.5)"
    assert str(SassColor(18, 52, 86)) == "#123456"


def test_color_rejects_out_of_range_channels() -> None:
    with pytest.raises(ValueError):
        SassColor(256, 0, 0)
    with pytest.raises(ValueError):
        SassColor(0, 0, 0, 1.5)


def test_null_is_singleton_and_falsy() -> None:
    assert SassNull() is NULL
    assert not NULL
    assert str(NULL) == "null"


def test_bool_text() -> None:
    assert str(SassBool(True)) == "true"
    assert str(SassBool(False)) == "false"


def test_list_text_uses_separator() -> None:
    items = [SassNumber(1, "px"), SassNumber(2, "px")]
    assert str(SassList(items)) == "1px, 2px"
    assert str(SassList(items, separator="space")) == "1px 2px"


def test_list_rejects_unknown_separator() -> None:
    with pytest.raises(ValueError):
        SassList([], separator="slash")


def test_map_keys_are_unquoted() -> None:
    m = SassMap({'"primary"': SassNumber(1), "'secondary'": SassNumber(2)})
    assert list(m.entries) == ["primary", "secondary"]


def test_map_duplicate_keys_last_wins() -> None:
    m = SassMap(
        [
            ('"a"', SassNumber(1)),
            ("b", SassNumber(2)),
            ("a", SassNumber(3)),
        ]
    )
    assert len(m) == 2
    assert m["a"] == SassNumber(3)
    # First-seen position is kept for the overwritten key.
    assert list(m.entries) == ["a", "b"]


def test_map_key_normalizes_non_string_keys() -> None:
    assert map_key(SassString('"x"')) == "x"
    assert map_key(SassNumber(10, "px")) == "10px"
    assert map_key(SassColor(255, 255, 255)) == "#ffffff"
    assert map_key(1) == "1"
    assert map_key(True) == "true"


def test_opaque_text_is_unquoted() -> None:
    class Thing:
        def __str__(self) -> str:
            return "'thing'"

    assert str(Opaque(Thing())) == "thing"


def test_from_python_builds_tree() -> None:
    value = from_python({"a": 1, "b": [True, None, "x"], "c": {"d": 1.5}})

    assert isinstance(value, SassMap)
    assert value["a"] == SassNumber(1)
    assert value["b"].items == [SassBool(True), NULL, SassString("x")]
    assert value["c"]["d"] == SassNumber(1.5)


def test_from_python_keeps_sass_values() -> None:
    color = SassColor(1, 2, 3)
    assert from_python(color) is color
    assert isinstance(from_python(object()), Opaque)


def test_sass_string_key_is_not_unquoted_twice() -> None:
    # SassString already dropped the outer pair; the inner quotes are text.
    m = SassMap([(SassString("\"'a'\""), SassNumber(1))])
    assert list(m.entries) == ["'a'"]
    assert map_key(SassString("\"'a'\"")) == "'a'"


def test_opaque_key_is_not_unquoted_twice() -> None:
    assert map_key(Opaque("\"'k'\"")) == "'k'"

"""
Argument type checking for export calls.

Arguments may arrive either as plain Python values or as Sass values
(a SassString path, SassBool flags). assert_type() rejects anything else
before the exporter touches the filesystem.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from sassy_export.core.exceptions import ArgumentTypeError
from sassy_export.values import SassBool, SassMap, SassString

# kind -> (accepted types, human readable name)
_KINDS: Dict[str, Tuple[Tuple[type, ...], str]] = {
    "String": ((str, SassString), "a string"),
    "Map": ((SassMap,), "a map"),
    "Bool": ((bool, SassBool), "a bool"),
}


def assert_type(value: Any, kind: str, name: str) -> None:
    """
    Raise ArgumentTypeError unless *value* is of the given *kind*.

        assert_type(path, "String", "path")
        assert_type(data, "Map", "map")
    """
    try:
        accepted, label = _KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown argument kind: {kind!r}") from None

    if not isinstance(value, accepted):
        raise ArgumentTypeError(
            f"${name}: {value!r} is not {label}"
        )


def to_bool(value: Any) -> bool:
    if isinstance(value, SassBool):
        return value.value
    return bool(value)


def to_text(value: Any) -> str:
    if isinstance(value, SassString):
        return value.value
    return str(value)

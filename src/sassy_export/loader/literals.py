# src/sassy_export/loader/literals.py

"""
Literal recognition for data-file scalars.

YAML and JSON only know strings, numbers, booleans and null. Sass values
such as ``10px``, ``50%``, ``#c0ffee`` or ``rgba(0, 0, 0, 0.5)`` arrive as
plain strings; parse_literal() turns them back into the matching SassValue.

Rules, tried in order:
    '"quoted"' / "'quoted'"      -> SassString(quoted=True), no further parsing
    true / false                 -> SassBool
    null                         -> SassNull
    #rgb #rgba #rrggbb #rrggbbaa -> SassColor
    rgb(r, g, b) / rgba(r, g, b, a) -> SassColor
    -1.5em 10px 50% 3            -> SassNumber
    anything else                -> SassString
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from sassy_export.values import (
    NULL,
    Opaque,
    SassBool,
    SassColor,
    SassList,
    SassMap,
    SassNumber,
    SassString,
    SassValue,
    unquote,
)

_NUMBER_RE = re.compile(
    r"^(?P<value>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(?P<unit>%|[a-zA-Z]+)?$"
)
_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(r"^(?P<fn>rgba?)\(\s*(?P<args>[^()]*)\)$", re.IGNORECASE)


def parse_number(text: str) -> Optional[SassNumber]:
    m = _NUMBER_RE.match(text)
    if not m:
        return None

    raw = m.group("value")
    value: Union[int, float]
    if re.fullmatch(r"[+-]?\d+", raw):
        value = int(raw)
    else:
        value = float(raw)

    return SassNumber(value, m.group("unit"))


def _hex_color(digits: str) -> SassColor:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = 1.0
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255, 5)
    return SassColor(red, green, blue, alpha)


def _channel(text: str) -> int:
    text = text.strip()
    if text.endswith("%"):
        return round(float(text[:-1]) * 255 / 100)
    return round(float(text))


def _alpha(text: str) -> float:
    text = text.strip()
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)


def parse_color(text: str) -> Optional[SassColor]:
    """Parse hex and rgb()/rgba() notation. Returns None when *text* is neither."""
    m = _HEX_RE.match(text)
    if m:
        return _hex_color(m.group("digits"))

    m = _RGB_RE.match(text)
    if not m:
        return None

    args = m.group("args").split(",")
    if len(args) not in (3, 4):
        return None

    try:
        red, green, blue = (_channel(a) for a in args[:3])
        alpha = _alpha(args[3]) if len(args) == 4 else 1.0
        return SassColor(red, green, blue, alpha)
    except ValueError:
        # Out of range channels or non-numeric arguments: not a color.
        return None


def parse_literal(text: str) -> SassValue:
    """Turn a raw data-file string into the SassValue it spells."""
    stripped = text.strip()

    if unquote(stripped) != stripped:
        return SassString(stripped)

    if stripped in ("true", "false"):
        return SassBool(stripped == "true")

    if stripped == "null":
        return NULL

    color = parse_color(stripped)
    if color is not None:
        return color

    number = parse_number(stripped)
    if number is not None:
        return number

    return SassString(text)


def build_value(obj: Any) -> SassValue:
    """
    Convert a parsed YAML/JSON document into SassValues.

    dict -> SassMap, list -> SassList, bool -> SassBool, int/float ->
    SassNumber, None -> SassNull, str -> parse_literal(), other -> Opaque.
    """
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return SassBool(obj)
    if isinstance(obj, (int, float)):
        return SassNumber(obj)
    if isinstance(obj, str):
        return parse_literal(obj)
    if isinstance(obj, dict):
        return SassMap([(k, build_value(v)) for k, v in obj.items()])
    if isinstance(obj, (list, tuple)):
        return SassList([build_value(v) for v in obj])
    return Opaque(obj)

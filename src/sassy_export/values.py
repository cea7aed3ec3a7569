# src/sassy_export/values.py

"""
Value model for SassyExport.

Every value handed to the exporter is one of the variants below:

    SassMap     ordered key/value mapping (keys unquoted, last-wins)
    SassList    ordered sequence
    SassString  text, surrounding quotes stripped on construction
    SassBool    true / false
    SassNumber  magnitude + optional unit ("10px", "50%", 3)
    SassColor   rgb channels + alpha, rendered as hex or rgba()
    SassNull    the Sass null value
    Opaque      anything else; rendered through str()

Unquoting happens exactly once, when a SassString or a SassMap key is built.
Nothing downstream needs to strip quotes again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

QUOTE_CHARS = ("\"", "'")

# Sass rounds numeric output to 5 decimal places.
NUMBER_PRECISION = 5


def unquote(text: str) -> str:
    """
    Strip one pair of matching surrounding quote characters.

        unquote('"foo"')  -> 'foo'
        unquote("'foo'")  -> 'foo'
        unquote('foo')    -> 'foo'
        unquote('"foo')   -> '"foo'
    """
    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        return text[1:-1]
    return text


def format_number(value: Union[int, float]) -> str:
    """Render a magnitude the way Sass prints it: no trailing zeros."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    text = f"{round(value, NUMBER_PRECISION):.{NUMBER_PRECISION}f}"
    text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass
class SassString:
    value: str
    quoted: bool = False

    def __post_init__(self) -> None:
        stripped = unquote(self.value)
        if stripped != self.value:
            self.value = stripped
            self.quoted = True

    def __str__(self) -> str:
        return self.value


@dataclass
class SassBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class SassNumber:
    """A number with an optional unit. ``unit=None`` means unitless."""

    value: Union[int, float]
    unit: Optional[str] = None

    @property
    def unitless(self) -> bool:
        return not self.unit

    def __str__(self) -> str:
        return format_number(self.value) + (self.unit or "")


@dataclass
class SassColor:
    """
    An RGBA color.

    Channels are 0-255 integers, alpha is 0-1. The canonical text form is
    ``#rrggbb`` for opaque colors and ``rgba(r, g, b, a)`` otherwise.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue"):
            level = getattr(self, channel)
            if not 0 <= level <= 255:
                raise ValueError(f"{channel} channel out of range 0-255: {level!r}")
            setattr(self, channel, int(round(level)))
        if not 0 <= self.alpha <= 1:
            raise ValueError(f"alpha out of range 0-1: {self.alpha!r}")

    @property
    def opaque(self) -> bool:
        return self.alpha >= 1

    def hex_str(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def rgba_str(self) -> str:
        return (
            f"rgba({self.red}, {self.green}, {self.blue}, "
            f"{format_number(self.alpha)})"
        )

    def canonical(self) -> str:
        return self.hex_str() if self.opaque else self.rgba_str()

    def __str__(self) -> str:
        return self.canonical()


class SassNull:
    """Singleton for the Sass ``null`` value."""

    _instance: Optional["SassNull"] = None

    def __new__(cls) -> "SassNull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SassNull()"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


NULL = SassNull()


@dataclass
class Opaque:
    """Any value the model has no variant for. Exported as text."""

    value: Any

    def __str__(self) -> str:
        return unquote(str(self.value))


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass
class SassList:
    items: List["SassValue"] = field(default_factory=list)
    separator: str = "comma"

    def __post_init__(self) -> None:
        if self.separator not in ("comma", "space"):
            raise ValueError(f"Unknown list separator: {self.separator!r}")
        self.items = list(self.items)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        joiner = ", " if self.separator == "comma" else " "
        return joiner.join(str(item) for item in self.items)


def map_key(key: Any) -> str:
    """Normalize a map key to the plain string used in JSON output."""
    if isinstance(key, str):
        return unquote(key)
    if isinstance(key, SassString):
        return key.value
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return format_number(key)
    if isinstance(key, Opaque):
        return str(key)
    return unquote(str(key))


@dataclass
class SassMap:
    """
    Ordered mapping of normalized keys to values.

    Accepts either a dict or an iterable of (key, value) pairs. Keys are
    normalized with map_key(); when two keys collide after normalization
    the later one wins.
    """

    entries: Dict[str, "SassValue"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        pairs = self.entries.items() if isinstance(self.entries, dict) else self.entries
        normalized: Dict[str, SassValue] = {}
        for key, value in pairs:
            normalized[map_key(key)] = value
        self.entries = normalized

    def __getitem__(self, key: str) -> "SassValue":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def items(self):
        return self.entries.items()

    def __str__(self) -> str:
        inner = ", ".join(f"{k}: {v}" for k, v in self.entries.items())
        return f"({inner})"


SassValue = Union[
    SassMap,
    SassList,
    SassString,
    SassBool,
    SassNumber,
    SassColor,
    SassNull,
    Opaque,
]

SASS_VALUE_TYPES = (
    SassMap,
    SassList,
    SassString,
    SassBool,
    SassNumber,
    SassColor,
    SassNull,
    Opaque,
)


def from_python(obj: Any) -> SassValue:
    """
    Build a SassValue from plain Python data.

    Strings are taken as text (quotes stripped). Use
    sassy_export.loader.build_value() to also recognise literal forms such
    as "10px" or "#fff".
    """
    if isinstance(obj, SASS_VALUE_TYPES):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return SassBool(obj)
    if isinstance(obj, (int, float)):
        return SassNumber(obj)
    if isinstance(obj, str):
        return SassString(obj)
    if isinstance(obj, dict):
        return SassMap([(k, from_python(v)) for k, v in obj.items()])
    if isinstance(obj, (list, tuple)):
        return SassList([from_python(v) for v in obj])
    return Opaque(obj)

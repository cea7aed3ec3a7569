"""
converter.py
Sass value -> JSON-compatible tree.

Dispatch rules (same for map values and list items):
- SassMap     -> dict (keys already normalized, order preserved)
- SassList    -> list
- SassBool    -> bool
- SassNumber  -> int/float when unitless, else "10px"-style string
- SassColor   -> "#rrggbb" or "rgba(r, g, b, a)"
- SassNull    -> None
- SassString / Opaque / anything else -> unquoted string

The conversion is pure: no I/O, no logging.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from sassy_export.core.exceptions import ConversionDepthError
from sassy_export.values import (
    Opaque,
    SassBool,
    SassColor,
    SassList,
    SassMap,
    SassNull,
    SassNumber,
    SassString,
    SassValue,
    unquote,
)

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

DEFAULT_MAX_DEPTH = 256


class ValueConverter:
    """
    Recursive SassValue -> JSONValue converter.

    ``max_depth`` bounds the container nesting so that absurdly deep input
    fails with ConversionDepthError instead of a RecursionError.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = DEFAULT_MAX_DEPTH if max_depth is None else int(max_depth)
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    def convert(self, value: SassValue) -> JSONValue:
        return self._convert(value, 0)

    def _convert(self, value: Any, depth: int) -> JSONValue:
        if isinstance(value, SassMap):
            self._check_depth(depth)
            return {
                key: self._convert(item, depth + 1)
                for key, item in value.items()
            }

        if isinstance(value, SassList):
            self._check_depth(depth)
            return [self._convert(item, depth + 1) for item in value]

        if isinstance(value, SassBool):
            return value.value

        if isinstance(value, SassNumber):
            # Units force the textual form, e.g. "10px".
            return value.value if value.unitless else str(value)

        if isinstance(value, SassColor):
            return value.canonical()

        if isinstance(value, SassNull):
            return None

        if isinstance(value, SassString):
            return value.value

        if isinstance(value, Opaque):
            return str(value)

        return unquote(str(value))

    def _check_depth(self, depth: int) -> None:
        if depth >= self.max_depth:
            raise ConversionDepthError(
                f"Value nesting exceeds max_depth={self.max_depth}"
            )


def to_json_value(value: SassValue, max_depth: Optional[int] = None) -> JSONValue:
    """Convert *value* with a fresh ValueConverter."""
    return ValueConverter(max_depth=max_depth).convert(value)

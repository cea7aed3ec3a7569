"""SassyExport — convert Sass-style data maps to JSON files."""

from .values import (
    NULL,
    Opaque,
    SassBool,
    SassColor,
    SassList,
    SassMap,
    SassNull,
    SassNumber,
    SassString,
    SassValue,
    from_python,
    unquote,
)
from .converter import ValueConverter, to_json_value
from .exporter import Exporter, export
from .core.context import ExportRequest
from .core.exceptions import (
    ArgumentTypeError,
    ConversionDepthError,
    DataFileError,
    SassyExportError,
)

__version__ = "1.3.5"

__all__ = [
    "NULL",
    "Opaque",
    "SassBool",
    "SassColor",
    "SassList",
    "SassMap",
    "SassNull",
    "SassNumber",
    "SassString",
    "SassValue",
    "from_python",
    "unquote",
    "ValueConverter",
    "to_json_value",
    "Exporter",
    "export",
    "ExportRequest",
    "ArgumentTypeError",
    "ConversionDepthError",
    "DataFileError",
    "SassyExportError",
]

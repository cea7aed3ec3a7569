"""
Core building blocks shared by the exporter, loader and CLI.
"""

from sassy_export.core.context import ExportRequest
from sassy_export.core.exceptions import (
    ArgumentTypeError,
    ConversionDepthError,
    DataFileError,
    SassyExportError,
)
from sassy_export.core.validation import assert_type, to_bool, to_text

__all__ = [
    "ExportRequest",
    "ArgumentTypeError",
    "ConversionDepthError",
    "DataFileError",
    "SassyExportError",
    "assert_type",
    "to_bool",
    "to_text",
]

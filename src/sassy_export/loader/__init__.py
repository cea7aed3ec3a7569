# src/sassy_export/loader/__init__.py

"""
Public interface for the data-file loader.

    from sassy_export.loader import (
        load_data_file,
        build_value,
        parse_literal,
        parse_color,
        parse_number,
    )
"""

from __future__ import annotations
from .file_loader import load_data_file
from .literals import build_value, parse_color, parse_literal, parse_number


__all__ = [
    "load_data_file",
    "build_value",
    "parse_color",
    "parse_literal",
    "parse_number",
]

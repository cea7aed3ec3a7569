"""
Exporter package.

Re-exports the export entry points used by the CLI and library callers.
"""

from __future__ import annotations

from .exporter import Exporter, build_request, export, status_message
from .json_exporter import serialize_json, wrap_javascript

__all__ = [
    "Exporter",
    "build_request",
    "export",
    "serialize_json",
    "status_message",
    "wrap_javascript",
]

"""
json_exporter.py
JSON text construction and file writing.

This module:
- Serializes converted trees to compact or pretty JSON
- Wraps the text as ``var <name> = ...`` for .js targets
- Writes the text to disk, creating parent directories
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from sassy_export.logging import get_logger

log = get_logger("json_exporter")

JS_EXTENSION = ".js"
JSON_EXTENSION = ".json"


def serialize_json(tree: Any, *, pretty: bool, indent: int = 2) -> str:
    """
    Dump *tree* as JSON text.

    Compact output has no whitespace at all; pretty output uses *indent*
    spaces and one member per line. Both parse back to the same value.

    Non-finite numbers (NaN, Infinity) have no JSON spelling and raise
    ValueError.
    """
    if pretty:
        return json.dumps(tree, indent=indent, ensure_ascii=False, allow_nan=False)
    return json.dumps(tree, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def wrap_javascript(json_str: str, filename: str) -> str:
    """Turn JSON text into an assignable ``var`` statement (no semicolon)."""
    return f"var {filename} = {json_str}"


def ensure_parent_dir(output_path: Path) -> bool:
    """
    Create the parent directory of *output_path* when missing.

    Returns True when a directory was created.
    """
    directory = output_path.parent
    if directory.exists():
        return False

    directory.mkdir(parents=True, exist_ok=True)
    return True


def write_text(
    output_path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
    unix_newlines: bool = True,
) -> int:
    """
    Write *text* to *output_path*, truncating any existing file.

    With ``unix_newlines`` the file gets "\\n" line endings on every
    platform. Returns the size of the written file in bytes.
    """
    newline: Optional[str] = "\n" if unix_newlines else None

    with output_path.open("w", encoding=encoding, newline=newline) as f:
        f.write(text)

    size_bytes = output_path.stat().st_size
    log.debug("Wrote %s (%d bytes)", output_path, size_bytes)
    return size_bytes

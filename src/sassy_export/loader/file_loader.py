"""
File Loader

Reads YAML / JSON data files into a top-level SassMap.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

from sassy_export.core.exceptions import DataFileError
from sassy_export.logging import get_logger
from sassy_export.values import SassMap

from .literals import build_value

log = get_logger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")
JSON_SUFFIXES = (".json",)


def _read_document(file_path: Path) -> Any:
    suffix = file_path.suffix.lower()

    with file_path.open("r", encoding="utf-8") as f:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(f)
        if suffix in JSON_SUFFIXES:
            return json.load(f)

    raise DataFileError(
        f"Unsupported data file type {suffix!r}: {file_path} "
        f"(expected one of {', '.join(YAML_SUFFIXES + JSON_SUFFIXES)})"
    )


def load_data_file(path: Union[str, Path]) -> SassMap:
    """
    Load a data file and build the SassMap it describes.

    Raises:
        FileNotFoundError: if `path` does not exist.
        DataFileError: if the file type is unsupported, the document cannot
            be parsed, or its top level is not a mapping.
    """
    file_path = Path(path)

    if not file_path.is_file():
        log.error(f"Data file does not exist: {file_path}")
        raise FileNotFoundError(f"Data file not found: {file_path}")

    log.debug(f"Loading data file: {file_path}")

    try:
        document = _read_document(file_path)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DataFileError(f"Could not parse {file_path}: {exc}") from exc

    if not isinstance(document, dict):
        raise DataFileError(
            f"Top level of {file_path} must be a mapping, "
            f"got {type(document).__name__}"
        )

    return build_value(document)

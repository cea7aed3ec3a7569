# src/sassy_export/utils/__init__.py

from .pathing import (
    WorkingDirectory,
    resolve_output_path,
    split_name,
)

__all__ = [
    "WorkingDirectory",
    "resolve_output_path",
    "split_name",
]

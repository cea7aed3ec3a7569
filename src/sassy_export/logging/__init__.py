"""
Logging package for ``sassy_export``.

Use ``get_logger(__name__)`` in modules to inherit the shared console and
master log handlers.
"""

from .logger import get_logger

__all__ = [
    "get_logger",
]

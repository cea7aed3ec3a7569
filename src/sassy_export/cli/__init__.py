"""
CLI package for sassy_export.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from sassy_export.cli.app import app, main

__all__ = [
    "app",
    "main",
]

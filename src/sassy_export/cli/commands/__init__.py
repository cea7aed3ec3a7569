"""
CLI command modules for sassy_export.

Each command module defines a single Typer-compatible command function.
"""

from sassy_export.cli.commands.export import export_command
from sassy_export.cli.commands.preview import preview_command

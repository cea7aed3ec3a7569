from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from sassy_export.cli.utils import load_data
from sassy_export.exporter import export
from sassy_export.logging import get_logger

console = Console()
log = get_logger("cli.export")


def export_command(
    data_file: Path = typer.Argument(..., exists=True, readable=True),
    output: str = typer.Argument(
        ...,
        help="Target path below the working directory (.json or .js)",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Log the export message",
    ),
    use_env_root: bool = typer.Option(
        False,
        "--use-env-root",
        help="Resolve OUTPUT against $PWD instead of the process working directory",
    ),
):
    """
    Export a data file to JSON, or to a JavaScript variable for .js targets.
    """
    data = load_data(data_file, verbose=debug)

    try:
        message = export(output, data, pretty, debug, use_env_root)
    except Exception as exc:
        log.exception(f"Export failed: {exc}")
        raise

    console.print(message, markup=False, highlight=False, soft_wrap=True)

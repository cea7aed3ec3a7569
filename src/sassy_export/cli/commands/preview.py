from __future__ import annotations

from pathlib import Path

import typer

from sassy_export.cli.utils import load_data
from sassy_export.config import get_config
from sassy_export.converter import ValueConverter
from sassy_export.exporter import serialize_json


def preview_command(
    data_file: Path = typer.Argument(..., exists=True, readable=True),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
):
    """
    Print the JSON a data file would export to, without writing anything.
    """
    settings = get_config().export
    data = load_data(data_file)

    tree = ValueConverter(max_depth=settings["max_depth"]).convert(data)
    typer.echo(serialize_json(tree, pretty=pretty, indent=settings["indent"]))

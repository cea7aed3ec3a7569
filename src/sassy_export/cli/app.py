from __future__ import annotations

import typer

from sassy_export.cli.commands.export import export_command
from sassy_export.cli.commands.preview import preview_command

app = typer.Typer(
    name="sassy-export",
    help="Export Sass-style data maps to JSON or JavaScript",
    add_completion=False,
)

app.command("export")(export_command)
app.command("preview")(preview_command)


def main():
    app()


if __name__ == "__main__":
    main()

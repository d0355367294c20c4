from typing import Optional

import typer

from stringdoc.common import needle
from stringdoc.needle import L
from stringdoc.cli.factories import make_app


def presets_command(
    target: Optional[str] = typer.Argument(
        None, help=needle.get(L.cli.argument.target.help)
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help=needle.get(L.cli.option.file.help)
    ),
    pretty: bool = typer.Option(
        False, "--pretty", help=needle.get(L.cli.option.pretty.help)
    ),
):
    app_instance = make_app()
    lines = app_instance.run_presets(target=target, file=file, pretty=pretty)
    if lines is None:
        raise typer.Exit(code=1)
    for line in lines:
        typer.echo(line)

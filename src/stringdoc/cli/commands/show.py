from enum import Enum
from typing import Optional

import typer

from stringdoc.common import needle
from stringdoc.needle import L
from stringdoc.cli.factories import make_app


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


def show_command(
    target: Optional[str] = typer.Argument(
        None, help=needle.get(L.cli.argument.target.help)
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help=needle.get(L.cli.option.file.help)
    ),
    fmt: Optional[OutputFormat] = typer.Option(
        None,
        "--format",
        case_sensitive=False,
        help=needle.get(L.cli.option.format.help),
    ),
):
    app_instance = make_app()
    output = app_instance.run_show(
        target=target, file=file, fmt=fmt.value if fmt else None
    )
    if output is None:
        raise typer.Exit(code=1)
    typer.echo(output, nl=False)

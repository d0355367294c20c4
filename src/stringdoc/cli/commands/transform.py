import sys

import typer

from stringdoc.common import needle
from stringdoc.needle import L
from stringdoc.cli.factories import make_app


def _read_argument(string: str) -> str:
    return sys.stdin.read() if string == "-" else string


def prettify_command(
    string: str = typer.Argument(..., help=needle.get(L.cli.argument.string.help)),
):
    app_instance = make_app()
    typer.echo(app_instance.run_prettify(_read_argument(string).strip()))


def deprettify_command(
    string: str = typer.Argument(..., help=needle.get(L.cli.argument.string.help)),
):
    app_instance = make_app()
    result = app_instance.run_deprettify(_read_argument(string))
    if result is None:
        raise typer.Exit(code=1)
    typer.echo(result)

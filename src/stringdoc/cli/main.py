import typer

from stringdoc.common import bus, needle
from stringdoc.needle import L
from .rendering import CliRenderer

from .commands.show import show_command
from .commands.presets import presets_command
from .commands.transform import prettify_command, deprettify_command

app = typer.Typer(
    name="stringdoc",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    bus.set_renderer(CliRenderer(verbose=verbose))


# Register commands
app.command(name="show", help=needle.get(L.cli.command.show.help))(show_command)
app.command(name="presets", help=needle.get(L.cli.command.presets.help))(
    presets_command
)
app.command(name="prettify", help=needle.get(L.cli.command.prettify.help))(
    prettify_command
)
app.command(name="deprettify", help=needle.get(L.cli.command.deprettify.help))(
    deprettify_command
)


if __name__ == "__main__":
    app()

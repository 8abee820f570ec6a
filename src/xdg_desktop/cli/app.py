from __future__ import annotations

import typer
from rich.console import Console

from xdg_desktop import __version__
from xdg_desktop.cli.commands.check import check_cmd
from xdg_desktop.cli.commands.get import get_cmd
from xdg_desktop.cli.commands.init import init_cmd
from xdg_desktop.cli.commands.show import show_cmd

app = typer.Typer(
    name="xdg-desktop",
    help="Parse desktop entry files into typed sections and values.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"xdg-desktop {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("show")(show_cmd)
app.command("get")(get_cmd)
app.command("check")(check_cmd)
app.command("init")(init_cmd)

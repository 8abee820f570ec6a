from __future__ import annotations

from pathlib import Path

import typer

from xdg_desktop.core.config import load_config
from xdg_desktop.core.engine import load_desktop_file
from xdg_desktop.core.errors import ExitCode
from xdg_desktop.parsers.errors import DesktopParseError


def get_cmd(
    file: Path = typer.Argument(..., help="Desktop entry file to parse."),
    key: str = typer.Argument(..., help="Key as written, e.g. 'Name[de]'."),
    section: str = typer.Option("Desktop Entry", "--section", "-s", help="Section name."),
) -> None:
    """Print the display form of KEY. Exit 1 if it is missing or failed to parse."""
    loaded = load_config(start_dir=file.resolve().parent)

    try:
        desktop = load_desktop_file(file, loaded.parser)
    except DesktopParseError as e:
        typer.echo(f"{file}: {e}", err=True)
        raise typer.Exit(code=int(ExitCode.ERROR))

    group = desktop.get(section)
    if group is None:
        typer.echo(f"No section {section!r} in {file}", err=True)
        raise typer.Exit(code=int(ExitCode.INVALID_ENTRIES))

    entry = group.get(key)
    if entry is None:
        typer.echo(f"No key {key!r} in section {section!r}", err=True)
        raise typer.Exit(code=int(ExitCode.INVALID_ENTRIES))

    if entry.error is not None:
        typer.echo(f"{key}: {entry.error}", err=True)
        raise typer.Exit(code=int(ExitCode.INVALID_ENTRIES))

    typer.echo(str(entry.value))

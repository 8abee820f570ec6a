from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from xdg_desktop.cli.ui import EntriesRenderOptions, get_ui, render_sections
from xdg_desktop.core.config import load_config
from xdg_desktop.core.engine import load_desktop_file
from xdg_desktop.core.errors import ExitCode
from xdg_desktop.core.export import dump
from xdg_desktop.core.models import OutputFormat, ProbePolicy
from xdg_desktop.parsers.errors import DesktopParseError


def parser_overrides(
    probe_policy: Optional[ProbePolicy], keep_brackets: Optional[bool]
) -> Dict[str, Any]:
    parser: Dict[str, Any] = {}
    if probe_policy is not None:
        parser["probe_policy"] = probe_policy.value
    if keep_brackets is not None:
        parser["keep_section_brackets"] = keep_brackets
    return {"parser": parser}


def show_cmd(
    file: Path = typer.Argument(..., help="Desktop entry file to parse."),
    fmt: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format."
    ),
    errors_only: bool = typer.Option(
        False, "--errors-only", help="Only list entries whose value failed to parse."
    ),
    probe_policy: Optional[ProbePolicy] = typer.Option(
        None, "--probe-policy", help="Typing of list values of unknown keys (overrides config)."
    ),
    keep_brackets: Optional[bool] = typer.Option(
        None,
        "--keep-brackets/--strip-brackets",
        help="Keep the [ ] around section names (overrides config).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    ui = get_ui(verbose=verbose)
    console = ui.console

    loaded = load_config(
        start_dir=file.resolve().parent,
        cli_overrides=parser_overrides(probe_policy, keep_brackets),
    )

    try:
        desktop = load_desktop_file(file, loaded.parser)
    except DesktopParseError as e:
        console.print(f"[err]{file}: {e}[/err]")
        raise typer.Exit(code=int(ExitCode.ERROR))

    if fmt == OutputFormat.TABLE:
        render_sections(
            console,
            desktop,
            title=str(file) if ui.verbose else None,
            opts=EntriesRenderOptions(
                max_value_width=loaded.ui.max_value_width,
                show_locale=loaded.ui.show_locale or ui.verbose,
                errors_only=errors_only,
            ),
        )
    else:
        typer.echo(dump(desktop, fmt))

    has_invalid = any(not entry.ok for _, entry in desktop.entries())
    raise typer.Exit(code=int(ExitCode.INVALID_ENTRIES if has_invalid else ExitCode.OK))

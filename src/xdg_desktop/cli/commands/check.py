from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from xdg_desktop.cli.commands.show import parser_overrides
from xdg_desktop.cli.ui import (
    get_ui,
    render_check_issues,
    render_check_summary,
    render_file_errors,
)
from xdg_desktop.core.config import load_config
from xdg_desktop.core.engine import run_check
from xdg_desktop.core.errors import ExitCode
from xdg_desktop.core.models import ProbePolicy


def check_cmd(
    paths: List[Path] = typer.Argument(
        ..., help="Files or directories (searched for *.desktop / *.directory)."
    ),
    fail: bool = typer.Option(
        True, "--fail/--no-fail", help="Exit 1 if any entry failed to parse (CI mode)."
    ),
    ignore_errors: bool = typer.Option(
        False, "--ignore-errors", help="Do not exit 2 when whole files fail to parse."
    ),
    probe_policy: Optional[ProbePolicy] = typer.Option(
        None, "--probe-policy", help="Typing of list values of unknown keys (overrides config)."
    ),
    max_rows: Optional[int] = typer.Option(None, "--max-rows", min=1),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    ui = get_ui(verbose=verbose)
    console = ui.console

    loaded = load_config(
        start_dir=Path.cwd(),
        cli_overrides=parser_overrides(probe_policy, None),
    )

    if ui.verbose:
        console.print("[bold]Config sources:[/bold]")
        console.print(f"  global: {loaded.global_path or '-'}")
        console.print(f"  repo:   {loaded.repo_path or '-'}")
        console.print()

    result = run_check(paths, loaded.parser)

    render_file_errors(console, result.errors)
    render_check_issues(console, result.issues, max_rows=max_rows)
    if ui.verbose:
        render_check_summary(console, result)

    if result.errors and not ignore_errors:
        raise typer.Exit(code=int(ExitCode.ERROR))

    if result.issues and fail:
        raise typer.Exit(code=int(ExitCode.INVALID_ENTRIES))

    raise typer.Exit(code=int(ExitCode.OK))

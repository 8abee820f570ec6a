from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from xdg_desktop.cli.ui.formatters import (
    EntriesRenderOptions,
    render_check_issues,
    render_check_summary,
    render_file_errors,
    render_sections,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "section": "bold cyan",
        "key": "bold",
        "kind": "magenta",
        "path": "cyan",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    return UI(console=console, verbose=verbose)


__all__ = [
    "EntriesRenderOptions",
    "UI",
    "get_ui",
    "render_check_issues",
    "render_check_summary",
    "render_file_errors",
    "render_sections",
]

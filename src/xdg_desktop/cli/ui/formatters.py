from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from xdg_desktop.core.models import CheckResult, EntryIssue, FileError
from xdg_desktop.parsers.common import split_locale
from xdg_desktop.parsers.types import DesktopFile, ParsedEntry


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def entry_kind(entry: ParsedEntry) -> str:
    if entry.error is not None:
        return "error"
    assert entry.value is not None
    kind = entry.value.kind.value
    items = getattr(entry.value, "items", None)
    if items:
        return f"{kind}[{items[0].kind.value}]"
    return kind


# ----------------------------
# Sections / entries
# ----------------------------

@dataclass(frozen=True)
class EntriesRenderOptions:
    max_value_width: int = 80
    show_locale: bool = False
    errors_only: bool = False


def render_sections(
    console: Console,
    desktop: DesktopFile,
    *,
    title: Optional[str] = None,
    opts: Optional[EntriesRenderOptions] = None,
) -> None:
    opts = opts or EntriesRenderOptions()

    if not desktop:
        console.print("[muted]No sections.[/muted]")
        return

    if title:
        console.print(f"[bold]{title}[/bold]")

    for name, section in desktop.items():
        table = Table(title=Text(f"[{name}]", style="section"), show_lines=False)
        table.add_column("Line", justify="right", no_wrap=True, style="muted")
        table.add_column("Key", style="key", no_wrap=True)
        if opts.show_locale:
            table.add_column("Locale", no_wrap=True)
        table.add_column("Type", style="kind", no_wrap=True)
        table.add_column("Value")

        rows = 0
        for key, entry in sorted(section.items(), key=lambda kv: kv[1].line or 0):
            if opts.errors_only and entry.ok:
                continue
            row = [str(entry.line or ""), key]
            if opts.show_locale:
                row.append(split_locale(key)[1] or "")
            row.append(entry_kind(entry))
            if entry.error is not None:
                row.append(Text(_short(str(entry.error.message), opts.max_value_width), style="err"))
            else:
                row.append(_short(str(entry.value), opts.max_value_width))
            table.add_row(*row)
            rows += 1

        if rows:
            console.print(table)


# ----------------------------
# Check results
# ----------------------------

def render_file_errors(
    console: Console,
    errors: Sequence[FileError],
    *,
    max_items: int = 25,
) -> None:
    if not errors:
        return

    console.print(f"[err]{len(errors)} file(s) could not be parsed.[/err]")
    shown = list(errors)[:max_items]
    for e in shown:
        loc = f"{e.file}:{e.line}" if e.line else e.file
        console.print(f"- [path]{loc}[/path]: {e.message}")

    if len(errors) > len(shown):
        console.print(f"[muted]… and {len(errors) - len(shown)} more[/muted]")


def render_check_issues(
    console: Console,
    issues: Sequence[EntryIssue],
    *,
    max_rows: Optional[int] = None,
) -> None:
    if not issues:
        console.print("[ok]No invalid entries.[/ok]")
        return

    show = sorted(issues, key=lambda i: (i.file, i.line or 0, i.key))
    total = len(show)
    if max_rows is not None:
        show = show[: int(max_rows)]

    table = Table(title=f"Invalid entries ({total})", show_lines=False)
    table.add_column("File", style="path")
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Message")
    for i in show:
        table.add_row(i.file, str(i.line or ""), i.section, i.key, _short(i.message, 120))
    console.print(table)

    if max_rows is not None and total > len(show):
        console.print(f"[muted]… showing {len(show)} of {total} entries.[/muted]")


def render_check_summary(
    console: Console,
    result: CheckResult,
    *,
    header: str = "Summary",
) -> None:
    s = result.stats
    cols = [
        "files_considered",
        "files_parsed",
        "files_failed",
        "sections",
        "entries",
        "invalid_entries",
        "duration_ms",
    ]
    table = Table(title=header, show_header=True, show_lines=False)
    for c in cols:
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(*(str(getattr(s, c, 0)) for c in cols))

    console.print()
    console.print(table)

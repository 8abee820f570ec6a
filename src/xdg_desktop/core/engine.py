from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from xdg_desktop.core.models import CheckResult, EntryIssue, FileError, ParserConfig
from xdg_desktop.parsers.errors import DesktopParseError
from xdg_desktop.parsers.file_parser import parse
from xdg_desktop.parsers.types import DesktopFile

logger = logging.getLogger(__name__)

DESKTOP_SUFFIXES = (".desktop", ".directory")


class DesktopFileLoadError(DesktopParseError):
    """The file could not be read from disk or is not valid UTF-8."""


def load_desktop_file(path: Path, config: Optional[ParserConfig] = None) -> DesktopFile:
    """
    Read a desktop entry file and parse it.

    Raises DesktopFileLoadError for I/O and decoding problems and lets
    structural parse errors propagate.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DesktopFileLoadError(f"Cannot read {path}: {e}") from e

    logger.debug("Loaded %s (%d bytes)", path, len(text))
    return parse(text, config)


def iter_desktop_paths(paths: Iterable[Path]) -> List[Path]:
    """
    Expand directories into the desktop entry files below them.
    Explicit file arguments are kept whatever their suffix.
    """
    out: List[Path] = []
    for p in paths:
        p = Path(p)
        if p.is_dir():
            out.extend(
                sorted(c for c in p.rglob("*") if c.is_file() and c.suffix in DESKTOP_SUFFIXES)
            )
        else:
            out.append(p)
    return out


def run_check(
    paths: Iterable[Path],
    config: Optional[ParserConfig] = None,
) -> CheckResult:
    """
    Parse every file, collecting file-level failures and per-entry
    conversion errors. A failing file never stops the run.
    """
    t0 = time.perf_counter()
    config = config or ParserConfig()

    files = iter_desktop_paths(paths)
    result = CheckResult(started_at=datetime.now(timezone.utc), files=[str(f) for f in files])
    result.stats.files_considered = len(files)

    errors: List[FileError] = []
    issues: List[EntryIssue] = []

    for f in files:
        try:
            desktop = load_desktop_file(f, config)
        except DesktopParseError as e:
            # Non-fatal per-file error; keep checking
            logger.debug("Failed to parse %s: %s", f, e)
            errors.append(FileError(file=str(f), message=e.message, line=e.line))
            continue

        result.stats.files_parsed += 1
        result.stats.sections += len(desktop)
        for section_name, entry in desktop.entries():
            result.stats.entries += 1
            if entry.error is not None:
                issues.append(
                    EntryIssue(
                        file=str(f),
                        section=section_name,
                        key=entry.key,
                        message=entry.error.message,
                        line=entry.line,
                    )
                )

    result.errors = errors
    result.issues = issues
    result.stats.files_failed = len(errors)
    result.stats.invalid_entries = len(issues)
    result.stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    result.finished_at = datetime.now(timezone.utc)
    return result

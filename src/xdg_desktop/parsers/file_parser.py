from __future__ import annotations

import logging
import re
from typing import Dict, Optional

from xdg_desktop.core.models import ParserConfig
from xdg_desktop.parsers.errors import DesktopParseError, SectionHeaderError
from xdg_desktop.parsers.types import DesktopFile, DesktopSection, ParsedEntry
from xdg_desktop.parsers.value_parser import parse_key_value

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"#.*")
_SECTION_RE = re.compile(r"\[(.*)\]")
# only \n ends a line; one \r before it is dropped
_LINE_BREAK_RE = re.compile(r"\r?\n")


def parse(text: str, config: Optional[ParserConfig] = None) -> DesktopFile:
    """
    Parse desktop entry text into a DesktopFile.

    Lines end at a newline only. Each is classified first-match-wins, the patterns
    anchored at the start of the line:
      comment / blank      -> skipped
      [Section]            -> flush the open section, open a new one
      anything else        -> Key=Value, typed by the value parser

    Raises SectionHeaderError when a key/value line appears before any header.
    Conversion failures do not raise; they are stored on the entry.
    """
    config = config or ParserConfig()

    groups: Dict[str, DesktopSection] = {}
    current: Dict[str, ParsedEntry] = {}
    header: Optional[str] = None

    if text is None:
        return DesktopFile(groups)

    for idx, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        if not line.strip() or _COMMENT_RE.match(line):
            continue

        m = _SECTION_RE.match(line)
        if m:
            if header is not None:
                # flushed even when empty; a repeated header replaces the older group
                groups[header] = DesktopSection(header, current)
                logger.debug("Closed section %r with %d entries", header, len(current))
                current = {}
            header = m.group(0) if config.keep_section_brackets else m.group(1)
            continue

        if header is None:
            raise SectionHeaderError(line=idx)

        key, outcome = parse_key_value(line, probe_policy=config.probe_policy)
        if isinstance(outcome, DesktopParseError):
            outcome.line = idx
            current[key] = ParsedEntry(key=key, error=outcome, line=idx)
        else:
            current[key] = ParsedEntry(key=key, value=outcome, line=idx)

    # a trailing section with nothing in it is dropped
    if header is not None and current:
        groups[header] = DesktopSection(header, current)

    return DesktopFile(groups)

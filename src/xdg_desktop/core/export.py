from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from xdg_desktop.core.models import OutputFormat
from xdg_desktop.parsers.types import DesktopFile, DesktopValue, ListValue, ParsedEntry


def value_to_dict(value: DesktopValue) -> Dict[str, Any]:
    """
    Tagged form of a typed value:
      {"type": "boolean", "value": false}
      {"type": "list", "value": [{"type": "string", "value": "Utility"}]}
    """
    if isinstance(value, ListValue):
        return {"type": value.kind.value, "value": [value_to_dict(i) for i in value.items]}
    return {"type": value.kind.value, "value": value.to_python()}


def entry_to_dict(entry: ParsedEntry) -> Dict[str, Any]:
    if entry.error is not None:
        return {"error": entry.error.message, "line": entry.line}
    assert entry.value is not None
    return value_to_dict(entry.value)


def to_dict(desktop: DesktopFile) -> Dict[str, Dict[str, Any]]:
    return {
        name: {key: entry_to_dict(entry) for key, entry in section.items()}
        for name, section in desktop.items()
    }


def dump(desktop: DesktopFile, fmt: OutputFormat = OutputFormat.JSON) -> str:
    data = to_dict(desktop)
    if fmt == OutputFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == OutputFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise ValueError(f"Unsupported export format: {fmt.value}")

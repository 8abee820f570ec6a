from __future__ import annotations

import json

import yaml

from xdg_desktop.core.export import dump, to_dict
from xdg_desktop.core.models import OutputFormat
from xdg_desktop.parsers.file_parser import parse

TEXT = "[Desktop Entry]\nName=App\nTerminal=maybe\nCategories=Utility;Development;\nX-Size=2\n"


def test_to_dict_tags_values_and_errors():
    data = to_dict(parse(TEXT))
    section = data["Desktop Entry"]
    assert section["Name"] == {"type": "localestring", "value": "App"}
    assert section["Terminal"] == {"error": "provided string was not `true` or `false`", "line": 3}
    assert section["Categories"] == {
        "type": "list",
        "value": [
            {"type": "string", "value": "Utility"},
            {"type": "string", "value": "Development"},
        ],
    }
    assert section["X-Size"] == {"type": "numeric", "value": 2.0}


def test_dump_json_and_yaml_agree():
    desktop = parse(TEXT)
    assert json.loads(dump(desktop, OutputFormat.JSON)) == yaml.safe_load(
        dump(desktop, OutputFormat.YAML)
    )

from __future__ import annotations

from xdg_desktop.parsers.common import split_locale, split_values, strip_locale
from xdg_desktop.parsers.errors import (
    BoolParseError,
    DesktopParseError,
    FloatParseError,
    MissingDelimiterError,
    SectionHeaderError,
    StructureError,
    ValueConversionError,
)
from xdg_desktop.parsers.file_parser import parse
from xdg_desktop.parsers.types import (
    BoolValue,
    DesktopFile,
    DesktopSection,
    DesktopValue,
    IconStringValue,
    ListValue,
    LocaleStringValue,
    NumericValue,
    ParsedEntry,
    StringValue,
)
from xdg_desktop.parsers.value_parser import (
    KEY_STRATEGIES,
    convert,
    parse_key_value,
    probe,
    strategy_for_key,
)

__all__ = [
    "BoolParseError",
    "BoolValue",
    "DesktopFile",
    "DesktopParseError",
    "DesktopSection",
    "DesktopValue",
    "FloatParseError",
    "IconStringValue",
    "KEY_STRATEGIES",
    "ListValue",
    "LocaleStringValue",
    "MissingDelimiterError",
    "NumericValue",
    "ParsedEntry",
    "SectionHeaderError",
    "StringValue",
    "StructureError",
    "ValueConversionError",
    "convert",
    "parse",
    "parse_key_value",
    "probe",
    "split_locale",
    "split_values",
    "strategy_for_key",
    "strip_locale",
]

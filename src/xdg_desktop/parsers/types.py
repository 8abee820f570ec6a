from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple

from xdg_desktop.core.models import ParserConfig, ValueKind
from xdg_desktop.parsers.errors import DesktopParseError


# ----------------------------
# Typed values
# ----------------------------

class DesktopValue:
    """Common base of the typed values a desktop entry key can hold."""

    kind: ClassVar[ValueKind]

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class StringValue(DesktopValue):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class LocaleStringValue(DesktopValue):
    """ Text of a key that may carry a locale suffix. The suffix itself is not kept."""
    value: str
    kind: ClassVar[ValueKind] = ValueKind.LOCALE_STRING

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class IconStringValue(DesktopValue):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.ICON_STRING

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BoolValue(DesktopValue):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NumericValue(DesktopValue):
    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMERIC

    def __str__(self) -> str:
        return repr(float(self.value))

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue(DesktopValue):
    items: Tuple[DesktopValue, ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.LIST

    def __str__(self) -> str:
        # every element is terminated, including the last one
        return "".join(f"{item};" for item in self.items)

    def __iter__(self) -> Iterator[DesktopValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> Any:
        return [item.to_python() for item in self.items]


# ----------------------------
# Parsed entries / containers
# ----------------------------

@dataclass(frozen=True)
class ParsedEntry:
    """ Outcome of one key/value line: a typed value or the error that replaced it."""
    key: str
    value: Optional[DesktopValue] = None
    error: Optional[DesktopParseError] = None
    line: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DesktopValue:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


class DesktopSection(Mapping):
    """Read-only mapping of raw key (locale suffix included) -> ParsedEntry."""

    __slots__ = ("_name", "_entries")

    def __init__(self, name: str, entries: Dict[str, ParsedEntry]) -> None:
        self._name = name
        self._entries = dict(entries)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> ParsedEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DesktopSection({self._name!r}, {len(self._entries)} entries)"

    def values_only(self) -> Dict[str, DesktopValue]:
        return {k: e.value for k, e in self._entries.items() if e.value is not None}

    def errors(self) -> Dict[str, DesktopParseError]:
        return {k: e.error for k, e in self._entries.items() if e.error is not None}


class DesktopFile(Mapping):
    """
    A parsed desktop entry file: section name -> DesktopSection.

    Built once from a complete text blob (see `from_str`) and never mutated
    afterwards.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Dict[str, DesktopSection]) -> None:
        self._groups = dict(groups)

    @classmethod
    def from_str(cls, text: str, config: Optional[ParserConfig] = None) -> "DesktopFile":
        from xdg_desktop.parsers.file_parser import parse

        return parse(text, config)

    def __getitem__(self, name: str) -> DesktopSection:
        return self._groups[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"DesktopFile(sections={list(self._groups)!r})"

    def entries(self) -> List[Tuple[str, ParsedEntry]]:
        """All (section name, entry) pairs, sections in stored order."""
        return [(name, entry) for name, sec in self._groups.items() for entry in sec.values()]

from __future__ import annotations

from typing import Optional


class DesktopParseError(Exception):
    """Base class for every error raised or recorded while parsing a desktop file."""

    def __init__(self, message: str, *, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.line == other.line  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message, self.line))


# ----------------------------
# Structural (abort the file)
# ----------------------------

class StructureError(DesktopParseError):
    pass


class SectionHeaderError(StructureError):
    def __init__(self, *, line: Optional[int] = None) -> None:
        super().__init__("File contains keys without section header", line=line)


# ----------------------------
# Per-key (stored on the entry)
# ----------------------------

class MissingDelimiterError(DesktopParseError):
    def __init__(self, *, line: Optional[int] = None) -> None:
        super().__init__("No delimiter found in line", line=line)


class ValueConversionError(DesktopParseError):
    """A raw value could not be converted to the type its key requires."""

    def __init__(self, message: str, text: str, *, line: Optional[int] = None) -> None:
        super().__init__(message, line=line)
        self.text = text

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.text, self.line) == (other.message, other.text, other.line)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message, self.text, self.line))


class BoolParseError(ValueConversionError):
    def __init__(self, text: str, *, line: Optional[int] = None) -> None:
        super().__init__("provided string was not `true` or `false`", text, line=line)


class FloatParseError(ValueConversionError):
    def __init__(self, text: str, *, line: Optional[int] = None) -> None:
        super().__init__("invalid float literal", text, line=line)

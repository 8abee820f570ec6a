from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# ================================
# Enums
# ================================


class ValueKind(str, Enum):
    STRING = "string"
    LOCALE_STRING = "localestring"
    ICON_STRING = "iconstring"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    LIST = "list"


class ConversionStrategy(str, Enum):
    STRING = "string"
    LOCALE_STRING = "localestring"
    ICON_STRING = "iconstring"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    LOCALE_STRING_LIST = "localestring_list"
    PROBE = "probe"


class ProbePolicy(str, Enum):
    HOMOGENEOUS = "homogeneous"
    ELEMENT_WISE = "element_wise"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


# ================================
# Config (defaults only)
# ================================


class ParserConfig(BaseModel):
    """
    Parser behaviour. Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py.
    """

    probe_policy: ProbePolicy = Field(
        default=ProbePolicy.HOMOGENEOUS,
        description="How list values of unrecognized keys are typed.",
    )
    keep_section_brackets: bool = Field(
        default=False,
        description="Store section names as written, e.g. '[Desktop Entry]'.",
    )


class UIConfig(BaseModel):
    max_value_width: int = Field(default=80, ge=8, le=2000)
    show_locale: bool = Field(
        default=False, description="Add a column with the locale tag of each key."
    )


# ================================
# Check results
# ================================


class FileError(BaseModel):
    file: str
    message: str
    line: Optional[int] = None


class EntryIssue(BaseModel):
    file: str
    section: str
    key: str
    message: str
    line: Optional[int] = None


class CheckStats(BaseModel):
    files_considered: int = 0
    files_parsed: int = 0
    files_failed: int = 0
    sections: int = 0
    entries: int = 0
    invalid_entries: int = 0
    duration_ms: int = 0


class CheckResult(BaseModel):
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    files: List[str] = Field(default_factory=list)
    errors: List[FileError] = Field(default_factory=list)
    issues: List[EntryIssue] = Field(default_factory=list)
    stats: CheckStats = Field(default_factory=CheckStats)

    @model_validator(mode="after")
    def _fixup_counts(self) -> "CheckResult":
        self.stats.invalid_entries = len(self.issues)
        self.stats.files_failed = len(self.errors)
        return self

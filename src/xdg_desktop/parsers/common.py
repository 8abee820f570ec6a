from __future__ import annotations

import re
from typing import List, Optional, Tuple

# `;` not preceded by a backslash
VALUE_DELIMITER_RE = re.compile(r"(?<!\\);")

# [lang], [lang_COUNTRY], [lang@modifier], [lang_COUNTRY@modifier] at the end of a key
LOCALE_SUFFIX_RE = re.compile(r"\[([a-z]{2}(?:_[A-Z]{2})?(?:@\w+)?)\]$")


def has_delimiter(value: str) -> bool:
    return VALUE_DELIMITER_RE.search(value) is not None


def split_values(value: str) -> List[str]:
    r"""
    Split a multi-valued field on unescaped `;`.

    Escaping backslashes are passed through untouched. A terminating `;`
    does not produce a trailing empty element:

      "a;b;"    -> ["a", "b"]
      "a\;b"   -> ["a\;b"]
      "a"       -> ["a"]
    """
    parts = VALUE_DELIMITER_RE.split(value)
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def split_locale(key: str) -> Tuple[str, Optional[str]]:
    """
    Separate a key into its base name and locale tag.

      "Name[sr@Latn]" -> ("Name", "sr@Latn")
      "Name"          -> ("Name", None)
    """
    m = LOCALE_SUFFIX_RE.search(key)
    if not m:
        return key, None
    return key[: m.start()], m.group(1)


def strip_locale(key: str) -> str:
    return split_locale(key)[0]

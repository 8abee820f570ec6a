from __future__ import annotations

import logging
from typing import Dict, List, Tuple, Union

from xdg_desktop.core.models import ConversionStrategy, ProbePolicy
from xdg_desktop.parsers.common import has_delimiter, split_values, strip_locale
from xdg_desktop.parsers.errors import (
    BoolParseError,
    DesktopParseError,
    FloatParseError,
    MissingDelimiterError,
    ValueConversionError,
)
from xdg_desktop.parsers.types import (
    BoolValue,
    DesktopValue,
    IconStringValue,
    ListValue,
    LocaleStringValue,
    NumericValue,
    StringValue,
)

logger = logging.getLogger(__name__)

ParseOutcome = Union[DesktopValue, DesktopParseError]


def _keys(strategy: ConversionStrategy, *names: str) -> Dict[str, ConversionStrategy]:
    return {n: strategy for n in names}


# Base key (locale suffix stripped) -> strategy. Anything else is probed.
KEY_STRATEGIES: Dict[str, ConversionStrategy] = {
    **_keys(
        ConversionStrategy.STRING,
        "Type", "Version", "Exec", "TryExec", "Path", "StartupWMClass", "URL",
    ),
    **_keys(ConversionStrategy.LOCALE_STRING, "Name", "GenericName", "Comment"),
    **_keys(
        ConversionStrategy.BOOLEAN,
        "NoDisplay", "Hidden", "Terminal", "StartupNotify",
        "PrefersNonDefaultGPU", "DBusActivatable",
    ),
    **_keys(ConversionStrategy.ICON_STRING, "Icon"),
    **_keys(ConversionStrategy.LOCALE_STRING_LIST, "Keywords"),
    **_keys(
        ConversionStrategy.STRING_LIST,
        "OnlyShowIn", "NotShowIn", "Actions", "MimeType", "Categories", "Implements",
    ),
}


# ----------------------------
# Scalar conversions
# ----------------------------

def parse_bool(text: str) -> BoolValue:
    if text == "true":
        return BoolValue(True)
    if text == "false":
        return BoolValue(False)
    raise BoolParseError(text)


def parse_numeric(text: str) -> NumericValue:
    # float() is laxer than a float literal: no padding, no digit separators
    if not text or text != text.strip() or "_" in text:
        raise FloatParseError(text)
    try:
        return NumericValue(float(text))
    except ValueError as e:
        raise FloatParseError(text) from e


def _convert_scalar(strategy: ConversionStrategy, text: str) -> DesktopValue:
    if strategy == ConversionStrategy.STRING:
        return StringValue(text)
    if strategy == ConversionStrategy.LOCALE_STRING:
        return LocaleStringValue(text)
    if strategy == ConversionStrategy.ICON_STRING:
        return IconStringValue(text)
    if strategy == ConversionStrategy.BOOLEAN:
        return parse_bool(text)
    raise ValueError(f"not a scalar strategy: {strategy}")


# ----------------------------
# Type probing
# ----------------------------

def _probe_scalar(text: str) -> DesktopValue:
    for fn in (parse_bool, parse_numeric):
        try:
            return fn(text)
        except ValueConversionError:
            continue
    return StringValue(text)


def _probe_homogeneous(items: List[str]) -> ListValue:
    for fn in (parse_bool, parse_numeric):
        try:
            return ListValue(tuple(fn(i) for i in items))
        except ValueConversionError:
            continue
    return ListValue(tuple(StringValue(i) for i in items))


def probe(text: str, policy: ProbePolicy = ProbePolicy.HOMOGENEOUS) -> DesktopValue:
    """
    Guess the type of a value whose key is not in KEY_STRATEGIES.

    Order is boolean, numeric, string; string always succeeds. A value with at
    least one unescaped `;` is a list. HOMOGENEOUS requires every element to
    take the same type, ELEMENT_WISE types each element on its own.
    """
    if not has_delimiter(text):
        return _probe_scalar(text)

    items = split_values(text)
    if policy == ProbePolicy.ELEMENT_WISE:
        return ListValue(tuple(_probe_scalar(i) for i in items))
    return _probe_homogeneous(items)


# ----------------------------
# Dispatch
# ----------------------------

def strategy_for_key(key: str) -> ConversionStrategy:
    return KEY_STRATEGIES.get(strip_locale(key), ConversionStrategy.PROBE)


def convert(
    strategy: ConversionStrategy,
    text: str,
    *,
    probe_policy: ProbePolicy = ProbePolicy.HOMOGENEOUS,
) -> DesktopValue:
    """Apply one conversion strategy to a raw value. Raises ValueConversionError."""
    if strategy == ConversionStrategy.PROBE:
        return probe(text, probe_policy)
    if strategy == ConversionStrategy.STRING_LIST:
        return ListValue(tuple(StringValue(i) for i in split_values(text)))
    if strategy == ConversionStrategy.LOCALE_STRING_LIST:
        return ListValue(tuple(LocaleStringValue(i) for i in split_values(text)))
    return _convert_scalar(strategy, text)


def parse_key_value(
    line: str,
    *,
    probe_policy: ProbePolicy = ProbePolicy.HOMOGENEOUS,
) -> Tuple[str, ParseOutcome]:
    """
    Parse a single `Key=Value` line.

    Never raises: the second element is either the typed value or the error
    that stands in for it. Without a `=` the whole line is returned as key.
    """
    if "=" not in line:
        return line, MissingDelimiterError()

    key, raw = line.split("=", 1)
    strategy = strategy_for_key(key)
    try:
        return key, convert(strategy, raw, probe_policy=probe_policy)
    except ValueConversionError as e:
        logger.debug("Key %r: %s (%s strategy)", key, e, strategy.value)
        return key, e

from __future__ import annotations

from xdg_desktop.core.models import ConversionStrategy, ParserConfig, ProbePolicy, ValueKind
from xdg_desktop.parsers import *  # noqa: F401,F403
from xdg_desktop.parsers import __all__ as _parsers_all

__version__ = "0.1.0"

__all__ = [
    "ConversionStrategy",
    "ParserConfig",
    "ProbePolicy",
    "ValueKind",
    "__version__",
    *_parsers_all,
]

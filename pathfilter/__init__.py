"""
pathfilter - composable filters for deciding which paths to ignore.

    >>> from pathfilter import ExtensionFilter, FilterSequence, RegexFilter
    >>> filters = FilterSequence([RegexFilter.from_str(r"^src/lib\\.rs$"), ExtensionFilter("cs")])
    >>> filters.ignore("src/Program.cs"), filters.ignore("src/main.cpp")
    (True, False)
"""
from __future__ import annotations

__version__ = "0.1.0"

from pathfilter.core import (
    CompileError,
    FilterDecodeError,
    FilterKind,
    FilterSequence,
    PathFilter,
    PathFilterError,
    dumps,
    ignore_any,
    load_filters,
    loads,
    path_extension,
    path_text,
    save_filters,
)
from pathfilter.filters import (
    BasePathFilter,
    ExtensionFilter,
    ExtensionsFilter,
    RegexFilter,
)

__all__ = [
    "__version__",
    "BasePathFilter",
    "CompileError",
    "ExtensionFilter",
    "ExtensionsFilter",
    "FilterDecodeError",
    "FilterKind",
    "FilterSequence",
    "PathFilter",
    "PathFilterError",
    "RegexFilter",
    "dumps",
    "ignore_any",
    "load_filters",
    "loads",
    "path_extension",
    "path_text",
    "save_filters",
]

"""
Core pathfilter types: errors, path helpers, the filter union and
JSON persistence.
"""
from __future__ import annotations

from pathfilter.core.errors import CompileError, FilterDecodeError, PathFilterError
from pathfilter.core.paths import path_extension, path_text
from pathfilter.core.serialization import dumps, load_filters, loads, save_filters
from pathfilter.core.union import FilterKind, FilterSequence, PathFilter, ignore_any

__all__ = [
    "CompileError",
    "FilterDecodeError",
    "PathFilterError",
    "path_extension",
    "path_text",
    "dumps",
    "loads",
    "load_filters",
    "save_filters",
    "FilterKind",
    "FilterSequence",
    "PathFilter",
    "ignore_any",
]

"""
pathfilter filters package.

Provides the filter contract and the extension and regex filters.
"""
from __future__ import annotations

from pathfilter.filters.base import BasePathFilter
from pathfilter.filters.extension import ExtensionFilter, ExtensionsFilter
from pathfilter.filters.regex import RegexFilter

__all__ = [
    "BasePathFilter",
    "ExtensionFilter",
    "ExtensionsFilter",
    "RegexFilter",
]

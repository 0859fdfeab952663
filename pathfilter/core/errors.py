from __future__ import annotations

import re


class PathFilterError(Exception):
    """Base class for all pathfilter errors."""


class CompileError(PathFilterError, ValueError):
    """
    Raised when a regex filter pattern cannot be compiled.

    Attributes:
        pattern: The pattern source that failed to compile
        diagnostic: The regex engine's error message
    """

    def __init__(self, pattern: str, error: re.error) -> None:
        self.pattern = pattern
        self.diagnostic = str(error)
        super().__init__(f"Invalid regex {pattern!r}: {self.diagnostic}")


class FilterDecodeError(PathFilterError, ValueError):
    """Raised when persisted filter data is malformed."""


__all__ = ["PathFilterError", "CompileError", "FilterDecodeError"]

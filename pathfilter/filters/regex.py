from __future__ import annotations

import re
from re import Pattern
from typing import Any, Dict, Iterable, List

from pathfilter.core.errors import CompileError, FilterDecodeError
from pathfilter.core.paths import PathInput, path_text
from pathfilter.filters.base import BasePathFilter

# Flags persisted by name alongside the pattern source
FLAGS: Dict[str, re.RegexFlag] = {
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "DOTALL": re.DOTALL,
    "VERBOSE": re.VERBOSE,
    "ASCII": re.ASCII,
}


def parse_flags(names: Iterable[str]) -> int:
    """
    Combine persisted flag names into an `re` flags value.

    Raises:
        FilterDecodeError: if a name is not one of FLAGS.
    """
    flags = 0
    for name in names:
        if name not in FLAGS:
            raise FilterDecodeError(f"Unknown regex flag: {name!r}")
        flags |= FLAGS[name]
    return flags


class RegexFilter(BasePathFilter):
    '''
    Ignores paths whose text form contains a match for a regular expression.

    Matching uses `Pattern.search`, so the expression may match anywhere in
    the path unless it anchors itself with ^ or $. Path separators are
    ordinary characters to the regex.

    Note that `$` also matches just before a trailing newline, so
    `^src/lib\\.rs$` ignores "src/lib.rs\\n" too. Use `\\Z` to anchor at the
    very end of the path.
    '''

    def __init__(self, regex: Pattern) -> None:
        """
        Wrap an already compiled regex.

        Parameters:
            regex (Pattern): A pattern compiled from a str. Bytes patterns are
                rejected with TypeError since paths are matched as text.
        """
        if not isinstance(regex, Pattern):
            raise TypeError(f"expected a compiled re.Pattern, got {type(regex).__name__}")
        if not isinstance(regex.pattern, str):
            raise TypeError("RegexFilter requires a str pattern, not bytes")
        self._regex = regex

    @classmethod
    def from_str(cls, pattern: str, flags: int = 0) -> "RegexFilter":
        """
        Compile `pattern` with `flags` and build a filter from it.

        Raises:
            CompileError: if the pattern is not a valid regular expression.

        Example:
            >>> f = RegexFilter.from_str(r"^src/lib\\.rs$")
            >>> f.ignore("src/lib.rs"), f.ignore("src/main.rs")
            (True, False)
        """
        try:
            regex = re.compile(pattern, flags)
        except re.error as e:
            raise CompileError(pattern, e) from e
        return cls(regex)

    @property
    def pattern(self) -> str:
        """Source text of the regex, used for persistence."""
        return self._regex.pattern

    @property
    def flag_names(self) -> List[str]:
        """Names of the FLAGS set on the compiled regex, inline ones included."""
        return [name for name, flag in FLAGS.items() if self._regex.flags & flag]

    def ignore(self, path: PathInput) -> bool:
        text = path_text(path)
        if text is None:
            return False
        return self._regex.search(text) is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "regex", "regex": self.pattern}
        flags = self.flag_names
        if flags:
            data["flags"] = flags
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegexFilter):
            return NotImplemented
        return self._regex == other._regex

    def __hash__(self) -> int:
        return hash(self._regex)

    def __repr__(self) -> str:
        return f"RegexFilter({self.pattern!r})"


__all__ = ["FLAGS", "RegexFilter", "parse_flags"]

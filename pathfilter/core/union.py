"""
Tagged union over the filter variants and the "any filter matches" combinator.
"""
from __future__ import annotations

from enum import Enum
from re import Pattern
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Union, overload

from pathfilter.core.errors import FilterDecodeError
from pathfilter.core.paths import PathInput
from pathfilter.filters.base import BasePathFilter
from pathfilter.filters.extension import ExtensionFilter, ExtensionsFilter
from pathfilter.filters.regex import RegexFilter, parse_flags

Variant = Union[ExtensionFilter, ExtensionsFilter, RegexFilter]
FilterLike = Union["PathFilter", ExtensionFilter, ExtensionsFilter, RegexFilter]


class FilterKind(Enum):
    """Closed set of filter variants. The value is the serialized tag."""
    EXTENSION = "extension"
    EXTENSIONS = "extensions"
    REGEX = "regex"


_KIND_BY_CLASS = {
    ExtensionFilter: FilterKind.EXTENSION,
    ExtensionsFilter: FilterKind.EXTENSIONS,
    RegexFilter: FilterKind.REGEX,
}


class PathFilter(BasePathFilter):
    """
    A single filter of any supported kind.

    Wraps exactly one ExtensionFilter, ExtensionsFilter or RegexFilter and
    routes `ignore` to it. APIs taking filters accept bare variants too and
    wrap them with `PathFilter.wrap`.

    Attributes:
        kind: Which variant is held
        filter: The variant itself
    """

    def __init__(self, filter: Variant) -> None:
        kind = _KIND_BY_CLASS.get(type(filter))
        if kind is None:
            raise TypeError(f"Unsupported filter type: {type(filter).__name__}")
        self.kind: FilterKind = kind
        self.filter: Variant = filter

    @classmethod
    def wrap(cls, value: FilterLike) -> "PathFilter":
        """Return `value` if it is already a PathFilter, else wrap it."""
        if isinstance(value, PathFilter):
            return value
        return cls(value)

    @classmethod
    def new_extension(cls, extension: str) -> "PathFilter":
        """
        Build a filter ignoring one extension.

        Example:
            >>> PathFilter.new_extension(".rs").kind
            <FilterKind.EXTENSION: 'extension'>
        """
        return cls(ExtensionFilter(extension))

    @classmethod
    def new_extensions(cls, extensions: Iterable[str]) -> "PathFilter":
        """Build a filter ignoring any of several extensions."""
        return cls(ExtensionsFilter(extensions))

    @classmethod
    def new_regex(cls, regex: Pattern) -> "PathFilter":
        """Build a regex filter from a compiled pattern."""
        return cls(RegexFilter(regex))

    @classmethod
    def from_pattern(cls, pattern: str) -> "PathFilter":
        """Build a regex filter from pattern source; may raise CompileError."""
        return cls(RegexFilter.from_str(pattern))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathFilter":
        """
        Decode a filter from its dict form.

        Raises:
            FilterDecodeError: if the data is malformed or names an unknown type
            CompileError: if a persisted regex no longer compiles
        """
        if not isinstance(data, dict):
            raise FilterDecodeError(f"Filter entry must be an object, got {type(data).__name__}")
        tag = data.get("type")
        try:
            kind = FilterKind(tag)
        except ValueError:
            raise FilterDecodeError(f"Unknown filter type: {tag!r}") from None

        if kind is FilterKind.EXTENSION:
            return cls(ExtensionFilter(_require(data, "extension", str)))
        if kind is FilterKind.EXTENSIONS:
            extensions = _require(data, "extensions", list)
            if not all(isinstance(ext, str) for ext in extensions):
                raise FilterDecodeError("'extensions' must be a list of strings")
            return cls(ExtensionsFilter(extensions))
        pattern = _require(data, "regex", str)
        flag_names = data.get("flags", [])
        if not isinstance(flag_names, list) or not all(isinstance(n, str) for n in flag_names):
            raise FilterDecodeError("'flags' must be a list of strings")
        return cls(RegexFilter.from_str(pattern, parse_flags(flag_names)))

    def ignore(self, path: PathInput) -> bool:
        return self.filter.ignore(path)

    def to_dict(self) -> Dict[str, Any]:
        return self.filter.to_dict()

    def describe(self) -> str:
        """Short human-readable summary, e.g. `extension: rs`."""
        if isinstance(self.filter, ExtensionFilter):
            detail = self.filter.extension
        elif isinstance(self.filter, ExtensionsFilter):
            detail = ", ".join(sorted(self.filter.extensions))
        else:
            detail = self.filter.pattern
        return f"{self.kind.value}: {detail}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathFilter):
            return NotImplemented
        return self.filter == other.filter

    def __hash__(self) -> int:
        return hash(self.filter)

    def __repr__(self) -> str:
        return f"PathFilter({self.filter!r})"


def _require(data: Dict[str, Any], key: str, expected: type) -> Any:
    value = data.get(key)
    if not isinstance(value, expected):
        raise FilterDecodeError(
            f"Filter of type {data.get('type')!r} needs {key!r} as {expected.__name__}"
        )
    return value


def ignore_any(filters: Iterable[FilterLike], path: PathInput) -> bool:
    """
    Return True if at least one of `filters` ignores `path`.

    Works over any iterable of PathFilter values or bare variants; filters
    are tried in order and evaluation stops at the first match. An empty
    iterable never ignores anything.

    Example:
        >>> ignore_any([ExtensionFilter("cs"), RegexFilter.from_str("^src/lib")], "src/Program.cs")
        True
        >>> ignore_any([], "src/Program.cs")
        False
    """
    return any(PathFilter.wrap(f).ignore(path) for f in filters)


class FilterSequence(BasePathFilter, Sequence[PathFilter]):
    """
    Immutable ordered collection of filters evaluated as a logical OR.

    The result does not depend on member order; order only decides which
    filter is reported by `first_match`.
    """

    def __init__(self, filters: Iterable[FilterLike] = ()) -> None:
        self._filters = tuple(PathFilter.wrap(f) for f in filters)

    def ignore(self, path: PathInput) -> bool:
        return ignore_any(self._filters, path)

    def first_match(self, path: PathInput) -> Optional[PathFilter]:
        """Return the first filter that ignores `path`, or None."""
        for f in self._filters:
            if f.ignore(path):
                return f
        return None

    def append(self, filter: FilterLike) -> "FilterSequence":
        """Return a new sequence with `filter` added at the end."""
        return FilterSequence(self._filters + (PathFilter.wrap(filter),))

    def to_dict(self) -> Dict[str, Any]:
        return {"filters": [f.to_dict() for f in self._filters]}

    @overload
    def __getitem__(self, index: int) -> PathFilter: ...

    @overload
    def __getitem__(self, index: slice) -> "FilterSequence": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FilterSequence(self._filters[index])
        return self._filters[index]

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[PathFilter]:
        return iter(self._filters)

    def __add__(self, other: Iterable[FilterLike]) -> "FilterSequence":
        return FilterSequence(self._filters + tuple(PathFilter.wrap(f) for f in other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterSequence):
            return NotImplemented
        return self._filters == other._filters

    def __hash__(self) -> int:
        return hash(self._filters)

    def __repr__(self) -> str:
        return f"FilterSequence({list(self._filters)!r})"


__all__ = [
    "FilterKind",
    "FilterLike",
    "FilterSequence",
    "PathFilter",
    "Variant",
    "ignore_any",
]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable

from pathfilter.core.paths import PathInput, path_extension
from pathfilter.filters.base import BasePathFilter


def normalize_extension(extension: str) -> str:
    """Strip the leading dots of an extension (".rs" -> "rs"). Case is kept."""
    return extension.lstrip(".")


@dataclass(frozen=True)
class ExtensionFilter(BasePathFilter):
    '''
    Ignores paths whose extension equals one configured extension.

    Example:
        >>> f = ExtensionFilter(".rs")
        >>> f.ignore("src/lib.rs"), f.ignore("src/main.txt")
        (True, False)
    '''
    extension: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "extension", normalize_extension(self.extension))

    def ignore(self, path: PathInput) -> bool:
        ext = path_extension(path)
        return ext is not None and ext == self.extension

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "extension", "extension": self.extension}


@dataclass(frozen=True)
class ExtensionsFilter(BasePathFilter):
    '''
    Ignores paths whose extension is one of a set of extensions.

    Example:
        >>> f = ExtensionsFilter([".rs", ".txt"]).with_extension("md")
        >>> f.ignore("README.md"), f.ignore("logo.png")
        (True, False)
    '''
    extensions: FrozenSet[str] = field(default_factory=frozenset)

    def __init__(self, extensions: Iterable[str] = ()) -> None:
        if isinstance(extensions, (str, bytes)):
            raise TypeError(
                "ExtensionsFilter expects a collection of extensions, not a single "
                f"{type(extensions).__name__}; use ExtensionFilter or wrap it in a list"
            )
        object.__setattr__(
            self,
            "extensions",
            frozenset(normalize_extension(ext) for ext in extensions),
        )

    def with_extension(self, extension: str) -> "ExtensionsFilter":
        """Return a copy of this filter that also ignores `extension`."""
        return ExtensionsFilter(self.extensions | {normalize_extension(extension)})

    def ignore(self, path: PathInput) -> bool:
        ext = path_extension(path)
        return ext is not None and ext in self.extensions

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "extensions", "extensions": sorted(self.extensions)}


__all__ = ["ExtensionFilter", "ExtensionsFilter", "normalize_extension"]

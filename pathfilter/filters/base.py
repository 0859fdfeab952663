from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, TypeVar

from pathfilter.core.paths import PathInput

P = TypeVar("P", bound=PathInput)


class BasePathFilter(ABC):
    '''
    Abstract base class for all path filters.

    Subclasses must implement `ignore` to decide whether a path is
    excluded, and `to_dict` to describe themselves for persistence.
    '''

    @abstractmethod
    def ignore(self, path: PathInput) -> bool:
        """
        Decide whether `path` should be ignored.

        Parameters
        ----------
        path:
            A str, bytes or os.PathLike path. It is never normalized.

        Returns
        -------
        bool:
            True if the path is excluded by this filter. A path the filter
            cannot apply to (no extension, not valid text) is never ignored.
        """
        raise NotImplementedError()

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Encode the filter as a JSON-compatible dict."""
        raise NotImplementedError()

    def filter_paths(self, paths: Iterable[P]) -> List[P]:
        """Return the paths that are NOT ignored, in input order."""
        return [p for p in paths if not self.ignore(p)]

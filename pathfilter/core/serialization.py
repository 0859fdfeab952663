"""
JSON persistence for filter collections.

A filter document looks like::

    {"filters": [
        {"type": "extension", "extension": "rs"},
        {"type": "extensions", "extensions": ["png", "jpg"]},
        {"type": "regex", "regex": "^build/"}
    ]}

A bare JSON list of filter objects is accepted on load as well.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pathfilter.core.errors import FilterDecodeError
from pathfilter.core.union import FilterLike, FilterSequence, PathFilter

logger = logging.getLogger(__name__)


def from_data(data: Any) -> FilterSequence:
    """
    Build a FilterSequence from already-parsed JSON data.

    Raises:
        FilterDecodeError: if the document or one of its entries is malformed
        CompileError: if a regex entry does not compile
    """
    if isinstance(data, dict):
        if "filters" not in data:
            raise FilterDecodeError("Filter document needs a 'filters' list")
        data = data["filters"]
    if not isinstance(data, list):
        raise FilterDecodeError(
            f"Filter document must be a list or an object, got {type(data).__name__}"
        )
    return FilterSequence(PathFilter.from_dict(entry) for entry in data)


def dumps(filters: Iterable[FilterLike], indent: int | None = 2) -> str:
    """Serialize filters to a JSON document string."""
    return json.dumps(FilterSequence(filters).to_dict(), indent=indent)


def loads(text: str) -> FilterSequence:
    """Parse a JSON document string into a FilterSequence."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FilterDecodeError(f"Invalid JSON: {e}") from e
    return from_data(data)


def load_filters(path: str | Path) -> FilterSequence:
    """
    Load filters from a JSON file.

    Args:
        path: File to read (UTF-8)

    Returns:
        The filters in file order

    Raises:
        FileNotFoundError / OSError: if the file cannot be read
        FilterDecodeError: if the content is not UTF-8 JSON or is malformed
        CompileError: if a regex entry does not compile
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FilterDecodeError(f"{file_path} is not valid UTF-8: {e}") from e
    filters = loads(text)
    logger.debug("Loaded %d filters from %s", len(filters), file_path)
    return filters


def save_filters(filters: Iterable[FilterLike], path: str | Path) -> None:
    """Write filters to a JSON file (UTF-8), replacing any existing content."""
    file_path = Path(path)
    sequence = FilterSequence(filters)
    file_path.write_text(dumps(sequence) + "\n", encoding="utf-8")
    logger.debug("Saved %d filters to %s", len(sequence), file_path)


__all__ = ["dumps", "from_data", "load_filters", "loads", "save_filters"]

from __future__ import annotations

import os
import sys
from pathlib import PurePath
from typing import Optional, Union

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def path_extension(path: PathInput) -> Optional[str]:
    """
    Return the extension component of a path's final segment.

    The extension is the text after the last dot of the file name. Names
    without a dot, names whose only dot is the leading one (".bashrc") and
    "..", have no extension and give None. A trailing dot gives an empty
    extension ("notes." -> "").

    Examples:
        >>> path_extension("src/lib.rs")
        'rs'
        >>> path_extension("archive.tar.gz")
        'gz'
        >>> path_extension(".gitignore") is None
        True
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        raw = raw.decode(sys.getfilesystemencoding(), "surrogateescape")
    name = PurePath(raw).name
    if not name or name == "..":
        return None
    idx = name.rfind(".")
    if idx <= 0:
        return None
    return name[idx + 1:]


def path_text(path: PathInput) -> Optional[str]:
    """
    Return the path as text, or None when it is not valid UTF-8.

    Str paths carrying surrogate escapes (undecodable bytes from the OS) and
    bytes paths that fail strict UTF-8 decoding have no lossless text form.
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return raw


__all__ = ["PathInput", "path_extension", "path_text"]

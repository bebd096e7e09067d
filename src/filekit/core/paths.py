from __future__ import annotations

"""
Path Operations.

Pure string-level manipulation of paths: joining, extension classification
and decomposition into segments. Nothing here touches the filesystem.
"""

import os
from typing import Iterable, List

from filekit.domain.constants import DEFAULT_SOURCE_EXTENSIONS
from filekit.domain.handle import FileHandle, PathLike

# Separators recognized when splitting a path into segments.
_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def join(base: PathLike, segment: str) -> FileHandle:
    """
    Build the handle for ``segment`` located under ``base``.

    No validation is made that the result exists.

    Args:
        base: Parent path.
        segment: Child path segment (may itself contain separators). It is
            always placed under ``base``, even if it starts with a separator.

    Returns:
        FileHandle: The joined path.
    """
    # A leading separator would make os.path.join discard the base.
    return FileHandle(os.path.join(os.fspath(base), segment.lstrip("".join(_SEPARATORS))))


def has_extension(path: PathLike, ext: str) -> bool:
    """
    Case-insensitive extension match against the file name only.

    Args:
        path: Path to classify.
        ext: Extension, with or without the leading dot.

    Returns:
        bool: True if the file name ends with the extension.
    """
    if not ext:
        return False
    suffix = ext if ext.startswith(".") else f".{ext}"
    name = os.path.basename(os.fspath(path))
    return name.lower().endswith(suffix.lower())


def is_source_file(path: PathLike, extensions: Iterable[str] = DEFAULT_SOURCE_EXTENSIONS) -> bool:
    """Check whether the file name carries any of the given source extensions."""
    return any(has_extension(path, ext) for ext in extensions)


def segments(path: PathLike) -> List[str]:
    """
    Split a path into its components.

    Empty segments (from leading, trailing or doubled separators) and
    current-directory ``"."`` segments are dropped. ``".."`` and symlinks
    are kept as they are.

    Args:
        path: Path to decompose.

    Returns:
        List[str]: Ordered path components.
    """
    raw = os.fspath(path)
    for sep in _SEPARATORS[1:]:
        raw = raw.replace(sep, _SEPARATORS[0])
    return [p for p in raw.split(_SEPARATORS[0]) if p not in ("", ".")]

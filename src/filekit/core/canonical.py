from __future__ import annotations

"""
Canonical Path Resolution.

Resolves symlinks and relative components. Resolution can fail on some
platforms for perfectly valid paths (network shares, symlinked temp roots),
so failures degrade to the absolute form instead of propagating.
"""

import logging
import os

from filekit.domain.handle import FileHandle, PathLike

logger = logging.getLogger(__name__)


def canonicalize(path: PathLike) -> FileHandle:
    """
    Return the canonical form of ``path``, falling back to its absolute form.

    Args:
        path: Path to resolve.

    Returns:
        FileHandle: Canonical path, or the absolute path if resolution failed.
    """
    raw = os.fspath(path)
    try:
        return FileHandle(os.path.realpath(raw))
    except (OSError, ValueError, RuntimeError) as e:
        logger.debug(f"Canonical resolution failed for '{raw}', using absolute path: {e}")
        return FileHandle(os.path.abspath(raw))

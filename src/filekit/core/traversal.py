from __future__ import annotations

"""
Breadth-First Filesystem Traversal.

Enumerates a root path and all of its descendants, parents always before
children. Because every entry appears strictly after its ancestors, the
reversed sequence is a valid post-order (children first) deletion order,
which is what scoped temp-directory cleanup relies on.
"""

import logging
import os
from collections import deque
from typing import Deque, Iterator, List, Set

from filekit.domain.handle import FileHandle, PathLike

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tree(root: PathLike, follow_symlinks: bool = False) -> Iterator[FileHandle]:
    """
    Lazily yield ``root`` followed by its descendants in breadth-first order.

    Plain files and missing paths yield only the root itself. Children of a
    directory are yielded sorted by name.

    Symlinked directories are yielded but not descended into unless
    ``follow_symlinks`` is set. When following, each directory is expanded
    at most once (keyed by its real path) so link cycles terminate.

    Args:
        root: Path to enumerate.
        follow_symlinks: Descend into symlinked directories.

    Yields:
        FileHandle: The root, then each descendant.
    """
    start = FileHandle(root)
    yield start

    queue: Deque[FileHandle] = deque([start])
    seen: Set[str] = set()

    while queue:
        current = queue.popleft()
        if not _should_expand(current, follow_symlinks, seen, is_root=current is start):
            continue

        try:
            names = sorted(os.listdir(current.path))
        except OSError as e:
            logger.debug(f"Skipping unreadable directory '{current}': {e}")
            continue

        for name in names:
            child = current / name
            yield child
            queue.append(child)


def tree_list(root: PathLike, follow_symlinks: bool = False) -> List[FileHandle]:
    """Eager form of :func:`tree`."""
    return list(tree(root, follow_symlinks=follow_symlinks))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _should_expand(node: FileHandle, follow_symlinks: bool, seen: Set[str], is_root: bool) -> bool:
    """Decide whether the children of ``node`` should be enumerated."""
    if not os.path.isdir(node.path):
        return False

    # The root is always expanded, even when it is itself a link.
    if os.path.islink(node.path) and not (follow_symlinks or is_root):
        return False

    key = os.path.realpath(node.path) if follow_symlinks else node.path
    if key in seen:
        logger.debug(f"Directory already visited, not expanding again: '{node}'")
        return False
    seen.add(key)
    return True

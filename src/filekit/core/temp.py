from __future__ import annotations

"""
Scoped Temporary Resources.

Creates a temporary file or directory, hands it to a block of code and
removes it on every exit path from that block, including an error raised
inside it. Directories are removed with their whole subtree, children
before parents, by walking the breadth-first traversal in reverse.

Cleanup never masks an error already propagating out of the block; such
cleanup problems are logged instead. When the block succeeded, a cleanup
problem is raised as ``CleanupFailure``.

WARNING: do not create symbolic links inside a temporary directory that
point outside of it. Links are removed rather than followed, but tools
run by the caller inside the directory may not be as careful.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from filekit.core.canonical import canonicalize
from filekit.core.traversal import tree_list
from filekit.domain.constants import TEMP_DIR_PREFIX, TEMP_FILE_PREFIX, TEMP_FILE_SUFFIX
from filekit.domain.errors import CleanupFailure, ResourceCreationFailure
from filekit.domain.handle import FileHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (path, error) pairs collected while removing a resource.
_Failures = List[Tuple[str, OSError]]

# -----------------------------------------------------------------------------
# CONTEXT MANAGERS
# -----------------------------------------------------------------------------

@contextmanager
def temp_directory(
        prefix: str = TEMP_DIR_PREFIX,
        suffix: str = "",
        dir: Optional[str] = None,
) -> Iterator[FileHandle]:
    """
    Provide a fresh, canonicalized temporary directory for the ``with`` block.

    Args:
        prefix: Directory name prefix.
        suffix: Directory name suffix.
        dir: Parent location; the system temp directory when None.

    Yields:
        FileHandle: The created directory.

    Raises:
        ResourceCreationFailure: If the directory cannot be created. The
            block is not entered.
        CleanupFailure: If the block succeeded but part of the tree could
            not be removed.
    """
    try:
        raw = tempfile.mkdtemp(prefix=prefix, suffix=suffix, dir=dir)
    except OSError as e:
        raise ResourceCreationFailure.wrap(e, dir or tempfile.gettempdir()) from e

    root = canonicalize(raw)
    logger.debug(f"Created temporary directory '{root}'")

    try:
        yield root
    except BaseException:
        _release(root, _remove_tree, propagating=True)
        raise
    _release(root, _remove_tree, propagating=False)


@contextmanager
def temp_file(
        prefix: str = TEMP_FILE_PREFIX,
        suffix: str = TEMP_FILE_SUFFIX,
        dir: Optional[str] = None,
) -> Iterator[FileHandle]:
    """
    Provide a fresh, empty, canonicalized temporary file for the ``with`` block.

    Raises:
        ResourceCreationFailure: If the file cannot be created.
        CleanupFailure: If the block succeeded but the file could not be removed.
    """
    try:
        fd, raw = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    except OSError as e:
        raise ResourceCreationFailure.wrap(e, dir or tempfile.gettempdir()) from e
    os.close(fd)

    handle = canonicalize(raw)
    logger.debug(f"Created temporary file '{handle}'")

    try:
        yield handle
    except BaseException:
        _release(handle, _remove_file, propagating=True)
        raise
    _release(handle, _remove_file, propagating=False)

# -----------------------------------------------------------------------------
# CALLABLE FORMS
# -----------------------------------------------------------------------------

def with_temp_directory(body: Callable[[FileHandle], T]) -> T:
    """
    Run ``body`` with a temporary directory and return its result.

    The directory and everything in it is removed once ``body`` returns or
    raises; the outcome of ``body`` is then propagated.
    """
    with temp_directory() as root:
        return body(root)


def with_temp_file(body: Callable[[FileHandle], T]) -> T:
    """Run ``body`` with a temporary file and return its result."""
    with temp_file() as handle:
        return body(handle)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _release(
        handle: FileHandle,
        remover: Callable[[FileHandle], _Failures],
        propagating: bool,
) -> None:
    """Remove a scoped resource and report what could not be removed."""
    failures = remover(handle)
    if not failures:
        logger.debug(f"Removed temporary resource '{handle}'")
        return

    if propagating:
        for path, err in failures:
            logger.warning(f"Temporary resource cleanup failed for '{path}': {err}")
        return

    raise CleanupFailure(handle.path, failures)


def _remove_tree(root: FileHandle) -> _Failures:
    """Delete ``root`` and its subtree in reverse breadth-first order."""
    failures: _Failures = []
    for entry in reversed(tree_list(root)):
        try:
            if os.path.isdir(entry.path) and not os.path.islink(entry.path):
                os.rmdir(entry.path)
            else:
                os.unlink(entry.path)
        except FileNotFoundError:
            continue
        except OSError as e:
            failures.append((entry.path, e))
    return failures


def _remove_file(handle: FileHandle) -> _Failures:
    try:
        os.unlink(handle.path)
    except FileNotFoundError:
        pass
    except OSError as e:
        return [(handle.path, e)]
    return []

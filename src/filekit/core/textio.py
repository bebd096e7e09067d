from __future__ import annotations

"""
Whole-File Text I/O.

Reads and writes entire files as a list of lines or a single string under an
explicit character encoding. The encoding always comes from the call site;
``DEFAULT_ENCODING`` (the platform preference) is used when it is omitted.

Low-level failures are classified into ``ReadFailure`` / ``WriteFailure`` /
``ResourceCreationFailure``, all of which remain ``OSError`` instances.
"""

import errno
import logging
import os
from typing import BinaryIO, Iterable, List

from filekit.domain.constants import DEFAULT_ENCODING, LINE_TERMINATOR
from filekit.domain.errors import ReadFailure, ResourceCreationFailure, WriteFailure
from filekit.domain.handle import PathLike

logger = logging.getLogger(__name__)

# Errors raised by open()/read()/write() that map onto a failure kind.
# LookupError covers an unknown encoding name.
_IO_ERRORS = (OSError, UnicodeError, LookupError)

# -----------------------------------------------------------------------------
# READ OPERATIONS
# -----------------------------------------------------------------------------

def read_string(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the whole file into a string, without newline translation.

    Args:
        path: File to read.
        encoding: Character encoding of the file.

    Returns:
        str: File contents.

    Raises:
        ReadFailure: If the file is missing, unreadable or invalid in ``encoding``.
    """
    raw = os.fspath(path)
    try:
        with open(raw, "r", encoding=encoding, newline="") as f:
            return f.read()
    except _IO_ERRORS as e:
        raise ReadFailure.wrap(e, raw) from e


def read_lines(path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """
    Read the whole file and split it into lines.

    ``\\n``, ``\\r\\n`` and ``\\r`` are all recognized as terminators and are
    stripped. A final terminator does not produce a trailing empty line.

    Args:
        path: File to read.
        encoding: Character encoding of the file.

    Returns:
        List[str]: Lines in file order.

    Raises:
        ReadFailure: If the file is missing, unreadable or invalid in ``encoding``.
    """
    raw = os.fspath(path)
    try:
        # Universal newline mode folds every terminator into "\n".
        with open(raw, "r", encoding=encoding, newline=None) as f:
            text = f.read()
    except _IO_ERRORS as e:
        raise ReadFailure.wrap(e, raw) from e

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines

# -----------------------------------------------------------------------------
# WRITE OPERATIONS
# -----------------------------------------------------------------------------

def write_string(path: PathLike, contents: str, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Overwrite the file with ``contents``, creating it if absent.

    Raises:
        WriteFailure: If the file cannot be written or encoded.
    """
    raw = os.fspath(path)
    try:
        with open(raw, "w", encoding=encoding, newline="") as f:
            f.write(contents)
    except _IO_ERRORS as e:
        raise WriteFailure.wrap(e, raw) from e


def write_lines(path: PathLike, lines: Iterable[str], encoding: str = DEFAULT_ENCODING) -> None:
    """
    Overwrite the file with each line followed by a line terminator.

    An empty ``lines`` produces an empty file.

    Args:
        path: File to write, created if absent.
        lines: Lines to write, without terminators.
        encoding: Character encoding to write with.

    Raises:
        WriteFailure: If the file cannot be written or encoded.
    """
    write_string(path, "".join(f"{line}{LINE_TERMINATOR}" for line in lines), encoding)


def open_output(path: PathLike) -> BinaryIO:
    """
    Open a binary output stream on the file, truncating it.

    The caller owns the returned stream and must close it.

    Raises:
        WriteFailure: If the file cannot be opened for writing.
    """
    raw = os.fspath(path)
    try:
        return open(raw, "wb")
    except OSError as e:
        raise WriteFailure.wrap(e, raw) from e

# -----------------------------------------------------------------------------
# CREATION
# -----------------------------------------------------------------------------

def create_with_parents(path: PathLike) -> None:
    """
    Create every missing parent directory, then an empty file at ``path``.

    An existing regular file is left untouched.

    Args:
        path: File to create.

    Raises:
        ResourceCreationFailure: If a parent component exists as a
            non-directory, a directory already occupies ``path``, or any
            creation step is refused by the filesystem.
    """
    raw = os.fspath(path)
    parent = os.path.dirname(os.path.abspath(raw))

    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        if os.path.isdir(raw):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), raw)
        with open(raw, "xb"):
            pass
        logger.debug(f"Created empty file '{raw}'")
    except FileExistsError as e:
        # makedirs reports a file squatting on a parent component this way too.
        if not os.path.isfile(raw):
            raise ResourceCreationFailure.wrap(e, raw) from e
    except OSError as e:
        raise ResourceCreationFailure.wrap(e, raw) from e

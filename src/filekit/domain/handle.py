from __future__ import annotations

"""
File Handle Value Type.

A ``FileHandle`` is a reference to a filesystem path, never an open resource.
It holds the path string and nothing else: no contents or metadata are cached,
so every operation re-resolves the path against the filesystem. Handles are
immutable; joining produces a new handle.

The filesystem operations are implemented as free functions in ``filekit.core``
and exposed here as methods for call-site convenience.
"""

import os
from typing import BinaryIO, Iterable, Iterator, List, Union

from filekit.domain.constants import (
    CLASSFILE_EXTENSION,
    DEFAULT_ENCODING,
    DEFAULT_SOURCE_EXTENSIONS,
    JAVA_EXTENSION,
    PYTHON_EXTENSION,
    SCALA_EXTENSION,
)

# Anything accepted where a path is expected.
PathLike = Union[str, os.PathLike]


class FileHandle:
    """
    Immutable reference to a filesystem path.

    Attributes:
        path: The path string exactly as constructed (absolute or relative).
    """

    __slots__ = ("_path",)

    def __init__(self, path: PathLike) -> None:
        object.__setattr__(self, "_path", os.fspath(path))

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("FileHandle is immutable")

    def __reduce__(self):
        # Rebuild through __init__; the default slot restore uses setattr.
        return (FileHandle, (self._path,))

    # -------------------------------------------------------------------------
    # VALUE SEMANTICS
    # -------------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        """Final path component, without any directory part."""
        return os.path.basename(self._path.rstrip(os.sep) or self._path)

    def __fspath__(self) -> str:
        return self._path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"FileHandle({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileHandle):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def __truediv__(self, segment: str) -> "FileHandle":
        return self.join(segment)

    # -------------------------------------------------------------------------
    # PATH OPERATIONS
    # -------------------------------------------------------------------------

    def join(self, segment: str) -> "FileHandle":
        from filekit.core.paths import join
        return join(self, segment)

    def has_extension(self, ext: str) -> bool:
        from filekit.core.paths import has_extension
        return has_extension(self, ext)

    def is_source_file(self, extensions: Iterable[str] = DEFAULT_SOURCE_EXTENSIONS) -> bool:
        from filekit.core.paths import is_source_file
        return is_source_file(self, extensions)

    def is_scala(self) -> bool:
        return self.has_extension(SCALA_EXTENSION)

    def is_java(self) -> bool:
        return self.has_extension(JAVA_EXTENSION)

    def is_classfile(self) -> bool:
        return self.has_extension(CLASSFILE_EXTENSION)

    def is_python(self) -> bool:
        return self.has_extension(PYTHON_EXTENSION)

    def parts(self) -> List[str]:
        from filekit.core.paths import segments
        return segments(self)

    def canon(self) -> "FileHandle":
        from filekit.core.canonical import canonicalize
        return canonicalize(self)

    def exists(self) -> bool:
        return os.path.exists(self._path)

    def is_dir(self) -> bool:
        return os.path.isdir(self._path)

    def is_file(self) -> bool:
        return os.path.isfile(self._path)

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def tree(self, follow_symlinks: bool = False) -> Iterator["FileHandle"]:
        """
        Return this handle followed by its descendants in breadth-first order.

        A fresh iterator is produced on every call.
        """
        from filekit.core.traversal import tree
        return tree(self, follow_symlinks=follow_symlinks)

    # -------------------------------------------------------------------------
    # TEXT I/O
    # -------------------------------------------------------------------------

    def read_lines(self, encoding: str = DEFAULT_ENCODING) -> List[str]:
        from filekit.core.textio import read_lines
        return read_lines(self, encoding)

    def write_lines(self, lines: Iterable[str], encoding: str = DEFAULT_ENCODING) -> None:
        from filekit.core.textio import write_lines
        write_lines(self, lines, encoding)

    def read_string(self, encoding: str = DEFAULT_ENCODING) -> str:
        from filekit.core.textio import read_string
        return read_string(self, encoding)

    def write_string(self, contents: str, encoding: str = DEFAULT_ENCODING) -> None:
        from filekit.core.textio import write_string
        write_string(self, contents, encoding)

    def create_with_parents(self) -> None:
        from filekit.core.textio import create_with_parents
        create_with_parents(self)

    def open_output(self) -> BinaryIO:
        from filekit.core.textio import open_output
        return open_output(self)

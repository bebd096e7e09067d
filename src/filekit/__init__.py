from __future__ import annotations

"""
filekit: convenience operations on filesystem paths.

Path joining and classification, scoped temporary files and directories,
breadth-first traversal, canonical resolution with fallback and whole-file
text I/O.
"""

from filekit.core.canonical import canonicalize
from filekit.core.paths import has_extension, is_source_file, join, segments
from filekit.core.temp import temp_directory, temp_file, with_temp_directory, with_temp_file
from filekit.core.textio import (
    create_with_parents,
    open_output,
    read_lines,
    read_string,
    write_lines,
    write_string,
)
from filekit.core.traversal import tree, tree_list
from filekit.domain.constants import DEFAULT_ENCODING
from filekit.domain.errors import (
    CleanupFailure,
    FileKitError,
    ReadFailure,
    ResourceCreationFailure,
    WriteFailure,
)
from filekit.domain.handle import FileHandle

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ENCODING",
    "CleanupFailure",
    "FileHandle",
    "FileKitError",
    "ReadFailure",
    "ResourceCreationFailure",
    "WriteFailure",
    "canonicalize",
    "create_with_parents",
    "has_extension",
    "is_source_file",
    "join",
    "open_output",
    "read_lines",
    "read_string",
    "segments",
    "temp_directory",
    "temp_file",
    "tree",
    "tree_list",
    "with_temp_directory",
    "with_temp_file",
    "write_lines",
    "write_string",
]

from __future__ import annotations

"""
Domain Constants.

Centralizes the defaults shared by the path, temp-resource and text I/O
layers: the platform text encoding, the naming scheme for temporary
resources and the extension sets used for source classification.
"""

import locale
from typing import FrozenSet

# Platform default text encoding, used whenever a caller omits one.
DEFAULT_ENCODING: str = locale.getpreferredencoding(False)

LINE_TERMINATOR = "\n"

# -----------------------------------------------------------------------------
# TEMPORARY RESOURCES
# -----------------------------------------------------------------------------
TEMP_FILE_PREFIX = "filekit-"
TEMP_FILE_SUFFIX = ".tmp"
TEMP_DIR_PREFIX = "filekit-"

# -----------------------------------------------------------------------------
# EXTENSION CLASSIFICATION
# -----------------------------------------------------------------------------
SCALA_EXTENSION = ".scala"
JAVA_EXTENSION = ".java"
CLASSFILE_EXTENSION = ".class"
PYTHON_EXTENSION = ".py"

DEFAULT_SOURCE_EXTENSIONS: FrozenSet[str] = frozenset({
    SCALA_EXTENSION,
    JAVA_EXTENSION,
    PYTHON_EXTENSION,
    ".kt", ".kts",
    ".c", ".cpp", ".h", ".hpp",
    ".cs", ".go", ".rs",
    ".js", ".ts", ".jsx", ".tsx",
})

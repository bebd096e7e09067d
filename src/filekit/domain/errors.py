from __future__ import annotations

"""
Error Kinds.

Every failure surfaced by filekit is an ``OSError`` subclass so callers that
already guard filesystem calls with ``except OSError`` keep working. The
original exception is always chained and its errno / filename preserved.
"""

from typing import List, Optional, Tuple


class FileKitError(OSError):
    """Base class for every error raised by filekit."""

    @classmethod
    def wrap(cls, exc: BaseException, path: Optional[str] = None) -> "FileKitError":
        """
        Build an error of this kind from a lower-level exception.

        Args:
            exc: The OSError or UnicodeError that caused the failure.
            path: Path the operation was acting on.

        Returns:
            FileKitError: The classified error, ready to be raised ``from exc``.
        """
        if isinstance(exc, OSError) and exc.errno is not None:
            return cls(exc.errno, exc.strerror, path or exc.filename)
        return cls(None, str(exc), path)


class ResourceCreationFailure(FileKitError):
    """A temporary resource or explicit file could not be created."""


class ReadFailure(FileKitError):
    """The target file is missing, unreadable or not valid in the encoding."""


class WriteFailure(FileKitError):
    """The target file is unwritable or its parent path is invalid."""


class CleanupFailure(FileKitError):
    """
    Removal of a scoped temporary resource failed after a successful body.

    Attributes:
        failures: ``(path, error)`` pairs for every entry left behind.
    """

    def __init__(self, root: str, failures: List[Tuple[str, OSError]]) -> None:
        first = failures[0][1] if failures else None
        errno_ = first.errno if first is not None else None
        detail = f"{len(failures)} path(s) could not be removed"
        if errno_ is not None:
            super().__init__(errno_, detail, root)
        else:
            super().__init__(detail)
            self.filename = root
        self.failures = failures

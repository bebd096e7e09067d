from __future__ import annotations

"""
Unit tests for Whole-File Text I/O.

Verifies line and string round-trips, encoding handling, terminator
recognition, failure classification and parent-directory creation.
"""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from filekit.core.textio import (
    create_with_parents,
    open_output,
    read_lines,
    read_string,
    write_lines,
    write_string,
)
from filekit.domain.errors import ReadFailure, ResourceCreationFailure, WriteFailure


# -----------------------------------------------------------------------------
# LINES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("lines", [
    ["alpha", "beta", "gamma"],
    ["", "middle", ""],
    ["single"],
    [],
    ["ünïcødé", "日本語"],
])
def test_write_then_read_lines_round_trip(tmp_path: Path, lines) -> None:
    """TC-01: Verify read_lines reconstructs exactly what write_lines wrote."""
    f = tmp_path / "lines.txt"

    write_lines(str(f), lines, encoding="utf-8")

    assert read_lines(str(f), encoding="utf-8") == lines


def test_write_lines_terminates_every_line(tmp_path: Path) -> None:
    """TC-02: Verify each line, including the last, ends with a newline."""
    f = tmp_path / "out.txt"
    write_lines(str(f), ["a", "b"], encoding="utf-8")
    assert f.read_bytes() == b"a\nb\n"


def test_read_lines_recognizes_all_terminators(tmp_path: Path) -> None:
    """TC-03: Verify \\n, \\r\\n and \\r all split lines."""
    f = tmp_path / "mixed.txt"
    f.write_bytes(b"one\r\ntwo\rthree\nfour")
    assert read_lines(str(f), encoding="ascii") == ["one", "two", "three", "four"]


def test_write_lines_accepts_generator(tmp_path: Path) -> None:
    """TC-04: Verify any iterable of strings is accepted."""
    f = tmp_path / "gen.txt"
    write_lines(str(f), (str(i) for i in range(3)), encoding="utf-8")
    assert read_lines(str(f), encoding="utf-8") == ["0", "1", "2"]


# -----------------------------------------------------------------------------
# STRINGS
# -----------------------------------------------------------------------------

def test_write_then_read_string_preserves_content(tmp_path: Path) -> None:
    """TC-05: Verify no newline translation happens on either side."""
    f = tmp_path / "raw.txt"
    contents = "first\r\nsecond\nno-terminator"

    write_string(str(f), contents, encoding="utf-8")

    assert read_string(str(f), encoding="utf-8") == contents


def test_write_string_overwrites(tmp_path: Path) -> None:
    """TC-06: Verify existing content is replaced."""
    f = tmp_path / "over.txt"
    f.write_text("old content that is longer", encoding="utf-8")

    write_string(str(f), "new", encoding="utf-8")

    assert f.read_text(encoding="utf-8") == "new"


def test_encoding_is_honored(tmp_path: Path) -> None:
    """TC-07: Verify bytes on disk follow the requested encoding."""
    f = tmp_path / "latin.txt"
    write_string(str(f), "café", encoding="latin-1")

    assert f.read_bytes() == "café".encode("latin-1")
    assert read_string(str(f), encoding="latin-1") == "café"


# -----------------------------------------------------------------------------
# FAILURES
# -----------------------------------------------------------------------------

def test_read_missing_file_raises_read_failure(tmp_path: Path) -> None:
    """TC-08: Verify a missing file is a ReadFailure carrying ENOENT."""
    missing = tmp_path / "missing.txt"

    with pytest.raises(ReadFailure) as exc_info:
        read_string(str(missing))

    assert exc_info.value.errno == errno.ENOENT
    assert exc_info.value.filename == str(missing)
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_read_invalid_encoding_raises_read_failure(tmp_path: Path) -> None:
    """TC-09: Verify undecodable content is a ReadFailure."""
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(ReadFailure) as exc_info:
        read_lines(str(f), encoding="utf-8")

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert exc_info.value.filename == str(f)


def test_unknown_encoding_raises_read_failure(tmp_path: Path) -> None:
    """TC-10: Verify an unknown encoding name is classified, not leaked."""
    f = tmp_path / "x.txt"
    f.write_text("x", encoding="utf-8")

    with pytest.raises(ReadFailure):
        read_string(str(f), encoding="no-such-codec")


def test_write_unencodable_raises_write_failure(tmp_path: Path) -> None:
    """TC-11: Verify characters outside the encoding are a WriteFailure."""
    f = tmp_path / "ascii.txt"
    with pytest.raises(WriteFailure):
        write_string(str(f), "naïve", encoding="ascii")


def test_write_into_missing_parent_raises_write_failure(tmp_path: Path) -> None:
    """TC-12: Verify a nonexistent parent directory is a WriteFailure."""
    f = tmp_path / "no" / "such" / "dir.txt"
    with pytest.raises(WriteFailure) as exc_info:
        write_lines(str(f), ["x"])
    assert exc_info.value.errno == errno.ENOENT


# -----------------------------------------------------------------------------
# CREATION
# -----------------------------------------------------------------------------

def test_create_with_parents_builds_hierarchy(tmp_path: Path) -> None:
    """TC-13: Verify missing parents and an empty file are created."""
    target = tmp_path / "deep" / "nested" / "file.txt"

    create_with_parents(str(target))

    assert target.is_file()
    assert target.read_bytes() == b""


def test_create_with_parents_leaves_existing_file(tmp_path: Path) -> None:
    """TC-14: Verify an existing file is not truncated."""
    target = tmp_path / "keep.txt"
    target.write_text("data", encoding="utf-8")

    create_with_parents(str(target))

    assert target.read_text(encoding="utf-8") == "data"


def test_create_with_parents_fails_when_parent_is_file(tmp_path: Path) -> None:
    """TC-15: Verify a file squatting on a parent component fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ResourceCreationFailure):
        create_with_parents(str(blocker / "child.txt"))


def test_create_with_parents_fails_on_directory(tmp_path: Path) -> None:
    """TC-16: Verify a directory already at the target path fails."""
    with pytest.raises(ResourceCreationFailure):
        create_with_parents(str(tmp_path))


def test_create_with_parents_propagates_permission_error(tmp_path: Path) -> None:
    """TC-17: Verify refused creation is classified with its errno."""
    denied = PermissionError(errno.EACCES, "Permission denied")
    with patch("filekit.core.textio.os.makedirs", side_effect=denied):
        with pytest.raises(ResourceCreationFailure) as exc_info:
            create_with_parents(str(tmp_path / "x" / "y.txt"))

    assert exc_info.value.errno == errno.EACCES


# -----------------------------------------------------------------------------
# OUTPUT STREAM
# -----------------------------------------------------------------------------

def test_open_output_writes_bytes(tmp_path: Path) -> None:
    """TC-18: Verify the stream truncates and writes raw bytes."""
    f = tmp_path / "bin.dat"
    f.write_bytes(b"previous")

    with open_output(str(f)) as out:
        out.write(b"\x00\x01")

    assert f.read_bytes() == b"\x00\x01"


def test_open_output_failure(tmp_path: Path) -> None:
    """TC-19: Verify an unopenable target raises WriteFailure."""
    with pytest.raises(WriteFailure):
        open_output(os.path.join(str(tmp_path), "missing", "bin.dat"))


def test_decode_failure_message_names_cause(tmp_path: Path) -> None:
    """TC-20: Verify the rendered ReadFailure keeps the decoder's explanation."""
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff")

    with pytest.raises(ReadFailure) as exc_info:
        read_string(str(f), encoding="utf-8")

    assert "invalid start byte" in str(exc_info.value)
    assert str(f) in str(exc_info.value)

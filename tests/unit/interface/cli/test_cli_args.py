from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Subcommand parsing.
2. Mapping of flags to configuration overrides.
3. In-process dispatch of each command.
"""

import json
import os
from pathlib import Path

from filekit.interface.cli.app import EXIT_FAILURE, EXIT_MISSING_PATH, EXIT_OK, main
from filekit.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def test_tree_flags_mapping() -> None:
    """Verify tree options are mapped to overrides."""
    args = parse_args(["--debug", "--encoding", "latin-1", "tree", "p", "--follow-symlinks", "--reverse"])

    overrides = args_to_overrides(args)

    assert args.command == "tree"
    assert args.reverse is True
    assert overrides == {"encoding": "latin-1", "follow_symlinks": True, "log_level": "DEBUG"}


def test_no_flags_no_overrides() -> None:
    """Verify unset options do not override configuration."""
    assert args_to_overrides(parse_args(["canon", "p"])) == {}


# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

def test_main_tree_json(sample_tree: Path, capsys) -> None:
    """Verify the tree command prints root first as JSON."""
    code = main(["tree", str(sample_tree), "--json"])

    out = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert out[0] == str(sample_tree)
    assert len(out) == 6


def test_main_tree_reverse(sample_tree: Path, capsys) -> None:
    """Verify --reverse prints the root last."""
    main(["tree", str(sample_tree), "--reverse"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == str(sample_tree)


def test_main_parts(capsys) -> None:
    """Verify the parts command drops empty and '.' segments."""
    path = os.sep.join(["", "a", ".", "", "b"])
    assert main(["parts", path]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["a", "b"]


def test_main_canon(tmp_path: Path, capsys) -> None:
    """Verify the canon command prints the resolved path."""
    assert main(["canon", str(tmp_path)]) == EXIT_OK
    assert capsys.readouterr().out.strip() == os.path.realpath(str(tmp_path))


def test_main_cat(tmp_path: Path, capsys) -> None:
    """Verify the cat command honors --encoding."""
    f = tmp_path / "f.txt"
    f.write_bytes("café\n".encode("latin-1"))

    assert main(["--encoding", "latin-1", "cat", str(f)]) == EXIT_OK
    assert capsys.readouterr().out == "café\n"


def test_main_cat_decode_failure(tmp_path: Path, capsys) -> None:
    """Verify operation failures map to exit code 1."""
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe")

    assert main(["--encoding", "utf-8", "cat", str(f)]) == EXIT_FAILURE
    assert "ERROR" in capsys.readouterr().err


def test_main_missing_path(tmp_path: Path, capsys) -> None:
    """Verify a nonexistent input maps to exit code 2."""
    assert main(["tree", str(tmp_path / "missing")]) == EXIT_MISSING_PATH
    assert "does not exist" in capsys.readouterr().err


def test_main_dump_config(capsys) -> None:
    """Verify --dump-config prints the effective configuration."""
    assert main(["--encoding", "ascii", "--dump-config"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out)["encoding"] == "ascii"


def test_main_cat_decode_failure_reports_reason(tmp_path: Path, capsys) -> None:
    """Verify the error line explains why decoding failed."""
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe")

    main(["--encoding", "utf-8", "cat", str(f)])

    assert "can't decode" in capsys.readouterr().err

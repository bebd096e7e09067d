from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Declares the ``filekit`` command line schema and translates a parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filekit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filekit",
        description="Inspect paths: traversal, canonical form, segments and contents.",
    )

    # --- Global options ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration overrides.",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Text encoding for file contents (platform default if omitted).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    # --- tree ---
    tree_p = sub.add_parser("tree", help="List a path and its descendants breadth-first.")
    tree_p.add_argument("path")
    tree_p.add_argument(
        "--reverse",
        action="store_true",
        help="Print in deletion order (children before parents).",
    )
    tree_p.add_argument(
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        default=None,
        help="Descend into symlinked directories.",
    )
    tree_p.add_argument("--json", dest="json_output", action="store_true")

    # --- canon ---
    canon_p = sub.add_parser("canon", help="Print the canonical form of a path.")
    canon_p.add_argument("path")

    # --- parts ---
    parts_p = sub.add_parser("parts", help="Print the segments of a path.")
    parts_p.add_argument("path")
    parts_p.add_argument("--json", dest="json_output", action="store_true")

    # --- cat ---
    cat_p = sub.add_parser("cat", help="Print the contents of a text file.")
    cat_p.add_argument("path")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the parsed namespace into configuration overrides.

    Only options the user actually supplied are returned.
    """
    overrides: Dict[str, Any] = {}

    if args.encoding:
        overrides["encoding"] = args.encoding
    if getattr(args, "follow_symlinks", None):
        overrides["follow_symlinks"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

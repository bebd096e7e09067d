from __future__ import annotations

"""
Command Line Interface Application Controller.

Bootstraps logging, resolves configuration (defaults, JSON file,
environment, command line), dispatches the chosen command and renders its
result on stdout.
"""

import json
import os
import sys
from typing import List, Optional

from filekit.config import FileKitConfig, load_config, merge_config
from filekit.core.canonical import canonicalize
from filekit.core.paths import segments
from filekit.core.textio import read_string
from filekit.core.traversal import tree_list
from filekit.domain.errors import FileKitError
from filekit.infra.logging import LoggingConfig, configure_logging, get_logger
from filekit.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_PATH = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    cfg = merge_config(load_config(args.config_path), cli_args.args_to_overrides(args))
    configure_logging(LoggingConfig.from_settings(cfg))
    logger.debug(f"Effective configuration: {cfg.to_dict()}")

    if args.dump_config:
        print(json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_MISSING_PATH

    # canon and parts also accept paths that do not exist
    if args.command in ("tree", "cat") and not os.path.lexists(args.path):
        print(f"ERROR: path does not exist: {args.path}", file=sys.stderr)
        return EXIT_MISSING_PATH

    try:
        return _dispatch(args, cfg)
    except FileKitError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _dispatch(args, cfg: FileKitConfig) -> int:
    if args.command == "tree":
        entries = tree_list(args.path, follow_symlinks=cfg.follow_symlinks)
        if args.reverse:
            entries.reverse()
        _emit([e.path for e in entries], args.json_output)

    elif args.command == "canon":
        print(canonicalize(args.path).path)

    elif args.command == "parts":
        _emit(segments(args.path), args.json_output)

    elif args.command == "cat":
        sys.stdout.write(read_string(args.path, cfg.encoding))

    return EXIT_OK


def _emit(items: List[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(items, ensure_ascii=False, indent=2))
        return
    for item in items:
        print(item)

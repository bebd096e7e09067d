from __future__ import annotations

"""
Runtime Configuration.

Resolves the settings used by the command line entry point: built-in
defaults, then an optional JSON file, then ``FILEKIT_*`` environment
variables. Library functions never consult this module; callers pass the
resolved values explicitly.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from filekit.domain.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

ENV_PREFIX = "FILEKIT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FileKitConfig:
    """
    Resolved settings.

    Attributes:
        encoding: Text encoding for read/write operations.
        follow_symlinks: Descend into symlinked directories when traversing.
        log_level: Logging level name.
        log_file: Optional rotating log file.
    """
    encoding: str = DEFAULT_ENCODING
    follow_symlinks: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

# -----------------------------------------------------------------------------
# LOADING
# -----------------------------------------------------------------------------

def load_config(
        path: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
) -> FileKitConfig:
    """
    Build the effective configuration.

    A missing or malformed file is reported and ignored rather than fatal.

    Args:
        path: Optional JSON file with overrides.
        env: Environment mapping; ``os.environ`` when None.

    Returns:
        FileKitConfig: The merged configuration.
    """
    cfg = FileKitConfig()

    if path:
        cfg = merge_config(cfg, _read_config_file(path))

    env_overrides = _env_overrides(os.environ if env is None else env)
    if env_overrides:
        cfg = merge_config(cfg, env_overrides)

    return cfg


def merge_config(base: FileKitConfig, overrides: Mapping[str, Any]) -> FileKitConfig:
    """
    Apply known, non-None overrides on top of ``base``.

    Unknown keys are logged and skipped.
    """
    known = {f.name for f in fields(FileKitConfig)}
    clean: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            logger.warning(f"Ignoring unknown configuration key: '{key}'")
            continue
        if value is not None:
            clean[key] = value
    return replace(base, **clean)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _read_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        logger.warning(f"Configuration file not found: '{path}'. Using defaults.")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read configuration file '{path}': {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Configuration file '{path}' is not a JSON object. Using defaults.")
        return {}

    if "follow_symlinks" in data:
        data["follow_symlinks"] = _parse_flag(data["follow_symlinks"])
    return data


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    """Collect ``FILEKIT_<FIELD>`` variables for every config field."""
    out: Dict[str, Any] = {}
    for f in fields(FileKitConfig):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None or raw == "":
            continue
        if f.name == "follow_symlinks":
            out[f.name] = _parse_flag(raw)
        else:
            out[f.name] = raw
    return out


def _parse_flag(value: Any) -> bool:
    """Interpret a boolean setting given as a JSON bool, number or string."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)

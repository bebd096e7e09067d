from __future__ import annotations

"""
Logging Configuration Model.

Derived from the application settings: only the level and the optional log
file vary per run. Record formats are fixed by the handler factories.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from filekit.config import FileKitConfig

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging subsystem settings.

    Attributes:
        level: Minimum severity name; unknown names mean INFO.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold before the log file rolls over.
        backup_count: Number of rolled-over files kept.
    """
    level: str = FileKitConfig.log_level
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = LOG_FILE_MAX_BYTES
    backup_count: int = LOG_FILE_BACKUPS

    @classmethod
    def from_settings(cls, settings: FileKitConfig, console: bool = True) -> "LoggingConfig":
        """Build the logging settings for a resolved ``FileKitConfig``."""
        return cls(level=settings.log_level, console=console, log_file=settings.log_file)

    @property
    def level_int(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO

from __future__ import annotations

"""
Logging Configuration Models.

Settings for the logging subsystem as the foldertree CLI uses it: a short
console format on stderr, which leaves stdout free for generated tree
text, and an optional rotating diagnostic file.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_LOG_FILE_NAME = "foldertree.log"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit records on stderr.
        log_file: Optional path of a rotating diagnostic file.
        max_bytes: Size of a log segment before rotation.
        backup_count: Rotated segments to keep.
        console_fmt: Terminal format; the level only, since the CLI prints
            its own result lines.
        file_fmt: File format, with timestamp and logger name so a scan can
            be traced module by module.
        datefmt: Timestamp format for file entries.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "foldertree %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """
        Build the configuration used by a command-line run.

        Args:
            debug: Lower the threshold to DEBUG (ignored rules, pruned
                directories, created entries).
            log_file: Extra file to mirror the records to.
        """
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file or None)

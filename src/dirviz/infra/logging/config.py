from __future__ import annotations

"""
Logging Settings.

Level names accepted by the CLI and the frozen settings object handed to
`configure_logging`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LEVEL_NAMES = tuple(_LEVEL_MAP)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Level name; unknown names resolve to INFO.
        console: Echo records on stderr (stdout carries the rendered tree).
        log_file: Rotating log file, or None for console only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled files kept next to the active one.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "dirviz: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, conf: Mapping[str, Any], *, console: bool = True) -> "LoggingConfig":
        """Build logging settings from a validated CLI configuration."""
        return cls(
            level=str(conf.get("log_level") or "INFO"),
            console=console,
            log_file=conf.get("log_file") or None,
        )

    @property
    def level_number(self) -> int:
        if not self.level:
            return logging.INFO
        return _LEVEL_MAP.get(str(self.level).strip().upper(), logging.INFO)

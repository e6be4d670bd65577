"""
Logging setup shared by the CLI and the GUI.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers still see the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "WARNING"
    DEFAULT_MAX_BYTES = 1024 * 1024  # 1 MB
    DEFAULT_BACKUP_COUNT = 3

    @staticmethod
    def resolve_level(log_level: Optional[str] = None) -> int:
        name = (log_level or os.getenv("LOG_LEVEL") or LoggingConfig.DEFAULT_LOG_LEVEL)
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")
        return level

    @staticmethod
    def setup_logging(
        log_level: Optional[str] = None,
        log_file: Optional[str | Path] = None,
        enable_console: bool = True,
        enable_colors: bool = True,
    ) -> None:
        """Configure the root logger. Safe to call more than once."""
        level = LoggingConfig.resolve_level(log_level)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        if enable_console and sys.stderr is not None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    "%(asctime)s - %(levelname)s - %(message)s",
                    datefmt="%H:%M:%S",
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.debug("Logging initialized at %s.", logging.getLevelName(level))

"""
Logger implementation for hashcorpus diagnostics.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig


class CorpusLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports output to stderr and ~/.hashcorpus/hashcorpus.log.
    """

    LOG_FILE_PATH = Path.home() / ".hashcorpus" / "hashcorpus.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "hashcorpus",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable rotating file output
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if file_enabled:
            self._setup_file_handler(formatter, log_level)

        # without a handler, stdlib falls back to printing warnings on stderr
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def from_config(cls, config: LoggingConfig) -> "CorpusLogger":
        """Build a logger from the [logging] settings section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
        )

    def _setup_file_handler(self, formatter: logging.Formatter, level: int) -> None:
        log_file = self.LOG_FILE_PATH
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """No-op logger for tests and library use without bootstrap."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

"""Centralized Logging Management for rfc822time

Hands out named loggers and, when asked to, installs console and file
handlers. Importing the library never installs handlers; applications (or
the command line front end) call configure().
"""

import logging
import logging.handlers
import re
import sys
from pathlib import Path
from typing import Dict, Optional

from .error_handler import ConfigurationError


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


def parse_size(size: str) -> int:
    """Convert a size such as 10MB to bytes."""
    m = re.fullmatch(r'(\d+)([KMG])B', size.strip().upper())
    if not m:
        raise ValueError(f'Invalid size: {size}')
    return int(m.group(1)) * 1024 ** ' KMG'.index(m.group(2))


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    CONSOLE_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
    FILE_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s'

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.loggers: Dict[str, logging.Logger] = {}
        self.handlers: Dict[str, logging.Handler] = {}
        self._initialized = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the specified name.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger instance
        """
        manager = cls()
        if name not in manager.loggers:
            manager.loggers[name] = logging.getLogger(name)
        return manager.loggers[name]

    def configure(self, config) -> None:
        """Install handlers on the root logger from a LoggingConfig.

        Handlers installed by an earlier call are replaced.

        Args:
            config: LoggingConfig section of the application configuration

        Raises:
            ConfigurationError: If the log file cannot be created
        """
        self.reset()
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        level = self._to_level(config.level)

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColoredFormatter(self.CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            root_logger.addHandler(console_handler)
            self.handlers['console'] = console_handler

        if config.file_path:
            log_file = Path(config.file_path)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=parse_size(config.max_file_size),
                    backupCount=config.backup_count
                )
            except OSError as e:
                self.reset()
                raise ConfigurationError(f"Cannot open log file {log_file}: {e}") from e
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(self.FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            root_logger.addHandler(file_handler)
            self.handlers['file'] = file_handler

    def set_log_level(self, level: str):
        """Set the console logging level.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = self._to_level(level)
        console_handler = self.handlers.get('console')
        if console_handler:
            console_handler.setLevel(numeric_level)

    def reset(self):
        """Remove every handler installed by configure()."""
        root_logger = logging.getLogger()
        for handler in self.handlers.values():
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    @staticmethod
    def _to_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level

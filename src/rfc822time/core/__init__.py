"""Core modules for rfc822time.

Configuration, error handling and logging shared by the parser and the
command line front end.
"""

from .config_manager import AppConfig, CLIConfig, ConfigManager, LoggingConfig
from .error_handler import (
    Rfc822TimeError,
    ConfigurationError,
    InputError,
    TokenDecodingError,
    ErrorHandler,
    ErrorSeverity
)
from .logging_manager import LoggingManager

__all__ = [
    "AppConfig",
    "CLIConfig",
    "ConfigManager",
    "LoggingConfig",
    "Rfc822TimeError",
    "ConfigurationError",
    "InputError",
    "TokenDecodingError",
    "ErrorHandler",
    "ErrorSeverity",
    "LoggingManager"
]

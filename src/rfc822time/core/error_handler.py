"""Error Handling for rfc822time

Exception hierarchy and a small handler that maps errors to log levels and
process exit codes for the command line front end.

Malformed timestamps are not errors: parse() reports them by returning None.
The exceptions here cover configuration problems, unreadable input and
violations of the parser's own invariants.
"""

import logging
import sys
import traceback
from enum import Enum
from typing import Callable, Dict, Optional, Type


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Rfc822TimeError(Exception):
    """Base exception class for rfc822time."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(Rfc822TimeError):
    """Error raised when configuration is invalid."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.HIGH):
        super().__init__(message, severity)


class InputError(Rfc822TimeError):
    """Error raised when stamps cannot be read from their source."""
    pass


class TokenDecodingError(Rfc822TimeError):
    """A token reached the decoder that the grammar should have rejected."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.CRITICAL):
        super().__init__(message, severity)


EXIT_CODES = {
    ErrorSeverity.LOW: 0,
    ErrorSeverity.MEDIUM: 1,
    ErrorSeverity.HIGH: 2,
    ErrorSeverity.CRITICAL: 3,
}


class ErrorHandler:
    """Central error handler for the command line front end."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.error_callbacks: Dict[Type[Exception], Callable[[Exception], None]] = {}

    def install(self):
        """Route unhandled exceptions through this handler."""
        sys.excepthook = self._handle_unhandled_exception

    def register_error_callback(self, exception_type: Type[Exception],
                                callback: Callable[[Exception], None]):
        """Register a callback for a specific exception type.

        Args:
            exception_type: The exception type to handle
            callback: Function to call when this exception occurs
        """
        self.error_callbacks[exception_type] = callback

    def handle_error(self, error: Exception, context: Optional[str] = None) -> int:
        """Log an error at the level matching its severity.

        Args:
            error: The exception that occurred
            context: Where the error occurred

        Returns:
            Process exit code for the error
        """
        severity = self.get_error_severity(error)
        message = self._format_error_message(error, context)
        self._log_error(message, severity)

        callback = self.error_callbacks.get(type(error))
        if callback:
            callback(error)

        return EXIT_CODES[severity]

    def get_error_severity(self, error: Exception) -> ErrorSeverity:
        """Determine error severity based on exception type."""
        if isinstance(error, Rfc822TimeError):
            return error.severity

        severity_map = {
            FileNotFoundError: ErrorSeverity.MEDIUM,
            IsADirectoryError: ErrorSeverity.MEDIUM,
            PermissionError: ErrorSeverity.HIGH,
            UnicodeDecodeError: ErrorSeverity.MEDIUM,
            MemoryError: ErrorSeverity.CRITICAL,
            KeyboardInterrupt: ErrorSeverity.LOW,
        }

        return severity_map.get(type(error), ErrorSeverity.HIGH)

    def _format_error_message(self, error: Exception, context: Optional[str] = None) -> str:
        message = str(error)
        if context:
            message = f"{context}: {message}"
        return message

    def _log_error(self, message: str, severity: ErrorSeverity):
        log_methods = {
            ErrorSeverity.LOW: self.logger.info,
            ErrorSeverity.MEDIUM: self.logger.warning,
            ErrorSeverity.HIGH: self.logger.error,
            ErrorSeverity.CRITICAL: self.logger.critical,
        }

        # Tracebacks only for errors that point at a bug
        log_methods[severity](message, exc_info=severity is ErrorSeverity.CRITICAL)

    def _handle_unhandled_exception(self, exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        error_message = ''.join(traceback.format_exception(
            exc_type, exc_value, exc_traceback
        ))
        self.logger.critical(f"Unhandled exception: {error_message}")

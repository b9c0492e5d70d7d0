"""
Custom exceptions for the TCP connection state machine.
"""
from typing import Iterable, Optional


class TcpStateError(Exception):
    """Base exception for tcpstate errors."""

    pass


class UnknownOperationError(TcpStateError, ValueError):
    """Raised when an operation name cannot be parsed."""

    def __init__(self, name: str, choices: Optional[Iterable[str]] = None):
        self.name = name
        self.choices = list(choices or [])
        message = f"Unknown operation: {name!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)


class ConfigurationError(TcpStateError):
    """Raised when settings cannot be loaded or validated."""

    def __init__(self, message="Invalid configuration", original_exception=None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)

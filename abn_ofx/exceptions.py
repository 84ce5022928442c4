"""
Exceptions raised while converting a statement.
"""
from typing import Any, Dict, Optional


class ConversionError(Exception):
    """Base exception for all statement conversion errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UsageError(ConversionError):
    """Raised when the converter is invoked without an input path."""
    pass


class InputReadError(ConversionError):
    """Raised when the input statement cannot be read or parsed."""
    pass


class OutputWriteError(ConversionError):
    """Raised when the OFX file cannot be written."""
    pass

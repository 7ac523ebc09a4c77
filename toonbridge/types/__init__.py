"""
toonbridge type definitions.

This module exports the record/result types and the error hierarchy.
"""

# Core types
from .core import (
    ConversionMode,
    DecodeResult,
    DecodeWarning,
    Record,
    ToonHeader,
)

# Error types
from .errors import (
    ConfigurationError,
    ElementNotObjectError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InputValidationError,
    MalformedHeaderError,
    NotAnArrayError,
    ToonBridgeError,
    ToonDecodeError,
    ToonEncodeError,
    TooFewLinesError,
)

__all__ = [
    # Core types
    "ConversionMode",
    "DecodeResult",
    "DecodeWarning",
    "Record",
    "ToonHeader",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "ToonBridgeError",
    "ToonEncodeError",
    "NotAnArrayError",
    "ElementNotObjectError",
    "ToonDecodeError",
    "MalformedHeaderError",
    "TooFewLinesError",
    "InputValidationError",
    "ConfigurationError",
]

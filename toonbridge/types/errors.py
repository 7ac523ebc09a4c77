"""
Error handling system for toonbridge.

Provides a structured error hierarchy for the TOON codec and the conversion
boundary. Every fatal codec condition has its own exception type so callers
can tell a malformed header from a non-array input without parsing messages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from toonbridge.constants import HEADER_GRAMMAR, utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Encoding Errors (1000-1999)
    NOT_AN_ARRAY = 1001
    ELEMENT_NOT_OBJECT = 1002

    # Decoding Errors (2000-2999)
    MALFORMED_HEADER = 2001
    TOO_FEW_LINES = 2002

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001

    # User Input Errors (6000-6999)
    INVALID_ARGS = 6001
    MISSING_ARGS = 6002
    INPUT_TOO_LARGE = 6003


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    line_number: int | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class ToonBridgeError(Exception):
    """Base error class for toonbridge."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()


# =============================================================================
# Encoder errors
# =============================================================================


class ToonEncodeError(ToonBridgeError):
    """Raised when a value cannot be encoded to TOON."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message="Invalid JSON or conversion failed",
            severity=ErrorSeverity.MEDIUM,
            context=context or ErrorContext(operation="encode", component="encoder"),
            original_error=original_error,
        )


class NotAnArrayError(ToonEncodeError):
    """The value handed to the encoder is not a JSON array."""

    def __init__(self, received_type: str | None = None) -> None:
        context = ErrorContext(operation="encode", component="encoder")
        if received_type:
            context.additional_info["received_type"] = received_type
        super().__init__(
            ErrorCode.NOT_AN_ARRAY,
            "TOON format requires an array of objects",
            context=context,
        )


class ElementNotObjectError(ToonEncodeError):
    """An element of the encoded array is not a JSON object."""

    def __init__(self, index: int | None = None, received_type: str | None = None) -> None:
        context = ErrorContext(operation="encode", component="encoder")
        if index is not None:
            context.additional_info["index"] = index
        if received_type:
            context.additional_info["received_type"] = received_type
        super().__init__(
            ErrorCode.ELEMENT_NOT_OBJECT,
            "TOON format requires an array of objects (not primitives or nested arrays)",
            context=context,
        )


# =============================================================================
# Decoder errors
# =============================================================================


class ToonDecodeError(ToonBridgeError):
    """Raised when TOON text cannot be decoded."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message="Invalid TOON format or parsing failed",
            severity=ErrorSeverity.MEDIUM,
            context=context or ErrorContext(operation="decode", component="decoder"),
            original_error=original_error,
        )


class MalformedHeaderError(ToonDecodeError):
    """The header line does not match ``arrayName[count]{key1,key2}:``."""

    def __init__(self, header_line: str | None = None) -> None:
        context = ErrorContext(operation="decode", component="header", line_number=1)
        if header_line is not None:
            context.additional_info["header"] = header_line
        super().__init__(
            ErrorCode.MALFORMED_HEADER,
            f"Invalid TOON header format. Expected: {HEADER_GRAMMAR}",
            context=context,
        )


class TooFewLinesError(ToonDecodeError):
    """The document lacks a header plus at least one data row."""

    def __init__(self, line_count: int | None = None) -> None:
        context = ErrorContext(operation="decode", component="decoder")
        if line_count is not None:
            context.additional_info["line_count"] = line_count
        super().__init__(
            ErrorCode.TOO_FEW_LINES,
            "Invalid TOON format: needs header and at least one data row",
            context=context,
        )


# =============================================================================
# Boundary errors
# =============================================================================


class InputValidationError(ToonBridgeError):
    """Error related to request validation at the conversion boundary."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGS,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=message,
            severity=ErrorSeverity.LOW,
            context=context or ErrorContext(operation="convert", component="service"),
        )


class ConfigurationError(ToonBridgeError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=ErrorContext(component="config"),
            original_error=original_error,
        )

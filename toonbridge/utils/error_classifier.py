"""Error classification: lightweight lookup-table implementation.

Classifies exceptions into categories and retryability for MCP error responses.
Only two fields are consumed at runtime: ``category`` (str enum) and ``is_retryable`` (bool).
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from toonbridge.types.errors import (
    ConfigurationError,
    InputValidationError,
    ToonDecodeError,
    ToonEncodeError,
)


class ErrorCategory(str, Enum):
    """High-level error categories for handling decisions."""

    TRANSIENT = "transient"
    PERMANENT = "permanent"
    CLIENT_ERROR = "client_error"
    SYSTEM_ERROR = "system_error"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    """Classification result: category and retryability."""

    category: ErrorCategory
    is_retryable: bool


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# Order matters: JSONDecodeError is a ValueError, codec errors come first.
_TYPE_TABLE: list[tuple[tuple[type[Exception], ...], ErrorClassification]] = [
    (
        (ToonEncodeError, ToonDecodeError, InputValidationError, json.JSONDecodeError),
        ErrorClassification(ErrorCategory.CLIENT_ERROR, False),
    ),
    (
        (ConfigurationError,),
        ErrorClassification(ErrorCategory.PERMANENT, False),
    ),
    (
        (ConnectionError, TimeoutError, BrokenPipeError),
        ErrorClassification(ErrorCategory.TRANSIENT, True),
    ),
    (
        (FileNotFoundError, IsADirectoryError, UnicodeDecodeError),
        ErrorClassification(ErrorCategory.PERMANENT, False),
    ),
    (
        (ValueError, TypeError, KeyError, AttributeError),
        ErrorClassification(ErrorCategory.CLIENT_ERROR, False),
    ),
    (
        (MemoryError, RecursionError),
        ErrorClassification(ErrorCategory.SYSTEM_ERROR, False),
    ),
    (
        (OSError,),
        ErrorClassification(ErrorCategory.SYSTEM_ERROR, True),
    ),
]

_MSG_PATTERNS: list[tuple[re.Pattern[str], ErrorClassification]] = [
    (
        re.compile(r"too.large|exceeds.maximum|payload", re.I),
        ErrorClassification(ErrorCategory.CLIENT_ERROR, False),
    ),
    (
        re.compile(r"service.unavailable|temporarily|try.again", re.I),
        ErrorClassification(ErrorCategory.TRANSIENT, True),
    ),
]

_UNKNOWN = ErrorClassification(ErrorCategory.UNKNOWN, False)


def _classify(error: Exception) -> ErrorClassification:
    """Type table first, then message patterns."""
    for exc_types, cls in _TYPE_TABLE:
        if isinstance(error, exc_types):
            return cls

    msg = str(error).lower()
    for pattern, cls in _MSG_PATTERNS:
        if pattern.search(msg):
            return cls

    return _UNKNOWN


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify_error(
    error: Exception, context: dict[str, Any] | None = None
) -> ErrorClassification:
    """Classify an error into category and retryability."""
    return _classify(error)


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    return _classify(error).is_retryable

"""
toonbridge utility modules.

This package provides shared utilities used across the toonbridge codebase:
- Logging (stderr-only, correlation IDs)
- Error classification
- Serialization to strict-JSON primitives
"""

# Logger
from .logger import (
    RequestContext,
    configure_logging,
    generate_request_id,
    get_correlation_id,
    get_request_context,
    is_debug_enabled,
    is_mcp_server,
    logger,
    run_with_request_context,
    with_correlation_id,
)

# Error Classifier
from .error_classifier import (
    ErrorCategory,
    ErrorClassification,
    classify_error,
    is_retryable as is_error_retryable,
)

# Serialization
from .serialization import (
    serialize_to_primitives,
)

__all__ = [
    # Logger
    "RequestContext",
    "configure_logging",
    "generate_request_id",
    "get_correlation_id",
    "get_request_context",
    "is_debug_enabled",
    "is_mcp_server",
    "logger",
    "run_with_request_context",
    "with_correlation_id",
    # Error Classifier
    "ErrorCategory",
    "ErrorClassification",
    "classify_error",
    "is_error_retryable",
    # Serialization
    "serialize_to_primitives",
]

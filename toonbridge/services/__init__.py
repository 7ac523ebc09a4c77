"""
Service layer for toonbridge.

The conversion service wraps the codec with request validation and the
success/failure response shapes consumed by the MCP tools and the CLI.
"""

from .conversion_service import (
    ConversionResponse,
    ConversionService,
    convert,
    get_conversion_service,
    handle_request,
)
from .savings import estimate_token_savings
from .usage import get_usage_info

__all__ = [
    "ConversionResponse",
    "ConversionService",
    "convert",
    "get_conversion_service",
    "handle_request",
    "estimate_token_savings",
    "get_usage_info",
]

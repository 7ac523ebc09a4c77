"""Shared infrastructure for the toonbridge MCP server.

This module contains the FastMCP instance, the shared conversion service,
the response-shape helpers and the error handling decorator used by every
tool module.
"""

import functools
import inspect

from fastmcp import FastMCP

from toonbridge.services.conversion_service import (
    ConversionService,
    get_conversion_service,
)
from toonbridge.utils.error_classifier import classify_error
from toonbridge.utils.logger import logger

# =============================================================================
# FastMCP Server Instance
# =============================================================================

mcp = FastMCP(
    "toonbridge",
    instructions="""toonbridge - JSON ⇄ TOON Converter

TOON is a compact tabular notation for arrays of uniform JSON objects. The
header declares the collection, the element count and the field names once:

    data[2]{id,name,role}:
      1,Alice,admin
      2,Bob,user

Use `convert_toon` with mode "json-to-toon" to shrink a JSON array before
placing it in a prompt, or "toon-to-json" to turn TOON back into JSON.
Use `estimate_toon_savings` to check whether TOON is worth it for a given
array, and `get_toon_format_info` for the full format rules.
""",
)


def _get_conversion_service() -> ConversionService:
    """Get the shared conversion service."""
    return get_conversion_service()


# =============================================================================
# Response Helpers
# =============================================================================


def _success_response(data: object, **metadata: object) -> dict:
    """Build a standard success response dict.

    Args:
        data: Tool payload, placed under ``data``.
        **metadata: Extra keys placed under ``metadata`` (omitted when empty).
    """
    response: dict = {"success": True, "data": data}
    if metadata:
        response["metadata"] = metadata
    return response


def _failure_response(
    error_message: str,
    error_code: str = "client_error",
    is_retryable: bool = False,
    **extra: object,
) -> dict:
    """Build a standard failure response dict.

    All MCP tool failures use this shape so consumers see a single,
    predictable structure: ``{"success": False, "error": "...",
    "error_code": "...", "is_retryable": ...}``.

    Args:
        error_message: Human-readable error description.
        error_code: Error classification (default ``"client_error"``).
            Use ``"system_error"`` for infrastructure failures.
        is_retryable: Whether the consumer should retry the operation
            (default ``False``).
        **extra: Additional keys merged into the response (e.g. ``details=...``).
    """
    return {
        "success": False,
        "error": error_message,
        "error_code": error_code,
        "is_retryable": is_retryable,
        **extra,
    }


# =============================================================================
# Error Handling Decorator
# =============================================================================


def _with_error_handling(operation_name: str):
    """Decorator for MCP tool implementations with error handling.

    Catches exceptions and returns standardized failure responses instead
    of raising into the MCP transport. Supports both sync and async tool
    implementations.

    Args:
        operation_name: Name of the operation for logging and error context.
    """

    def _handle_exception(e: Exception):
        classification = classify_error(e, {"operation": operation_name})
        logger.error(
            f"Error in operation '{operation_name}': {e} "
            f"({type(e).__name__}, {classification.category.value})"
        )
        return _failure_response(
            str(e),
            error_code=classification.category.value,
            is_retryable=classification.is_retryable,
        )

    def decorator(func):
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    return _handle_exception(e)

            return async_wrapper
        else:

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    return _handle_exception(e)

            return wrapper

    return decorator

"""
Logging utility for toonbridge.

STDOUT is reserved for converter output (CLI) and JSON-RPC messages (MCP
stdio transport), so the only sink installed by ``configure_logging`` writes
to STDERR.

Correlation ID Support:
- Uses contextvars to propagate correlation IDs across async operations
- A patcher injects the current correlation ID into every log record
- Use with_correlation_id() context manager for scoped correlation IDs
"""

import os
import secrets
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Generator, TypeVar

from loguru import logger as loguru_logger

# ============================================================================
# Request Context
# ============================================================================


@dataclass
class RequestContext:
    """Request context for correlation ID tracking."""

    correlation_id: str
    operation: str | None = None
    start_time: float | None = None


# Context variable for request tracking
_request_context: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)


def generate_request_id() -> str:
    """
    Generate a unique request ID for correlation.

    Format: req_<timestamp_base36>_<random_hex>
    """
    timestamp = int(time.time() * 1000)
    random_part = secrets.token_hex(4)
    return f"req_{base36_encode(timestamp)}_{random_part}"


def base36_encode(number: int) -> str:
    """Encode a non-negative integer to base36 string."""
    if number == 0:
        return "0"

    chars = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = []
    while number:
        result.append(chars[number % 36])
        number //= 36
    return "".join(reversed(result))


def get_request_context() -> RequestContext | None:
    """Get the current request context (if any)."""
    return _request_context.get()


def get_correlation_id() -> str | None:
    """Get the current correlation ID (if any)."""
    ctx = get_request_context()
    return ctx.correlation_id if ctx else None


T = TypeVar("T")


@contextmanager
def with_correlation_id(
    correlation_id: str | None = None,
    operation: str | None = None,
) -> Generator[RequestContext, None, None]:
    """
    Context manager for running code with a correlation ID.

    All log messages within this context will include the correlation ID.

    Args:
        correlation_id: The correlation ID to use (generated when omitted)
        operation: Optional operation name for additional context

    Yields:
        The RequestContext object
    """
    context = RequestContext(
        correlation_id=correlation_id or generate_request_id(),
        operation=operation,
        start_time=time.time(),
    )
    token = _request_context.set(context)
    try:
        yield context
    finally:
        _request_context.reset(token)


def run_with_request_context(
    context: RequestContext,
    fn: Callable[[], T],
) -> T:
    """
    Run a function within a request context (correlation ID scope).

    Args:
        context: The request context containing the correlation ID
        fn: The function to run within the context

    Returns:
        The result of the function
    """
    token = _request_context.set(context)
    try:
        return fn()
    finally:
        _request_context.reset(token)


# ============================================================================
# Logger Configuration
# ============================================================================

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[correlation_id]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() == "true"


def is_mcp_server() -> bool:
    """Check if we're in MCP server mode."""
    return _env_flag("TOONBRIDGE_MCP_SERVER")


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _env_flag("TOONBRIDGE_DEBUG")


def _stderr_sink(message) -> None:
    # Resolve sys.stderr per write so redirected streams are honoured
    sys.stderr.write(message)


def _inject_correlation_id(record) -> None:
    record["extra"]["correlation_id"] = get_correlation_id() or "-"


def configure_logging(debug: bool | None = None) -> None:
    """Install the STDERR sink used by the CLI and the MCP server.

    Args:
        debug: Force DEBUG level; defaults to ``TOONBRIDGE_DEBUG``.
    """
    if debug is None:
        debug = is_debug_enabled()

    loguru_logger.configure(
        handlers=[
            {
                "sink": _stderr_sink,
                "level": "DEBUG" if debug else "INFO",
                "format": LOG_FORMAT,
                "colorize": False,
            }
        ],
        extra={"correlation_id": "-"},
        patcher=_inject_correlation_id,
    )


# Export loguru logger for direct use
logger = loguru_logger

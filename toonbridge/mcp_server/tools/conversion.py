"""Conversion tools: JSON ⇄ TOON conversion, format info and savings estimates."""

from typing import Literal

from toonbridge.codec.json_text import loads
from toonbridge.mcp_server._shared import (
    _failure_response,
    _get_conversion_service,
    _success_response,
    _with_error_handling,
    mcp,
)
from toonbridge.services.savings import estimate_token_savings
from toonbridge.services.usage import get_usage_info

# =============================================================================
# Implementations
# =============================================================================


@_with_error_handling("convert_toon")
def _convert_toon_impl(input: str, mode: str) -> dict:
    """Implementation for convert_toon tool."""
    response = _get_conversion_service().convert(input, mode)
    body = response.to_dict()
    if response.ok:
        return body
    return _failure_response(
        body["error"],
        details=body.get("details"),
        status_code=response.status_code,
    )


@_with_error_handling("get_toon_format_info")
def _get_toon_format_info_impl() -> dict:
    """Implementation for get_toon_format_info tool."""
    return _success_response(get_usage_info())


@_with_error_handling("estimate_toon_savings")
def _estimate_toon_savings_impl(input: str) -> dict:
    """Implementation for estimate_toon_savings tool."""
    data = loads(input)
    estimate = estimate_token_savings(data)
    if "error" in estimate:
        return _failure_response(estimate["error"], recommendation=estimate["recommendation"])
    return _success_response(estimate)


# =============================================================================
# MCP Tool Registration
# =============================================================================


@mcp.tool
def convert_toon(
    input: str,
    mode: Literal["json-to-toon", "toon-to-json"],
) -> dict:
    """Convert between a JSON array of objects and TOON.

    Args:
        input: JSON array text (json-to-toon) or TOON text (toon-to-json)
        mode: Conversion direction:
            - "json-to-toon": encode a JSON array of objects as TOON
            - "toon-to-json": decode TOON into pretty-printed JSON

    Returns:
        success, mode, input and output on success (plus warnings when the
        TOON header count disagrees with the rows found); error and details
        on failure
    """
    return _convert_toon_impl(input, mode)


@mcp.tool
def get_toon_format_info() -> dict:
    """Describe the TOON format, its escaping rules and worked examples.

    Returns:
        Format description, syntax, rules and example conversions
    """
    return _get_toon_format_info_impl()


@mcp.tool
def estimate_toon_savings(input: str) -> dict:
    """Estimate how many tokens TOON saves over compact JSON.

    Args:
        input: JSON array of objects, as text

    Returns:
        json_tokens, toon_tokens, savings_percent and a recommendation
        ("toon", "json" or "either")
    """
    return _estimate_toon_savings_impl(input)

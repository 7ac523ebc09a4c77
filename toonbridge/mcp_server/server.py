"""MCP Server entry point for toonbridge.

Importing this module registers every tool on the shared FastMCP instance.
"""

from fastmcp import FastMCP

from toonbridge.mcp_server._shared import mcp
from toonbridge.mcp_server.tools import (  # noqa: F401
    _convert_toon_impl,
    _estimate_toon_savings_impl,
    _get_toon_format_info_impl,
)
from toonbridge.utils.logger import configure_logging


def create_server() -> FastMCP:
    """Create and return the configured MCP server instance.

    Returns:
        Configured FastMCP server with all tools registered
    """
    return mcp


def run_server() -> None:
    """Run the MCP server over stdio."""
    configure_logging()
    mcp.run()


# Allow running directly
if __name__ == "__main__":
    run_server()

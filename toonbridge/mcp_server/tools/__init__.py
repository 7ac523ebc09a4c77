"""MCP tool modules for toonbridge.

Each module defines _impl functions (testable logic) and @mcp.tool
registrations (MCP-facing wrappers). Importing a module triggers tool
registration on the shared `mcp` FastMCP instance from _shared.py.
"""

from toonbridge.mcp_server.tools.conversion import (  # noqa: F401
    _convert_toon_impl,
    _estimate_toon_savings_impl,
    _get_toon_format_info_impl,
)

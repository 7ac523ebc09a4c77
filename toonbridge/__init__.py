"""
toonbridge - JSON ⇄ TOON conversion.

Converts JSON arrays of objects into TOON, a compact tabular notation that
declares field names once and lists one row per record, and parses TOON back
into JSON. Provides:
- A pure encoder/decoder pair (``toonbridge.codec``)
- A conversion service with request validation and error responses
- An MCP server exposing the converter as tools
- A command line interface
"""

__version__ = "0.1.0"

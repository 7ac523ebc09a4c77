"""MCP server exposing the JSON ⇄ TOON converter as tools."""

"""Phase 3: MCP server tests.

Test Modules:
- test_mcp_tools.py: tool implementations and response envelopes
- test_error_classifier.py: exception categories and retryability
"""

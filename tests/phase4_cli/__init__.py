"""Phase 4: CLI tests."""

"""Command line interface for toonbridge."""

"""Command line interface for memory-match."""

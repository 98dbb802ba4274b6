"""Command-line interface for navcheck."""

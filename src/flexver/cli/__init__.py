"""Command-line interface for flexver."""

"""Command-line interface for linespin."""

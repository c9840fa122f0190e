"""CLI commands for linespin."""

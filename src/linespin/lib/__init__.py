"""Shared library code for linespin: errors, logging and terminal UI."""

"""Pydantic models for linespin configuration."""

from linespin.models.spinner_config import SpinnerConfig

__all__ = ["SpinnerConfig"]

"""Spinner configuration model.

Both knobs default to the classic behaviour: a four-frame ASCII rotation
redrawn ten times per second. They are exposed mainly so tests and callers
with their own pacing can tune them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from linespin.config.defaults import (
    DEFAULT_FRAMES,
    DEFAULT_TICK_INTERVAL,
    MAX_TICK_INTERVAL,
)
from linespin.lib.errors import ConfigError


class SpinnerConfig(BaseModel):
    """Rendering and refresh settings for a spinner session."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tick_interval: float = Field(
        default=DEFAULT_TICK_INTERVAL,
        gt=0,
        le=MAX_TICK_INTERVAL,
        description="Seconds between background redraws",
    )
    frames: str = Field(
        default=DEFAULT_FRAMES,
        min_length=1,
        description="Characters drawn in rotation, one byte each",
    )

    @field_validator("frames")
    @classmethod
    def validate_frames(cls, v: str) -> str:
        """Each frame must occupy exactly one byte on the wire."""
        for char in v:
            if not (char.isascii() and char.isprintable()):
                raise ValueError(
                    f"Invalid frame character {char!r}. "
                    "Frames must be printable ASCII characters"
                )
        return v

    @classmethod
    def from_options(cls, **options: Any) -> "SpinnerConfig":
        """Build a config, reporting failures as ConfigError.

        Args:
            **options: Field values; None values fall back to defaults.

        Returns:
            Validated SpinnerConfig.

        Raises:
            ConfigError: If any option is invalid.
        """
        values = {k: v for k, v in options.items() if v is not None}
        try:
            return cls(**values)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"]) or "spinner"
            raise ConfigError(field, first["msg"]) from e

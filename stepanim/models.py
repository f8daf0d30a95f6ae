"""Pydantic models for stepanim configuration.

Provides validated data models for type safety and runtime validation.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from rich.color import Color, ColorParseError

from stepanim.animation.presets.spinner import SpinnerType
from stepanim.animation.style import AdvanceMode, RepeatMode


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Log level")
    log_file: str | None = Field(None, description="Log file path")
    structured_logging: bool = Field(
        default=False,
        description="Write JSON records instead of Rich console output",
    )
    log_correlation_id: bool = Field(
        default=True,
        description="Include correlation IDs",
    )


class AnimationDefaultsConfig(BaseModel):
    """Defaults used by presets when a value is not given explicitly."""

    step_duration: float = Field(
        default=0.1,
        ge=0.0,
        le=60.0,
        description="Seconds each step lasts",
    )
    frame_interval: float = Field(
        default=1 / 30,
        gt=0.0,
        le=1.0,
        description="Seconds between two rendered frames",
    )
    highlight_color: str | None = Field(
        default="bright_cyan",
        description="Rich color used by highlighting presets",
    )
    trail_length: int = Field(
        default=1,
        ge=0,
        le=16,
        description="Positions following the scanner head",
    )
    trail_dim_factor: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Brightness kept per trail position",
    )
    repeat: int | None = Field(
        default=None,
        ge=0,
        description="Full passes to play, None for endless",
    )
    advance_mode: AdvanceMode = Field(
        default=AdvanceMode.AUTO,
        description="Automatic or manual step progression",
    )
    spinner_type: SpinnerType = Field(
        default=SpinnerType.BRAILLE_DOUBLE,
        description="Symbol cycle of the spinner preset",
    )

    @field_validator("highlight_color")
    @classmethod
    def validate_highlight_color(cls, v: str | None) -> str | None:
        """Validate that the color is understood by Rich."""
        if v is None:
            return v
        try:
            Color.parse(v)
        except ColorParseError as e:
            msg = f"Invalid highlight color: {v!r}"
            raise ValueError(msg) from e
        return v

    @property
    def repeat_mode(self) -> RepeatMode:
        return RepeatMode.infinite() if self.repeat is None else RepeatMode.finite(self.repeat)


class Config(BaseModel):
    """Main configuration model."""

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
    animation: AnimationDefaultsConfig = Field(
        default_factory=AnimationDefaultsConfig,
        description="Animation defaults",
    )

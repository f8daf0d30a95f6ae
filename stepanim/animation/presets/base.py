"""Shared configuration of the text presets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from stepanim.animation.action import AnimationAction, restore
from stepanim.animation.step import AnimationStep, AnimationStepBuilder
from stepanim.animation.style import AdvanceMode, AnimationStyle, AnimationStyleBuilder, RepeatMode
from stepanim.animation.symbol import ColorLike, Symbol, parse_color
from stepanim.animation.target import Single
from stepanim.animation.text import TextStyles, create_symbols
from stepanim.utils.exceptions import ValidationError


@dataclass
class PresetConfig(ABC):
    """Fields every preset understands."""

    # Content
    text: str = ""
    styles: TextStyles | None = None  # static styling the preset starts from

    # Timing
    duration: float = 0.1  # seconds per step
    repeat_mode: RepeatMode = field(default_factory=RepeatMode.infinite)
    advance_mode: AdvanceMode = AdvanceMode.AUTO

    # Highlight colors, None keeps the color of the symbol
    foreground_color: ColorLike = None
    background_color: ColorLike = None

    def __post_init__(self) -> None:
        """Validate and normalize."""
        self._validate_config()
        self.foreground_color = parse_color(self.foreground_color)
        self.background_color = parse_color(self.background_color)
        self.advance_mode = AdvanceMode(self.advance_mode)

    def _validate_config(self) -> None:
        """Validate preset configuration.

        Raises:
            ValidationError: If configuration is invalid

        """
        if self.duration < 0:
            msg = f"Step duration must not be negative, got {self.duration}"
            raise ValidationError(msg, {"duration": self.duration})

    @property
    def has_highlight_color(self) -> bool:
        return self.foreground_color is not None or self.background_color is not None

    def symbols(self) -> dict[int, Symbol]:
        """Starting symbols of the text, as the animation will receive them."""
        return create_symbols(self.text, self.styles)

    @abstractmethod
    def build_steps(self) -> list[AnimationStep]:
        """Steps of one pass over the text."""

    def to_animation_style(self) -> AnimationStyle:
        return (
            AnimationStyleBuilder()
            .with_steps(self.build_steps())
            .with_repeat_mode(self.repeat_mode)
            .with_advance_mode(self.advance_mode)
            .build()
        )

    def highlight(self, symbol: Symbol) -> Symbol:
        """``symbol`` painted with the configured highlight colors."""
        style = symbol.style
        if self.foreground_color is not None:
            style = style.with_foreground(self.foreground_color)
        if self.background_color is not None:
            style = style.with_background(self.background_color)
        return symbol.with_style(style)


def step_from_symbols(updates: dict[int, Symbol], duration: float) -> AnimationStep:
    """A step that turns each position of ``updates`` into its symbol."""
    builder = AnimationStepBuilder().with_duration(duration)
    for x, symbol in sorted(updates.items()):
        actions: list[AnimationAction] = restore(symbol)
        builder = builder.for_target(Single(x)).do_actions(actions).then()
    return builder.build()


def steps_from_windows(
    windows: list[dict[int, Symbol]],
    originals: dict[int, Symbol],
    duration: float,
) -> list[AnimationStep]:
    """One step per highlight window.

    Each step paints its window and restores the positions that were in the
    previous window but are not in this one. The first window follows the
    last, so the steps loop cleanly.
    """
    steps = []
    for k, window in enumerate(windows):
        previous = windows[k - 1]
        updates = {x: originals[x] for x in previous if x not in window}
        updates.update(window)
        steps.append(step_from_symbols(updates, duration))
    return steps

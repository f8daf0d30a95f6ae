"""Spinner: one position cycling through a set of symbols."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stepanim.animation.presets.base import PresetConfig
from stepanim.animation.step import AnimationStep, AnimationStepBuilder
from stepanim.animation.symbol import Symbol
from stepanim.animation.target import Single
from stepanim.utils.exceptions import ValidationError


class SpinnerType(str, Enum):
    ASCII = "ascii"
    BOX_DRAWING = "box_drawing"
    ARROW = "arrow"
    DOUBLE_ARROW = "double_arrow"
    QUADRANT_BLOCK = "quadrant_block"
    QUADRANT_BLOCK_CRACK = "quadrant_block_crack"
    VERTICAL_BLOCK = "vertical_block"
    HORIZONTAL_BLOCK = "horizontal_block"
    TRIANGLE_CORNERS = "triangle_corners"
    WHITE_SQUARE = "white_square"
    WHITE_CIRCLE = "white_circle"
    BLACK_CIRCLE = "black_circle"
    MOON_PHASES = "moon_phases"
    BRAILLE_ONE = "braille_one"
    BRAILLE_DOUBLE = "braille_double"
    BRAILLE_SIX = "braille_six"
    BRAILLE_EIGHT = "braille_eight"
    BRAILLE_EIGHT_DOUBLE = "braille_eight_double"

    @property
    def symbols(self) -> tuple[str, ...]:
        return SPINNER_SYMBOLS[self]


SPINNER_SYMBOLS: dict[SpinnerType, tuple[str, ...]] = {
    SpinnerType.ASCII: ("|", "/", "-", "\\"),
    SpinnerType.BOX_DRAWING: ("│", "╱", "─", "╲"),
    SpinnerType.ARROW: ("↑", "↗", "→", "↘", "↓", "↙", "←", "↖"),
    SpinnerType.DOUBLE_ARROW: ("⇑", "⇗", "⇒", "⇘", "⇓", "⇙", "⇐", "⇖"),
    SpinnerType.QUADRANT_BLOCK: ("▝", "▗", "▖", "▘"),
    SpinnerType.QUADRANT_BLOCK_CRACK: ("▙", "▛", "▜", "▟"),
    SpinnerType.VERTICAL_BLOCK: ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█"),
    SpinnerType.HORIZONTAL_BLOCK: ("▏", "▎", "▍", "▌", "▋", "▊", "▉", "█"),
    SpinnerType.TRIANGLE_CORNERS: ("◢", "◣", "◤", "◥"),
    SpinnerType.WHITE_SQUARE: ("◳", "◲", "◱", "◰"),
    SpinnerType.WHITE_CIRCLE: ("◷", "◶", "◵", "◴"),
    SpinnerType.BLACK_CIRCLE: ("◑", "◒", "◐", "◓"),
    SpinnerType.MOON_PHASES: ("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘"),
    SpinnerType.BRAILLE_ONE: ("⠈", "⠐", "⠠", "⠄", "⠂", "⠁"),
    SpinnerType.BRAILLE_DOUBLE: ("⠘", "⠰", "⠤", "⠆", "⠃", "⠉"),
    SpinnerType.BRAILLE_SIX: ("⠷", "⠯", "⠟", "⠻", "⠽", "⠾"),
    SpinnerType.BRAILLE_EIGHT: ("⣷", "⣯", "⣟", "⡿", "⢿", "⣻", "⣽", "⣾"),
    SpinnerType.BRAILLE_EIGHT_DOUBLE: ("⣧", "⣏", "⡟", "⠿", "⢻", "⣹", "⣼", "⣶"),
}


@dataclass
class SpinnerAnimation(PresetConfig):
    """A single-character spinner.

    ``cycle`` overrides the symbols of ``spinner_type`` when given. ``text`` is
    ignored; the spinner always lives at position 0.
    """

    spinner_type: SpinnerType = SpinnerType.BRAILLE_DOUBLE
    cycle: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        self.spinner_type = SpinnerType(self.spinner_type)
        if self.cycle is not None:
            self.cycle = tuple(self.cycle)
        super().__post_init__()

    def _validate_config(self) -> None:
        super()._validate_config()
        if self.cycle is not None:
            if not self.cycle:
                msg = "Spinner needs at least one symbol"
                raise ValidationError(msg)
            if not all(self.cycle):
                msg = "Spinner symbols must not be empty"
                raise ValidationError(msg, {"cycle": list(self.cycle)})

    @property
    def frames(self) -> tuple[str, ...]:
        return self.cycle if self.cycle is not None else self.spinner_type.symbols

    def symbols(self) -> dict[int, Symbol]:
        return {0: Symbol(self.frames[0])}

    def build_steps(self) -> list[AnimationStep]:
        steps = []
        for value in self.frames:
            accumulator = (
                AnimationStepBuilder()
                .with_duration(self.duration)
                .for_target(Single(0))
                .update_character(value)
            )
            if self.foreground_color is not None:
                accumulator = accumulator.update_foreground_color(self.foreground_color)
            if self.background_color is not None:
                accumulator = accumulator.update_background_color(self.background_color)
            steps.append(accumulator.then().build())
        return steps

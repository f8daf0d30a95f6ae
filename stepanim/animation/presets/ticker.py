"""Ticker: the text rotates by one position per step."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stepanim.animation.presets.base import PresetConfig, step_from_symbols
from stepanim.animation.step import AnimationStep


class TickerDirection(str, Enum):
    FORWARD = "forward"  # symbols travel to the right
    BACKWARD = "backward"  # symbols travel to the left


@dataclass
class TickerAnimation(PresetConfig):
    """Rotate the whole text, character and style, one position per step.

    Step ``k`` shows at position ``x`` the symbol that started at
    ``(x - k) mod n`` (forward) or ``(x + k) mod n`` (backward). Step 0 is
    the unrotated text.
    """

    direction: TickerDirection = TickerDirection.FORWARD

    def __post_init__(self) -> None:
        super().__post_init__()
        self.direction = TickerDirection(self.direction)

    def build_steps(self) -> list[AnimationStep]:
        symbols = self.symbols()
        n = len(symbols)
        sign = 1 if self.direction is TickerDirection.FORWARD else -1
        return [
            step_from_symbols(
                {x: symbols[(x - sign * k) % n] for x in range(n)},
                self.duration,
            )
            for k in range(n)
        ]

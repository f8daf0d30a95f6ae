"""Scanner: a highlighted head sweeps forth and back with a fading trail."""

from __future__ import annotations

from dataclasses import dataclass

from stepanim.animation.presets.base import PresetConfig, steps_from_windows
from stepanim.animation.step import AnimationStep
from stepanim.animation.symbol import Modifier, Symbol, dim_color
from stepanim.utils.exceptions import ValidationError


@dataclass
class ScannerAnimation(PresetConfig):
    """Sweep over positions ``0..n-1`` and back over ``n-2..1``.

    The head is followed by ``trail_length`` positions, on the side it comes
    from. The i-th trail position gets the highlight colors scaled by
    ``trail_dim_factor ** i``, or the dim modifier when no highlight color is
    configured.
    """

    trail_length: int = 1
    trail_dim_factor: float = 0.5

    def _validate_config(self) -> None:
        super()._validate_config()
        if self.trail_length < 0:
            msg = f"Trail length must not be negative, got {self.trail_length}"
            raise ValidationError(msg, {"trail_length": self.trail_length})
        if not 0.0 <= self.trail_dim_factor <= 1.0:
            msg = f"Trail dim factor must be between 0.0 and 1.0, got {self.trail_dim_factor}"
            raise ValidationError(msg, {"trail_dim_factor": self.trail_dim_factor})

    def head_positions(self, n: int) -> list[tuple[int, int]]:
        """(head, direction) for every step; direction is 1 forward, -1 back."""
        forward = [(x, 1) for x in range(n)]
        backward = [(x, -1) for x in range(n - 2, 0, -1)]
        return forward + backward

    def build_steps(self) -> list[AnimationStep]:
        symbols = self.symbols()
        windows = [
            self._window(symbols, head, direction)
            for head, direction in self.head_positions(len(symbols))
        ]
        return steps_from_windows(windows, symbols, self.duration)

    def _window(self, symbols: dict[int, Symbol], head: int, direction: int) -> dict[int, Symbol]:
        window = {}
        for i in range(self.trail_length, -1, -1):
            x = head - direction * i
            if x in symbols:
                window[x] = self._paint(symbols[x], i)
        return window

    def _paint(self, symbol: Symbol, distance: int) -> Symbol:
        if not self.has_highlight_color:
            modifier = Modifier.BOLD if distance == 0 else Modifier.DIM
            return symbol.with_style(symbol.style.add_modifiers(modifier))
        if distance == 0:
            return self.highlight(symbol)
        factor = self.trail_dim_factor**distance
        style = symbol.style
        if self.foreground_color is not None:
            style = style.with_foreground(dim_color(self.foreground_color, factor))
        if self.background_color is not None:
            style = style.with_background(dim_color(self.background_color, factor))
        return symbol.with_style(style)

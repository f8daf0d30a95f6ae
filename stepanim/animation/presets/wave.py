"""Wave: a highlighted head runs across the text and wraps around."""

from __future__ import annotations

from dataclasses import dataclass

from stepanim.animation.presets.base import PresetConfig, steps_from_windows
from stepanim.animation.step import AnimationStep
from stepanim.animation.symbol import Modifier, Symbol


@dataclass
class WaveAnimation(PresetConfig):
    """One step per position.

    The head gets the highlight colors, or bold when none are configured. The
    position right behind it keeps the highlight with the dim modifier. The
    head jumps back to position 0 after the last one.
    """

    def build_steps(self) -> list[AnimationStep]:
        symbols = self.symbols()
        windows = [self._window(symbols, x) for x in range(len(symbols))]
        return steps_from_windows(windows, symbols, self.duration)

    def _window(self, symbols: dict[int, Symbol], head: int) -> dict[int, Symbol]:
        window = {head: self._head(symbols[head])}
        if head >= 1:
            tail = self._head(symbols[head - 1])
            window[head - 1] = tail.with_style(tail.style.add_modifiers(Modifier.DIM))
        return window

    def _head(self, symbol: Symbol) -> Symbol:
        if self.has_highlight_color:
            return self.highlight(symbol)
        return symbol.with_style(symbol.style.add_modifiers(Modifier.BOLD))

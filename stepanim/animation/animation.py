"""Frame production: ties a style, the per-position state and a clock together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from stepanim.animation.advancable import AdvancableAnimation, create_advancable
from stepanim.animation.processing import apply_step, frame_symbols
from stepanim.animation.state import SymbolState, initial_states
from stepanim.animation.step import AnimationStep
from stepanim.animation.style import AnimationStyle
from stepanim.animation.symbol import Symbol, SymbolStyle
from stepanim.utils.time import Clock, TimeSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationFrame:
    """What to paint after one tick: every position with its symbol."""

    symbols: Mapping[int, Symbol] = field(default_factory=dict)

    @property
    def styles(self) -> dict[int, SymbolStyle]:
        return {x: symbol.style for x, symbol in self.symbols.items()}

    @property
    def text(self) -> str:
        return "".join(symbol.value for _, symbol in sorted(self.symbols.items()))


class Animation:
    """A running animation over one text run.

    The animation is driven entirely by ``next_frame()`` calls; it never
    schedules anything by itself. Time is read from ``clock``.
    """

    def __init__(
        self,
        style: AnimationStyle,
        symbols: Mapping[int, Symbol],
        clock: TimeSource | None = None,
    ) -> None:
        self.style = style
        self._clock: TimeSource = clock or Clock()
        self._controller: AdvancableAnimation = create_advancable(
            style.steps, style.repeat_mode, style.advance_mode
        )
        self._states: dict[int, SymbolState] = initial_states(symbols)
        # Committed state from before the current step was entered
        self._step_base: dict[int, SymbolState] = self._states
        self._paused = False
        self._resumed = False
        self._last_step_retrieved_at: float | None = None

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_finished(self) -> bool:
        return self._controller.is_exhausted

    @property
    def states(self) -> Mapping[int, SymbolState]:
        return self._states

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        if self._paused:
            self._paused = False
            self._resumed = True

    def advance(self) -> None:
        """Allow a manual animation to move on; no-op for automatic ones."""
        self._controller.advance()

    def next_frame(self) -> AnimationFrame | None:
        """Produce the frame for this tick, or ``None`` once nothing is left.

        Reuses the current step while paused, while it has not lasted its
        duration, or while a manual animation waits for ``advance()``. The
        first tick after ``unpause()`` restarts the step timer from now. A held
        step is applied again to the state it was entered from, so every tick
        of the same step yields the same frame.
        """
        step = self._select_step()
        if step is None:
            return None
        self._states = apply_step(self._step_base, step)
        return AnimationFrame(frame_symbols(self._states))

    def _select_step(self) -> AnimationStep | None:
        now = self._clock.now()

        if self._last_step_retrieved_at is None:
            self._last_step_retrieved_at = now
            self._step_base = self._states
            self._controller.start()
            return self._controller.current_step()

        if self._paused:
            return self._controller.current_step()

        if self._resumed:
            self._resumed = False
            self._last_step_retrieved_at = now
            return self._controller.current_step()

        current = self._controller.current_step()
        if current is None:
            return None

        elapsed = now - self._last_step_retrieved_at
        if elapsed < 0 or elapsed < current.duration:
            return current

        next_step = self._controller.next_step()
        if next_step is not None:
            logger.debug("Step changed after %.3fs", elapsed)
            self._last_step_retrieved_at = now
            self._step_base = self._states
            return next_step
        if self._controller.is_exhausted:
            logger.debug("Animation finished")
            return None
        return current

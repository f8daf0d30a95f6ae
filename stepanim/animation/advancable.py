"""Advance controllers: gate step progression behind an advance policy."""

from __future__ import annotations

from typing import Sequence

from stepanim.animation.repeatable import RepeatableAnimation, create_repeatable
from stepanim.animation.step import AnimationStep
from stepanim.animation.style import AdvanceMode, RepeatMode


class AdvancableAnimation:
    """Forwards to a repetition controller; subclasses decide when to move."""

    def __init__(self, repeatable: RepeatableAnimation) -> None:
        self._repeatable = repeatable

    @property
    def is_exhausted(self) -> bool:
        return self._repeatable.is_exhausted

    def current_step(self) -> AnimationStep | None:
        return self._repeatable.current_step()

    def start(self) -> None:
        self._repeatable.start()

    def next_step(self) -> AnimationStep | None:
        return self._repeatable.next_step()

    def advance(self) -> None:
        """Authorize the next move. Only meaningful for manual animations."""


class AutomaticallyAdvancableAnimation(AdvancableAnimation):
    pass


class ManuallyAdvancableAnimation(AdvancableAnimation):
    """Moves at most one step per ``advance()`` call."""

    def __init__(self, repeatable: RepeatableAnimation) -> None:
        super().__init__(repeatable)
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def next_step(self) -> AnimationStep | None:
        if not self._ready:
            return None
        self._ready = False
        return self._repeatable.next_step()

    def advance(self) -> None:
        self._ready = True


def create_advancable(
    steps: Sequence[AnimationStep],
    repeat_mode: RepeatMode,
    advance_mode: AdvanceMode,
) -> AdvancableAnimation:
    repeatable = create_repeatable(steps, repeat_mode)
    if AdvanceMode(advance_mode) is AdvanceMode.MANUAL:
        return ManuallyAdvancableAnimation(repeatable)
    return AutomaticallyAdvancableAnimation(repeatable)

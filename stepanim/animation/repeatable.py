"""Repetition controllers: walk an ordered list of steps, looping or not.

A controller starts *before* its first step. ``next_step()`` on a fresh
controller enters and returns step 0, so the n-th successful call returns the
n-th step played. ``start()`` enters step 0 without moving past it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from stepanim.animation.step import AnimationStep
from stepanim.animation.style import RepeatMode

logger = logging.getLogger(__name__)


class RepeatableAnimation(ABC):
    """Base controller over ``(index, iteration)``."""

    def __init__(self, steps: Sequence[AnimationStep]) -> None:
        self._steps: tuple[AnimationStep, ...] = tuple(steps)
        self._index = 0
        self._iteration = 0
        self._started = False
        self._exhausted = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def is_exhausted(self) -> bool:
        return self._exhausted or not self._steps

    def current_step(self) -> AnimationStep | None:
        """Return the current step, or ``None`` once nothing is left to play."""
        if self.is_exhausted:
            return None
        return self._steps[self._index]

    def start(self) -> None:
        """Enter step 0 if nothing has been entered yet."""
        self._started = True

    def next_step(self) -> AnimationStep | None:
        """Move to the next step and return it; ``None`` once exhausted."""
        if self.is_exhausted:
            return None
        if not self._started:
            self._started = True
            return self._steps[self._index]
        if self._index < len(self._steps) - 1:
            self._index += 1
        elif not self._wrap():
            self._exhausted = True
            logger.debug(
                "Animation exhausted after %d pass(es) over %d step(s)",
                self._iteration + 1,
                len(self._steps),
            )
            return None
        return self._steps[self._index]

    @abstractmethod
    def _wrap(self) -> bool:
        """Go back to step 0 after the last one; False when no pass is left."""


class InfinitelyRepeatableAnimation(RepeatableAnimation):
    def _wrap(self) -> bool:
        self._index = 0
        self._iteration += 1
        return True


class FinitelyRepeatableAnimation(RepeatableAnimation):
    def __init__(self, steps: Sequence[AnimationStep], passes: int) -> None:
        super().__init__(steps)
        # Zero passes plays like one.
        self._last_iteration = max(passes - 1, 0)

    def _wrap(self) -> bool:
        if self._iteration >= self._last_iteration:
            return False
        self._index = 0
        self._iteration += 1
        return True


def create_repeatable(steps: Sequence[AnimationStep], repeat_mode: RepeatMode) -> RepeatableAnimation:
    if repeat_mode.passes is None:
        return InfinitelyRepeatableAnimation(steps)
    return FinitelyRepeatableAnimation(steps, repeat_mode.passes)

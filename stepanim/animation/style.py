"""Animation style: ordered steps plus repeat and advance policies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from stepanim.animation.step import AnimationStep
from stepanim.utils.exceptions import ValidationError


class AdvanceMode(str, Enum):
    """How the animation moves to its next step.

    AUTO advances on a tick once the current step has lasted long enough.
    MANUAL additionally needs an ``advance()`` call before each move.
    """

    AUTO = "auto"
    MANUAL = "manual"


@dataclass(frozen=True)
class RepeatMode:
    """How many full passes over the steps are played.

    ``passes`` is ``None`` for an endless animation. A finite count of zero
    plays one pass, like a count of one.
    """

    passes: int | None = None

    def __post_init__(self) -> None:
        if self.passes is not None and self.passes < 0:
            msg = f"Repeat count must not be negative, got {self.passes}"
            raise ValidationError(msg, {"passes": self.passes})

    @classmethod
    def infinite(cls) -> RepeatMode:
        return cls(None)

    @classmethod
    def finite(cls, passes: int) -> RepeatMode:
        return cls(passes)

    @property
    def is_infinite(self) -> bool:
        return self.passes is None

    def __str__(self) -> str:
        return "infinite" if self.passes is None else f"finite({self.passes})"


@dataclass(frozen=True)
class AnimationStyle:
    """Everything needed to start an ``Animation`` except the text itself."""

    steps: tuple[AnimationStep, ...] = ()
    repeat_mode: RepeatMode = field(default_factory=RepeatMode.infinite)
    advance_mode: AdvanceMode = AdvanceMode.AUTO

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def total_duration(self) -> float | None:
        """Playing time of the whole animation, ``None`` when endless."""
        if self.repeat_mode.is_infinite:
            return None
        passes = max(self.repeat_mode.passes or 0, 1)
        return passes * sum(step.duration for step in self.steps)


class AnimationStyleBuilder:
    def __init__(self) -> None:
        self._steps: list[AnimationStep] = []
        self._repeat_mode = RepeatMode.infinite()
        self._advance_mode = AdvanceMode.AUTO

    def with_repeat_mode(self, repeat_mode: RepeatMode) -> AnimationStyleBuilder:
        self._repeat_mode = repeat_mode
        return self

    def with_advance_mode(self, advance_mode: AdvanceMode) -> AnimationStyleBuilder:
        self._advance_mode = advance_mode
        return self

    def with_steps(self, steps: Sequence[AnimationStep]) -> AnimationStyleBuilder:
        self._steps = list(steps)
        return self

    def add_step(self, step: AnimationStep) -> AnimationStyleBuilder:
        self._steps.append(step)
        return self

    def build(self) -> AnimationStyle:
        return AnimationStyle(
            steps=tuple(self._steps),
            repeat_mode=self._repeat_mode,
            advance_mode=self._advance_mode,
        )

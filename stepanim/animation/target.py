"""Target selectors: which positions a group of actions applies to.

Targets are plain frozen values so they can be used as map keys inside a
step. Each target resolves against the step view of the step currently being
applied; resolution never mutates anything.

Applying order within one step (most specific first):

1. ``Single``
2. ``Range``
3. ``Every``
4. ``AllExceptEvery``
5. ``Custom``
6. ``Untouched``
7. ``UntouchedThisStep``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Protocol, Sequence, TypeVar

from stepanim.animation.state import StepStatus, StepView
from stepanim.utils.exceptions import ValidationError

T = TypeVar("T")

# Positions are 16-bit column indices.
MAX_POSITION = 0xFFFF


class PositionSelector(Protocol):
    """Custom selection logic for ``Custom`` targets.

    Implementations must be hashable (frozen dataclasses work well), since the
    target that wraps them is used as a dictionary key.
    """

    def select(self, states: StepView) -> Iterable[int]:
        """Return the positions to touch, given the current step view."""
        ...


def _check_position(value: int, name: str) -> None:
    if not 0 <= value <= MAX_POSITION:
        msg = f"{name} must be a position between 0 and {MAX_POSITION}, got {value}"
        raise ValidationError(msg, {name: value})


def _check_stride(value: int) -> None:
    if value < 1:
        msg = f"Stride must be at least 1, got {value}"
        raise ValidationError(msg, {"n": value})


@dataclass(frozen=True)
class AnimationTarget(ABC):
    """Base class of all target selectors."""

    priority: ClassVar[int] = 0

    @abstractmethod
    def resolve(self, states: StepView) -> list[int]:
        """Return the positions this target denotes in ``states``."""


@dataclass(frozen=True)
class Single(AnimationTarget):
    """One position, whether or not it exists in the text."""

    x: int
    priority: ClassVar[int] = 70

    def __post_init__(self) -> None:
        _check_position(self.x, "x")

    def resolve(self, states: StepView) -> list[int]:
        return [self.x]


@dataclass(frozen=True)
class Range(AnimationTarget):
    """Existing positions from ``start`` through ``end``, both inclusive."""

    start: int
    end: int
    priority: ClassVar[int] = 60

    def __post_init__(self) -> None:
        _check_position(self.start, "start")
        _check_position(self.end, "end")

    def resolve(self, states: StepView) -> list[int]:
        return [x for x in sorted(states) if self.start <= x <= self.end]


@dataclass(frozen=True)
class Every(AnimationTarget):
    """Every n-th position in ascending order, starting with the first one."""

    n: int
    priority: ClassVar[int] = 50

    def __post_init__(self) -> None:
        _check_stride(self.n)

    def resolve(self, states: StepView) -> list[int]:
        return sorted(states)[:: self.n]


@dataclass(frozen=True)
class AllExceptEvery(AnimationTarget):
    """The complement of ``Every(n)`` under the same enumeration."""

    n: int
    priority: ClassVar[int] = 40

    def __post_init__(self) -> None:
        _check_stride(self.n)

    def resolve(self, states: StepView) -> list[int]:
        return [x for i, x in enumerate(sorted(states)) if i % self.n]


@dataclass(frozen=True)
class Custom(AnimationTarget):
    """Positions chosen by a ``PositionSelector``."""

    selector: PositionSelector
    priority: ClassVar[int] = 30

    def resolve(self, states: StepView) -> list[int]:
        return list(dict.fromkeys(self.selector.select(states)))


@dataclass(frozen=True)
class Untouched(AnimationTarget):
    """Positions no step has touched since the animation started."""

    priority: ClassVar[int] = 20

    def resolve(self, states: StepView) -> list[int]:
        return [x for x in sorted(states) if states[x].status is StepStatus.INITIAL]


@dataclass(frozen=True)
class UntouchedThisStep(AnimationTarget):
    """Positions the step being applied has not touched yet."""

    priority: ClassVar[int] = 10

    def resolve(self, states: StepView) -> list[int]:
        return [x for x in sorted(states) if not states[x].is_touched]


def by_priority(entries: Iterable[tuple[AnimationTarget, T]]) -> list[tuple[AnimationTarget, T]]:
    """Order (target, payload) pairs for applying; ties keep their order."""
    return sorted(entries, key=lambda entry: -entry[0].priority)


@dataclass(frozen=True)
class PositionSet:
    """A ``PositionSelector`` over a fixed collection of positions."""

    positions: tuple[int, ...]

    @classmethod
    def of(cls, positions: Sequence[int]) -> PositionSet:
        return cls(tuple(positions))

    def select(self, states: StepView) -> Iterable[int]:
        return [x for x in self.positions if x in states]

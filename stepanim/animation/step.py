"""A single timed step of an animation and its builder.

Example::

    step = (
        AnimationStepBuilder()
        .with_duration(0.1)
        .for_target(Single(0))
        .update_foreground_color("grey50")
        .add_modifier(Modifier.UNDERLINE)
        .then()
        .for_target(Every(2))
        .update_foreground_color("white")
        .remove_modifier(Modifier.UNDERLINE)
        .then()
        .for_target(UntouchedThisStep())
        .remove_all_modifiers()
        .then()
        .build()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from stepanim.animation.action import (
    AddModifier,
    AnimationAction,
    RemoveAllModifiers,
    RemoveModifier,
    UpdateBackgroundColor,
    UpdateCharacter,
    UpdateForegroundColor,
)
from stepanim.animation.symbol import ColorLike, Modifier, parse_color
from stepanim.animation.target import AnimationTarget, by_priority
from stepanim.utils.exceptions import ValidationError


def _check_duration(duration: float) -> None:
    if duration < 0:
        msg = f"Step duration must not be negative, got {duration}"
        raise ValidationError(msg, {"duration": duration})


@dataclass(frozen=True)
class AnimationStep:
    """Targeted actions plus how long the step lasts, in seconds.

    An empty ``actions`` map is a pure wait step.
    """

    actions: Mapping[AnimationTarget, tuple[AnimationAction, ...]] = field(
        default_factory=dict
    )
    duration: float = 0.0

    def __post_init__(self) -> None:
        _check_duration(self.duration)
        # Normalize to tuples so steps compare by content.
        object.__setattr__(
            self,
            "actions",
            {target: tuple(actions) for target, actions in self.actions.items()},
        )

    def ordered_actions(self) -> Iterator[tuple[AnimationTarget, tuple[AnimationAction, ...]]]:
        """Yield (target, actions) pairs in applying order."""
        yield from by_priority(self.actions.items())


class AnimationStepBuilder:
    """Accumulates (target, actions) entries into an ``AnimationStep``."""

    def __init__(self) -> None:
        self._duration: float = 0.0
        self._actions: dict[AnimationTarget, list[AnimationAction]] = {}

    def with_duration(self, seconds: float) -> AnimationStepBuilder:
        _check_duration(seconds)
        self._duration = seconds
        return self

    def for_target(self, target: AnimationTarget) -> AnimationActionAccumulator:
        return AnimationActionAccumulator(target, self)

    def _add(self, target: AnimationTarget, actions: list[AnimationAction]) -> None:
        self._actions.setdefault(target, []).extend(actions)

    def build(self) -> AnimationStep:
        return AnimationStep(
            actions={target: tuple(actions) for target, actions in self._actions.items()},
            duration=self._duration,
        )


class AnimationActionAccumulator:
    """Sub-builder scoped to one target; ``then()`` returns to the step builder."""

    def __init__(self, target: AnimationTarget, step_builder: AnimationStepBuilder) -> None:
        self._target = target
        self._step_builder = step_builder
        self._actions: list[AnimationAction] = []

    def update_character(self, value: str) -> AnimationActionAccumulator:
        return self.do_action(UpdateCharacter(value))

    def update_foreground_color(self, color: ColorLike) -> AnimationActionAccumulator:
        return self.do_action(UpdateForegroundColor(parse_color(color)))

    def update_background_color(self, color: ColorLike) -> AnimationActionAccumulator:
        return self.do_action(UpdateBackgroundColor(parse_color(color)))

    def add_modifier(self, modifier: Modifier) -> AnimationActionAccumulator:
        return self.do_action(AddModifier(modifier))

    def remove_modifier(self, modifier: Modifier) -> AnimationActionAccumulator:
        return self.do_action(RemoveModifier(modifier))

    def remove_all_modifiers(self) -> AnimationActionAccumulator:
        return self.do_action(RemoveAllModifiers())

    def do_action(self, action: AnimationAction) -> AnimationActionAccumulator:
        self._actions.append(action)
        return self

    def do_actions(self, actions: list[AnimationAction]) -> AnimationActionAccumulator:
        self._actions.extend(actions)
        return self

    def then(self) -> AnimationStepBuilder:
        self._step_builder._add(self._target, self._actions)  # noqa: SLF001
        return self._step_builder

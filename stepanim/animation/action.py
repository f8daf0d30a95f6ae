"""Atomic mutations applied to a matched symbol."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rich.color import Color

from stepanim.animation.symbol import ColorLike, Modifier, Symbol, parse_color
from stepanim.utils.exceptions import ValidationError


@dataclass(frozen=True)
class AnimationAction(ABC):
    """Base class of all actions."""

    @abstractmethod
    def apply(self, symbol: Symbol) -> Symbol:
        """Return ``symbol`` with this mutation applied."""


@dataclass(frozen=True)
class UpdateCharacter(AnimationAction):
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            msg = "Character must not be empty"
            raise ValidationError(msg)

    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_value(self.value)


@dataclass(frozen=True)
class UpdateForegroundColor(AnimationAction):
    color: Color | None

    @classmethod
    def parse(cls, color: ColorLike) -> UpdateForegroundColor:
        return cls(parse_color(color))

    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_style(symbol.style.with_foreground(self.color))


@dataclass(frozen=True)
class UpdateBackgroundColor(AnimationAction):
    color: Color | None

    @classmethod
    def parse(cls, color: ColorLike) -> UpdateBackgroundColor:
        return cls(parse_color(color))

    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_style(symbol.style.with_background(self.color))


@dataclass(frozen=True)
class AddModifier(AnimationAction):
    modifier: Modifier

    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_style(symbol.style.add_modifiers(self.modifier))


@dataclass(frozen=True)
class RemoveModifier(AnimationAction):
    modifier: Modifier

    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_style(symbol.style.remove_modifiers(self.modifier))


@dataclass(frozen=True)
class RemoveAllModifiers(AnimationAction):
    def apply(self, symbol: Symbol) -> Symbol:
        return symbol.with_style(symbol.style.clear_modifiers())


def restore(symbol: Symbol) -> list[AnimationAction]:
    """Actions that turn any symbol into exactly ``symbol``."""
    actions: list[AnimationAction] = [
        UpdateCharacter(symbol.value),
        UpdateForegroundColor(symbol.style.foreground),
        UpdateBackgroundColor(symbol.style.background),
        RemoveAllModifiers(),
    ]
    if symbol.style.modifiers:
        actions.append(AddModifier(symbol.style.modifiers))
    return actions


def apply_actions(symbol: Symbol, actions: list[AnimationAction]) -> Symbol:
    """Apply ``actions`` to ``symbol`` in list order."""
    for action in actions:
        symbol = action.apply(symbol)
    return symbol

"""Symbol and style value types.

A symbol is one renderable character position of a text run: a character
value plus its visual attributes. Both are immutable; every change produces a
fresh value.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Flag, auto
from typing import Any, Union

from rich.color import Color, ColorParseError
from rich.style import Style

from stepanim.utils.exceptions import ValidationError

ColorLike = Union[Color, str, None]


class Modifier(Flag):
    """Text emphasis flags."""

    NONE = 0
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    BLINK = auto()
    REVERSE = auto()
    HIDDEN = auto()
    STRIKE = auto()


# Modifier -> keyword of rich.style.Style
_RICH_ATTRIBUTES: dict[Modifier, str] = {
    Modifier.BOLD: "bold",
    Modifier.DIM: "dim",
    Modifier.ITALIC: "italic",
    Modifier.UNDERLINE: "underline",
    Modifier.BLINK: "blink",
    Modifier.REVERSE: "reverse",
    Modifier.HIDDEN: "conceal",
    Modifier.STRIKE: "strike",
}


def parse_color(value: ColorLike) -> Color | None:
    """Parse a Rich color definition ("red", "#ff8800", "color(33)", ...).

    Raises:
        ValidationError: If the string is not a valid color

    """
    if value is None or isinstance(value, Color):
        return value
    try:
        return Color.parse(value)
    except ColorParseError as e:
        msg = f"Invalid color: {value!r}"
        raise ValidationError(msg, {"color": value}) from e


def parse_modifiers(value: Modifier | str | None) -> Modifier:
    """Parse modifiers given as a flag or as space separated names ("bold dim")."""
    if value is None:
        return Modifier.NONE
    if isinstance(value, Modifier):
        return value
    result = Modifier.NONE
    for name in value.split():
        try:
            result |= Modifier[name.upper()]
        except KeyError as e:
            msg = f"Unknown modifier: {name!r}"
            raise ValidationError(msg, {"modifier": name}) from e
    return result


def dim_color(color: ColorLike, factor: float) -> Color | None:
    """Scale the RGB components of a color by ``factor``.

    Standard and 256-palette colors are first resolved to their truecolor
    triplet. ``None`` (terminal default) has no RGB value and is returned
    unchanged.
    """
    if not 0.0 <= factor <= 1.0:
        msg = f"Dim factor must be between 0.0 and 1.0, got {factor}"
        raise ValidationError(msg)
    parsed = parse_color(color)
    if parsed is None:
        return None
    triplet = parsed.get_truecolor()
    return Color.from_rgb(
        round(triplet.red * factor),
        round(triplet.green * factor),
        round(triplet.blue * factor),
    )


@dataclass(frozen=True)
class SymbolStyle:
    """Visual attributes of one symbol."""

    foreground: Color | None = None
    background: Color | None = None
    modifiers: Modifier = Modifier.NONE

    @classmethod
    def parse(
        cls,
        foreground: ColorLike = None,
        background: ColorLike = None,
        modifiers: Modifier | str | None = None,
    ) -> SymbolStyle:
        """Build a style from Rich color strings and modifier names."""
        return cls(
            foreground=parse_color(foreground),
            background=parse_color(background),
            modifiers=parse_modifiers(modifiers),
        )

    def with_foreground(self, color: ColorLike) -> SymbolStyle:
        return replace(self, foreground=parse_color(color))

    def with_background(self, color: ColorLike) -> SymbolStyle:
        return replace(self, background=parse_color(color))

    def add_modifiers(self, modifiers: Modifier) -> SymbolStyle:
        return replace(self, modifiers=self.modifiers | modifiers)

    def remove_modifiers(self, modifiers: Modifier) -> SymbolStyle:
        return replace(self, modifiers=self.modifiers & ~modifiers)

    def clear_modifiers(self) -> SymbolStyle:
        return replace(self, modifiers=Modifier.NONE)

    def to_rich(self) -> Style:
        """Convert to a Rich style; unset attributes are left to inherit."""
        attributes: dict[str, Any] = {
            name: True
            for modifier, name in _RICH_ATTRIBUTES.items()
            if modifier in self.modifiers
        }
        return Style(color=self.foreground, bgcolor=self.background, **attributes)


@dataclass(frozen=True)
class Symbol:
    """One renderable character position."""

    value: str
    style: SymbolStyle = field(default_factory=SymbolStyle)

    def with_value(self, value: str) -> Symbol:
        return replace(self, value=value)

    def with_style(self, style: SymbolStyle) -> Symbol:
        return replace(self, style=style)

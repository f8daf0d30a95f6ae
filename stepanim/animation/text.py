"""Static styling of a text run, used before and after an animation plays."""

from __future__ import annotations

from typing import Mapping

from stepanim.animation.state import StepStatus, StepSymbolState
from stepanim.animation.symbol import Symbol, SymbolStyle
from stepanim.animation.target import AnimationTarget, Range, Single, Untouched, by_priority
from stepanim.utils.exceptions import ValidationError

# Static styles only know about these selections.
TEXT_TARGETS = (Single, Range, Untouched)

TextStyles = Mapping[AnimationTarget, SymbolStyle]


def create_symbols(text: str, styles: TextStyles | None = None) -> dict[int, Symbol]:
    """Build the starting ``{position: Symbol}`` map of ``text``.

    ``Single`` wins over ``Range``, which wins over ``Untouched``. Positions no
    selection reaches get the default style.

    Raises:
        ValidationError: If a selection other than Single, Range or Untouched
            is given

    """
    styles = styles or {}
    for target in styles:
        if not isinstance(target, TEXT_TARGETS):
            msg = f"{type(target).__name__} cannot be used to style static text"
            raise ValidationError(msg, {"target": repr(target)})

    symbols = {x: Symbol(value) for x, value in enumerate(text)}
    view = {x: StepSymbolState(symbol) for x, symbol in symbols.items()}
    claimed: set[int] = set()

    for target, style in by_priority(styles.items()):
        for x in target.resolve(view):
            if x not in symbols or x in claimed:
                continue
            symbols[x] = symbols[x].with_style(style)
            view[x] = StepSymbolState(symbols[x], StepStatus.STYLED)
            claimed.add(x)

    return symbols

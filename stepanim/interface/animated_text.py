"""Rich rendering adapter for an animated single-line text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Hashable, Mapping, TypeVar

from rich.text import Text

from stepanim.animation.animation import Animation
from stepanim.animation.text import TextStyles, create_symbols
from stepanim.utils.exceptions import AnimationNotFoundError
from stepanim.utils.time import TimeSource

if TYPE_CHECKING:
    from stepanim.animation.style import AnimationStyle
    from stepanim.animation.symbol import Symbol

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class AnimatedText(Generic[K]):
    """A text run with statically styled symbols and keyed animations.

    At most one animation is active. Every ``render()`` ticks it once; when it
    ends, the text falls back to its static styling.
    """

    def __init__(
        self,
        text: str,
        styles: TextStyles | None = None,
        animations: Mapping[K, AnimationStyle] | None = None,
        clock: TimeSource | None = None,
    ) -> None:
        self.text = text
        self.animations: dict[K, AnimationStyle] = dict(animations or {})
        self._clock = clock
        self._symbols = create_symbols(text, styles)
        self._active: Animation | None = None
        self._active_key: K | None = None

    @property
    def active_key(self) -> K | None:
        return self._active_key

    @property
    def is_animating(self) -> bool:
        return self._active is not None

    @property
    def is_paused(self) -> bool:
        return self._active is not None and self._active.is_paused

    def enable_animation(self, key: K) -> None:
        """Start the animation registered under ``key``, replacing any active one.

        Raises:
            AnimationNotFoundError: If no animation is registered under ``key``

        """
        style = self.animations.get(key)
        if style is None:
            msg = f"No animation registered under {key!r}"
            raise AnimationNotFoundError(msg, {"key": key, "available": list(self.animations)})
        self._active = Animation(style, self._symbols, clock=self._clock)
        self._active_key = key
        logger.debug("Enabled animation %r", key)

    def disable_animation(self) -> None:
        self._active = None
        self._active_key = None

    def pause_animation(self) -> None:
        if self._active is not None:
            self._active.pause()

    def unpause_animation(self) -> None:
        if self._active is not None:
            self._active.unpause()

    def advance_animation(self) -> None:
        if self._active is not None:
            self._active.advance()

    def current_symbols(self) -> Mapping[int, Symbol]:
        """Tick the active animation and return what should be painted."""
        if self._active is None:
            return self._symbols
        frame = self._active.next_frame()
        if frame is None:
            logger.debug("Animation %r ended", self._active_key)
            self.disable_animation()
            return self._symbols
        return frame.symbols

    def render(self) -> Text:
        symbols = self.current_symbols()
        text = Text(no_wrap=True, end="")
        for _, symbol in sorted(symbols.items()):
            text.append(symbol.value, style=symbol.style.to_rich())
        return text

    def __rich__(self) -> Text:
        return self.render()

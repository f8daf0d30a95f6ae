"""Textual widgets painting animated text."""

from __future__ import annotations

from typing import Any

from textual.widgets import Static

from stepanim.interface.animated_text import AnimatedText


class AnimatedTextWidget(Static):  # type: ignore[misc]
    """Static widget that repaints an ``AnimatedText`` on a fixed interval."""

    DEFAULT_CSS = """
    AnimatedTextWidget {
        height: 1;
        width: auto;
    }
    """

    def __init__(
        self,
        animated_text: AnimatedText[Any],
        interval: float = 1 / 30,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Initialize the widget.

        Args:
            animated_text: Text to paint
            interval: Seconds between two frames

        """
        super().__init__(*args, **kwargs)
        self.animated_text = animated_text
        self.interval = interval

    def on_mount(self) -> None:  # type: ignore[override]  # pragma: no cover
        """Start ticking."""
        self.tick()
        self.set_interval(self.interval, self.tick)

    def tick(self) -> None:
        """Paint the next frame."""
        self.update(self.animated_text.render())

    def enable_animation(self, key: Any) -> None:
        self.animated_text.enable_animation(key)
        self.tick()

    def disable_animation(self) -> None:
        self.animated_text.disable_animation()
        self.tick()

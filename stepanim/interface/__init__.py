"""Rendering adapters for Rich and Textual."""

from stepanim.interface.animated_text import AnimatedText
from stepanim.interface.widgets import AnimatedTextWidget

__all__ = ["AnimatedText", "AnimatedTextWidget"]

"""stepanim - declarative step-based animations for terminal text."""

from __future__ import annotations

__version__ = "0.1.0"

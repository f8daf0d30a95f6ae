"""Ready-made step generators."""

from stepanim.animation.presets.base import PresetConfig
from stepanim.animation.presets.scanner import ScannerAnimation
from stepanim.animation.presets.spinner import SPINNER_SYMBOLS, SpinnerAnimation, SpinnerType
from stepanim.animation.presets.ticker import TickerAnimation, TickerDirection
from stepanim.animation.presets.wave import WaveAnimation

__all__ = [
    "SPINNER_SYMBOLS",
    "PresetConfig",
    "ScannerAnimation",
    "SpinnerAnimation",
    "SpinnerType",
    "TickerAnimation",
    "TickerDirection",
    "WaveAnimation",
]

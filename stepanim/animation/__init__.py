"""Declarative step-based text animation engine."""

from stepanim.animation.action import (
    AddModifier,
    AnimationAction,
    RemoveAllModifiers,
    RemoveModifier,
    UpdateBackgroundColor,
    UpdateCharacter,
    UpdateForegroundColor,
    restore,
)
from stepanim.animation.advancable import (
    AdvancableAnimation,
    AutomaticallyAdvancableAnimation,
    ManuallyAdvancableAnimation,
    create_advancable,
)
from stepanim.animation.animation import Animation, AnimationFrame
from stepanim.animation.processing import apply_step, resolve_step
from stepanim.animation.repeatable import (
    FinitelyRepeatableAnimation,
    InfinitelyRepeatableAnimation,
    RepeatableAnimation,
    create_repeatable,
)
from stepanim.animation.state import (
    StepStatus,
    StepSymbolState,
    SymbolState,
    SymbolStatus,
    merge_states,
    to_step_view,
)
from stepanim.animation.step import AnimationActionAccumulator, AnimationStep, AnimationStepBuilder
from stepanim.animation.style import AdvanceMode, AnimationStyle, AnimationStyleBuilder, RepeatMode
from stepanim.animation.symbol import Modifier, Symbol, SymbolStyle, dim_color
from stepanim.animation.target import (
    AllExceptEvery,
    AnimationTarget,
    Custom,
    Every,
    PositionSelector,
    PositionSet,
    Range,
    Single,
    Untouched,
    UntouchedThisStep,
)
from stepanim.animation.text import create_symbols

__all__ = [
    "AddModifier",
    "AdvancableAnimation",
    "AdvanceMode",
    "AllExceptEvery",
    "Animation",
    "AnimationAction",
    "AnimationActionAccumulator",
    "AnimationFrame",
    "AnimationStep",
    "AnimationStepBuilder",
    "AnimationStyle",
    "AnimationStyleBuilder",
    "AnimationTarget",
    "AutomaticallyAdvancableAnimation",
    "Custom",
    "Every",
    "FinitelyRepeatableAnimation",
    "InfinitelyRepeatableAnimation",
    "ManuallyAdvancableAnimation",
    "Modifier",
    "PositionSelector",
    "PositionSet",
    "Range",
    "RemoveAllModifiers",
    "RemoveModifier",
    "RepeatMode",
    "RepeatableAnimation",
    "Single",
    "StepStatus",
    "StepSymbolState",
    "Symbol",
    "SymbolState",
    "SymbolStatus",
    "SymbolStyle",
    "Untouched",
    "UntouchedThisStep",
    "UpdateBackgroundColor",
    "UpdateCharacter",
    "UpdateForegroundColor",
    "apply_step",
    "create_advancable",
    "create_repeatable",
    "create_symbols",
    "dim_color",
    "merge_states",
    "resolve_step",
    "restore",
    "to_step_view",
]

"""Per-position animation state.

Two separate snapshots are used while a step is processed:

- the committed state (``SymbolState``), which survives between frames;
- the step view (``StepSymbolState``), which only lives while one step is
  being applied and remembers what that step has already touched.

Both maps are treated as immutable; a new map is built at every boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from stepanim.animation.symbol import Symbol


class SymbolStatus(Enum):
    """Committed status of a position."""

    INITIAL = "initial"  # never touched since the animation started
    STYLED = "styled"  # touched by at least one step


class StepStatus(Enum):
    """Status of a position while one step is applied."""

    INITIAL = "initial"
    UNTOUCHED = "untouched"  # styled by an earlier step, not yet by this one
    STYLED = "styled"  # already touched by this step


@dataclass(frozen=True)
class SymbolState:
    symbol: Symbol
    status: SymbolStatus = SymbolStatus.INITIAL

    @property
    def is_initial(self) -> bool:
        return self.status is SymbolStatus.INITIAL


@dataclass(frozen=True)
class StepSymbolState:
    symbol: Symbol
    status: StepStatus = StepStatus.INITIAL

    @property
    def is_touched(self) -> bool:
        """True once the step being built has touched this position."""
        return self.status is StepStatus.STYLED


SymbolStates = Mapping[int, SymbolState]
StepView = Mapping[int, StepSymbolState]


def initial_states(symbols: Mapping[int, Symbol]) -> dict[int, SymbolState]:
    """Wrap the starting symbols of a text run as untouched state."""
    return {x: SymbolState(symbol) for x, symbol in symbols.items()}


def to_step_view(states: SymbolStates) -> dict[int, StepSymbolState]:
    """Open a new step: positions styled before become eligible again."""
    return {
        x: StepSymbolState(
            state.symbol,
            StepStatus.INITIAL if state.is_initial else StepStatus.UNTOUCHED,
        )
        for x, state in states.items()
    }


def overlay(view: StepView, step_result: Mapping[int, Symbol]) -> dict[int, StepSymbolState]:
    """Return the step view with the positions in ``step_result`` marked touched."""
    updated = dict(view)
    for x, symbol in step_result.items():
        if x in updated:
            updated[x] = StepSymbolState(symbol, StepStatus.STYLED)
    return updated


def merge_states(
    previous: SymbolStates,
    step_result: Mapping[int, Symbol],
) -> dict[int, SymbolState]:
    """Commit one step.

    Positions touched by the step become styled with their new symbol; every
    other position keeps its previous status and symbol. Positions that do not
    exist in ``previous`` are ignored.
    """
    merged: dict[int, SymbolState] = {}
    for x, state in previous.items():
        if x in step_result:
            merged[x] = SymbolState(step_result[x], SymbolStatus.STYLED)
        else:
            merged[x] = state
    return merged

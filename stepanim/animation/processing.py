"""Applying one step to the committed per-position state."""

from __future__ import annotations

from typing import Mapping

from stepanim.animation.action import apply_actions
from stepanim.animation.state import (
    SymbolState,
    SymbolStates,
    merge_states,
    overlay,
    to_step_view,
)
from stepanim.animation.step import AnimationStep
from stepanim.animation.symbol import Symbol


def resolve_step(states: SymbolStates, step: AnimationStep) -> dict[int, Symbol]:
    """Return the symbols a step touches, keyed by position.

    Target groups run in priority order and each position is claimed by the
    first group that resolves to it; broader groups never override a more
    specific one within the same step. Every group resolves against the step
    view as left by the groups before it. Positions missing from ``states``
    are skipped.
    """
    base_view = to_step_view(states)
    step_result: dict[int, Symbol] = {}

    for target, actions in step.ordered_actions():
        view = overlay(base_view, step_result)
        claimed: dict[int, Symbol] = {}
        for x in target.resolve(view):
            state = view.get(x)
            if state is None or state.is_touched:
                continue
            claimed[x] = apply_actions(state.symbol, list(actions))
        step_result.update(claimed)

    return step_result


def apply_step(states: SymbolStates, step: AnimationStep) -> dict[int, SymbolState]:
    """Apply ``step`` to ``states`` and return the new committed state."""
    return merge_states(states, resolve_step(states, step))


def frame_symbols(states: Mapping[int, SymbolState]) -> dict[int, Symbol]:
    """Every position is paintable, whether styled or still initial."""
    return {x: state.symbol for x, state in sorted(states.items())}

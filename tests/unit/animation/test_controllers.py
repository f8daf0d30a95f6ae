"""Tests for the repetition and advance controllers."""

from __future__ import annotations

import pytest

from stepanim.animation.advancable import (
    AutomaticallyAdvancableAnimation,
    ManuallyAdvancableAnimation,
    create_advancable,
)
from stepanim.animation.repeatable import (
    FinitelyRepeatableAnimation,
    InfinitelyRepeatableAnimation,
    RepeatableAnimation,
    create_repeatable,
)
from stepanim.animation.step import AnimationStep
from stepanim.animation.style import AdvanceMode, RepeatMode

pytestmark = [pytest.mark.unit, pytest.mark.animation]


@pytest.fixture
def steps() -> list[AnimationStep]:
    return [AnimationStep(duration=float(i + 1)) for i in range(3)]


class TestFinite:
    def test_base_controller_is_abstract(self, steps):
        with pytest.raises(TypeError):
            RepeatableAnimation(steps)

    def test_two_passes_then_exhausted(self, steps):
        controller = FinitelyRepeatableAnimation(steps, 2)
        played = [controller.next_step() for _ in range(6)]
        assert played == steps + steps
        for _ in range(100):
            assert controller.next_step() is None
        assert controller.is_exhausted
        assert controller.current_step() is None

    def test_zero_passes_plays_once(self, steps):
        controller = FinitelyRepeatableAnimation(steps, 0)
        assert [controller.next_step() for _ in range(3)] == steps
        assert controller.next_step() is None
        assert controller.next_step() is None

    def test_one_pass(self, steps):
        controller = create_repeatable(steps, RepeatMode.finite(1))
        assert [controller.next_step() for _ in range(4)] == [*steps, None]

    def test_iteration_counter(self, steps):
        controller = FinitelyRepeatableAnimation(steps, 3)
        for _ in range(4):
            controller.next_step()
        assert controller.iteration == 1
        assert controller.index == 0

    def test_current_step_does_not_move(self, steps):
        controller = FinitelyRepeatableAnimation(steps, 1)
        assert controller.current_step() is steps[0]
        assert controller.current_step() is steps[0]
        controller.next_step()
        controller.next_step()
        assert controller.current_step() is steps[1]

    def test_start_enters_first_step(self, steps):
        controller = FinitelyRepeatableAnimation(steps, 1)
        controller.start()
        controller.start()
        assert controller.current_step() is steps[0]
        assert controller.next_step() is steps[1]


class TestInfinite:
    def test_wraps_on_fourth_call(self, steps):
        controller = InfinitelyRepeatableAnimation(steps)
        first = controller.next_step()
        controller.next_step()
        controller.next_step()
        fourth = controller.next_step()
        assert fourth is steps[0]
        assert fourth == first
        assert controller.iteration == 1

    def test_never_exhausts(self, steps):
        controller = create_repeatable(steps, RepeatMode.infinite())
        for _ in range(300):
            assert controller.next_step() is not None
        assert not controller.is_exhausted


class TestEmpty:
    @pytest.mark.parametrize("mode", [RepeatMode.infinite(), RepeatMode.finite(2)])
    def test_empty_steps_never_produce(self, mode):
        controller = create_repeatable([], mode)
        assert controller.current_step() is None
        assert controller.next_step() is None
        assert controller.is_exhausted


class TestAdvanceController:
    def test_factory(self, steps):
        assert isinstance(
            create_advancable(steps, RepeatMode.infinite(), AdvanceMode.AUTO),
            AutomaticallyAdvancableAnimation,
        )
        assert isinstance(
            create_advancable(steps, RepeatMode.infinite(), "manual"),
            ManuallyAdvancableAnimation,
        )

    def test_auto_forwards(self, steps):
        controller = create_advancable(steps, RepeatMode.finite(1), AdvanceMode.AUTO)
        assert [controller.next_step() for _ in range(4)] == [*steps, None]
        assert controller.is_exhausted

    def test_auto_advance_is_noop(self, steps):
        controller = create_advancable(steps, RepeatMode.infinite(), AdvanceMode.AUTO)
        controller.start()
        controller.advance()
        assert controller.current_step() is steps[0]

    def test_manual_needs_advance(self, steps):
        controller = create_advancable(steps, RepeatMode.infinite(), AdvanceMode.MANUAL)
        controller.start()
        assert controller.next_step() is None
        assert controller.current_step() is steps[0]

        controller.advance()
        assert controller.is_ready
        assert controller.next_step() is steps[1]
        assert not controller.is_ready
        assert controller.next_step() is None

    def test_manual_advance_does_not_accumulate(self, steps):
        controller = create_advancable(steps, RepeatMode.infinite(), AdvanceMode.MANUAL)
        controller.start()
        controller.advance()
        controller.advance()
        assert controller.next_step() is steps[1]
        assert controller.next_step() is None

    def test_manual_current_step_keeps_ready(self, steps):
        controller = create_advancable(steps, RepeatMode.infinite(), AdvanceMode.MANUAL)
        controller.start()
        controller.advance()
        controller.current_step()
        assert controller.is_ready

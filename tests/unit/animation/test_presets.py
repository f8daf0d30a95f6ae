"""Tests for the preset step generators."""

from __future__ import annotations

import pytest
from rich.color import Color

from stepanim.animation.animation import Animation
from stepanim.animation.presets import (
    SPINNER_SYMBOLS,
    PresetConfig,
    ScannerAnimation,
    SpinnerAnimation,
    SpinnerType,
    TickerAnimation,
    TickerDirection,
    WaveAnimation,
)
from stepanim.animation.processing import apply_step
from stepanim.animation.state import initial_states
from stepanim.animation.style import AdvanceMode, RepeatMode
from stepanim.animation.symbol import Modifier, SymbolStyle, dim_color
from stepanim.animation.target import Single
from stepanim.utils.exceptions import ValidationError

pytestmark = [pytest.mark.unit, pytest.mark.animation]

RED = Color.parse("#ff0000")


def play(preset, passes: int = 1) -> list:
    """Apply every step of ``preset`` in order and collect the states."""
    states = initial_states(preset.symbols())
    history = []
    for _ in range(passes):
        for step in preset.build_steps():
            states = apply_step(states, step)
            history.append(states)
    return history


def texts(history) -> list[str]:
    return ["".join(state.symbol.value for _, state in sorted(states.items())) for states in history]


class TestPresetConfig:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            PresetConfig(text="abc")


class TestTicker:
    def test_forward(self):
        preset = TickerAnimation(text="abcd", duration=0.2)
        assert texts(play(preset)) == ["abcd", "dabc", "cdab", "bcda"]

    def test_backward(self):
        preset = TickerAnimation(text="abcd", direction=TickerDirection.BACKWARD)
        assert texts(play(preset)) == ["abcd", "bcda", "cdab", "dabc"]

    def test_direction_from_string(self):
        assert TickerAnimation(text="ab", direction="backward").direction is TickerDirection.BACKWARD

    def test_styles_travel_with_characters(self):
        preset = TickerAnimation(text="abc", styles={Single(0): SymbolStyle(foreground=RED)})
        second = play(preset)[1]
        assert second[1].symbol.value == "a"
        assert second[1].symbol.style.foreground == RED
        assert second[0].symbol.style.foreground is None

    def test_loops_back_to_start(self):
        history = play(TickerAnimation(text="xyz"), passes=2)
        assert texts(history)[3] == "xyz"

    def test_style_settings(self):
        style = TickerAnimation(
            text="abc",
            duration=0.3,
            repeat_mode=RepeatMode.finite(2),
            advance_mode=AdvanceMode.MANUAL,
        ).to_animation_style()
        assert len(style.steps) == 3
        assert all(step.duration == 0.3 for step in style.steps)
        assert style.repeat_mode == RepeatMode.finite(2)
        assert style.advance_mode is AdvanceMode.MANUAL

    def test_empty_text(self):
        assert TickerAnimation(text="").build_steps() == []

    def test_negative_duration(self):
        with pytest.raises(ValidationError):
            TickerAnimation(text="abc", duration=-1)


class TestScanner:
    def test_head_path(self):
        preset = ScannerAnimation(text="abcd")
        assert [head for head, _ in preset.head_positions(4)] == [0, 1, 2, 3, 2, 1]
        assert preset.head_positions(1) == [(0, 1)]
        assert preset.head_positions(0) == []

    def test_highlight_with_trail(self):
        preset = ScannerAnimation(text="abcd", foreground_color=RED, trail_length=2, trail_dim_factor=0.5)
        history = play(preset)
        at_head_2 = history[2]
        assert at_head_2[2].symbol.style.foreground == RED
        assert at_head_2[1].symbol.style.foreground == dim_color(RED, 0.5)
        assert at_head_2[0].symbol.style.foreground == dim_color(RED, 0.25)
        assert at_head_2[3].symbol.style.foreground is None

    def test_trail_follows_direction(self):
        preset = ScannerAnimation(text="abcd", foreground_color=RED, trail_length=1)
        history = play(preset)
        # Step 4: head back at 2, coming from 3
        at_head_2_back = history[4]
        assert at_head_2_back[2].symbol.style.foreground == RED
        assert at_head_2_back[3].symbol.style.foreground == dim_color(RED, 0.5)
        assert at_head_2_back[1].symbol.style.foreground is None
        assert at_head_2_back[0].symbol.style.foreground is None

    def test_positions_leaving_window_are_restored(self):
        preset = ScannerAnimation(text="abcde", foreground_color=RED, trail_length=1)
        history = play(preset)
        assert history[3][1].symbol.style == SymbolStyle()
        assert history[3][1].symbol.value == "b"

    def test_without_color_uses_modifiers(self):
        preset = ScannerAnimation(text="abc", trail_length=1)
        at_head_1 = play(preset)[1]
        assert at_head_1[1].symbol.style.modifiers == Modifier.BOLD
        assert at_head_1[0].symbol.style.modifiers == Modifier.DIM

    def test_looping_restores_last_window(self):
        preset = ScannerAnimation(text="abcd", foreground_color=RED, trail_length=1)
        history = play(preset, passes=2)
        restart = history[6]
        assert restart[0].symbol.style.foreground == RED
        assert restart[1].symbol.style.foreground is None
        assert restart[2].symbol.style.foreground is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"trail_length": -1}, {"trail_dim_factor": 1.5}, {"foreground_color": "nope"}],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValidationError):
            ScannerAnimation(text="abc", **kwargs)


class TestWave:
    def test_head_and_tail(self):
        preset = WaveAnimation(text="abcd", foreground_color=RED)
        history = play(preset)
        assert history[0][0].symbol.style == SymbolStyle(foreground=RED)
        at_head_2 = history[2]
        assert at_head_2[2].symbol.style == SymbolStyle(foreground=RED)
        assert at_head_2[1].symbol.style == SymbolStyle(foreground=RED, modifiers=Modifier.DIM)
        assert at_head_2[0].symbol.style == SymbolStyle()

    def test_wraps_around(self):
        preset = WaveAnimation(text="abc", foreground_color=RED)
        history = play(preset, passes=2)
        restart = history[3]
        assert restart[0].symbol.style == SymbolStyle(foreground=RED)
        assert restart[1].symbol.style == SymbolStyle()
        assert restart[2].symbol.style == SymbolStyle()

    def test_one_step_per_position(self):
        assert len(WaveAnimation(text="hello").build_steps()) == 5


class TestSpinner:
    def test_cycles_symbols(self):
        preset = SpinnerAnimation(spinner_type=SpinnerType.ASCII)
        assert [states[0].symbol.value for states in play(preset)] == ["|", "/", "-", "\\"]

    def test_default_type(self):
        preset = SpinnerAnimation()
        assert preset.spinner_type is SpinnerType.BRAILLE_DOUBLE
        assert preset.frames == ("⠘", "⠰", "⠤", "⠆", "⠃", "⠉")

    def test_every_type_has_symbols(self):
        assert set(SPINNER_SYMBOLS) == set(SpinnerType)
        assert all(SpinnerType(t).symbols for t in SpinnerType)

    def test_color(self):
        preset = SpinnerAnimation(spinner_type="arrow", foreground_color="green")
        states = play(preset)[0]
        assert states[0].symbol.style.foreground == Color.parse("green")

    def test_custom_cycle(self):
        preset = SpinnerAnimation(cycle=["a", "b"])
        assert texts(play(preset)) == ["a", "b"]

    @pytest.mark.parametrize("cycle", [[], ["a", ""]])
    def test_invalid_cycle(self, cycle):
        with pytest.raises(ValidationError):
            SpinnerAnimation(cycle=cycle)

    def test_runs_in_animation(self, fake_clock):
        preset = SpinnerAnimation(spinner_type=SpinnerType.BLACK_CIRCLE, duration=0.1)
        animation = Animation(preset.to_animation_style(), preset.symbols(), clock=fake_clock)
        assert animation.next_frame().text == "◑"
        fake_clock.set(0.15)
        assert animation.next_frame().text == "◒"

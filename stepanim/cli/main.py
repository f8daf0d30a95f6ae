"""Command line for stepanim.

Plays the presets live in the terminal and shows the effective configuration.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import click
import toml
from rich.console import Console
from rich.live import Live

from stepanim.animation.presets import (
    PresetConfig,
    ScannerAnimation,
    SpinnerAnimation,
    SpinnerType,
    TickerAnimation,
    TickerDirection,
    WaveAnimation,
)
from stepanim.animation.style import RepeatMode
from stepanim.config.config import ConfigManager
from stepanim.interface.animated_text import AnimatedText
from stepanim.models import LogLevel
from stepanim.utils.exceptions import StepAnimError
from stepanim.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_KEY = "demo"


def _get_config_manager(ctx: click.Context) -> ConfigManager:
    return ctx.obj["config_manager"]


def _play(console: Console, animated_text: AnimatedText[str], seconds: float | None, interval: float) -> None:
    """Tick ``animated_text`` until it ends or ``seconds`` have passed.

    Manual animations are advanced on every tick; they still wait for each
    step to last its duration.
    """
    deadline = None if seconds is None else time.monotonic() + seconds
    animated_text.enable_animation(DEMO_KEY)
    with Live(animated_text.render(), console=console, auto_refresh=False) as live:
        while animated_text.is_animating:
            if deadline is not None and time.monotonic() >= deadline:
                break
            time.sleep(interval)
            animated_text.advance_animation()
            live.update(animated_text.render(), refresh=True)


def _run_preset(ctx: click.Context, preset: PresetConfig, label: str, seconds: float | None) -> None:
    cfg = _get_config_manager(ctx).config.animation
    animated_text: AnimatedText[str] = AnimatedText(
        label,
        animations={DEMO_KEY: preset.to_animation_style()},
    )
    logger.info(
        "Playing %s over %d position(s), repeat %s",
        type(preset).__name__,
        len(label),
        preset.repeat_mode,
    )
    try:
        _play(Console(), animated_text, seconds, cfg.frame_interval)
    except KeyboardInterrupt:
        logger.debug("Demo interrupted")


def _repeat_mode(ctx: click.Context, repeat: int | None) -> RepeatMode:
    if repeat is None:
        return _get_config_manager(ctx).config.animation.repeat_mode
    return RepeatMode.finite(repeat)


def _common_options(ctx: click.Context, options: dict[str, Any]) -> dict[str, Any]:
    cfg = _get_config_manager(ctx).config.animation
    duration = options.get("duration")
    return {
        "duration": cfg.step_duration if duration is None else duration,
        "repeat_mode": _repeat_mode(ctx, options.get("repeat")),
        "advance_mode": cfg.advance_mode,
        "foreground_color": options.get("color") or cfg.highlight_color,
    }


def demo_options(func: Any) -> Any:
    """Options shared by every demo command."""
    func = click.option(
        "--seconds",
        type=click.FloatRange(min=0.0),
        default=None,
        help="Stop after this many seconds (default: when the animation ends)",
    )(func)
    func = click.option("--color", type=str, default=None, help="Highlight color")(func)
    func = click.option(
        "--repeat",
        type=click.IntRange(min=0),
        default=None,
        help="Number of passes (default: endless)",
    )(func)
    return click.option(
        "--duration",
        type=click.FloatRange(min=0.0),
        default=None,
        help="Seconds per step",
    )(func)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v: info, -vv: debug)",
)
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: int) -> None:
    """Stepanim - declarative step-based terminal text animations."""
    ctx.ensure_object(dict)
    try:
        config_manager = ConfigManager(config, setup_logs=False)
    except StepAnimError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["config_manager"] = config_manager

    observability = config_manager.config.observability
    if verbose >= 2:
        observability = observability.model_copy(update={"log_level": LogLevel.DEBUG})
    elif verbose == 1:
        observability = observability.model_copy(update={"log_level": LogLevel.INFO})
    setup_logging(observability)


@cli.group()
def demo() -> None:
    """Play a preset animation in the terminal."""


@demo.command("ticker")
@click.argument("text")
@click.option(
    "--direction",
    type=click.Choice([d.value for d in TickerDirection]),
    default=TickerDirection.FORWARD.value,
    show_default=True,
)
@demo_options
@click.pass_context
def ticker_cmd(ctx: click.Context, text: str, direction: str, **options: Any) -> None:
    """Rotate TEXT one position per step."""
    common = _common_options(ctx, options)
    try:
        preset = TickerAnimation(text=text, direction=TickerDirection(direction), **common)
    except StepAnimError as e:
        raise click.ClickException(str(e)) from e
    _run_preset(ctx, preset, text, options.get("seconds"))


@demo.command("scanner")
@click.argument("text")
@click.option("--trail-length", type=click.IntRange(min=0), default=None, help="Trail length")
@demo_options
@click.pass_context
def scanner_cmd(ctx: click.Context, text: str, trail_length: int | None, **options: Any) -> None:
    """Sweep a highlight over TEXT and back."""
    cfg = _get_config_manager(ctx).config.animation
    common = _common_options(ctx, options)
    try:
        preset = ScannerAnimation(
            text=text,
            trail_length=cfg.trail_length if trail_length is None else trail_length,
            trail_dim_factor=cfg.trail_dim_factor,
            **common,
        )
    except StepAnimError as e:
        raise click.ClickException(str(e)) from e
    _run_preset(ctx, preset, text, options.get("seconds"))


@demo.command("wave")
@click.argument("text")
@demo_options
@click.pass_context
def wave_cmd(ctx: click.Context, text: str, **options: Any) -> None:
    """Run a highlighted head across TEXT."""
    common = _common_options(ctx, options)
    try:
        preset = WaveAnimation(text=text, **common)
    except StepAnimError as e:
        raise click.ClickException(str(e)) from e
    _run_preset(ctx, preset, text, options.get("seconds"))


@demo.command("spinner")
@click.argument("text", required=False, default="")
@click.option(
    "--type",
    "spinner_type",
    type=click.Choice([t.value for t in SpinnerType]),
    default=None,
    help="Symbol cycle",
)
@demo_options
@click.pass_context
def spinner_cmd(ctx: click.Context, text: str, spinner_type: str | None, **options: Any) -> None:
    """Spin next to the optional label TEXT."""
    cfg = _get_config_manager(ctx).config.animation
    common = _common_options(ctx, options)
    try:
        preset = SpinnerAnimation(
            spinner_type=SpinnerType(spinner_type) if spinner_type else cfg.spinner_type,
            **common,
        )
    except StepAnimError as e:
        raise click.ClickException(str(e)) from e
    label = f"{preset.frames[0]} {text}" if text else preset.frames[0]
    _run_preset(ctx, preset, label, options.get("seconds"))


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("show")
@click.option(
    "--format",
    "format_",
    type=click.Choice(["toml", "json"]),
    default="toml",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show one section (e.g. animation)",
)
@click.pass_context
def show_config(ctx: click.Context, format_: str, section: str | None) -> None:
    """Show the effective configuration."""
    cm = _get_config_manager(ctx)
    if section is None:
        click.echo(cm.export(format_))
        return
    data = cm.config.model_dump(mode="json")
    if section not in data:
        msg = f"Section not found: {section}"
        raise click.ClickException(msg)
    if format_ == "toml":
        click.echo(toml.dumps(data[section]))
    else:
        click.echo(json.dumps(data[section], indent=2))


def main() -> None:  # pragma: no cover
    cli(obj={})


if __name__ == "__main__":  # pragma: no cover
    main()

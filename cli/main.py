#!/usr/bin/env python3
"""
Spinner Schedule CLI - Inspect the spinner's derived animation schedule

Prints effective angles, rates, phase table, extra rotation and arc geometry
for a spinner configuration without starting a GUI.
"""

import json
import sys
from dataclasses import asdict
from pathlib import Path

import click

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import (
    DEFAULT_MAX_ANGLE,
    DEFAULT_MIN_ANGLE,
    DEFAULT_ROTATION_SPEED_MULTIPLIER,
    DEFAULT_SPINNER_COLOR,
    DEFAULT_SPINNER_SIZE,
    DEFAULT_SWEEP_TIME_MILLIS,
)
from core.spinner_motion import SpinnerFrame, SpinnerMotionModel
from utils.logger import get_logger

logger = get_logger()


def build_report(model: SpinnerMotionModel, samples: int) -> dict:
    """Collect everything worth printing about a model into plain data"""
    config = model.config
    cycle = config.sweep_time_millis

    frames = []
    for i in range(samples):
        # Evenly spaced across one cycle, last sample lands on the cycle end
        t = cycle * i / (samples - 1) if samples > 1 else 0.0
        frame = SpinnerFrame(
            start_angle=model.tracks.start_angle.value_at(t),
            sweep_angle=model.tracks.sweep_angle.value_at(t),
            extra_rotate_angle=model.tracks.extra_rotation.sample(t),
        )
        frames.append({"elapsed_millis": t, **asdict(frame)})

    return {
        "config": asdict(config),
        "rates": asdict(model.rates),
        "schedule": asdict(model.schedule),
        "extra_rotation": asdict(model.extra_rotation),
        "geometry": asdict(model.geometry),
        "frames": frames,
    }


@click.command()
@click.option("--size", type=float, default=DEFAULT_SPINNER_SIZE, show_default=True,
              help="Spinner edge length (logical units)")
@click.option("--color", default=DEFAULT_SPINNER_COLOR, show_default=True,
              help="Arc color (#RRGGBB or #AARRGGBB)")
@click.option("--stroke-width", type=float, default=None,
              help="Stroke width (default: size / 6)")
@click.option("--sweep-time", "sweep_time_millis", type=int,
              default=DEFAULT_SWEEP_TIME_MILLIS, show_default=True,
              help="Duration of one grow/shrink cycle in ms")
@click.option("--rotation-multiplier", "rotation_speed_multiplier", type=float,
              default=DEFAULT_ROTATION_SPEED_MULTIPLIER, show_default=True,
              help="Extra spin speed relative to the base rotation")
@click.option("--min-angle", type=float, default=DEFAULT_MIN_ANGLE, show_default=True,
              help="Shortest arc in degrees (outside 0..360 becomes 0)")
@click.option("--max-angle", type=float, default=DEFAULT_MAX_ANGLE, show_default=True,
              help="Longest arc in degrees (outside min..360 becomes 360)")
@click.option("--density", type=float, default=1.0, show_default=True,
              help="Pixels per logical unit for the geometry")
@click.option("--samples", type=click.IntRange(min=0), default=0, show_default=True,
              help="Print N evenly spaced frames across one cycle")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table")
def main(
    size: float,
    color: str,
    stroke_width: float,
    sweep_time_millis: int,
    rotation_speed_multiplier: float,
    min_angle: float,
    max_angle: float,
    density: float,
    samples: int,
    as_json: bool,
):
    """
    Show the derived animation schedule of a loading spinner.

    \b
    Examples:
        spinner-schedule
        spinner-schedule --min-angle 10 --max-angle 300 --samples 9
        spinner-schedule --sweep-time 800 --json
    """
    try:
        model = SpinnerMotionModel(
            size=size,
            color=color,
            stroke_width=stroke_width,
            sweep_time_millis=sweep_time_millis,
            rotation_speed_multiplier=rotation_speed_multiplier,
            min_angle=min_angle,
            max_angle=max_angle,
            density=density,
        )
    except ZeroDivisionError as e:
        logger.log_error_with_context(e, {"sweep_time_millis": sweep_time_millis})
        click.secho("  ✗ Error: --sweep-time must not be zero", fg="red", err=True)
        sys.exit(1)

    report = build_report(model, samples)

    if as_json:
        click.echo(json.dumps(report, indent=2))
        return

    config = model.config
    rates = model.rates
    schedule = model.schedule
    geometry = model.geometry

    click.echo()
    click.secho("=" * 50, fg="cyan")
    click.secho("  Spinner Schedule", fg="cyan", bold=True)
    click.secho("=" * 50, fg="cyan")
    click.echo()

    click.echo(f"  Angles:          {config.min_angle:g}° .. {config.max_angle:g}°")
    if config.min_angle != min_angle or config.max_angle != max_angle:
        click.secho(f"                   (given {min_angle:g}° .. {max_angle:g}°)", fg="yellow")
    click.echo(f"  Sweep time:      {config.sweep_time_millis} ms")
    click.echo(f"  Sweep speed:     {rates.sweep_speed:.6f} cycles/ms")
    click.echo(f"  Rotation speed:  {rates.rotation_speed:.6f} °/ms")
    click.echo(f"  Extra rotation:  {rates.extra_rotation_speed:.6f} °/ms "
               f"(period {model.extra_rotation.duration_millis:.1f} ms)")
    click.echo()

    click.secho("  Phase   End (ms)   Start angle", fg="yellow", bold=True)
    for index, (boundary, angle) in enumerate(zip(schedule.boundaries, schedule.start_angles), 1):
        click.echo(f"  {index:<7} {boundary:<10} {angle:.3f}°")
    click.echo(f"  (start-angle track ends at 360° at {schedule.phase4} ms)")
    click.echo()

    click.echo(f"  Arc box:         {geometry.arc_size[0]:g} x {geometry.arc_size[1]:g} "
               f"at ({geometry.top_left[0]:g}, {geometry.top_left[1]:g})")
    click.echo(f"  Stroke:          {geometry.stroke_width_pixels:g} px, round caps")

    if report["frames"]:
        click.echo()
        click.secho("  t (ms)     start°     sweep°     extra°", fg="yellow", bold=True)
        for frame in report["frames"]:
            click.echo(
                f"  {frame['elapsed_millis']:<10.1f} {frame['start_angle']:<10.3f} "
                f"{frame['sweep_angle']:<10.3f} {frame['extra_rotate_angle']:.3f}"
            )
    click.echo()


if __name__ == "__main__":
    main()

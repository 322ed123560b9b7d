"""
Spinner Motion Model - Angle animation math for the loading spinner

PURPOSE: Turn a handful of spinner parameters into a repeating grow/shrink arc
         motion plus an independent extra spin.
CONTEXT: Everything here is pure. Derived values are computed once per
         configuration; renderers sample frames from an external clock.

Cycle anatomy (sweep_time_millis long):
    phase 1: the arc uncurls from nothing to min_angle
    phase 2: the arc grows from min_angle to max_angle
    phase 3: the arc holds max_angle while rotating
    phase 4: the arc shrinks back to min_angle
"""
from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from config import (
    DEFAULT_MAX_ANGLE,
    DEFAULT_MIN_ANGLE,
    DEFAULT_ROTATION_SPEED_MULTIPLIER,
    DEFAULT_SPINNER_COLOR,
    DEFAULT_SPINNER_SIZE,
    DEFAULT_SWEEP_TIME_MILLIS,
    STROKE_WIDTH_DIVISOR,
)
from core.arc_geometry import ArcGeometry, compute_arc_geometry
from core.keyframes import KeyframeTrack, LinearRampTrack
from utils.logger import get_logger

logger = get_logger()

FULL_CIRCLE = 360.0


def resolve_min_angle(min_angle: float) -> float:
    """Clamp rule for min_angle: anything outside [0, 360] becomes 0"""
    if 0.0 <= min_angle <= FULL_CIRCLE:
        return float(min_angle)
    return 0.0


def resolve_max_angle(max_angle: float, min_angle: float) -> float:
    """
    Clamp rule for max_angle: anything outside [min_angle, 360] becomes 360

    min_angle must already be resolved.
    """
    if 0.0 <= max_angle <= FULL_CIRCLE and max_angle >= min_angle:
        return float(max_angle)
    return FULL_CIRCLE


def parse_rgba(color: str) -> Tuple[int, int, int, int]:
    """
    Parse ``#RRGGBB`` or ``#AARRGGBB`` into an (r, g, b, a) tuple

    Raises:
        ValueError: If the string is not a hex color
    """
    hex_color = color.lstrip("#")
    if len(hex_color) == 6:
        hex_color = "ff" + hex_color
    if len(hex_color) != 8:
        raise ValueError(f"Not a hex color: {color!r}")

    alpha, red, green, blue = (int(hex_color[i:i + 2], 16) for i in range(0, 8, 2))
    return red, green, blue, alpha


@dataclass(frozen=True)
class SpinnerConfig:
    """
    Static spinner configuration

    Angles are stored as resolved; out-of-range values are corrected silently
    (min_angle first, then max_angle against the resolved min_angle).
    """

    size: float = DEFAULT_SPINNER_SIZE
    color: str = DEFAULT_SPINNER_COLOR
    stroke_width: Optional[float] = None
    sweep_time_millis: int = DEFAULT_SWEEP_TIME_MILLIS
    rotation_speed_multiplier: float = DEFAULT_ROTATION_SPEED_MULTIPLIER
    min_angle: float = DEFAULT_MIN_ANGLE
    max_angle: float = DEFAULT_MAX_ANGLE

    def __post_init__(self):
        if self.stroke_width is None:
            object.__setattr__(self, "stroke_width", self.size / STROKE_WIDTH_DIVISOR)

        min_angle = resolve_min_angle(self.min_angle)
        if min_angle != self.min_angle:
            logger.log_angle_correction("min_angle", self.min_angle, min_angle)
        max_angle = resolve_max_angle(self.max_angle, min_angle)
        if max_angle != self.max_angle:
            logger.log_angle_correction("max_angle", self.max_angle, max_angle)

        object.__setattr__(self, "min_angle", min_angle)
        object.__setattr__(self, "max_angle", max_angle)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return parse_rgba(self.color)


@dataclass(frozen=True)
class DerivedRates:
    """Speeds in degrees per millisecond (sweep_speed: cycle fraction per ms)"""

    sweep_speed: float
    rotation_speed: float
    extra_rotation_speed: float


@dataclass(frozen=True)
class PhaseSchedule:
    """Phase boundaries (whole ms within one cycle) and start-angle keyframes"""

    phase1: int
    phase2: int
    phase3: int
    phase4: int
    phase1_start_angle: float
    phase2_start_angle: float
    phase3_start_angle: float
    # Not used by the start-angle track, which ends at a full circle
    phase4_start_angle: float

    @property
    def boundaries(self) -> Tuple[int, int, int, int]:
        return self.phase1, self.phase2, self.phase3, self.phase4

    @property
    def start_angles(self) -> Tuple[float, float, float, float]:
        return (
            self.phase1_start_angle,
            self.phase2_start_angle,
            self.phase3_start_angle,
            self.phase4_start_angle,
        )


@dataclass(frozen=True)
class ExtraRotation:
    """Independent continuous spin; duration is infinite when speed is zero"""

    speed: float
    duration_millis: float


@dataclass(frozen=True)
class MotionDerivation:
    rates: DerivedRates
    schedule: PhaseSchedule
    extra_rotation: ExtraRotation


@dataclass(frozen=True)
class SpinnerFrame:
    """Angles for one rendered frame, in degrees, clockwise from 3 o'clock"""

    start_angle: float
    sweep_angle: float
    extra_rotate_angle: float


@dataclass(frozen=True)
class SpinnerTracks:
    start_angle: KeyframeTrack
    sweep_angle: KeyframeTrack
    extra_rotation: LinearRampTrack


def derive(config: SpinnerConfig) -> MotionDerivation:
    """
    Derive rates, phase schedule and extra rotation from a configuration

    Phase boundaries are running sums truncated (not rounded) to whole
    milliseconds, so phase4 may end a few ms before sweep_time_millis.

    Raises:
        ZeroDivisionError: If sweep_time_millis is zero
    """
    min_angle = config.min_angle
    max_angle = config.max_angle
    sweep_time = config.sweep_time_millis

    sweep_speed = (FULL_CIRCLE + max_angle - min_angle) / (FULL_CIRCLE * sweep_time)
    rotation_speed = (FULL_CIRCLE + min_angle - max_angle) / sweep_time
    extra_rotation_speed = (config.rotation_speed_multiplier - 1) * rotation_speed

    # Degrees of sweep per millisecond
    sweep_rate = FULL_CIRCLE * sweep_speed

    phase1 = int(min_angle / sweep_rate)
    phase2 = int(phase1 + (max_angle - min_angle) / sweep_rate)
    phase3 = int(phase2 + (FULL_CIRCLE - max_angle) / sweep_rate)
    phase4 = int(phase3 + (max_angle - min_angle) / sweep_rate)

    phase1_start_angle = phase1 * rotation_speed
    phase2_start_angle = phase1_start_angle + (phase2 - phase1) * rotation_speed
    phase3_start_angle = phase2_start_angle + (phase3 - phase2) * rotation_speed
    phase4_start_angle = phase3_start_angle + (phase4 - phase3) * rotation_speed

    if extra_rotation_speed == 0:
        extra_duration = float("inf")
    else:
        extra_duration = FULL_CIRCLE / extra_rotation_speed

    return MotionDerivation(
        rates=DerivedRates(
            sweep_speed=sweep_speed,
            rotation_speed=rotation_speed,
            extra_rotation_speed=extra_rotation_speed,
        ),
        schedule=PhaseSchedule(
            phase1=phase1,
            phase2=phase2,
            phase3=phase3,
            phase4=phase4,
            phase1_start_angle=phase1_start_angle,
            phase2_start_angle=phase2_start_angle,
            phase3_start_angle=phase3_start_angle,
            phase4_start_angle=phase4_start_angle,
        ),
        extra_rotation=ExtraRotation(speed=extra_rotation_speed, duration_millis=extra_duration),
    )


def build_tracks(config: SpinnerConfig, derivation: MotionDerivation) -> SpinnerTracks:
    """Build the three animation tracks for a derived configuration"""
    schedule = derivation.schedule

    start_angle = KeyframeTrack(
        config.sweep_time_millis,
        initial_value=0.0,
        target_value=FULL_CIRCLE,
        keyframes=(
            (schedule.phase1, schedule.phase1_start_angle),
            (schedule.phase2, schedule.phase2_start_angle),
            (schedule.phase3, schedule.phase3_start_angle),
            (schedule.phase4, FULL_CIRCLE),
        ),
    )
    sweep_angle = KeyframeTrack(
        config.sweep_time_millis,
        initial_value=config.min_angle,
        target_value=config.min_angle,
        keyframes=(
            (schedule.phase1, config.min_angle),
            (schedule.phase2, config.max_angle),
            (schedule.phase3, config.max_angle),
            (schedule.phase4, config.min_angle),
        ),
    )
    extra_rotation = LinearRampTrack(derivation.extra_rotation.duration_millis, 0.0, FULL_CIRCLE)

    return SpinnerTracks(start_angle=start_angle, sweep_angle=sweep_angle, extra_rotation=extra_rotation)


def sample(tracks: SpinnerTracks, elapsed_millis: float) -> SpinnerFrame:
    """Evaluate all three tracks after ``elapsed_millis`` of playback"""
    return SpinnerFrame(
        start_angle=tracks.start_angle.sample(elapsed_millis),
        sweep_angle=tracks.sweep_angle.sample(elapsed_millis),
        extra_rotate_angle=tracks.extra_rotation.sample(elapsed_millis),
    )


class SpinnerMotionModel:
    """
    Spinner configuration plus everything derived from it

    WHY: Renderers call frame_at() every frame; derivation happens only when
         the configuration changes.
    """

    def __init__(
        self,
        size: float = DEFAULT_SPINNER_SIZE,
        color: str = DEFAULT_SPINNER_COLOR,
        stroke_width: Optional[float] = None,
        sweep_time_millis: int = DEFAULT_SWEEP_TIME_MILLIS,
        rotation_speed_multiplier: float = DEFAULT_ROTATION_SPEED_MULTIPLIER,
        min_angle: float = DEFAULT_MIN_ANGLE,
        max_angle: float = DEFAULT_MAX_ANGLE,
        density: float = 1.0,
    ):
        self.density = density
        self._apply(
            SpinnerConfig(
                size=size,
                color=color,
                stroke_width=stroke_width,
                sweep_time_millis=sweep_time_millis,
                rotation_speed_multiplier=rotation_speed_multiplier,
                min_angle=min_angle,
                max_angle=max_angle,
            )
        )

    def _apply(self, config: SpinnerConfig):
        started = time.perf_counter()

        derivation = derive(config)
        tracks = build_tracks(config, derivation)

        self.config = config
        self.derivation = derivation
        self.tracks = tracks
        self.geometry: ArcGeometry = compute_arc_geometry(config.size, config.stroke_width, self.density)

        logger.log_performance("spinner derivation", time.perf_counter() - started)
        logger.log_spinner_config(
            config.size, config.sweep_time_millis, config.min_angle, config.max_angle
        )

    @property
    def rates(self) -> DerivedRates:
        return self.derivation.rates

    @property
    def schedule(self) -> PhaseSchedule:
        return self.derivation.schedule

    @property
    def extra_rotation(self) -> ExtraRotation:
        return self.derivation.extra_rotation

    def frame_at(self, elapsed_millis: float) -> SpinnerFrame:
        """Angles after ``elapsed_millis`` since the animation started"""
        return sample(self.tracks, elapsed_millis)

    def reconfigure(self, **changes) -> SpinnerConfig:
        """
        Replace configuration fields and re-derive

        Passing size without stroke_width keeps the current stroke width; pass
        stroke_width=None to go back to size / 6.

        Returns:
            The new effective configuration
        """
        density = changes.pop("density", None)
        if density is not None:
            self.density = density

        if not changes and density is None:
            return self.config

        self._apply(dataclasses.replace(self.config, **changes))
        return self.config

    def __repr__(self):
        return f"SpinnerMotionModel({self.config!r}, density={self.density})"

"""
Keyframe Tracks - Piecewise-linear, infinitely repeating animation tracks

PURPOSE: Evaluate animated values as a pure function of elapsed time.
CONTEXT: The spinner's start-angle and sweep-angle tracks are keyframe tracks,
         the extra rotation is a linear ramp. Both restart every cycle.
"""
from __future__ import annotations

import math
from typing import Iterable, Tuple

import numpy as np


class KeyframeTrack:
    """
    Piecewise-linear track over one cycle of ``duration_millis``

    The initial value sits at time 0 and the target value at the cycle end.
    Keyframes at either time replace them; for repeated timestamps the later
    keyframe wins.
    """

    def __init__(
        self,
        duration_millis: int,
        initial_value: float,
        target_value: float,
        keyframes: Iterable[Tuple[float, float]] = (),
    ):
        self.duration_millis = duration_millis

        points = {0.0: float(initial_value), float(duration_millis): float(target_value)}
        for time_millis, value in keyframes:
            points[float(time_millis)] = float(value)

        ordered = sorted(points.items())
        self._times = np.array([t for t, _ in ordered], dtype=np.float64)
        self._values = np.array([v for _, v in ordered], dtype=np.float64)

    @property
    def keyframes(self) -> Tuple[Tuple[float, float], ...]:
        """Resolved (time, value) pairs, ordered by time"""
        return tuple(zip(self._times.tolist(), self._values.tolist()))

    def value_at(self, cycle_millis: float) -> float:
        """
        Value at a position inside one cycle

        Args:
            cycle_millis: Offset from the cycle start; clamped to [0, duration]

        Returns:
            Linearly interpolated value
        """
        return float(np.interp(cycle_millis, self._times, self._values))

    def sample(self, elapsed_millis: float) -> float:
        """Value after ``elapsed_millis`` of continuous playback (restart mode)"""
        return self.value_at(math.fmod(elapsed_millis, self.duration_millis))

    def __repr__(self):
        return f"KeyframeTrack(duration_millis={self.duration_millis}, keyframes={self.keyframes})"


class LinearRampTrack:
    """Linear ramp from ``start_value`` to ``end_value``, restarting forever"""

    def __init__(self, duration_millis: float, start_value: float = 0.0, end_value: float = 360.0):
        self.duration_millis = duration_millis
        self.start_value = start_value
        self.end_value = end_value

    def value_at(self, cycle_millis: float) -> float:
        """Value at a position inside one period"""
        if math.isinf(self.duration_millis):
            # Infinite period: the ramp never leaves its start value
            return self.start_value
        fraction = cycle_millis / self.duration_millis
        return self.start_value + (self.end_value - self.start_value) * fraction

    def sample(self, elapsed_millis: float) -> float:
        """Value after ``elapsed_millis`` of continuous playback"""
        if math.isinf(self.duration_millis):
            return self.start_value
        return self.value_at(math.fmod(elapsed_millis, self.duration_millis))

    def __repr__(self):
        return (
            f"LinearRampTrack(duration_millis={self.duration_millis}, "
            f"start_value={self.start_value}, end_value={self.end_value})"
        )

"""Rectangular current-injection pulse."""

from __future__ import annotations

import math

from .base import StimulusPattern


def injected_current(amplitude: float, t: float, t_min: float, t_max: float) -> float:
    """amplitude while t_min < t < t_max, else 0.

    Both bounds are exclusive: the pulse is off exactly at t_min and t_max.
    """
    if t_min < t < t_max:
        return amplitude
    return 0.0


class RectangularPulse(StimulusPattern):
    """Constant-amplitude pulse over an open window of steps.

    Example:
        >>> stim = RectangularPulse(amplitude=100.0, t_min=100, t_max=130)
        >>> stim.get_input(100)   # 0.0 (boundary)
        >>> stim.get_input(101)   # 100.0
        >>> stim.get_input(130)   # 0.0 (boundary)
    """

    def __init__(self, amplitude: float, t_min: float, t_max: float):
        """Initialize pulse.

        Args:
            amplitude: Current injected while active
            t_min: Exclusive start step
            t_max: Exclusive end step
        """
        self.amplitude = amplitude
        self.t_min = t_min
        self.t_max = t_max

    def get_input(self, timestep: int) -> float:
        return injected_current(self.amplitude, timestep, self.t_min, self.t_max)

    def duration_timesteps(self) -> int:
        return int(math.ceil(self.t_max))

    def active_steps(self) -> range:
        """Integer steps at which the pulse is on."""
        start = int(math.floor(self.t_min)) + 1
        stop = int(math.ceil(self.t_max))
        return range(max(start, 0), max(stop, 0))

    def __repr__(self) -> str:
        return (
            f"RectangularPulse(amplitude={self.amplitude}, "
            f"t_min={self.t_min}, t_max={self.t_max})"
        )

"""Sequential stimulus: explicit current per step."""

from __future__ import annotations

from typing import Sequence

from .base import StimulusPattern


class Sequential(StimulusPattern):
    """Pre-recorded current values, one per step, silent afterwards.

    Useful for driving the neuron from an interactive control or a trace
    recorded elsewhere.

    Example:
        >>> stim = Sequential([0.0, 5.0, 5.0])
        >>> stim.get_input(1)   # 5.0
        >>> stim.get_input(10)  # 0.0
    """

    def __init__(self, values: Sequence[float]):
        self.values = tuple(float(v) for v in values)

    def get_input(self, timestep: int) -> float:
        if 0 <= timestep < len(self.values):
            return self.values[timestep]
        return 0.0

    def duration_timesteps(self) -> int:
        return len(self.values)

"""Stimulus patterns for injected current.

- **RectangularPulse**: Constant amplitude over an open step window
- **Sequential**: Explicit per-step values

Example:
    >>> from msnsim.stimuli import RectangularPulse
    >>>
    >>> ampa = RectangularPulse(amplitude=100.0, t_min=100, t_max=130)
    >>> ampa.get_input(110)
    100.0
"""

from __future__ import annotations

from .base import StimulusPattern
from .pulse import RectangularPulse, injected_current
from .sequential import Sequential

__all__ = [
    "StimulusPattern",
    "RectangularPulse",
    "Sequential",
    "injected_current",
]

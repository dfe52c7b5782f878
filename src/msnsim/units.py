"""Unit types for dimensional analysis in membrane computations.

Prevents mixing incompatible quantities (currents vs conductances vs voltages).
Uses Python's NewType for zero-runtime-cost type checking with mypy/pyright.

Unlike normalized-unit simulators, msnsim works in the physical units of
Humphries et al. (2009): millivolts, milliseconds, picofarads and the
model's native current units.

Example usage:
    from msnsim.units import Conductance, Current, Voltage

    def channel_current(h: Conductance, v: Voltage, ...) -> Current:
        ...
"""

from typing import NewType, Union

import torch

# =============================================================================
# ELECTRICAL UNITS
# =============================================================================

Voltage = NewType("Voltage", float)
"""Membrane, resting, threshold or reversal potential (mV)."""

Conductance = NewType("Conductance", float)
"""Synaptic conductance trace h_z (dimensionless gating, scaled by g_z)."""

Current = NewType("Current", float)
"""Membrane current in model units.

Positive = depolarizing, negative = hyperpolarizing.
For synaptic channels currents are DERIVED: I = g * h * (E - V).
"""

Capacitance = NewType("Capacitance", float)
"""Membrane capacitance C (pF)."""

# =============================================================================
# TEMPORAL UNITS
# =============================================================================

TimeMS = NewType("TimeMS", float)
"""Time in milliseconds."""

Frequency = NewType("Frequency", float)
"""Frequency in Hz (spikes per second)."""

# =============================================================================
# DIMENSIONLESS
# =============================================================================

Fraction = NewType("Fraction", float)
"""Receptor activation fraction, nominally in [0, 1] (D1/D2 occupancy)."""

Scalar = Union[float, torch.Tensor]
"""Python float or element-wise tensor accepted by the pure model functions."""

# =============================================================================
# CONVERSIONS
# =============================================================================

MS_PER_SECOND = 1000.0
"""Milliseconds per second."""


def steps_to_ms(n_steps: int, dt_ms: TimeMS) -> TimeMS:
    """Convert a number of simulation steps to elapsed milliseconds."""
    return TimeMS(n_steps * dt_ms)

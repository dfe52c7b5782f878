"""Utility functions for numerical validation."""

from __future__ import annotations

import math
from typing import Optional

from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.errors import SimulationDivergenceError


def validate_finite(
    value: float,
    name: str,
    step: Optional[int] = None,
) -> None:
    """Validate that a numerical value is finite.

    Args:
        value: Value to validate
        name: Quantity name for error message
        step: Simulation step index, if known

    Raises:
        SimulationDivergenceError: If value is NaN or Inf
    """
    where = f" at step {step}" if step is not None else ""

    if math.isnan(value):
        raise SimulationDivergenceError(
            f"Invalid {name}{where}: NaN is not a valid value. "
            f"This usually indicates a numerical instability upstream.",
            step=step,
            field=name,
            value=value,
        )

    if math.isinf(value):
        raise SimulationDivergenceError(
            f"Invalid {name}{where}: Inf is not a valid value. "
            f"This usually indicates an Euler overflow (reduce dt or drive).",
            step=step,
            field=name,
            value=value,
        )


def validate_state_finite(state: NeuronState, step: Optional[int] = None) -> None:
    """Validate every field of a neuron state.

    Raises:
        SimulationDivergenceError: On the first NaN/Inf field
    """
    bad = state.first_non_finite()
    if bad is not None:
        name, value = bad
        validate_finite(value, name, step)

"""
Custom exception classes for msnsim.

Exception Hierarchy:
====================
MSNSimError (base) - Base exception for all msnsim-specific errors
├── ConfigurationError - Invalid parameter or simulation configuration
└── SimulationDivergenceError - Integration produced a non-finite state

The pure model functions never raise: they are total over real inputs and
let floating-point inf/NaN propagate. Errors are raised at the edges, when
parameters are constructed and when the driver checks a step's output.

Author: msnsim Project
Date: March 2026
"""

from __future__ import annotations

from typing import Optional


class MSNSimError(Exception):
    """Base exception for all msnsim-specific errors.

    All custom exceptions in msnsim inherit from this class, enabling
    code to catch msnsim errors specifically.
    """


class ConfigurationError(MSNSimError):
    """Invalid configuration parameters.

    Raised when parameter or simulation values are out of valid range
    (zero time constants, non-positive timestep, dopamine fractions
    outside [0, 1], ...).
    """


class SimulationDivergenceError(MSNSimError):
    """Explicit Euler integration blew up.

    Raised by the simulation driver when a state variable becomes NaN or
    Inf, typically after a large total current combined with a large dt.

    Attributes:
        step: Simulation step index at which divergence was detected
        field: Name of the offending state field
        value: The non-finite value
    """

    def __init__(
        self,
        message: str,
        step: Optional[int] = None,
        field: Optional[str] = None,
        value: Optional[float] = None,
    ):
        super().__init__(message)
        self.step = step
        self.field = field
        self.value = value

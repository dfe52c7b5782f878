"""Utilities for msnsim."""

from msnsim.utils.numerical_validation import validate_finite, validate_state_finite

__all__ = [
    "validate_finite",
    "validate_state_finite",
]

"""Immutable neuron state snapshot shared by the Izhikevich-family steppers.

A NeuronState is created once as the initial condition; every step consumes
the previous state and returns a brand-new one. The sequence of states is the
trajectory, and the caller owns it.

The Izhikevich constants a, b, c, d are carried per state (d changes on each
spike under D1 modulation). Dopamine fractions d1, d2 are part of the state
as well even though they stay constant within a run.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class NeuronState:
    """Snapshot of a single MSN at one timestep.

    Attributes:
        v: Membrane potential (mV)
        u: Recovery variable
        a, b, c, d: Izhikevich constants (d is rescaled at spike time)
        d1: Fraction of activated D1 receptors
        d2: Fraction of activated D2 receptors
        h_ampa, h_nmda, h_gaba: Synaptic conductance traces (non-negative)
    """

    v: float
    u: float
    a: float
    b: float
    c: float
    d: float
    d1: float = 0.0
    d2: float = 0.0
    h_ampa: float = 0.0
    h_nmda: float = 0.0
    h_gaba: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Plain mapping of every field (exact float values)."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NeuronState":
        """Rebuild a state from to_dict() output.

        Raises:
            ValueError: If fields are missing or unknown
        """
        names = {f.name for f in fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise ValueError(f"Unknown NeuronState fields: {sorted(unknown)}")
        required = {f.name for f in fields(cls)[:6]}
        missing = required - set(data)
        if missing:
            raise ValueError(f"Missing NeuronState fields: {sorted(missing)}")
        return cls(**{k: float(v) for k, v in data.items()})

    def first_non_finite(self) -> tuple[str, float] | None:
        """Name and value of the first NaN/Inf field, or None."""
        for name, value in asdict(self).items():
            if not math.isfinite(value):
                return name, value
        return None

    def is_finite(self) -> bool:
        return self.first_non_finite() is None

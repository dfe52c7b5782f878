"""Container for a recorded MSN trajectory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import torch

from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.units import MS_PER_SECOND, Frequency, steps_to_ms


@dataclass
class SimulationResult:
    """Trajectory and inputs of one run.

    The driver appends one entry per step to each list; the integrator
    itself never touches these.

    Attributes:
        initial: State before the first step
        states: State after each step
        ampa_input, nmda_input, gaba_input: Per-step channel inputs
        spike_steps: Steps at which the reset branch was taken
        dt_ms: Timestep used for the run
        dtype: Default dtype of the trace tensors
    """

    initial: NeuronState
    dt_ms: float
    dtype: torch.dtype = torch.float64
    states: List[NeuronState] = field(default_factory=list)
    ampa_input: List[float] = field(default_factory=list)
    nmda_input: List[float] = field(default_factory=list)
    gaba_input: List[float] = field(default_factory=list)
    spike_steps: List[int] = field(default_factory=list)

    @property
    def n_steps(self) -> int:
        return len(self.states)

    @property
    def spike_count(self) -> int:
        return len(self.spike_steps)

    @property
    def final_state(self) -> NeuronState:
        return self.states[-1] if self.states else self.initial

    def _trace_dtype(self, dtype: Optional[torch.dtype]) -> torch.dtype:
        return self.dtype if dtype is None else dtype

    def firing_rate_hz(self) -> Frequency:
        """Mean firing rate over the run (Hz)."""
        duration_ms = steps_to_ms(self.n_steps, self.dt_ms)
        if duration_ms <= 0:
            return Frequency(0.0)
        return Frequency(self.spike_count * MS_PER_SECOND / duration_ms)

    def voltage_trace(self, dtype: Optional[torch.dtype] = None) -> torch.Tensor:
        """Membrane potential after each step [n_steps]."""
        return torch.tensor([s.v for s in self.states], dtype=self._trace_dtype(dtype))

    def recovery_trace(self, dtype: Optional[torch.dtype] = None) -> torch.Tensor:
        """Recovery variable after each step [n_steps]."""
        return torch.tensor([s.u for s in self.states], dtype=self._trace_dtype(dtype))

    def conductance_traces(self, dtype: Optional[torch.dtype] = None) -> Dict[str, torch.Tensor]:
        """Conductance traces keyed by channel name, each [n_steps]."""
        dtype = self._trace_dtype(dtype)
        return {
            "ampa": torch.tensor([s.h_ampa for s in self.states], dtype=dtype),
            "nmda": torch.tensor([s.h_nmda for s in self.states], dtype=dtype),
            "gaba": torch.tensor([s.h_gaba for s in self.states], dtype=dtype),
        }

    def input_traces(self, dtype: Optional[torch.dtype] = None) -> torch.Tensor:
        """Injected inputs stacked as [3, n_steps] (AMPA, NMDA, GABA)."""
        return torch.tensor(
            [self.ampa_input, self.nmda_input, self.gaba_input], dtype=self._trace_dtype(dtype)
        )

    def spike_train(self) -> torch.Tensor:
        """Boolean spike raster [n_steps], True where the reset branch fired."""
        train = torch.zeros(self.n_steps, dtype=torch.bool)
        if self.spike_steps:
            train[torch.tensor(self.spike_steps, dtype=torch.long)] = True
        return train

"""
Simulation driver configuration.

An explicit, immutable configuration object handed to the simulation driver
at construction time. Changing a setting means building a new config (see
MSNSimulation.reconfigure) and re-running; nothing recomputes implicitly.

Input protocol (defaults reproduce the reference experiment):
- AMPA drive:  amplitude * ampa_frac   on steps (100, 130)
- NMDA drive:  amplitude * nmda_frac   on steps (0, 200)
- GABA drive: -amplitude * gaba_frac   on steps (120, 130)

Window bounds are exclusive on both sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import torch

from msnsim.config.validation import ConfigValidationError, ValidatedConfig
from msnsim.constants import msn
from msnsim.neuromodulation.dopamine import DopamineModulation

_DTYPES = {
    "float32": torch.float32,
    "float64": torch.float64,
}


@dataclass(frozen=True)
class SimulationConfig(ValidatedConfig):
    """Configuration for a single-neuron MSN run."""

    # Temporal
    n_steps: int = 500
    """Number of integration steps."""

    dt_ms: float = msn.MSN_DT_MS
    """Integration timestep in milliseconds."""

    # Dopamine receptor activation
    d1: float = 0.0
    """Fraction of activated D1 receptors, in [0, 1]."""

    d2: float = 0.0
    """Fraction of activated D2 receptors, in [0, 1]."""

    modulation: DopamineModulation = DopamineModulation.NONE
    """How k and v_r follow D1/D2 (see DopamineModulation)."""

    # Injected drive
    amplitude: float = 100.0
    """Shared input amplitude, split across channels by the *_frac fields."""

    ampa_frac: float = 1.0
    nmda_frac: float = 0.0
    gaba_frac: float = 0.0

    ampa_window: Tuple[float, float] = (100.0, 130.0)
    nmda_window: Tuple[float, float] = (0.0, 200.0)
    gaba_window: Tuple[float, float] = (120.0, 130.0)

    # Initial condition
    v0: float = msn.MSN_V0
    u0: float = msn.MSN_U0
    h_ampa0: float = 0.0
    h_nmda0: float = 0.0
    h_gaba0: float = 0.0

    # Numerics
    check_finite: bool = True
    """Raise SimulationDivergenceError on the first non-finite state."""

    dtype: str = "float64"
    """Data type of the recorded trace tensors: 'float32' or 'float64'."""

    _validation_rules = {
        'n_steps': ('positive_integer',),
        'dt_ms': ('positive', 'finite'),
        'd1': ('probability',),
        'd2': ('probability',),
        'amplitude': ('finite',),
        'ampa_frac': ('probability',),
        'nmda_frac': ('probability',),
        'gaba_frac': ('probability',),
        'v0': ('finite',),
        'u0': ('finite',),
        'h_ampa0': ('non_negative', 'finite'),
        'h_nmda0': ('non_negative', 'finite'),
        'h_gaba0': ('non_negative', 'finite'),
    }

    def __post_init__(self) -> None:
        self.validate_config()

        if self.dtype not in _DTYPES:
            raise ConfigValidationError(
                f"Unknown dtype '{self.dtype}'. Choose from: {list(_DTYPES.keys())}"
            )
        if not isinstance(self.modulation, DopamineModulation):
            raise ConfigValidationError(
                f"modulation must be a DopamineModulation, got {self.modulation!r}"
            )
        for name in ('ampa_window', 'nmda_window', 'gaba_window'):
            window = getattr(self, name)
            if not isinstance(window, (tuple, list)) or len(window) != 2:
                raise ConfigValidationError(
                    f"{name} must be a (t_min, t_max) pair, got {window!r}"
                )
            t_min, t_max = window
            if isinstance(t_min, bool) or isinstance(t_max, bool) or not all(
                isinstance(t, (int, float)) for t in window
            ):
                raise ConfigValidationError(f"{name}={window!r} bounds must be numeric")
            if t_min > t_max:
                raise ConfigValidationError(
                    f"{name}=({t_min}, {t_max}) has start after end"
                )

    def get_torch_dtype(self) -> torch.dtype:
        """Get PyTorch dtype object for recorded traces."""
        return _DTYPES[self.dtype]

    @property
    def ampa_amplitude(self) -> float:
        return self.amplitude * self.ampa_frac

    @property
    def nmda_amplitude(self) -> float:
        return self.amplitude * self.nmda_frac

    @property
    def gaba_amplitude(self) -> float:
        """GABA drive is injected with inverted sign."""
        return -self.amplitude * self.gaba_frac

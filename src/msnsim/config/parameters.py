"""
Parameter records for the dopamine-modulated Izhikevich MSN.

Two immutable records:
- IzhikevichParameters: the original four-parameter model (a, b, c, d) plus
  threshold and initial conditions.
- DopamineNeuronParameters: wraps IzhikevichParameters and adds the
  Humphries et al. (2009) membrane, dopamine and synaptic constants.

Both are frozen dataclasses and are validated on construction. They are
built once per simulation run and passed by reference into every pure
model function; nothing mutates them. Dopamine pre-modulation produces a
new record (see DopamineNeuronParameters.with_dopamine).

Usage:
    from msnsim.config.parameters import msn_parameters

    params = msn_parameters()                    # Humphries 2009 MSN
    params_da = params.with_dopamine(d1=0.8, d2=0.0)
    params_slow = msn_parameters(tau_nmda=200.0)

Author: msnsim Project
Date: March 2026
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from msnsim.config.validation import ValidatedConfig
from msnsim.constants import msn
from msnsim.neuromodulation.dopamine import (
    modulated_gain,
    modulated_rest_potential,
)

_FINITE = ('finite',)
_DIVISOR = ('nonzero', 'finite')


@dataclass(frozen=True)
class IzhikevichParameters(ValidatedConfig):
    """Base Izhikevich constants.

    Defaults are the Humphries 2009 MSN values.
    """

    a: float = msn.MSN_A
    """Recovery time scale (smaller = slower recovery)."""

    b: float = msn.MSN_B
    """Sensitivity of recovery variable u to voltage."""

    c: float = msn.MSN_C
    """After-spike reset voltage (mV)."""

    d: float = msn.MSN_D
    """After-spike recovery increment."""

    v_thresh: float = msn.MSN_THRESHOLD
    """Fixed spike cut-off of the original formulation (mV)."""

    v0: float = msn.MSN_V0
    """Initial membrane potential (mV)."""

    u0: float = msn.MSN_U0
    """Initial recovery variable."""

    _validation_rules = {
        'a': _FINITE,
        'b': _FINITE,
        'c': _FINITE,
        'd': _FINITE,
        'v_thresh': _FINITE,
        'v0': _FINITE,
        'u0': _FINITE,
    }

    def __post_init__(self) -> None:
        self.validate_config()


@dataclass(frozen=True)
class DopamineNeuronParameters(ValidatedConfig):
    """Humphries et al. (2009) MSN parameters.

    Time constants and capacitance are divisors in the update rule and must
    be nonzero; every value must be finite.
    """

    izhikevich: IzhikevichParameters = field(default_factory=IzhikevichParameters)

    # Membrane (Izhikevich 2007 capacitance form)
    k: float = msn.MSN_K_GAIN
    v_r: float = msn.MSN_V_REST
    v_peak: float = msn.MSN_V_PEAK
    C: float = msn.MSN_CAPACITANCE
    v_t: float = msn.MSN_V_T
    d: float = msn.MSN_D

    # Synaptic reversal potentials (mV)
    E_ampa: float = msn.MSN_E_AMPA
    E_nmda: float = msn.MSN_E_NMDA
    E_gaba: float = msn.MSN_E_GABA

    # Synaptic time constants (ms)
    tau_ampa: float = msn.MSN_TAU_AMPA
    tau_nmda: float = msn.MSN_TAU_NMDA
    tau_gaba: float = msn.MSN_TAU_GABA

    Mg: float = msn.MSN_MG

    # Dopamine modulation
    K: float = msn.MSN_K_POTASSIUM
    L: float = msn.MSN_L_CALCIUM
    alpha: float = msn.MSN_ALPHA
    beta_1: float = msn.MSN_BETA_1
    beta_2: float = msn.MSN_BETA_2

    # Maximum conductances
    g_ampa: float = msn.MSN_G_AMPA
    g_nmda: float = msn.MSN_G_NMDA
    g_gaba: float = msn.MSN_G_GABA

    _validation_rules = {
        'k': _FINITE,
        'v_r': _FINITE,
        'v_peak': _FINITE,
        'C': _DIVISOR,
        'v_t': _FINITE,
        'd': _FINITE,
        'E_ampa': _FINITE,
        'E_nmda': _FINITE,
        'E_gaba': _FINITE,
        'tau_ampa': _DIVISOR,
        'tau_nmda': _DIVISOR,
        'tau_gaba': _DIVISOR,
        'Mg': ('non_negative', 'finite'),
        'K': _FINITE,
        'L': _FINITE,
        'alpha': _FINITE,
        'beta_1': _FINITE,
        'beta_2': _FINITE,
        'g_ampa': _FINITE,
        'g_nmda': _FINITE,
        'g_gaba': _FINITE,
    }

    def __post_init__(self) -> None:
        self.validate_config()

    # Forwarded Izhikevich constants

    @property
    def a(self) -> float:
        return self.izhikevich.a

    @property
    def b(self) -> float:
        return self.izhikevich.b

    @property
    def c(self) -> float:
        """Reset voltage applied on the spike branch."""
        return self.izhikevich.c

    @property
    def spike_threshold(self) -> float:
        """Voltage at or above which the reset branch is taken (v_t)."""
        return self.v_t

    def with_dopamine(self, d1: float, d2: float) -> "DopamineNeuronParameters":
        """Return a copy with k and v_r pre-modulated by D1/D2 activation.

        v_r <- v_r (1 + K d1),  k <- k (1 - alpha d2)

        The reset increment d is not touched here; it is rescaled at spike
        time from the neuron state's own d1.
        """
        return replace(
            self,
            k=modulated_gain(self.k, d2, self.alpha),
            v_r=modulated_rest_potential(self.v_r, d1, self.K),
        )


def msn_parameters(**overrides: Any) -> DopamineNeuronParameters:
    """Build the Humphries 2009 medium spiny neuron parameter record.

    Args:
        **overrides: Field values replacing the published constants. Izhikevich
            fields (a, b, c, v_thresh, v0, u0) are routed to the nested record.

    Returns:
        Validated DopamineNeuronParameters

    Raises:
        ConfigValidationError: If an override is zero where a divisor is
            required, or non-finite
    """
    iz_fields = {'a', 'b', 'c', 'v_thresh', 'v0', 'u0'}
    iz_overrides = {k: v for k, v in overrides.items() if k in iz_fields}
    top_overrides = {k: v for k, v in overrides.items() if k not in iz_fields}

    izhikevich = IzhikevichParameters(**iz_overrides)
    if 'd' in top_overrides:
        izhikevich = replace(izhikevich, d=top_overrides['d'])

    return DopamineNeuronParameters(izhikevich=izhikevich, **top_overrides)

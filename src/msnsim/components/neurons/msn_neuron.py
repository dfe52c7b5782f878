"""Dopamine-modulated Izhikevich Medium Spiny Neuron (Humphries et al. 2009).

Model equations (Izhikevich 2007 capacitance form):
    C dv/dt = k (v - v_r)(v - v_t) - u + I
    du/dt   = a [b (v - v_r) - u]

    if v >= v_t:
        v := c
        d := d (1 - L d1)
        u := u + d

Synaptic drive:
    I = I_ampa^D2 + B(v) I_nmda^D1 + I_gaba
    I_z = g_z h_z (E_z - v)

Dopamine:
    - D1 activation boosts the NMDA current and shrinks the reset increment.
    - D2 activation weakens the AMPA current.
    - Under DopamineModulation.INLINE, v_r follows D1 and k follows D2 on
      every step. Otherwise k and v_r come from the parameter record as-is,
      so callers can pre-apply them with params.with_dopamine(d1, d2).

The spike test uses the instantaneous threshold v_t rather than the fixed
Izhikevich cut-off. There is no refractory state; the reset is instantaneous
and re-evaluated every step.

Integration is explicit Euler with no stability guard: a large total current
combined with a large dt can overflow, and the step lets inf/NaN propagate.
The simulation driver is where divergence is detected.

Reference: Humphries, Lepora, Wood & Gurney (2009). Capturing dopaminergic
modulation and bimodal membrane behaviour of striatal medium spiny neurons
in accurate, reduced models. Front. Comput. Neurosci. 3:26.
"""

from __future__ import annotations

from typing import Optional

from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.config.parameters import DopamineNeuronParameters
from msnsim.constants.msn import MSN_DT_MS
from msnsim.neuromodulation.dopamine import (
    DopamineModulation,
    effective_rest_and_gain,
    modulated_ampa_current,
    modulated_nmda_current,
    modulated_reset_increment,
)
from msnsim.synapses.channels import (
    channel_current,
    decay_conductance,
    total_current,
    update_conductance,
)
from msnsim.units import Capacitance, Current, TimeMS, Voltage


def initial_state(
    params: DopamineNeuronParameters,
    d1: float = 0.0,
    d2: float = 0.0,
    v: Optional[Voltage] = None,
    u: Optional[float] = None,
    h_ampa: float = 0.0,
    h_nmda: float = 0.0,
    h_gaba: float = 0.0,
) -> NeuronState:
    """Build the initial condition of a run.

    Args:
        params: Model parameters (supply v0/u0 defaults and a, b, c, d)
        d1: Fraction of activated D1 receptors
        d2: Fraction of activated D2 receptors
        v: Initial voltage (default: params.izhikevich.v0)
        u: Initial recovery variable (default: params.izhikevich.u0)
        h_ampa, h_nmda, h_gaba: Initial conductance traces

    Returns:
        NeuronState with the baseline reset increment params.d
    """
    iz = params.izhikevich
    return NeuronState(
        v=iz.v0 if v is None else v,
        u=iz.u0 if u is None else u,
        a=iz.a,
        b=iz.b,
        c=iz.c,
        d=params.d,
        d1=d1,
        d2=d2,
        h_ampa=h_ampa,
        h_nmda=h_nmda,
        h_gaba=h_gaba,
    )


def is_spiking(state: NeuronState, params: DopamineNeuronParameters) -> bool:
    """True if the next step takes the reset branch."""
    return state.v >= params.spike_threshold


def membrane_increment(
    v: Voltage,
    u: float,
    i_total: Current,
    k: float,
    v_r: Voltage,
    v_t: Voltage,
    C: Capacitance,
    dt: TimeMS,
) -> float:
    """Euler voltage increment (k (v - v_r)(v - v_t) - u + I) dt / C."""
    return (k * (v - v_r) * (v - v_t) - u + i_total) * dt / C


def recovery_increment(
    v: Voltage,
    u: float,
    a: float,
    b: float,
    v_r: Voltage,
    dt: TimeMS,
) -> float:
    """Euler recovery increment a (b (v - v_r) - u) dt."""
    return a * (b * (v - v_r) - u) * dt


def msn_step(
    state: NeuronState,
    i_ampa: float,
    i_nmda: float,
    i_gaba: float,
    params: DopamineNeuronParameters,
    dt_ms: TimeMS = MSN_DT_MS,
    modulation: DopamineModulation = DopamineModulation.NONE,
) -> NeuronState:
    """Advance one MSN by one timestep.

    Args:
        state: Previous state
        i_ampa: AMPA input folded into h_ampa this step
        i_nmda: NMDA input folded into h_nmda this step
        i_gaba: GABA input folded into h_gaba this step
        params: Model parameters (never modified)
        dt_ms: Timestep in ms (must be > 0, not checked)
        modulation: Whether k and v_r are re-derived from d1/d2 here

    Returns:
        New NeuronState. The input state is left untouched.
    """
    if is_spiking(state, params):
        d_next = modulated_reset_increment(state.d, state.d1, params.L)
        return NeuronState(
            v=params.c,
            u=state.u + d_next,
            a=state.a,
            b=state.b,
            c=state.c,
            d=d_next,
            d1=state.d1,
            d2=state.d2,
            h_ampa=state.h_ampa,
            h_nmda=state.h_nmda,
            h_gaba=state.h_gaba,
        )

    v = state.v

    # Jump: fold this step's input into each trace
    h_ampa = update_conductance(state.h_ampa, i_ampa, params.tau_ampa)
    h_nmda = update_conductance(state.h_nmda, i_nmda, params.tau_nmda)
    h_gaba = update_conductance(state.h_gaba, i_gaba, params.tau_gaba)

    ampa_raw = channel_current(h_ampa, v, params.g_ampa, params.E_ampa)
    nmda_raw = channel_current(h_nmda, v, params.g_nmda, params.E_nmda)
    gaba_raw = channel_current(h_gaba, v, params.g_gaba, params.E_gaba)

    # GABA is not dopamine-sensitive
    ampa = modulated_ampa_current(ampa_raw, state.d2, params.beta_2)
    nmda = modulated_nmda_current(nmda_raw, state.d1, params.beta_1)
    i_total = total_current(ampa, nmda, gaba_raw, v, params.Mg)

    if modulation is DopamineModulation.INLINE:
        v_r, k = effective_rest_and_gain(
            params.v_r, params.k, state.d1, state.d2, params.K, params.alpha
        )
    else:
        v_r, k = params.v_r, params.k

    dv = membrane_increment(v, state.u, i_total, k, v_r, params.v_t, params.C, dt_ms)
    du = recovery_increment(v, state.u, params.a, params.b, v_r, dt_ms)

    return NeuronState(
        v=v + dv,
        u=state.u + du,
        a=state.a,
        b=state.b,
        c=state.c,
        d=state.d,
        d1=state.d1,
        d2=state.d2,
        h_ampa=decay_conductance(h_ampa, params.tau_ampa, dt_ms),
        h_nmda=decay_conductance(h_nmda, params.tau_nmda, dt_ms),
        h_gaba=decay_conductance(h_gaba, params.tau_gaba, dt_ms),
    )

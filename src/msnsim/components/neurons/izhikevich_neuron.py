"""Izhikevich Neuron Model - the original 2003 formulation.

Kept alongside the MSN model as the baseline the Humphries extension starts
from. It reproduces the classic cortical firing patterns (tonic spiking,
bursting, spike frequency adaptation, ...) with four parameters.

Model equations:
    dv/dt = 0.04*v^2 + 5*v + 140 - u + I
    du/dt = a*(b*v - u)

    if v >= 30 mV:
        v := c
        u := u + d

Parameters:
    a: recovery time constant (smaller = slower recovery)
    b: sensitivity of recovery variable u to voltage v
    c: after-spike reset value for voltage
    d: after-spike reset increment for recovery variable

Unlike the MSN stepper, the reset reads c and d from the state itself and
no synaptic or dopamine terms are involved.

Reference: Izhikevich, E.M. (2003). Simple model of spiking neurons.
IEEE Transactions on Neural Networks, 14(6), 1569-1572.
"""

from __future__ import annotations

from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.config.parameters import IzhikevichParameters
from msnsim.constants import msn
from msnsim.units import Current, TimeMS


def classic_parameters() -> IzhikevichParameters:
    """Reference constants of the original model (fast-spiking regime)."""
    return IzhikevichParameters(
        a=msn.CLASSIC_A,
        b=msn.CLASSIC_B,
        c=msn.CLASSIC_C,
        d=msn.CLASSIC_D,
        v_thresh=msn.CLASSIC_THRESHOLD,
        v0=msn.CLASSIC_V0,
        u0=msn.CLASSIC_U0,
    )


def classic_initial_state(
    params: IzhikevichParameters,
    d1: float = 0.0,
    d2: float = 0.0,
) -> NeuronState:
    """Initial state carrying the classic constants."""
    return NeuronState(
        v=params.v0,
        u=params.u0,
        a=params.a,
        b=params.b,
        c=params.c,
        d=params.d,
        d1=d1,
        d2=d2,
    )


def izhikevich_dv(state: NeuronState, current: Current, dt: TimeMS) -> float:
    """Euler voltage increment (0.04 v^2 + 5 v + 140 - u + I) dt."""
    v = state.v
    return (0.04 * v * v + 5 * v + 140 - state.u + current) * dt


def izhikevich_du(state: NeuronState, dt: TimeMS) -> float:
    """Euler recovery increment a (b v - u) dt."""
    return state.a * (state.b * state.v - state.u) * dt


def izhikevich_step(
    state: NeuronState,
    current: Current,
    dt: TimeMS,
    v_threshold: float = msn.CLASSIC_THRESHOLD,
) -> NeuronState:
    """Advance one classic Izhikevich neuron by one timestep.

    Args:
        state: Previous state
        current: Injected current for this step
        dt: Timestep in ms
        v_threshold: Spike cut-off voltage (mV)

    Returns:
        New NeuronState; conductance traces and dopamine fields pass through
    """
    if state.v >= v_threshold:
        v_next = state.c
        u_next = state.u + state.d
    else:
        v_next = state.v + izhikevich_dv(state, current, dt)
        u_next = state.u + izhikevich_du(state, dt)

    return NeuronState(
        v=v_next,
        u=u_next,
        a=state.a,
        b=state.b,
        c=state.c,
        d=state.d,
        d1=state.d1,
        d2=state.d2,
        h_ampa=state.h_ampa,
        h_nmda=state.h_nmda,
        h_gaba=state.h_gaba,
    )

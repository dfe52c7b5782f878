"""Synaptic channel currents for the MSN model: AMPA, NMDA and GABA_A.

Each channel z in {ampa, nmda, gaba} carries a conductance trace h_z:

    h_z(t) <- (h_z(t) + S_z(t)) / tau_z     jump on input arrival
    dh_z/dt = -h_z / tau_z                  continuous decay

and contributes an Ohmic current

    I_z = g_z h_z (E_z - v)

NMDA is additionally gated by the voltage-dependent Mg2+ block

    B(v) = 1 / (1 + [Mg2+]_0 / 3.57 * exp(-0.062 v))

so the total synaptic drive is I = I_ampa + B(v) I_nmda + I_gaba.

References:
- Jahr & Stevens (1990): Voltage dependence of NMDA-activated macroscopic
  conductances predicted by single-channel kinetics. J Neurosci 10(9).
- Humphries et al. (2009), Front. Comput. Neurosci. 3:26.
"""

from __future__ import annotations

import math
from enum import Enum

import torch

from msnsim.units import Conductance, Current, Scalar, TimeMS, Voltage

MG_BLOCK_HALF_CONCENTRATION = 3.57
"""[Mg2+] (mM) at which block is half-maximal at 0 mV."""

MG_BLOCK_VOLTAGE_SLOPE = 0.062
"""Voltage sensitivity of the Mg2+ block (1/mV)."""


class SynapticChannel(Enum):
    """Synaptic channel types of the MSN model."""

    AMPA = "ampa"
    NMDA = "nmda"
    GABA = "gaba"


def _exp(x: Scalar) -> Scalar:
    if isinstance(x, torch.Tensor):
        return torch.exp(x)
    return math.exp(x)


def magnesium_block(v: Voltage | torch.Tensor, mg: float = 1.0) -> Scalar:
    """Fraction of NMDA conductance relieved from Mg2+ block at voltage v.

    Strictly increasing in v and bounded in (0, 1). At v = 0 mV with
    mg = 1 mM it equals 1 / (1 + 1/3.57) ~= 0.7813.

    Args:
        v: Membrane potential (mV), float or tensor
        mg: Extracellular magnesium concentration (mM)

    Returns:
        Unblocked fraction, same kind as v
    """
    return 1 / (1 + (mg / MG_BLOCK_HALF_CONCENTRATION) * _exp(-MG_BLOCK_VOLTAGE_SLOPE * v))


def total_current(
    i_ampa: Current,
    i_nmda: Current,
    i_gaba: Current,
    v: Voltage,
    mg: float = 1.0,
) -> Current:
    """Total synaptic drive with the NMDA component Mg2+-gated."""
    return i_ampa + magnesium_block(v, mg) * i_nmda + i_gaba


def update_conductance(h_prev: Conductance, input_spike_sum: float, tau: TimeMS) -> Conductance:
    """Fold this step's input into the trace: (h_prev + S) / tau.

    This is the jump at input arrival; the continuous decay is applied
    separately (decay_conductance).
    """
    return (h_prev + input_spike_sum) / tau


def decay_conductance(h: Conductance, tau: TimeMS, dt: TimeMS) -> Conductance:
    """One explicit Euler step of dh/dt = -h / tau."""
    dh = (-h / tau) * dt
    return h + dh


def channel_current(h: Conductance, v: Voltage, g: float, E: Voltage) -> Current:
    """Ohmic channel current g h (E - v)."""
    return g * h * (E - v)


def steady_state_conductance(input_spike_sum: float, tau: TimeMS, dt: TimeMS) -> Conductance:
    """Fixed point of jump-then-decay under a constant per-step input.

    One step maps h to r (h + S) with r = (1 - dt/tau) / tau, so for
    |r| < 1 iteration converges to h* = r S / (1 - r).
    """
    r = (1 - dt / tau) / tau
    return r * input_spike_sum / (1 - r)

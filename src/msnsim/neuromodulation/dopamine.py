"""Dopamine receptor modulation of MSN excitability (Humphries et al. 2009).

D1 and D2 receptor activation (phi_1, phi_2: fraction of activated receptors)
rescale the Izhikevich parameters and the glutamatergic currents:

    v_r <- v_r (1 + K phi_1)            K+ current (D1)
    d   <- d (1 - L phi_1)              L-type Ca2+ current (D1)
    k   <- k (1 - alpha phi_2)          f-I curve slope (D2)

    I_nmda^D1 = I_nmda (1 + beta_1 phi_1)
    I_ampa^D2 = I_ampa (1 - beta_2 phi_2)

All functions are pure and total. Receptor fractions are expected in [0, 1]
but are not checked here; the formulas stay well defined outside that range.
Python floats and torch tensors are both accepted (element-wise).
"""

from __future__ import annotations

from enum import Enum

from msnsim.units import Current, Fraction, Scalar, Voltage


class DopamineModulation(Enum):
    """Where the D1/D2 rescaling of k and v_r happens.

    NONE:
        The integrator uses the parameter record's k and v_r as given
        (reference behaviour).
    PRE_APPLIED:
        Same as NONE inside the integrator; the simulation driver replaces
        the record with params.with_dopamine(d1, d2) once before the run.
    INLINE:
        The integrator derives k and v_r from the state's d1/d2 on every
        step.
    """

    NONE = "none"
    PRE_APPLIED = "pre_applied"
    INLINE = "inline"


def modulated_rest_potential(v_r: Scalar, d1: Fraction, K: float) -> Scalar:
    """Resting potential scaled by D1 activation: v_r (1 + K d1)."""
    return v_r * (1 + K * d1)


def modulated_reset_increment(d: Scalar, d1: Fraction, L: float) -> Scalar:
    """Post-spike recovery jump reduced by D1 activation: d (1 - L d1)."""
    return d * (1 - L * d1)


def modulated_gain(k: Scalar, d2: Fraction, alpha: float) -> Scalar:
    """Quadratic gain reduced by D2 activation: k (1 - alpha d2)."""
    return k * (1 - alpha * d2)


def modulated_nmda_current(i_nmda: Current, d1: Fraction, beta1: float) -> Current:
    """NMDA current enhanced by D1 activation: I_nmda (1 + beta_1 d1)."""
    return i_nmda * (1 + beta1 * d1)


def modulated_ampa_current(i_ampa: Current, d2: Fraction, beta2: float) -> Current:
    """AMPA current reduced by D2 activation: I_ampa (1 - beta_2 d2)."""
    return i_ampa * (1 - beta2 * d2)


def effective_rest_and_gain(
    v_r: Voltage,
    k: float,
    d1: Fraction,
    d2: Fraction,
    K: float,
    alpha: float,
) -> tuple[Voltage, float]:
    """Both D1/D2-dependent membrane parameters at once.

    Returns:
        (v_r', k') as used by the voltage equation under inline modulation
    """
    return modulated_rest_potential(v_r, d1, K), modulated_gain(k, d2, alpha)

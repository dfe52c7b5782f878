"""
Dopamine neuromodulation of the MSN model.
"""

from msnsim.neuromodulation.dopamine import (
    DopamineModulation,
    effective_rest_and_gain,
    modulated_ampa_current,
    modulated_gain,
    modulated_nmda_current,
    modulated_reset_increment,
    modulated_rest_potential,
)

__all__ = [
    "DopamineModulation",
    "effective_rest_and_gain",
    "modulated_ampa_current",
    "modulated_gain",
    "modulated_nmda_current",
    "modulated_reset_increment",
    "modulated_rest_potential",
]

"""
Synaptic channel models (AMPA, NMDA, GABA_A).
"""

from msnsim.synapses.channels import (
    SynapticChannel,
    channel_current,
    decay_conductance,
    magnesium_block,
    steady_state_conductance,
    total_current,
    update_conductance,
)

__all__ = [
    "SynapticChannel",
    "channel_current",
    "decay_conductance",
    "magnesium_block",
    "steady_state_conductance",
    "total_current",
    "update_conductance",
]

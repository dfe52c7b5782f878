"""
Neuron models for msnsim.

The dopamine-modulated MSN stepper and the classic Izhikevich stepper share
one immutable NeuronState.
"""

from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.components.neurons.msn_neuron import (
    initial_state,
    is_spiking,
    membrane_increment,
    msn_step,
    recovery_increment,
)
from msnsim.components.neurons.izhikevich_neuron import (
    classic_initial_state,
    classic_parameters,
    izhikevich_du,
    izhikevich_dv,
    izhikevich_step,
)

__all__ = [
    # State
    "NeuronState",
    # MSN (Humphries 2009)
    "initial_state",
    "is_spiking",
    "membrane_increment",
    "msn_step",
    "recovery_increment",
    # Classic Izhikevich (2003)
    "classic_initial_state",
    "classic_parameters",
    "izhikevich_du",
    "izhikevich_dv",
    "izhikevich_step",
]

"""
msnsim - Dopamine-modulated Izhikevich model of a striatal medium spiny neuron.

Implements the reduced MSN model of Humphries et al. (2009): the Izhikevich
(2007) capacitance-form neuron with D1/D2 dopamine receptor modulation and
AMPA, NMDA (Mg2+-gated) and GABA_A synaptic channels, integrated with
explicit Euler one immutable state at a time.

Quick Start:
============

    from msnsim import MSNSimulation, SimulationConfig

    result = MSNSimulation(SimulationConfig(d1=0.5)).run()
    print(result.spike_count, result.voltage_trace()[-1])

Single steps:
=============

    from msnsim import initial_state, msn_parameters, msn_step

    params = msn_parameters()
    state = initial_state(params, d1=0.2)
    state = msn_step(state, 100.0, 0.0, 0.0, params, dt_ms=0.1)
"""

__version__ = "0.1.0"

from msnsim.errors import ConfigurationError, MSNSimError, SimulationDivergenceError
from msnsim.config import (
    ConfigValidationError,
    DopamineNeuronParameters,
    IzhikevichParameters,
    SimulationConfig,
    msn_parameters,
)
from msnsim.neuromodulation import (
    DopamineModulation,
    modulated_ampa_current,
    modulated_gain,
    modulated_nmda_current,
    modulated_reset_increment,
    modulated_rest_potential,
)
from msnsim.synapses import (
    SynapticChannel,
    channel_current,
    magnesium_block,
    total_current,
    update_conductance,
)
from msnsim.components.neurons import (
    NeuronState,
    initial_state,
    izhikevich_step,
    msn_step,
)
from msnsim.stimuli import RectangularPulse, Sequential, injected_current
from msnsim.simulation import MSNSimulation, SimulationResult, run_simulation

__all__ = [
    "__version__",
    # Errors
    "MSNSimError",
    "ConfigurationError",
    "ConfigValidationError",
    "SimulationDivergenceError",
    # Configuration
    "DopamineNeuronParameters",
    "IzhikevichParameters",
    "SimulationConfig",
    "msn_parameters",
    # Dopamine
    "DopamineModulation",
    "modulated_ampa_current",
    "modulated_gain",
    "modulated_nmda_current",
    "modulated_reset_increment",
    "modulated_rest_potential",
    # Synapses
    "SynapticChannel",
    "channel_current",
    "magnesium_block",
    "total_current",
    "update_conductance",
    # Neurons
    "NeuronState",
    "initial_state",
    "izhikevich_step",
    "msn_step",
    # Stimuli
    "RectangularPulse",
    "Sequential",
    "injected_current",
    # Simulation
    "MSNSimulation",
    "SimulationResult",
    "run_simulation",
]

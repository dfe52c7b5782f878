"""
Configuration for msnsim.

Parameter records (model constants) and the simulation driver config,
plus the declarative validation they share.

Usage:
    from msnsim.config import SimulationConfig, msn_parameters

    params = msn_parameters()
    config = SimulationConfig(n_steps=1000, d1=0.5)
"""

from msnsim.config.validation import (
    ConfigValidationError,
    ValidatedConfig,
    ValidatorRegistry,
)
from msnsim.config.parameters import (
    DopamineNeuronParameters,
    IzhikevichParameters,
    msn_parameters,
)
from msnsim.config.simulation_config import SimulationConfig

__all__ = [
    "ConfigValidationError",
    "ValidatedConfig",
    "ValidatorRegistry",
    "DopamineNeuronParameters",
    "IzhikevichParameters",
    "msn_parameters",
    "SimulationConfig",
]

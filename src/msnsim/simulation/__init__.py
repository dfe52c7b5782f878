"""
Simulation driver: runs the MSN integrator over a fixed number of steps.
"""

from msnsim.simulation.result import SimulationResult
from msnsim.simulation.runner import MSNSimulation, run_simulation

__all__ = [
    "MSNSimulation",
    "SimulationResult",
    "run_simulation",
]

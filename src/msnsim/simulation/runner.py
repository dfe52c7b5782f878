"""
Simulation driver for a single dopamine-modulated MSN.

Usage:
    sim = MSNSimulation(SimulationConfig(d1=0.5, amplitude=120.0))
    result = sim.run()
    v = result.voltage_trace()

    # Change a setting: build a new simulation and run it again
    result_d2 = sim.reconfigure(d2=0.8).run()

The driver owns the trajectory. Each step calls the pure integrator with
the previous state and this step's channel inputs, then appends the returned
state to the result. Runs are deterministic: identical config, parameters
and initial state reproduce the same trajectory bit for bit.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Any, Optional

from msnsim.components.neurons.msn_neuron import initial_state, is_spiking, msn_step
from msnsim.components.neurons.neuron_state import NeuronState
from msnsim.config.parameters import DopamineNeuronParameters, msn_parameters
from msnsim.config.simulation_config import SimulationConfig
from msnsim.errors import SimulationDivergenceError
from msnsim.neuromodulation.dopamine import DopamineModulation
from msnsim.simulation.result import SimulationResult
from msnsim.stimuli import RectangularPulse, StimulusPattern
from msnsim.utils.numerical_validation import validate_state_finite

logger = logging.getLogger(__name__)


class MSNSimulation:
    """Fixed-length, single-threaded run of the MSN integrator.

    Args:
        config: Simulation settings (defaults reproduce the reference run)
        params: Model parameters (default: Humphries 2009 MSN)
        ampa_stimulus: AMPA input pattern (default: the config's pulse)
        nmda_stimulus: NMDA input pattern (default: the config's pulse)
        gaba_stimulus: GABA input pattern (default: the config's pulse)

    Example:
        >>> recorded = Sequential([0.0] * 100 + [80.0] * 30)
        >>> result = MSNSimulation(ampa_stimulus=recorded).run()
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        params: Optional[DopamineNeuronParameters] = None,
        ampa_stimulus: Optional[StimulusPattern] = None,
        nmda_stimulus: Optional[StimulusPattern] = None,
        gaba_stimulus: Optional[StimulusPattern] = None,
    ):
        self.config = config or SimulationConfig()
        self.base_params = params or msn_parameters()

        if self.config.modulation is DopamineModulation.PRE_APPLIED:
            self.params = self.base_params.with_dopamine(self.config.d1, self.config.d2)
        else:
            self.params = self.base_params

        # Explicit patterns replace the config's pulses, amplitude fractions included
        cfg = self.config
        self.ampa_stimulus: StimulusPattern = ampa_stimulus or RectangularPulse(
            cfg.ampa_amplitude, *cfg.ampa_window
        )
        self.nmda_stimulus: StimulusPattern = nmda_stimulus or RectangularPulse(
            cfg.nmda_amplitude, *cfg.nmda_window
        )
        self.gaba_stimulus: StimulusPattern = gaba_stimulus or RectangularPulse(
            cfg.gaba_amplitude, *cfg.gaba_window
        )
        self._custom_stimuli = {
            "ampa_stimulus": ampa_stimulus,
            "nmda_stimulus": nmda_stimulus,
            "gaba_stimulus": gaba_stimulus,
        }

    def reconfigure(self, **changes: Any) -> "MSNSimulation":
        """New simulation with some config fields replaced.

        Parameters and explicitly supplied stimuli carry over.
        """
        return MSNSimulation(
            replace(self.config, **changes), self.base_params, **self._custom_stimuli
        )

    def initial_state(self) -> NeuronState:
        """Initial condition described by the config."""
        cfg = self.config
        return initial_state(
            self.params,
            d1=cfg.d1,
            d2=cfg.d2,
            v=cfg.v0,
            u=cfg.u0,
            h_ampa=cfg.h_ampa0,
            h_nmda=cfg.h_nmda0,
            h_gaba=cfg.h_gaba0,
        )

    def run(self, initial: Optional[NeuronState] = None) -> SimulationResult:
        """Integrate config.n_steps steps.

        Args:
            initial: Starting state (default: from config)

        Returns:
            SimulationResult with one entry per step

        Raises:
            SimulationDivergenceError: If check_finite is enabled and a state
                becomes NaN/Inf
        """
        cfg = self.config
        state = initial if initial is not None else self.initial_state()
        result = SimulationResult(
            initial=state, dt_ms=cfg.dt_ms, dtype=cfg.get_torch_dtype()
        )

        logger.info(
            f"Running MSN simulation: {cfg.n_steps} steps, dt={cfg.dt_ms} ms, "
            f"d1={state.d1}, d2={state.d2}, modulation={cfg.modulation.value}"
        )

        for t in range(cfg.n_steps):
            i_ampa = self.ampa_stimulus.get_input(t)
            i_nmda = self.nmda_stimulus.get_input(t)
            i_gaba = self.gaba_stimulus.get_input(t)

            spiking = is_spiking(state, self.params)
            state = msn_step(
                state,
                i_ampa,
                i_nmda,
                i_gaba,
                self.params,
                dt_ms=cfg.dt_ms,
                modulation=cfg.modulation,
            )

            if cfg.check_finite:
                try:
                    validate_state_finite(state, step=t)
                except SimulationDivergenceError as e:
                    logger.warning(f"Simulation diverged: {e}")
                    raise

            if spiking:
                result.spike_steps.append(t)
                logger.debug(f"Spike reset at step {t} (d={state.d:.3f})")

            result.ampa_input.append(i_ampa)
            result.nmda_input.append(i_nmda)
            result.gaba_input.append(i_gaba)
            result.states.append(state)

        logger.info(
            f"MSN simulation finished: {result.spike_count} spikes, "
            f"final v={result.final_state.v:.3f} mV"
        )
        return result


def run_simulation(
    config: Optional[SimulationConfig] = None,
    params: Optional[DopamineNeuronParameters] = None,
    initial: Optional[NeuronState] = None,
    ampa_stimulus: Optional[StimulusPattern] = None,
    nmda_stimulus: Optional[StimulusPattern] = None,
    gaba_stimulus: Optional[StimulusPattern] = None,
) -> SimulationResult:
    """One-shot convenience wrapper around MSNSimulation.run()."""
    sim = MSNSimulation(config, params, ampa_stimulus, nmda_stimulus, gaba_stimulus)
    return sim.run(initial)

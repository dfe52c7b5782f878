"""Shared test fixtures and configuration."""

import pytest
import torch

from msnsim.components.neurons import initial_state
from msnsim.config import SimulationConfig, msn_parameters


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure reproducible tests by seeding torch.

    The model itself is deterministic; this keeps any randomized test
    inputs stable across runs.
    """
    torch.manual_seed(42)


@pytest.fixture
def params():
    """Humphries 2009 MSN parameters."""
    return msn_parameters()


@pytest.fixture
def resting_state(params):
    """Reference initial condition: v=-65, u=-14, no dopamine, empty traces."""
    return initial_state(params, d1=0.0, d2=0.0, v=-65.0, u=-14.0)


@pytest.fixture
def dt_ms():
    """Reference integration timestep."""
    return 0.1


@pytest.fixture
def silent_config():
    """500 steps with no injected drive."""
    return SimulationConfig(n_steps=500, amplitude=0.0)

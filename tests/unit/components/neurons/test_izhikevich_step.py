"""Tests for the classic (2003) Izhikevich stepper."""

import dataclasses

import pytest

from msnsim.components.neurons import (
    classic_initial_state,
    classic_parameters,
    izhikevich_du,
    izhikevich_dv,
    izhikevich_step,
)


@pytest.fixture
def classic_state():
    return classic_initial_state(classic_parameters())


class TestClassicParameters:

    def test_constant_table(self):
        p = classic_parameters()
        assert (p.a, p.b, p.c, p.d) == (0.1, 0.2, -65.0, 8.0)
        assert p.v_thresh == 30.0
        assert (p.v0, p.u0) == (-65.0, -14.0)

    def test_initial_state_carries_constants(self, classic_state):
        assert (classic_state.v, classic_state.u) == (-65.0, -14.0)
        assert (classic_state.a, classic_state.b, classic_state.c, classic_state.d) == (
            0.1, 0.2, -65.0, 8.0,
        )


class TestClassicStep:

    def test_euler_increments(self, classic_state):
        # 0.04*4225 - 325 + 140 + 14 + 10 = 8
        assert izhikevich_dv(classic_state, 10.0, 0.1) == pytest.approx(0.8)
        # 0.1 * (0.2 * -65 + 14) * 0.1
        assert izhikevich_du(classic_state, 0.1) == pytest.approx(0.01)

    def test_subthreshold_step(self, classic_state):
        nxt = izhikevich_step(classic_state, 10.0, 0.1)
        assert nxt.v == pytest.approx(-64.2)
        assert nxt.u == pytest.approx(-13.99)

    def test_reset_uses_state_c_and_d(self, classic_state):
        st = dataclasses.replace(classic_state, v=30.0, u=2.0)
        nxt = izhikevich_step(st, 0.0, 0.1)
        assert nxt.v == -65.0
        assert nxt.u == 10.0
        assert nxt.d == 8.0

    def test_custom_threshold(self, classic_state):
        st = dataclasses.replace(classic_state, v=20.0)
        assert izhikevich_step(st, 0.0, 0.1, v_threshold=20.0).v == -65.0
        assert izhikevich_step(st, 0.0, 0.1).v != -65.0

    def test_dopamine_and_traces_pass_through(self, classic_state):
        st = dataclasses.replace(classic_state, d1=0.4, d2=0.2, h_nmda=1.5)
        nxt = izhikevich_step(st, 5.0, 0.1)
        assert (nxt.d1, nxt.d2, nxt.h_nmda) == (0.4, 0.2, 1.5)

    def test_sustained_current_produces_spikes(self, classic_state):
        """Constant drive well above rheobase gives repeated resets."""
        st = classic_state
        resets = 0
        for _ in range(2000):
            spiking = st.v >= 30.0
            st = izhikevich_step(st, 10.0, 0.1)
            if spiking:
                resets += 1
                assert st.v == -65.0
        assert resets >= 2

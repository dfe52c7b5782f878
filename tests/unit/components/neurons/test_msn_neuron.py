"""Tests for the dopamine-modulated MSN integrator (single-step behaviour)."""

import dataclasses
import math

import pytest

from msnsim.components.neurons import (
    NeuronState,
    initial_state,
    is_spiking,
    membrane_increment,
    msn_step,
    recovery_increment,
)
from msnsim.neuromodulation import DopamineModulation
from msnsim.synapses import magnesium_block


def _with(state: NeuronState, **changes) -> NeuronState:
    return dataclasses.replace(state, **changes)


class TestInitialState:

    def test_defaults_from_parameters(self, params):
        st = initial_state(params)
        assert st.v == -65.0
        assert st.u == -14.0
        assert (st.a, st.b, st.c, st.d) == (0.01, -20.0, -55.0, 91.0)
        assert (st.h_ampa, st.h_nmda, st.h_gaba) == (0.0, 0.0, 0.0)

    def test_overrides(self, params):
        st = initial_state(params, d1=0.3, d2=0.6, v=-70.0, u=0.0, h_nmda=0.9)
        assert (st.v, st.u, st.d1, st.d2, st.h_nmda) == (-70.0, 0.0, 0.3, 0.6, 0.9)


class TestSpikeReset:
    """Reset branch: v >= v_t."""

    @pytest.mark.parametrize("v", [-29.7, -10.0, 35.0])
    @pytest.mark.parametrize("u", [-14.0, 0.0, 250.0])
    def test_voltage_resets_to_c_exactly(self, params, resting_state, v, u):
        st = _with(resting_state, v=v, u=u, h_ampa=12.0, h_nmda=3.0, h_gaba=7.0)
        nxt = msn_step(st, 500.0, 200.0, -50.0, params)
        assert nxt.v == params.c == -55.0

    def test_threshold_is_inclusive(self, params, resting_state):
        st = _with(resting_state, v=params.v_t)
        assert is_spiking(st, params)
        assert not is_spiking(_with(st, v=-29.71), params)

    def test_recovery_jumps_by_unmodulated_d_without_dopamine(self, params, resting_state):
        st = _with(resting_state, v=0.0, u=5.0)
        nxt = msn_step(st, 0.0, 0.0, 0.0, params)
        assert nxt.d == 91.0
        assert nxt.u == 5.0 + 91.0

    def test_reset_increment_recomputed_from_d1(self, params, resting_state):
        st = _with(resting_state, v=0.0, u=5.0, d1=0.5)
        nxt = msn_step(st, 0.0, 0.0, 0.0, params)
        expected_d = 91.0 * (1 - params.L * 0.5)
        assert nxt.d == pytest.approx(expected_d)
        assert nxt.u == pytest.approx(5.0 + expected_d)

    def test_reset_increment_compounds_across_spikes(self, params, resting_state):
        """d is rescaled from the current state's d each time the neuron spikes."""
        st = _with(resting_state, v=0.0, d1=1.0)
        first = msn_step(st, 0.0, 0.0, 0.0, params)
        second = msn_step(_with(first, v=0.0), 0.0, 0.0, 0.0, params)
        factor = 1 - params.L
        assert first.d == pytest.approx(91.0 * factor)
        assert second.d == pytest.approx(91.0 * factor * factor)

    def test_traces_pass_through(self, params, resting_state):
        st = _with(resting_state, v=0.0, h_ampa=1.5, h_nmda=2.5, h_gaba=3.5)
        nxt = msn_step(st, 100.0, 100.0, 100.0, params)
        assert (nxt.h_ampa, nxt.h_nmda, nxt.h_gaba) == (1.5, 2.5, 3.5)


class TestSubthresholdBranch:

    def test_matches_hand_computed_update(self, params, resting_state, dt_ms):
        """One step with AMPA/NMDA/GABA drive, written out term by term."""
        st = _with(resting_state, v=-60.0, u=-10.0, d1=0.4, d2=0.3,
                   h_ampa=1.0, h_nmda=2.0, h_gaba=0.5)
        nxt = msn_step(st, 20.0, 30.0, -4.0, params, dt_ms=dt_ms)

        h_ampa = (1.0 + 20.0) / 6.0
        h_nmda = (2.0 + 30.0) / 160.0
        h_gaba = (0.5 - 4.0) / 4.0
        i_ampa = params.g_ampa * h_ampa * (0.0 + 60.0) * (1 - 0.215 * 0.3)
        i_nmda = params.g_nmda * h_nmda * (0.0 + 60.0) * (1 + 6.3 * 0.4)
        i_gaba = params.g_gaba * h_gaba * (-60.0 + 60.0)
        i_total = i_ampa + magnesium_block(-60.0) * i_nmda + i_gaba

        dv = (1.0 * (-60.0 + 80.0) * (-60.0 + 29.7) + 10.0 + i_total) * dt_ms / 15.2
        du = 0.01 * (-20.0 * (-60.0 + 80.0) + 10.0) * dt_ms

        assert nxt.v == pytest.approx(-60.0 + dv)
        assert nxt.u == pytest.approx(-10.0 + du)
        assert nxt.h_ampa == pytest.approx(h_ampa - h_ampa / 6.0 * dt_ms)
        assert nxt.h_nmda == pytest.approx(h_nmda - h_nmda / 160.0 * dt_ms)
        assert nxt.h_gaba == pytest.approx(h_gaba - h_gaba / 4.0 * dt_ms)
        assert nxt.d == st.d

    def test_increment_helpers(self, params, dt_ms):
        dv = membrane_increment(-65.0, -14.0, 0.0, params.k, params.v_r, params.v_t, params.C, dt_ms)
        du = recovery_increment(-65.0, -14.0, params.a, params.b, params.v_r, dt_ms)
        assert dv == pytest.approx((15.0 * (-65.0 + 29.7) + 14.0) * dt_ms / 15.2)
        assert du == pytest.approx(0.01 * (-300.0 + 14.0) * dt_ms)

    def test_recovery_uses_parameter_a_b_not_state_copies(self, params, resting_state):
        """State copies of a, b are carried along but the ODE reads the parameters."""
        st = _with(resting_state, a=0.0, b=0.0)
        nxt = msn_step(st, 0.0, 0.0, 0.0, params)
        assert nxt.u != st.u
        assert (nxt.a, nxt.b) == (0.0, 0.0)

    def test_input_state_is_not_modified(self, params, resting_state):
        before = resting_state.to_dict()
        msn_step(resting_state, 100.0, 10.0, -5.0, params)
        assert resting_state.to_dict() == before

    def test_gaba_is_not_dopamine_sensitive(self, params, resting_state):
        low = msn_step(_with(resting_state, v=-40.0), 0.0, 0.0, -20.0, params)
        high = msn_step(_with(resting_state, v=-40.0, d1=1.0, d2=1.0), 0.0, 0.0, -20.0, params)
        assert high.v == low.v

    def test_d1_amplifies_nmda_drive(self, params, resting_state):
        st = _with(resting_state, v=-40.0)
        without = msn_step(st, 0.0, 50.0, 0.0, params)
        with_d1 = msn_step(_with(st, d1=1.0), 0.0, 50.0, 0.0, params)
        assert with_d1.v > without.v

    def test_d2_weakens_ampa_drive(self, params, resting_state):
        st = _with(resting_state, v=-70.0)
        without = msn_step(st, 50.0, 0.0, 0.0, params)
        with_d2 = msn_step(_with(st, d2=1.0), 50.0, 0.0, 0.0, params)
        assert with_d2.v < without.v

    def test_non_finite_values_propagate(self, params, resting_state):
        """No stability guard: an overflowing current yields inf, not an exception."""
        st = _with(resting_state, v=-35.0)
        nxt = msn_step(st, 1e308, 0.0, 0.0, params, dt_ms=0.1)
        assert math.isinf(nxt.v)
        assert not nxt.is_finite()


class TestModulationPolicy:

    def test_none_ignores_dopamine_for_k_and_v_r(self, params, resting_state):
        base = msn_step(resting_state, 0.0, 0.0, 0.0, params)
        da = msn_step(_with(resting_state, d1=0.8, d2=0.8), 0.0, 0.0, 0.0, params)
        assert (da.v, da.u) == (base.v, base.u)

    def test_inline_changes_dynamics(self, params, resting_state):
        st = _with(resting_state, d1=0.8, d2=0.8)
        plain = msn_step(st, 0.0, 0.0, 0.0, params, modulation=DopamineModulation.NONE)
        inline = msn_step(st, 0.0, 0.0, 0.0, params, modulation=DopamineModulation.INLINE)
        assert inline.v != plain.v
        assert inline.u != plain.u

    @pytest.mark.parametrize("d1,d2", [(0.0, 0.0), (0.3, 0.9), (1.0, 0.25)])
    def test_inline_equals_pre_applied(self, params, resting_state, d1, d2):
        st = _with(resting_state, d1=d1, d2=d2)
        inline = msn_step(st, 40.0, 5.0, -3.0, params, modulation=DopamineModulation.INLINE)
        pre = msn_step(st, 40.0, 5.0, -3.0, params.with_dopamine(d1, d2))
        assert inline == pre

    def test_inline_at_zero_dopamine_equals_reference(self, params, resting_state):
        inline = msn_step(resting_state, 40.0, 5.0, -3.0, params, modulation=DopamineModulation.INLINE)
        plain = msn_step(resting_state, 40.0, 5.0, -3.0, params)
        assert inline == plain


class TestDeterminism:

    def test_repeated_trajectories_identical(self, params, resting_state):
        def trajectory():
            st = resting_state
            out = []
            for t in range(300):
                i_ampa = 100.0 if 100 < t < 130 else 0.0
                st = msn_step(st, i_ampa, 0.0, 0.0, params)
                out.append(st)
            return out

        assert trajectory() == trajectory()

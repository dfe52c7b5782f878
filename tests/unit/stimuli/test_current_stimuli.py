"""Tests for injected-current stimulus patterns."""

import pytest

from msnsim.stimuli import RectangularPulse, Sequential, StimulusPattern, injected_current


class TestInjectedCurrent:

    def test_inside_window(self):
        assert injected_current(100.0, 101, 100, 130) == 100.0
        assert injected_current(100.0, 129, 100, 130) == 100.0

    @pytest.mark.parametrize("t", [100, 130])
    def test_bounds_are_exclusive(self, t):
        assert injected_current(100.0, t, 100, 130) == 0.0

    def test_outside_window(self):
        assert injected_current(100.0, 0, 100, 130) == 0.0
        assert injected_current(100.0, 400, 100, 130) == 0.0

    def test_negative_amplitude(self):
        assert injected_current(-25.0, 125, 120, 130) == -25.0

    def test_empty_window(self):
        assert all(injected_current(1.0, t, 5, 5) == 0.0 for t in range(10))


class TestRectangularPulse:

    def test_is_stimulus_pattern(self):
        assert isinstance(RectangularPulse(1.0, 0, 10), StimulusPattern)

    def test_reference_ampa_window(self):
        stim = RectangularPulse(amplitude=100.0, t_min=100, t_max=130)
        values = stim.as_list(200)
        on = [t for t, x in enumerate(values) if x != 0.0]
        assert on == list(range(101, 130))
        assert list(stim.active_steps()) == on

    def test_active_steps_with_fractional_bounds(self):
        stim = RectangularPulse(1.0, 2.5, 5.5)
        assert list(stim.active_steps()) == [3, 4, 5]
        assert [t for t in range(10) if stim.get_input(t)] == [3, 4, 5]

    def test_window_starting_at_zero_excludes_step_zero(self):
        stim = RectangularPulse(5.0, 0, 200)
        assert stim.get_input(0) == 0.0
        assert stim.get_input(1) == 5.0
        assert stim.active_steps()[0] == 1

    def test_duration(self):
        assert RectangularPulse(1.0, 100, 130).duration_timesteps() == 130

    def test_pattern_is_stateless(self):
        stim = RectangularPulse(3.0, 0, 4)
        assert stim.as_list(6) == stim.as_list(6) == [0.0, 3.0, 3.0, 3.0, 0.0, 0.0]

    def test_repr(self):
        assert "amplitude=2.0" in repr(RectangularPulse(2.0, 1, 3))


class TestSequential:

    def test_replays_values(self):
        stim = Sequential([0, 5, 7.5])
        assert stim.as_list(5) == [0.0, 5.0, 7.5, 0.0, 0.0]

    def test_negative_and_out_of_range_steps(self):
        stim = Sequential([1.0, 2.0])
        assert stim.get_input(-1) == 0.0
        assert stim.get_input(2) == 0.0

    def test_duration(self):
        assert Sequential([1.0] * 7).duration_timesteps() == 7

    def test_values_are_copied(self):
        values = [1.0, 2.0]
        stim = Sequential(values)
        values[0] = 99.0
        assert stim.get_input(0) == 1.0

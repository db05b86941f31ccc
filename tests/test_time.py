"""Tests for time stepping utilities."""

import numpy as np
import pytest

from heatzoo.time.stepper import Stepper, output_times


class TestStepper:
    def test_n_steps(self):
        assert Stepper(t_end=1.0, dt=0.1).n_steps == 10
        assert Stepper(t_end=2000.0, dt=0.2).n_steps == 10000

    def test_iteration(self):
        steps = list(Stepper(t_end=1.0, dt=0.25))
        assert len(steps) == 4
        np.testing.assert_allclose([t for t, _ in steps], [0.25, 0.5, 0.75, 1.0])
        np.testing.assert_allclose([dt for _, dt in steps], 0.25)

    def test_last_step_clamped(self):
        steps = list(Stepper(t_end=1.0, dt=0.3))
        assert len(steps) == 4
        assert steps[-1][0] == pytest.approx(1.0)
        assert steps[-1][1] == pytest.approx(0.1)

    def test_times_include_start(self):
        times = Stepper(t_end=3.0, dt=1.0, t_start=1.0).times
        np.testing.assert_allclose(times, [1.0, 2.0, 3.0])

    def test_empty_span(self):
        stepper = Stepper(t_end=5.0, dt=1.0, t_start=5.0)
        assert stepper.n_steps == 0
        assert list(stepper) == []

    def test_invalid(self):
        with pytest.raises(ValueError):
            Stepper(t_end=1.0, dt=0.0)
        with pytest.raises(ValueError):
            Stepper(t_end=0.0, dt=0.1, t_start=1.0)


class TestOutputTimes:
    def test_end_points(self):
        np.testing.assert_allclose(output_times((0.0, 10.0)), [0.0, 10.0])

    def test_regular(self):
        np.testing.assert_allclose(output_times((0.0, 10.0), 2.5), [0.0, 2.5, 5.0, 7.5, 10.0])

    def test_ends_exactly_at_t_end(self):
        times = output_times((0.0, 10.0), 3.0)
        np.testing.assert_allclose(times, [0.0, 3.0, 6.0, 9.0, 10.0])
        assert times[-1] == 10.0

    def test_floating_point_interval(self):
        times = output_times((0.0, 1.0), 0.1)
        assert len(times) == 11
        assert times[-1] == 1.0

    def test_invalid(self):
        with pytest.raises(ValueError):
            output_times((1.0, 0.0))
        with pytest.raises(ValueError):
            output_times((0.0, 1.0), -1.0)

"""Tests for the time integrators."""

import numpy as np
import pytest

from heatzoo.boundaries.base import Boundary, Emission
from heatzoo.errors import NumericalInstability
from heatzoo.geometry.grid import HeatRod, HeatPlate
from heatzoo.materials.base import DynamicIsotropic
from heatzoo.materials.library import steel, dynamic_steel
from heatzoo.physics.heat import HeatConduction
from heatzoo.postprocess.integrals import total_energy
from heatzoo.solvers.base import Solution, initial_state
from heatzoo.solvers.euler import EulerIntegrator
from heatzoo.solvers.scipy_backend import ScipyIntegrator


def _cooling_rod(n=10, prop=steel):
    rod = HeatRod(0.2, n)
    boundary = Boundary(rod)
    boundary.set_emission(Emission(5.0, 0.5, 300.0), "east")
    return HeatConduction(rod, prop, boundary)


class TestInitialState:
    def test_scalar(self):
        rod = HeatRod(0.2, 5)
        np.testing.assert_array_equal(initial_state(rod, 600.0), np.full(5, 600.0))

    def test_flat_is_copied(self):
        rod = HeatRod(0.2, 3)
        theta = np.array([300.0, 400.0, 500.0])
        y0 = initial_state(rod, theta)
        y0[0] = 0.0
        assert theta[0] == 300.0

    def test_grid(self):
        plate = HeatPlate(0.2, 0.1, 3, 2)
        grid = np.arange(6, dtype=float).reshape((3, 2), order="F")
        np.testing.assert_array_equal(initial_state(plate, grid), np.arange(6.0))

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            initial_state(HeatRod(0.2, 5), np.zeros(4))


class TestSolution:
    def test_accessors(self):
        plate = HeatPlate(0.2, 0.1, 2, 2)
        history = np.array([np.full(4, 600.0), np.full(4, 500.0), np.full(4, 400.0)])
        sol = Solution(np.array([0.0, 1.0, 2.0]), history, plate)
        assert len(sol) == 3
        np.testing.assert_array_equal(sol.final, 400.0)
        np.testing.assert_array_equal(sol.at(0.9), 500.0)
        np.testing.assert_array_equal(sol[0], 600.0)
        assert sol.grid().shape == (2, 2)
        assert sol.grid(0.0)[0, 0] == 600.0


class TestScipyIntegrator:
    def test_uniform_insulated_stays_uniform(self):
        rod = HeatRod(0.2, 8)
        sol = ScipyIntegrator().solve(HeatConduction(rod, steel), 450.0, (0.0, 100.0))
        assert sol.success
        np.testing.assert_allclose(sol.final, 450.0)

    def test_cooling_rod(self):
        heat = _cooling_rod()
        sol = ScipyIntegrator().solve(heat, 600.0, (0.0, 200.0), save_every=50.0)
        np.testing.assert_allclose(sol.times, [0.0, 50.0, 100.0, 150.0, 200.0])
        means = sol.history.mean(axis=1)
        assert np.all(np.diff(means) < 0.0)
        assert np.all(sol.history > 300.0)
        # Hottest at the insulated end
        assert np.argmax(sol.final) == 0

    def test_dynamic_material(self):
        heat = _cooling_rod(prop=dynamic_steel)
        sol = ScipyIntegrator().solve(heat, 600.0, (0.0, 200.0))
        assert sol.final.max() < 600.0
        assert sol.final.min() > 300.0

    def test_insulated_plate_conserves_energy(self):
        plate = HeatPlate(0.2, 0.1, 8, 4)
        heat = HeatConduction(plate, steel)
        theta0 = np.linspace(300.0, 600.0, plate.n_cells)
        sol = ScipyIntegrator().solve(heat, theta0, (0.0, 500.0))
        e0 = total_energy(theta0, plate, steel)
        assert total_energy(sol.final, plate, steel) == pytest.approx(e0, rel=1e-6)
        assert np.ptp(sol.final) < np.ptp(theta0)

    def test_explicit_method(self):
        heat = _cooling_rod(n=5)
        sol = ScipyIntegrator(method="RK45").solve(heat, 600.0, (0.0, 50.0))
        assert sol.success
        assert sol.final.max() < 600.0

    def test_empty_span(self):
        heat = HeatConduction(HeatRod(0.2, 3), steel)
        sol = ScipyIntegrator().solve(heat, 300.0, (0.0, 0.0))
        assert len(sol) == 1
        np.testing.assert_array_equal(sol.times, [0.0])
        np.testing.assert_array_equal(sol.final, 300.0)
        euler = EulerIntegrator(dt=1.0).solve(heat, 300.0, (0.0, 0.0))
        assert len(euler) == 1

    def test_invalid_physics(self):
        heat = HeatConduction(HeatRod(0.2, 4), steel, Boundary(HeatPlate(0.1, 0.1, 2, 2)))
        with pytest.raises(ValueError):
            ScipyIntegrator().solve(heat, 300.0, (0.0, 1.0))

    def test_inadmissible_material(self):
        prop = DynamicIsotropic((45.0,), (7800.0,), (480.0, -1.0))
        heat = HeatConduction(HeatRod(0.2, 4), prop)
        with pytest.raises(ValueError):
            ScipyIntegrator().solve(heat, 600.0, (0.0, 1.0))


class TestEulerIntegrator:
    def test_matches_bdf(self):
        heat = _cooling_rod()
        t_span = (0.0, 100.0)
        euler = EulerIntegrator(dt=1.0).solve(heat, 600.0, t_span)
        bdf = ScipyIntegrator(rtol=1e-8, atol=1e-10).solve(heat, 600.0, t_span)
        np.testing.assert_allclose(euler.final, bdf.final, atol=0.2)

    def test_saved_times(self):
        heat = _cooling_rod()
        sol = EulerIntegrator(dt=1.0).solve(heat, 600.0, (0.0, 10.0), save_every=5.0)
        np.testing.assert_allclose(sol.times, [0.0, 5.0, 10.0])
        assert sol.history.shape == (3, 10)
        assert sol.nfev == 10

    def test_unstable_step(self):
        heat = _cooling_rod(n=40)
        with pytest.raises(NumericalInstability):
            EulerIntegrator(dt=2.0).solve(heat, 600.0, (0.0, 10.0))

    def test_input_not_modified(self):
        heat = _cooling_rod(n=4)
        theta0 = np.full(4, 600.0)
        EulerIntegrator(dt=1.0).solve(heat, theta0, (0.0, 5.0))
        np.testing.assert_array_equal(theta0, 600.0)

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            EulerIntegrator(dt=0.0)

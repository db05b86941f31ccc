"""Tests for post-processing utilities."""

import numpy as np
import pytest

from heatzoo.boundaries.base import Boundary, Emission
from heatzoo.geometry.grid import HeatRod, HeatPlate, HeatCuboid
from heatzoo.materials.library import steel, dynamic_steel
from heatzoo.physics.heat import HeatConduction
from heatzoo.postprocess.integrals import (
    total_energy,
    mean_temperature,
    boundary_heat_rate,
)
from heatzoo.postprocess.probes import PointProbe
from heatzoo.solvers.base import Solution


class TestIntegrals:
    def test_total_energy(self):
        rod = HeatRod(0.2, 4)
        energy = total_energy(np.full(4, 300.0), rod, steel)
        assert energy == pytest.approx(7800.0 * 480.0 * 300.0 * 0.2)

    def test_mean_temperature(self):
        plate = HeatPlate(0.2, 0.1, 2, 2)
        assert mean_temperature([300.0, 400.0, 500.0, 600.0], plate) == pytest.approx(450.0)
        with pytest.raises(ValueError):
            mean_temperature([300.0, 400.0], plate)

    def test_insulated_heat_rate_is_zero(self):
        rod = HeatRod(0.2, 4)
        assert boundary_heat_rate(np.full(4, 900.0), rod, Boundary(rod)) == 0.0

    @pytest.mark.parametrize("prop", [steel, dynamic_steel])
    def test_energy_balance(self, prop):
        plate = HeatPlate(0.2, 0.1, 5, 4)
        boundary = Boundary(plate)
        boundary.set_emission(Emission(10.0, 0.6, 300.0), "west", "east", "north")
        heat = HeatConduction(plate, prop, boundary)
        theta = np.random.default_rng(3).uniform(350.0, 650.0, plate.n_cells)
        dtheta = heat.rhs(0.0, theta)
        _, rho, c = prop.properties(theta)
        stored = float(np.sum(rho * c * dtheta)) * plate.cell_volume
        assert stored == pytest.approx(boundary_heat_rate(theta, plate, boundary), rel=1e-9)

    def test_energy_balance_cuboid(self):
        cube = HeatCuboid(0.1, 0.2, 0.3, 2, 3, 4)
        boundary = Boundary(cube)
        boundary.set_emission(Emission(10.0, 0.6, 300.0), "top", "bottom")
        heat = HeatConduction(cube, steel, boundary)
        theta = np.linspace(400.0, 700.0, cube.n_cells)
        stored = float(np.sum(heat.rhs(0.0, theta))) * 7800.0 * 480.0 * cube.cell_volume
        assert stored == pytest.approx(boundary_heat_rate(theta, cube, boundary), rel=1e-9)


class TestPointProbe:
    def test_rod_cell(self):
        rod = HeatRod(0.2, 4)
        assert PointProbe((0.1,)).cell(rod) == 2
        assert PointProbe((0.01,)).cell(rod) == 0

    def test_clipped_to_domain(self):
        rod = HeatRod(0.2, 4)
        assert PointProbe((0.3,)).cell(rod) == 3
        assert PointProbe((-1.0,)).cell(rod) == 0

    def test_plate_cell(self):
        plate = HeatPlate(0.2, 0.1, 4, 2)
        assert PointProbe((0.15, 0.07)).cell(plate) == 7

    @pytest.mark.parametrize("x, expected", [(0.05, 1), (0.1, 2), (0.15, 3), (0.3, 6), (0.7, 14)])
    def test_edge_belongs_to_upper_cell(self, x, expected):
        rod = HeatRod(1.0, 20)
        assert PointProbe((x,)).cell(rod) == expected

    def test_wrong_dimension(self):
        with pytest.raises(ValueError):
            PointProbe((0.1, 0.1)).cell(HeatRod(0.2, 4))

    def test_sample_and_history(self):
        rod = HeatRod(0.2, 4)
        history = np.array([[600.0, 500.0, 400.0, 300.0], [550.0, 450.0, 350.0, 310.0]])
        sol = Solution(np.array([0.0, 10.0]), history, rod)
        probe = PointProbe((0.2,))
        assert probe.sample(rod, history[0]) == 300.0
        times, temps = probe.history(sol)
        np.testing.assert_array_equal(times, [0.0, 10.0])
        np.testing.assert_array_equal(temps, [300.0, 310.0])

"""Tests for the geometry module."""

import numpy as np
import pytest

from heatzoo.errors import InvalidDimension, UnknownFace
from heatzoo.geometry.grid import Face, Geometry, HeatRod, HeatPlate, HeatCuboid


class TestHeatRod:
    def test_basic_creation(self):
        rod = HeatRod(0.2, 40)
        assert rod.dim == 1
        assert rod.extents == (0.2,)
        assert rod.counts == (40,)
        assert rod.n_cells == 40

    def test_sampling(self):
        rod = HeatRod(0.2, 40)
        assert rod.sampling[0] == pytest.approx(0.2 / 40)

    def test_faces(self):
        assert HeatRod(1.0, 3).faces == (Face.WEST, Face.EAST)

    def test_cell_centers(self):
        rod = HeatRod(1.0, 4)
        np.testing.assert_allclose(
            rod.cell_centers()[:, 0], [0.125, 0.375, 0.625, 0.875],
        )

    def test_face_area_is_unit(self):
        assert HeatRod(1.0, 4).face_area(0) == 1.0


class TestHeatPlate:
    def test_sampling_per_axis(self):
        plate = HeatPlate(0.2, 0.1, 40, 20)
        for axis in range(2):
            assert plate.sampling[axis] == pytest.approx(
                plate.extents[axis] / plate.counts[axis]
            )
        assert plate.n_cells == 800

    def test_cell_volume_and_face_area(self):
        plate = HeatPlate(0.2, 0.1, 4, 2)
        assert plate.cell_volume == pytest.approx(0.05 * 0.05)
        assert plate.face_area(0) == pytest.approx(0.05)
        assert plate.face_area(1) == pytest.approx(0.05)

    def test_faces(self):
        plate = HeatPlate(1.0, 1.0, 2, 2)
        assert set(plate.faces) == {Face.WEST, Face.EAST, Face.SOUTH, Face.NORTH}


class TestHeatCuboid:
    def test_creation(self):
        cube = HeatCuboid(0.3, 0.2, 0.1, 3, 2, 1)
        assert cube.dim == 3
        assert cube.n_cells == 6
        assert len(cube.faces) == 6
        np.testing.assert_allclose(cube.sampling, [0.1, 0.1, 0.1])


class TestIndexing:
    def test_linear_index_is_x_fastest(self):
        plate = HeatPlate(1.0, 1.0, 4, 3)
        assert plate.linear_index(0, 0) == 0
        assert plate.linear_index(1, 0) == 1
        assert plate.linear_index(1, 2) == 9

    def test_roundtrip(self):
        cube = HeatCuboid(1.0, 1.0, 1.0, 3, 4, 5)
        for linear in (0, 7, 31, 59):
            assert cube.linear_index(*cube.multi_index(linear)) == linear

    def test_reshape_matches_linear_index(self):
        plate = HeatPlate(1.0, 1.0, 4, 3)
        grid = plate.reshape(np.arange(12))
        assert grid.shape == (4, 3)
        assert grid[1, 2] == plate.linear_index(1, 2)
        np.testing.assert_array_equal(plate.flatten(grid), np.arange(12))

    def test_out_of_range(self):
        plate = HeatPlate(1.0, 1.0, 4, 3)
        with pytest.raises(IndexError):
            plate.linear_index(4, 0)
        with pytest.raises(IndexError):
            plate.linear_index(1)
        with pytest.raises(IndexError):
            plate.multi_index(12)

    def test_face_index(self):
        plate = HeatPlate(1.0, 1.0, 4, 3)
        grid = plate.reshape(np.arange(12))
        np.testing.assert_array_equal(grid[plate.face_index(Face.EAST)], [3, 7, 11])
        np.testing.assert_array_equal(grid[plate.face_index("south")], [0, 1, 2, 3])
        with pytest.raises(UnknownFace):
            plate.face_index(Face.TOP)
        with pytest.raises(UnknownFace):
            plate.face_index("up")


class TestInvalidDimension:
    @pytest.mark.parametrize("length, n", [(0.0, 10), (-1.0, 10), (1.0, 0), (1.0, -2), (1.0, 2.5)])
    def test_rod(self, length, n):
        with pytest.raises(InvalidDimension):
            HeatRod(length, n)

    def test_plate_non_positive_width(self):
        with pytest.raises(InvalidDimension):
            HeatPlate(0.2, 0.0, 10, 10)

    def test_mismatched_lengths(self):
        with pytest.raises(InvalidDimension):
            Geometry((1.0, 2.0), (3,))

    def test_unsupported_dimension(self):
        with pytest.raises(InvalidDimension):
            Geometry((), ())
        with pytest.raises(InvalidDimension):
            Geometry((1.0,) * 4, (2,) * 4)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            HeatRod(0.0, 10)

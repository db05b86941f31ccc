"""Uniform cell-centred grids for 1-D, 2-D and 3-D domains.

Classes
-------
Face
    Closed enumeration of domain faces.
Geometry
    Axis-aligned domain split into equally sized cells.
HeatRod, HeatPlate, HeatCuboid
    1-D, 2-D and 3-D convenience constructors.

Cells are numbered x-fastest: the linear index of cell ``(i, j, k)`` is
``i + nx * (j + ny * k)``.  A flat field therefore reshapes to
``(nx, ny, nz)`` with ``order="F"``.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from heatzoo.errors import InvalidDimension, UnknownFace


class Face(str, Enum):
    """Domain faces.

    ``west``/``east`` bound the x-axis, ``south``/``north`` the y-axis and
    ``bottom``/``top`` the z-axis.
    """

    WEST = "west"
    EAST = "east"
    SOUTH = "south"
    NORTH = "north"
    BOTTOM = "bottom"
    TOP = "top"

    @property
    def axis(self) -> int:
        """Axis normal to this face."""
        return _FACE_AXIS[self]

    @property
    def side(self) -> int:
        """``0`` for the low end of the axis, ``-1`` for the high end."""
        return 0 if self in (Face.WEST, Face.SOUTH, Face.BOTTOM) else -1


_FACE_AXIS = {
    Face.WEST: 0, Face.EAST: 0,
    Face.SOUTH: 1, Face.NORTH: 1,
    Face.BOTTOM: 2, Face.TOP: 2,
}

_FACES_BY_DIM = {
    1: (Face.WEST, Face.EAST),
    2: (Face.WEST, Face.EAST, Face.SOUTH, Face.NORTH),
    3: (Face.WEST, Face.EAST, Face.SOUTH, Face.NORTH, Face.BOTTOM, Face.TOP),
}


class Geometry:
    """Axis-aligned domain discretised into a uniform grid of cells.

    Args:
        extents: Physical length per axis (m).
        counts: Number of cells per axis.
        origin: Low corner of the domain.  Defaults to the origin.

    Raises:
        InvalidDimension: If the dimensionality is not 1, 2 or 3, if
            *extents* and *counts* differ in length, or if any extent or
            count is non-positive.
    """

    def __init__(
        self,
        extents: Sequence[float],
        counts: Sequence[int],
        origin: Sequence[float] | None = None,
    ) -> None:
        extents = tuple(float(e) for e in extents)
        counts = tuple(counts)
        if len(extents) not in _FACES_BY_DIM:
            raise InvalidDimension(
                f"Only 1-D, 2-D and 3-D domains are supported, got {len(extents)} axes."
            )
        if len(counts) != len(extents):
            raise InvalidDimension(
                f"Got {len(extents)} extents but {len(counts)} cell counts."
            )
        for axis, (length, n) in enumerate(zip(extents, counts)):
            if not np.isfinite(length) or length <= 0.0:
                raise InvalidDimension(
                    f"Extent along axis {axis} must be positive, got {length}."
                )
            if int(n) != n or n <= 0:
                raise InvalidDimension(
                    f"Cell count along axis {axis} must be a positive integer, got {n}."
                )

        if origin is None:
            origin = (0.0,) * len(extents)
        if len(origin) != len(extents):
            raise InvalidDimension(
                f"Origin has {len(origin)} coordinates for a {len(extents)}-D domain."
            )

        self._extents = extents
        self._counts = tuple(int(n) for n in counts)
        self._origin = tuple(float(o) for o in origin)
        self._sampling = tuple(
            length / n for length, n in zip(self._extents, self._counts)
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        """Spatial dimension (1, 2 or 3)."""
        return len(self._extents)

    @property
    def extents(self) -> tuple[float, ...]:
        """Physical length per axis."""
        return self._extents

    @property
    def counts(self) -> tuple[int, ...]:
        """Number of cells per axis."""
        return self._counts

    @property
    def shape(self) -> tuple[int, ...]:
        """Grid shape, same as :attr:`counts`."""
        return self._counts

    @property
    def origin(self) -> tuple[float, ...]:
        """Low corner of the domain."""
        return self._origin

    @property
    def sampling(self) -> tuple[float, ...]:
        """Cell size per axis, ``extent / count``."""
        return self._sampling

    @property
    def n_cells(self) -> int:
        """Total number of cells."""
        return int(np.prod(self._counts))

    @property
    def cell_volume(self) -> float:
        """Cell length (1-D), area (2-D) or volume (3-D)."""
        return float(np.prod(self._sampling))

    @property
    def faces(self) -> tuple[Face, ...]:
        """Faces of the domain, in axis order."""
        return _FACES_BY_DIM[self.dim]

    def face_area(self, axis: int) -> float:
        """Area of a cell face normal to *axis*.

        Unit area in 1-D; length per unit depth in 2-D.
        """
        others = [d for a, d in enumerate(self._sampling) if a != axis]
        return float(np.prod(others)) if others else 1.0

    def face_index(self, face: Face | str) -> tuple:
        """Index selecting the boundary cells of *face* in a reshaped grid.

        Raises:
            UnknownFace: If *face* is not a face name or does not exist on
                this domain.
        """
        try:
            face = Face(face)
        except ValueError:
            raise UnknownFace(f"Unknown face {face!r}.") from None
        if face not in self.faces:
            raise UnknownFace(f"Face {face.value!r} does not exist on a {self.dim}-D domain.")
        idx: list = [slice(None)] * self.dim
        idx[face.axis] = face.side
        return tuple(idx)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def linear_index(self, *index: int) -> int:
        """Linear (x-fastest) index of the cell at grid coordinate *index*.

        Raises:
            IndexError: If the coordinate has the wrong length or lies
                outside the grid.
        """
        if len(index) != self.dim:
            raise IndexError(
                f"Expected {self.dim} cell coordinates, got {len(index)}."
            )
        for axis, (i, n) in enumerate(zip(index, self._counts)):
            if not 0 <= i < n:
                raise IndexError(f"Cell index {i} out of range on axis {axis}.")
        return int(np.ravel_multi_index(index, self._counts, order="F"))

    def multi_index(self, linear: int) -> tuple[int, ...]:
        """Grid coordinate of the cell with linear index *linear*."""
        if not 0 <= linear < self.n_cells:
            raise IndexError(f"Linear index {linear} out of range.")
        return tuple(
            int(i) for i in np.unravel_index(linear, self._counts, order="F")
        )

    def reshape(self, field: ArrayLike) -> np.ndarray:
        """View a flat field of shape ``(n_cells,)`` as a grid of :attr:`shape`."""
        return np.reshape(np.asarray(field), self._counts, order="F")

    def flatten(self, grid: ArrayLike) -> np.ndarray:
        """Inverse of :meth:`reshape`."""
        return np.ravel(np.asarray(grid), order="F")

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def axis_centers(self, axis: int) -> np.ndarray:
        """Cell-centre coordinates along *axis*."""
        d = self._sampling[axis]
        return self._origin[axis] + d * (np.arange(self._counts[axis]) + 0.5)

    def cell_centers(self) -> np.ndarray:
        """Centres of all cells in linear order, shape ``(n_cells, dim)``."""
        axes = [self.axis_centers(a) for a in range(self.dim)]
        grids = np.meshgrid(*axes, indexing="ij")
        return np.column_stack([g.ravel(order="F") for g in grids])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(extents={self._extents}, "
            f"counts={self._counts})"
        )


class HeatRod(Geometry):
    """1-D rod of length *L* split into *Nx* cells."""

    def __init__(self, L: float, Nx: int) -> None:
        super().__init__((L,), (Nx,))


class HeatPlate(Geometry):
    """2-D plate of length *L* (x) and width *W* (y)."""

    def __init__(self, L: float, W: float, Nx: int, Ny: int) -> None:
        super().__init__((L, W), (Nx, Ny))


class HeatCuboid(Geometry):
    """3-D cuboid of length *L* (x), width *W* (y) and height *H* (z)."""

    def __init__(
        self,
        L: float,
        W: float,
        H: float,
        Nx: int,
        Ny: int,
        Nz: int,
    ) -> None:
        super().__init__((L, W, H), (Nx, Ny, Nz))

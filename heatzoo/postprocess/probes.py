"""Point probes for extracting temperature time series.

Classes
-------
PointProbe
    Sample the temperature at a single location.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

_EDGE_TOL = 1e-9


@dataclass
class PointProbe:
    """Extract temperatures at a specific location.

    Args:
        location: Coordinates ``(x,)``, ``(x, y)`` or ``(x, y, z)``.
    """

    location: tuple[float, ...]

    def cell(self, geometry: Any) -> int:
        """Linear index of the cell containing the probe.

        A probe on an interior cell edge belongs to the upper cell; a probe
        outside the domain maps to the closest boundary cell.

        Raises:
            ValueError: If the location has the wrong dimension.
        """
        loc = np.atleast_1d(np.asarray(self.location, dtype=float))
        if loc.shape != (geometry.dim,):
            raise ValueError(
                f"Probe location has {loc.size} coordinates, geometry is {geometry.dim}-D."
            )
        index = []
        for axis in range(geometry.dim):
            # Edge positions may divide to just below an integer (0.15 / 0.05)
            pos = (loc[axis] - geometry.origin[axis]) / geometry.sampling[axis]
            i = int(np.floor(pos + _EDGE_TOL))
            index.append(min(max(i, 0), geometry.counts[axis] - 1))
        return geometry.linear_index(*index)

    def sample(self, geometry: Any, field: np.ndarray) -> float:
        """Temperature of the nearest cell.

        Args:
            geometry: Discretised domain.
            field: Temperature field, shape ``(n_cells,)``.
        """
        return float(np.asarray(field)[self.cell(geometry)])

    def history(self, solution: Any) -> tuple[np.ndarray, np.ndarray]:
        """Time series at the probe.

        Args:
            solution: A :class:`~heatzoo.solvers.base.Solution`.

        Returns:
            ``(times, temperatures)``.
        """
        idx = self.cell(solution.geometry)
        return solution.times.copy(), solution.history[:, idx].copy()

"""Energy integrals and boundary heat balance.

Functions
---------
total_energy
    Heat stored in the body relative to 0 K.
mean_temperature
    Volume-averaged temperature.
boundary_heat_rate
    Net heat flow through the domain faces.

Without emission the semi-discrete scheme conserves :func:`total_energy`
exactly; with emission its rate of change equals
:func:`boundary_heat_rate`.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike


def total_energy(theta: ArrayLike, geometry: Any, prop: Any) -> float:
    """Heat stored in the body (J, per unit cross-section in 1-D/2-D).

    Args:
        theta: Temperature field, shape ``(n_cells,)`` (K).
        geometry: Discretised domain.
        prop: Property model.
    """
    enthalpy = prop.volumetric_enthalpy(np.asarray(theta, dtype=float))
    return float(np.sum(enthalpy) * geometry.cell_volume)


def mean_temperature(theta: ArrayLike, geometry: Any) -> float:
    """Volume-averaged temperature (K).

    Cells have equal volumes, so this is the arithmetic mean.
    """
    theta = np.asarray(theta, dtype=float)
    if theta.shape != (geometry.n_cells,):
        raise ValueError(f"Expected a field of shape ({geometry.n_cells},), got {theta.shape}.")
    return float(theta.mean())


def boundary_heat_rate(theta: ArrayLike, geometry: Any, boundary: Any) -> float:
    """Net heat flow into the body through all faces (W).

    Positive when the body gains heat.

    Args:
        theta: Temperature field, shape ``(n_cells,)`` (K).
        geometry: Discretised domain.
        boundary: Emission configuration.
    """
    grid = geometry.reshape(np.asarray(theta, dtype=float))
    total = 0.0
    for face, emission in boundary:
        if emission.is_insulating:
            continue
        cells = grid[geometry.face_index(face)]
        total += float(np.sum(emission.flux(cells))) * geometry.face_area(face.axis)
    return total

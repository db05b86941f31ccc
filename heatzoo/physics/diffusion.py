"""Discrete heat diffusion operator.

Governing equation::

    ρ(Θ) c(Θ) ∂Θ/∂t = ∇·(λ(Θ) ∇Θ)

with the emission flux of :mod:`heatzoo.boundaries` on the domain faces.

The equation is discretised with cell-centred finite volumes on a
uniform grid.  The conductivity on an interior interface is the mean of
the two adjacent cells' conductivities, each evaluated at the cell's own
temperature.  On a domain face the missing neighbour is replaced by the
emission flux evaluated at the boundary cell's temperature, so no ghost
cells are needed.  For constant isotropic properties the interior
stencil reduces to ``α (Θ[i-1] - 2Θ[i] + Θ[i+1]) / Δx²``.

The operator keeps no state between calls; it is meant to be evaluated
repeatedly by an ODE integrator, including at rejected trial steps.
"""

from __future__ import annotations

from typing import Any

import numpy as np


def _slab(ndim: int, axis: int, index: int | slice) -> tuple:
    """Index selecting *index* along *axis* and everything elsewhere."""
    idx: list[Any] = [slice(None)] * ndim
    idx[axis] = index
    return tuple(idx)


def diffusion(
    dtheta: np.ndarray,
    theta: np.ndarray,
    geometry: Any,
    prop: Any,
    boundary: Any,
) -> np.ndarray:
    """Evaluate dΘ/dt for every cell and write it into *dtheta*.

    Args:
        dtheta: Output buffer, shape ``(n_cells,)``.  Overwritten.
        theta: Current temperature field, shape ``(n_cells,)`` (K).
            Not modified.
        geometry: A :class:`~heatzoo.geometry.grid.Geometry`.
        prop: A property model from :mod:`heatzoo.materials`.
        boundary: A :class:`~heatzoo.boundaries.base.Boundary` for
            *geometry*.

    Returns:
        *dtheta*, for convenience.

    Raises:
        ValueError: If the buffers do not have ``n_cells`` entries, if
            they overlap, or if *boundary* belongs to a domain of
            another dimension.
    """
    theta = np.asarray(theta, dtype=float)
    n = geometry.n_cells
    if theta.shape != (n,) or np.shape(dtheta) != (n,):
        raise ValueError(
            f"Expected fields of shape ({n},), got theta {theta.shape} "
            f"and dtheta {np.shape(dtheta)}."
        )
    if np.may_share_memory(dtheta, theta):
        raise ValueError("dtheta and theta must be distinct buffers.")
    if len(boundary) != 2 * geometry.dim:
        raise ValueError(
            f"Boundary has {len(boundary)} faces, a {geometry.dim}-D "
            f"domain has {2 * geometry.dim}."
        )

    grid = geometry.reshape(theta)
    ndim = grid.ndim
    lam, rho, c = prop.properties(grid, 0)

    # Net heat gain per unit volume (W/m³)
    heat = np.zeros_like(grid)

    for axis, dx in enumerate(geometry.sampling):
        if prop.is_anisotropic and axis > 0:
            lam = prop.properties(grid, axis)[0]
        if grid.shape[axis] < 2:
            continue
        lo = _slab(ndim, axis, slice(None, -1))
        hi = _slab(ndim, axis, slice(1, None))
        lam_face = 0.5 * (lam[lo] + lam[hi])
        # Heat flowing from the upper into the lower neighbour
        exchange = lam_face * np.diff(grid, axis=axis) / dx ** 2
        heat[lo] += exchange
        heat[hi] -= exchange

    for face, emission in boundary:
        if emission.is_insulating:
            continue
        axis = face.axis
        cells = geometry.face_index(face)
        heat[cells] += emission.flux(grid[cells]) / geometry.sampling[axis]

    dtheta[:] = geometry.flatten(heat / (rho * c))
    return dtheta

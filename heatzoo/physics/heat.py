"""Heat conduction in solids with boundary emission.

Governing equation::

    ρ(Θ) c(Θ) ∂Θ/∂t = ∇·(λ(Θ) ∇Θ)

with ``-λ ∂Θ/∂n = -q_emission`` on every face, where ``q_emission`` is
the convective plus radiative flux of :class:`~heatzoo.boundaries.Boundary`.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy import sparse

from heatzoo.boundaries.base import Boundary
from heatzoo.physics.base import PhysicsModule
from heatzoo.physics.diffusion import _slab, diffusion
from heatzoo.physics.stability import stable_time_step


class HeatConduction(PhysicsModule):
    """Transient heat conduction on a uniform grid.

    Args:
        geometry: A :class:`~heatzoo.geometry.grid.Geometry`.
        prop: A property model from :mod:`heatzoo.materials`.
        boundary: Emission per face.  Defaults to an insulated boundary.

    Example::

        rod = HeatRod(0.2, 40)
        boundary = Boundary(rod)
        boundary.set_emission(Emission(5.0, 0.5, 300.0), "east")
        heat = HeatConduction(rod, steel, boundary)
        dtheta = heat.rhs(0.0, np.full(40, 600.0))
    """

    name = "heat"
    primary_field = "T"

    def __init__(
        self,
        geometry: Any,
        prop: Any,
        boundary: Boundary | None = None,
    ) -> None:
        super().__init__(geometry, prop)
        self.boundary = boundary if boundary is not None else Boundary(geometry)

    def __call__(
        self,
        dtheta: np.ndarray,
        theta: np.ndarray,
        param: Any = None,
        t: float = 0.0,
    ) -> np.ndarray:
        return diffusion(dtheta, theta, self.geometry, self.prop, self.boundary)

    def jac_sparsity(self) -> sparse.csr_matrix:
        """Sparsity pattern of the Jacobian of the right-hand side.

        Each cell depends on itself and on its neighbours along every
        axis.  Implicit SciPy solvers use the pattern to build the
        Jacobian by finite differences at a fraction of the cost.

        Returns:
            Integer CSR matrix of shape ``(n_cells, n_cells)``.
        """
        n = self.geometry.n_cells
        index = self.geometry.reshape(np.arange(n))
        rows = [np.arange(n)]
        cols = [np.arange(n)]
        for axis in range(index.ndim):
            a = index[_slab(index.ndim, axis, slice(None, -1))].ravel()
            b = index[_slab(index.ndim, axis, slice(1, None))].ravel()
            rows += [a, b]
            cols += [b, a]
        rows_arr = np.concatenate(rows)
        cols_arr = np.concatenate(cols)
        data = np.ones(len(rows_arr), dtype=int)
        return sparse.csr_matrix((data, (rows_arr, cols_arr)), shape=(n, n))

    def stable_time_step(self, temperature: Any = None) -> float:
        """Largest stable forward-Euler step, see :func:`stable_time_step`."""
        return stable_time_step(self.geometry, self.prop, temperature)

    def validate(self) -> list[str]:
        issues = super().validate()
        if self.boundary.geometry.dim != self.dim:
            issues.append(
                f"Boundary is defined for a {self.boundary.geometry.dim}-D "
                f"domain, geometry is {self.dim}-D."
            )
        if self.prop.is_anisotropic and self.prop.dim != self.dim:
            issues.append(
                f"Property model has {self.prop.dim} conductivities for a "
                f"{self.dim}-D domain."
            )
        return issues

"""SciPy integrator backend.

Hands the heat-conduction right-hand side to
:func:`scipy.integrate.solve_ivp`.  The semi-discrete heat equation is
stiff, so the implicit multistep ``"BDF"`` method is the default; the
Jacobian sparsity pattern of the operator is passed along for implicit
methods so that finite-difference Jacobians stay cheap on fine grids.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike
from scipy.integrate import solve_ivp

from heatzoo.materials.base import check_properties
from heatzoo.solvers.base import Integrator, Solution, initial_state
from heatzoo.time.stepper import output_times

logger = logging.getLogger(__name__)

_IMPLICIT_METHODS = ("BDF", "Radau")


class ScipyIntegrator(Integrator):
    """Adaptive integrator backed by :func:`scipy.integrate.solve_ivp`.

    Args:
        method: Any ``solve_ivp`` method.  ``"BDF"`` and ``"Radau"``
            handle stiff problems; ``"RK45"`` and friends do not.
        rtol: Relative tolerance.
        atol: Absolute tolerance (K).
        use_jac_sparsity: Pass the operator's Jacobian sparsity pattern
            to implicit methods.
        max_step: Largest allowed step (s).
    """

    def __init__(
        self,
        method: str = "BDF",
        rtol: float = 1e-6,
        atol: float = 1e-8,
        use_jac_sparsity: bool = True,
        max_step: float = np.inf,
    ) -> None:
        self.method = method
        self.rtol = rtol
        self.atol = atol
        self.use_jac_sparsity = use_jac_sparsity
        self.max_step = max_step

    def solve(
        self,
        physics: Any,
        theta0: float | ArrayLike,
        t_span: tuple[float, float],
        save_every: float | None = None,
    ) -> Solution:
        """Integrate the physics module over *t_span*.

        Raises:
            ValueError: If the physics module is inconsistent or the
                material is inadmissible at the initial temperature.
            RuntimeError: If ``solve_ivp`` fails.
        """
        issues = physics.validate()
        if issues:
            raise ValueError("; ".join(issues))

        y0 = initial_state(physics.geometry, theta0)
        check_properties(physics.prop, y0)
        t0, t1 = float(t_span[0]), float(t_span[1])
        if t1 == t0:
            return Solution(
                times=np.array([t0]),
                history=y0[None, :],
                geometry=physics.geometry,
                message="Empty time span.",
            )
        t_eval = output_times(t_span, save_every)

        options: dict[str, Any] = {}
        if self.use_jac_sparsity and self.method in _IMPLICIT_METHODS:
            options["jac_sparsity"] = physics.jac_sparsity()

        logger.info(
            "Integrating %s with %s over t=[%g, %g] s (%d cells)",
            type(physics).__name__, self.method, t_span[0], t_span[1], y0.size,
        )
        result = solve_ivp(
            physics.rhs,
            (t0, t1),
            y0,
            method=self.method,
            t_eval=t_eval,
            rtol=self.rtol,
            atol=self.atol,
            max_step=self.max_step,
            **options,
        )
        if not result.success:
            raise RuntimeError(f"solve_ivp failed: {result.message}")
        logger.info(
            "Integration finished: %d RHS evaluations, %d saved states",
            result.nfev, len(result.t),
        )

        return Solution(
            times=result.t,
            history=result.y.T,
            geometry=physics.geometry,
            success=bool(result.success),
            message=str(result.message),
            nfev=int(result.nfev),
        )

    def __repr__(self) -> str:
        return (
            f"ScipyIntegrator(method={self.method!r}, rtol={self.rtol}, "
            f"atol={self.atol})"
        )

"""Fixed-step forward Euler integrator.

Explicit Euler is only conditionally stable on the heat equation, so the
requested step is checked against
:func:`~heatzoo.physics.stability.stable_time_step` at the initial
temperature field before any step is taken.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from heatzoo.materials.base import check_properties
from heatzoo.physics.stability import check_stability
from heatzoo.solvers.base import Integrator, Solution, initial_state
from heatzoo.time.stepper import Stepper, output_times

logger = logging.getLogger(__name__)


class EulerIntegrator(Integrator):
    """Forward Euler with a fixed step.

    Args:
        dt: Time step (s).

    Example::

        sol = EulerIntegrator(dt=0.2).solve(heat, 600.0, (0.0, 2000.0), save_every=1.0)
    """

    def __init__(self, dt: float) -> None:
        if dt <= 0.0:
            raise ValueError(f"dt must be positive, got {dt}.")
        self.dt = dt

    def solve(
        self,
        physics: Any,
        theta0: float | ArrayLike,
        t_span: tuple[float, float],
        save_every: float | None = None,
    ) -> Solution:
        """Integrate the physics module over *t_span*.

        States are saved at the first step reaching or passing each
        requested output time.

        Raises:
            ValueError: If the physics module is inconsistent or the
                material is inadmissible at the initial temperature.
            NumericalInstability: If :attr:`dt` exceeds the stability
                bound at the initial temperature field.
        """
        issues = physics.validate()
        if issues:
            raise ValueError("; ".join(issues))

        theta = initial_state(physics.geometry, theta0)
        check_properties(physics.prop, theta)
        check_stability(self.dt, physics.geometry, physics.prop, theta)

        t_eval = output_times(t_span, save_every)
        stepper = Stepper(t_end=float(t_span[1]), dt=self.dt, t_start=float(t_span[0]))
        logger.info(
            "Integrating %s with forward Euler, dt=%g s, %d steps",
            type(physics).__name__, self.dt, stepper.n_steps,
        )

        tol = 1e-9 * self.dt
        history = [theta.copy()]
        saved = [float(t_span[0])]
        k = 1
        dtheta = np.empty_like(theta)
        nfev = 0
        for t, dt in stepper:
            physics(dtheta, theta, None, t - dt)
            nfev += 1
            theta += dt * dtheta
            while k < len(t_eval) and t >= t_eval[k] - tol:
                history.append(theta.copy())
                saved.append(t)
                k += 1

        logger.info("Integration finished: %d RHS evaluations", nfev)
        return Solution(
            times=np.asarray(saved),
            history=np.asarray(history),
            geometry=physics.geometry,
            success=True,
            message="Reached the end of the time span.",
            nfev=nfev,
        )

    def __repr__(self) -> str:
        return f"EulerIntegrator(dt={self.dt})"

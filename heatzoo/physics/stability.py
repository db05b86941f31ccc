"""Stability bound for fixed-step explicit integration.

Forward Euler applied to the semi-discrete heat equation is stable when::

    Δt ≤ 0.5 / (αx/Δx² + αy/Δy² + αz/Δz²)

with α = λ/(ρc) the diffusivity along each axis.  The operator itself
does not enforce the bound; callers choosing a fixed explicit step check
it with :func:`check_stability` before integrating.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from heatzoo.constants import STABILITY_FACTOR, STABILITY_WARN_RATIO
from heatzoo.errors import NumericalInstability

logger = logging.getLogger(__name__)


def stable_time_step(
    geometry: Any,
    prop: Any,
    temperature: ArrayLike | None = None,
) -> float:
    """Largest stable forward-Euler time step (s).

    Args:
        geometry: Discretised domain.
        prop: Property model.
        temperature: Temperatures at which the diffusivity is evaluated.
            The most restrictive one wins.  Required for
            temperature-dependent models.

    Returns:
        Stable step bound; ``inf`` for a non-conducting material.

    Raises:
        ValueError: If *temperature* is missing for a dynamic model.
    """
    if temperature is None:
        if prop.is_dynamic:
            raise ValueError(
                "A temperature is required to bound the step of a "
                "temperature-dependent material."
            )
        temperature = 0.0
    theta = np.atleast_1d(np.asarray(temperature, dtype=float))

    rate = np.zeros_like(theta)
    for axis, dx in enumerate(geometry.sampling):
        alpha = prop.diffusivity(theta, axis if prop.is_anisotropic else 0)
        rate = rate + alpha / dx ** 2

    worst = float(np.max(rate))
    if worst <= 0.0:
        return float("inf")
    return STABILITY_FACTOR / worst


def check_stability(
    dt: float,
    geometry: Any,
    prop: Any,
    temperature: ArrayLike | None = None,
) -> float:
    """Verify that *dt* is a stable forward-Euler step.

    Args:
        dt: Requested time step (s).
        geometry: Discretised domain.
        prop: Property model.
        temperature: See :func:`stable_time_step`.

    Returns:
        The stable step bound.

    Raises:
        ValueError: If *dt* is not positive.
        NumericalInstability: If *dt* exceeds the bound.
    """
    if dt <= 0.0:
        raise ValueError(f"Time step must be positive, got {dt}.")
    max_dt = stable_time_step(geometry, prop, temperature)
    if dt > max_dt:
        raise NumericalInstability(dt, max_dt)
    if dt > STABILITY_WARN_RATIO * max_dt:
        logger.warning(
            "Time step %.4g s is close to the stability limit %.4g s", dt, max_dt,
        )
    return max_dt

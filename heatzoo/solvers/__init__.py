"""Solvers: time integration of the semi-discrete heat equation."""

from heatzoo.solvers.base import Integrator, Solution, initial_state
from heatzoo.solvers.scipy_backend import ScipyIntegrator
from heatzoo.solvers.euler import EulerIntegrator

__all__ = [
    "Integrator",
    "Solution",
    "initial_state",
    "ScipyIntegrator",
    "EulerIntegrator",
]

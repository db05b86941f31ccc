"""Abstract base class for physics modules.

A physics module binds a geometry and a property model to a governing
equation and exposes the semi-discrete right-hand side in the two
calling conventions used by ODE integrators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class PhysicsModule(ABC):
    """Abstract physics module.

    Attributes:
        name: Short identifier (e.g. ``"heat"``).
        primary_field: Name of the unknown field (e.g. ``"T"``).
        geometry: The discretised domain.
        prop: The property model.
        dim: Spatial dimension (inherited from the geometry).
    """

    name: str
    primary_field: str

    def __init__(self, geometry: Any, prop: Any) -> None:
        self.geometry = geometry
        self.prop = prop
        self.dim = geometry.dim

    @abstractmethod
    def __call__(
        self,
        dtheta: np.ndarray,
        theta: np.ndarray,
        param: Any = None,
        t: float = 0.0,
    ) -> np.ndarray:
        """Write the time derivative of *theta* into *dtheta*.

        Args:
            dtheta: Output buffer, shape ``(n_cells,)``.
            theta: Current state, shape ``(n_cells,)``.
            param: Auxiliary parameters (unused by autonomous models).
            t: Current time (s).

        Returns:
            *dtheta*.
        """

    def rhs(self, t: float, theta: np.ndarray) -> np.ndarray:
        """Right-hand side in the ``f(t, y)`` convention of SciPy."""
        dtheta = np.empty(self.geometry.n_cells, dtype=float)
        return self(dtheta, theta, None, t)

    @property
    def n_cells(self) -> int:
        """Number of unknowns."""
        return self.geometry.n_cells

    @property
    def is_transient(self) -> bool:
        """Whether this physics module involves time derivatives."""
        return True

    def validate(self) -> list[str]:
        """Run basic consistency checks.

        Returns:
            List of warning/error strings (empty if all OK).
        """
        issues: list[str] = []
        if self.geometry is None:
            issues.append("No geometry assigned.")
        if self.prop is None:
            issues.append("No property model assigned.")
        return issues

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(primary_field={self.primary_field!r}, "
            f"dim={self.dim})"
        )

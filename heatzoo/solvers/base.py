"""Abstract integrator interface.

All integrators implement :class:`Integrator`, which provides a uniform
``solve()`` method regardless of the underlying time-stepping method.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np
from numpy.typing import ArrayLike


class Solution:
    """Container for integrator output.

    Attributes:
        times: Saved time values, shape ``(n_times,)``.
        history: Temperature fields at the saved times, shape
            ``(n_times, n_cells)``.
        geometry: The geometry the fields live on.
        success: Whether the integrator reached the end of the span.
        message: Integrator status message.
        nfev: Number of right-hand-side evaluations.
    """

    def __init__(
        self,
        times: np.ndarray,
        history: np.ndarray,
        geometry: Any,
        success: bool = True,
        message: str = "",
        nfev: int = 0,
    ) -> None:
        self.times = np.asarray(times, dtype=float)
        self.history = np.asarray(history, dtype=float)
        self.geometry = geometry
        self.success = success
        self.message = message
        self.nfev = nfev

    @property
    def final(self) -> np.ndarray:
        """Temperature field at the last saved time."""
        return self.history[-1]

    def at(self, time: float) -> np.ndarray:
        """Temperature field at the saved time nearest to *time*."""
        idx = int(np.argmin(np.abs(self.times - time)))
        return self.history[idx]

    def grid(self, time: float | None = None) -> np.ndarray:
        """Temperature field reshaped to the geometry's grid.

        Args:
            time: Saved time to return.  Defaults to the last one.
        """
        field = self.final if time is None else self.at(time)
        return self.geometry.reshape(field)

    def __len__(self) -> int:
        return len(self.times)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.history[index]

    def __repr__(self) -> str:
        n = self.geometry.n_cells if self.geometry else "?"
        return f"Solution(n_times={len(self.times)}, n_cells={n}, success={self.success})"


def initial_state(geometry: Any, theta0: float | ArrayLike) -> np.ndarray:
    """Build a flat initial temperature field.

    Args:
        geometry: Target geometry.
        theta0: Uniform temperature, flat field of ``n_cells`` values, or
            a grid of ``geometry.shape``.

    Returns:
        Fresh float array of shape ``(n_cells,)``.

    Raises:
        ValueError: If the shape matches neither form.
    """
    arr = np.asarray(theta0, dtype=float)
    if arr.ndim == 0:
        return np.full(geometry.n_cells, float(arr))
    if arr.shape == (geometry.n_cells,):
        return arr.copy()
    if arr.shape == tuple(geometry.shape):
        return geometry.flatten(arr).copy()
    raise ValueError(
        f"Initial field of shape {arr.shape} fits neither ({geometry.n_cells},) "
        f"nor {tuple(geometry.shape)}."
    )


class Integrator(ABC):
    """Abstract time integrator.

    Subclasses wrap a specific time-stepping method while exposing a
    uniform interface.
    """

    @abstractmethod
    def solve(
        self,
        physics: Any,
        theta0: float | ArrayLike,
        t_span: tuple[float, float],
        save_every: float | None = None,
    ) -> Solution:
        """Integrate *physics* from *theta0* over *t_span*.

        Args:
            physics: A :class:`~heatzoo.physics.base.PhysicsModule`.
            theta0: Initial temperature (see :func:`initial_state`).
            t_span: ``(t_start, t_end)`` (s).
            save_every: Interval between saved states (s).  ``None``
                saves the start and end states only.

        Returns:
            A :class:`Solution` object.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

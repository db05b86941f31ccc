"""Time stepping utilities.

Classes
-------
Stepper
    Fixed-size time stepping.

Functions
---------
output_times
    Times at which a solution is saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class Stepper:
    """Fixed time stepper.

    Args:
        t_end: End time (s).
        dt: Time-step size (s).
        t_start: Start time (s).  Defaults to 0.

    Example::

        stepper = Stepper(t_end=2000.0, dt=0.2)
        for t, dt in stepper:
            ...
    """

    t_end: float
    dt: float
    t_start: float = 0.0

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}.")
        if self.t_end < self.t_start:
            raise ValueError(
                f"t_end ({self.t_end}) must not precede t_start ({self.t_start})."
            )

    @property
    def n_steps(self) -> int:
        """Number of time steps."""
        return int(np.ceil((self.t_end - self.t_start) / self.dt - 1e-9))

    @property
    def times(self) -> np.ndarray:
        """Array of all time values (including start)."""
        steps = [self.t_start] + [t for t, _ in self]
        return np.asarray(steps, dtype=float)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        """Yield ``(t, dt)`` tuples, *t* being the time reached by the step."""
        for k in range(1, self.n_steps + 1):
            t = min(self.t_start + k * self.dt, self.t_end)
            t_prev = self.t_start + (k - 1) * self.dt
            yield t, t - t_prev

    def __repr__(self) -> str:
        return f"Stepper(t_end={self.t_end}, dt={self.dt}, t_start={self.t_start})"


def output_times(
    t_span: tuple[float, float],
    save_every: float | None = None,
) -> np.ndarray:
    """Times at which a solution is saved.

    Args:
        t_span: ``(t_start, t_end)``.
        save_every: Saving interval.  ``None`` saves only the end points.

    Returns:
        ``t_start, t_start + save_every, ...`` up to and including
        ``t_end``.
    """
    t0, t1 = float(t_span[0]), float(t_span[1])
    if t1 < t0:
        raise ValueError(f"t_span must be increasing, got {t_span}.")
    if save_every is None:
        return np.array([t0, t1]) if t1 > t0 else np.array([t0])
    if save_every <= 0.0:
        raise ValueError(f"save_every must be positive, got {save_every}.")
    n = int(np.floor((t1 - t0) / save_every + 1e-9))
    times = t0 + save_every * np.arange(n + 1)
    if t1 - times[-1] > 1e-9 * max(1.0, abs(t1)):
        times = np.append(times, t1)
    else:
        times[-1] = t1
    return times

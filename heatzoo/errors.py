"""Exception types raised by heatzoo.

All configuration errors derive from both :class:`HeatZooError` and
:class:`ValueError`, so callers catching ``ValueError`` keep working.

Classes
-------
HeatZooError
    Base class for package errors.
InvalidDimension
    Non-positive extent or cell count, or unsupported dimensionality.
UnknownFace
    Boundary face that does not exist for the geometry.
NumericalInstability
    Explicit time step above the diffusive stability bound.
"""

from __future__ import annotations


class HeatZooError(Exception):
    """Base class for all heatzoo errors."""


class InvalidDimension(HeatZooError, ValueError):
    """Raised when a geometry is built from invalid extents or counts."""


class UnknownFace(HeatZooError, ValueError):
    """Raised when a boundary face is not valid for the geometry."""


class NumericalInstability(HeatZooError, ValueError):
    """Raised when a fixed explicit step exceeds the stability bound.

    Attributes:
        dt: The requested time step (s).
        max_dt: The largest stable time step (s).
    """

    def __init__(self, dt: float, max_dt: float) -> None:
        self.dt = dt
        self.max_dt = max_dt
        super().__init__(
            f"Numerical stability is not guaranteed: dt={dt:g} s exceeds "
            f"the stable limit {max_dt:g} s.  Choose a smaller time step "
            "or an implicit method."
        )

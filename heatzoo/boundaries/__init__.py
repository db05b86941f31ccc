"""Boundaries: convective and radiative emission per domain face."""

from heatzoo.boundaries.base import Boundary, Emission
from heatzoo.geometry.grid import Face

__all__ = [
    "Boundary",
    "Emission",
    "Face",
]

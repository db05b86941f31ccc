"""
heatzoo: transient heat conduction in rods, plates and cuboids.

Subpackages
-----------
geometry
    Uniform cell-centred grids (rod, plate, cuboid).
materials
    Static/dynamic, isotropic/anisotropic thermal property models.
boundaries
    Convective and radiative emission per domain face.
physics
    Discrete diffusion operator and stability bound.
time
    Fixed-step stepping and output times.
solvers
    Time integration (SciPy, forward Euler).
postprocess
    Energy balance and probes.
"""

from heatzoo import (
    geometry,
    materials,
    boundaries,
    physics,
    time,
    solvers,
    postprocess,
)
from heatzoo.errors import (
    HeatZooError,
    InvalidDimension,
    UnknownFace,
    NumericalInstability,
)
from heatzoo.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "materials",
    "boundaries",
    "physics",
    "time",
    "solvers",
    "postprocess",
    "HeatZooError",
    "InvalidDimension",
    "UnknownFace",
    "NumericalInstability",
    "setup_logging",
]

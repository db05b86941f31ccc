"""Post-processing: energy balance and probes."""

from heatzoo.postprocess.integrals import (
    total_energy,
    mean_temperature,
    boundary_heat_rate,
)
from heatzoo.postprocess.probes import PointProbe

__all__ = [
    "total_energy",
    "mean_temperature",
    "boundary_heat_rate",
    "PointProbe",
]

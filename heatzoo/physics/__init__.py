"""Physics: the discrete heat equation and its stability bound."""

from heatzoo.physics.base import PhysicsModule
from heatzoo.physics.diffusion import diffusion
from heatzoo.physics.heat import HeatConduction
from heatzoo.physics.stability import stable_time_step, check_stability

__all__ = [
    "PhysicsModule",
    "diffusion",
    "HeatConduction",
    "stable_time_step",
    "check_stability",
]

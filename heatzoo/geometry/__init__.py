"""Geometry: uniform grids for rods, plates and cuboids."""

from heatzoo.geometry.grid import Face, Geometry, HeatRod, HeatPlate, HeatCuboid

__all__ = [
    "Face",
    "Geometry",
    "HeatRod",
    "HeatPlate",
    "HeatCuboid",
]

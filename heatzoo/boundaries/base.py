"""Boundary emission: convective and radiative heat exchange.

Classes
-------
Emission
    Heat-transfer coefficient, emissivity and ambient temperature.
Boundary
    Emission descriptor per face of a geometry.

The net heat flux density entering the body through a face is::

    q = h (Θamb - Θ) + ϵ σ (Θamb⁴ - Θ⁴)

where σ is the Stefan-Boltzmann constant.  Faces that were never
configured carry the zero descriptor and are perfectly insulated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike

from heatzoo.constants import DEFAULT_AMBIENT, STEFAN_BOLTZMANN
from heatzoo.errors import UnknownFace
from heatzoo.geometry.grid import Face

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Emission:
    """Emission descriptor of a boundary face.

    Args:
        heat_transfer_coefficient: h (W/(m²·K)), ≥ 0.
        emissivity: ϵ (–), between 0 and 1.
        ambient_temperature: Θamb (K), > 0.

    ``Emission()`` is the insulating descriptor (no exchange).

    Example::

        emission = Emission(5.0, 0.5, 300.0)
    """

    heat_transfer_coefficient: float = 0.0
    emissivity: float = 0.0
    ambient_temperature: float = DEFAULT_AMBIENT

    def __post_init__(self) -> None:
        h = self.heat_transfer_coefficient
        if not np.isfinite(h) or h < 0.0:
            raise ValueError(
                "Heat transfer coefficient must be finite and non-negative, "
                f"got {self.heat_transfer_coefficient}."
            )
        if not 0.0 <= self.emissivity <= 1.0:
            raise ValueError(f"Emissivity must lie in [0, 1], got {self.emissivity}.")
        amb = self.ambient_temperature
        if not np.isfinite(amb) or amb <= 0.0:
            raise ValueError(
                "Ambient temperature must be finite and positive (absolute scale), "
                f"got {self.ambient_temperature}."
            )

    @property
    def is_insulating(self) -> bool:
        """True if the descriptor exchanges no heat."""
        return self.heat_transfer_coefficient == 0.0 and self.emissivity == 0.0

    def flux(self, temperature: ArrayLike) -> np.ndarray:
        """Net heat flux density into the body at *temperature* (W/m²)."""
        theta = np.asarray(temperature, dtype=float)
        amb = self.ambient_temperature
        convective = self.heat_transfer_coefficient * (amb - theta)
        radiative = self.emissivity * STEFAN_BOLTZMANN * (amb ** 4 - theta ** 4)
        return convective + radiative


_INSULATED = Emission()


class Boundary:
    """Emission configuration for every face of a geometry.

    Args:
        geometry: A :class:`~heatzoo.geometry.grid.Geometry`.

    Example::

        boundary = Boundary(HeatRod(0.2, 40))
        boundary.set_emission(Emission(5.0, 0.5, 300.0), "east")
        boundary.flux("east", 600.0)
    """

    def __init__(self, geometry: Any) -> None:
        self.geometry = geometry
        self._emissions: dict[Face, Emission] = {
            face: _INSULATED for face in geometry.faces
        }

    def _resolve(self, face: Face | str) -> Face:
        try:
            resolved = Face(face)
        except ValueError:
            raise UnknownFace(
                f"Unknown face {face!r}.  Valid faces: "
                f"{[f.value for f in self.geometry.faces]}"
            ) from None
        if resolved not in self._emissions:
            raise UnknownFace(
                f"Face {resolved.value!r} does not exist on a "
                f"{self.geometry.dim}-D domain.  Valid faces: "
                f"{[f.value for f in self.geometry.faces]}"
            )
        return resolved

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_emission(self, emission: Emission, *faces: Face | str) -> None:
        """Assign *emission* to one or more faces, replacing any previous one.

        Args:
            emission: Emission descriptor.
            *faces: Faces as :class:`Face` members or names (``"east"``).

        Raises:
            UnknownFace: If a face is not valid for the geometry.
        """
        if not faces:
            raise TypeError("set_emission() requires at least one face.")
        resolved = [self._resolve(face) for face in faces]
        for face in resolved:
            self._emissions[face] = emission
            logger.debug("Emission on %s set to %r", face.value, emission)

    def emission(self, face: Face | str) -> Emission:
        """Return the emission descriptor of *face*."""
        return self._emissions[self._resolve(face)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def flux(self, face: Face | str, temperature: ArrayLike) -> np.ndarray:
        """Net heat flux density into the body through *face* (W/m²).

        Args:
            face: Boundary face.
            temperature: Temperature of the boundary cell(s) (K).
        """
        return self._emissions[self._resolve(face)].flux(temperature)

    def is_insulated(self, face: Face | str) -> bool:
        """True if *face* exchanges no heat."""
        return self._emissions[self._resolve(face)].is_insulating

    def active_faces(self) -> list[Face]:
        """Faces that exchange heat with the surroundings."""
        return [f for f, e in self._emissions.items() if not e.is_insulating]

    def __iter__(self) -> Iterator[tuple[Face, Emission]]:
        return iter(self._emissions.items())

    def __len__(self) -> int:
        return len(self._emissions)

    def __repr__(self) -> str:
        active = [f.value for f in self.active_faces()]
        return f"Boundary(dim={self.geometry.dim}, active_faces={active})"

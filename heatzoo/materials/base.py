"""Thermal property models.

The property models form a closed set of variants sharing one
capability, ``properties(temperature, axis)``, which returns the
thermal conductivity λ (W/(m·K)), mass density ρ (kg/m³) and specific
heat capacity c (J/(kg·K)) at a local temperature.

Classes
-------
StaticIsotropic
    Constant λ, ρ, c.
DynamicIsotropic
    λ, ρ, c as polynomials of temperature.
StaticAnisotropic
    Constant per-axis λ, constant ρ and c.
DynamicAnisotropic
    Per-axis polynomial λ, polynomial ρ and c.

Functions
---------
check_properties
    Verify physical admissibility at given temperatures.

Polynomial coefficients are ordered by ascending power, e.g. ``[8.0, 0.1]``
means ``λ(Θ) = 8 + 0.1·Θ``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from numpy.polynomial import polynomial as P
from numpy.typing import ArrayLike


def _coefficients(values: float | Sequence[float], name: str) -> tuple[float, ...]:
    coeffs = tuple(float(v) for v in np.atleast_1d(np.asarray(values, dtype=float)))
    if not coeffs:
        raise ValueError(f"{name} needs at least one polynomial coefficient.")
    return coeffs


def _check_static(conductivity: Sequence[float], density: float, specific_heat: float) -> None:
    if any(lam < 0.0 for lam in conductivity):
        raise ValueError(f"Thermal conductivity must be non-negative, got {conductivity}.")
    if density <= 0.0:
        raise ValueError(f"Density must be positive, got {density}.")
    if specific_heat <= 0.0:
        raise ValueError(f"Specific heat must be positive, got {specific_heat}.")


def _check_axis(axis: int, dim: int) -> None:
    if not 0 <= axis < dim:
        raise ValueError(f"Axis {axis} out of range for {dim} conductivity values.")


def _constant(value: float, temperature: ArrayLike) -> np.ndarray:
    return np.full(np.shape(temperature), value, dtype=float)


# ======================================================================
# Isotropic
# ======================================================================


@dataclass(frozen=True)
class StaticIsotropic:
    """Temperature-independent, direction-independent properties.

    Args:
        conductivity: λ (W/(m·K)).
        density: ρ (kg/m³).
        specific_heat: c (J/(kg·K)).

    Example::

        steel = StaticIsotropic(45.0, 7800.0, 480.0)
        lam, rho, c = steel.properties(600.0)
    """

    conductivity: float
    density: float
    specific_heat: float

    is_dynamic = False
    is_anisotropic = False

    def __post_init__(self) -> None:
        _check_static((self.conductivity,), self.density, self.specific_heat)

    def properties(
        self, temperature: ArrayLike, axis: int = 0,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(λ, ρ, c)`` broadcast to the shape of *temperature*."""
        return (
            _constant(self.conductivity, temperature),
            _constant(self.density, temperature),
            _constant(self.specific_heat, temperature),
        )

    def diffusivity(self, temperature: ArrayLike, axis: int = 0) -> np.ndarray:
        """Thermal diffusivity α = λ / (ρc) (m²/s)."""
        return _diffusivity(self, temperature, axis)

    def volumetric_enthalpy(self, temperature: ArrayLike) -> np.ndarray:
        """Stored heat per unit volume relative to 0 K, ρ·c·Θ (J/m³)."""
        return self.density * self.specific_heat * np.asarray(temperature, dtype=float)


@dataclass(frozen=True)
class DynamicIsotropic:
    """Temperature-dependent, direction-independent properties.

    Each property is a polynomial of the local temperature.  A single
    number is accepted for a constant property.

    Args:
        conductivity: Coefficients of λ(Θ).
        density: Coefficients of ρ(Θ).
        specific_heat: Coefficients of c(Θ).

    Example::

        prop = DynamicIsotropic([8.0, 0.1], [7800.0], [330.0, 0.5])
    """

    conductivity: tuple[float, ...]
    density: tuple[float, ...]
    specific_heat: tuple[float, ...]

    is_dynamic = True
    is_anisotropic = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "conductivity", _coefficients(self.conductivity, "conductivity"))
        object.__setattr__(self, "density", _coefficients(self.density, "density"))
        object.__setattr__(self, "specific_heat", _coefficients(self.specific_heat, "specific_heat"))

    def properties(
        self, temperature: ArrayLike, axis: int = 0,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Evaluate ``(λ(Θ), ρ(Θ), c(Θ))`` at *temperature*."""
        theta = np.asarray(temperature, dtype=float)
        return (
            P.polyval(theta, self.conductivity),
            P.polyval(theta, self.density),
            P.polyval(theta, self.specific_heat),
        )

    def diffusivity(self, temperature: ArrayLike, axis: int = 0) -> np.ndarray:
        """Thermal diffusivity α(Θ) = λ(Θ) / (ρ(Θ)c(Θ)) (m²/s)."""
        return _diffusivity(self, temperature, axis)

    def volumetric_enthalpy(self, temperature: ArrayLike) -> np.ndarray:
        """Stored heat per unit volume, ∫₀^Θ ρ(s)c(s) ds (J/m³)."""
        return _polynomial_enthalpy(self.density, self.specific_heat, temperature)


# ======================================================================
# Anisotropic
# ======================================================================


@dataclass(frozen=True)
class StaticAnisotropic:
    """Temperature-independent properties with per-axis conductivity.

    The conductivity tensor is diagonal, ``diag(λx, λy[, λz])``.

    Args:
        conductivity: One λ per axis (W/(m·K)).
        density: ρ (kg/m³).
        specific_heat: c (J/(kg·K)).

    Example::

        prop = StaticAnisotropic((10.0, 100.0), 7800.0, 480.0)
    """

    conductivity: tuple[float, ...]
    density: float
    specific_heat: float

    is_dynamic = False
    is_anisotropic = True

    def __post_init__(self) -> None:
        lam = tuple(float(v) for v in self.conductivity)
        if not 1 <= len(lam) <= 3:
            raise ValueError(f"Expected 1 to 3 conductivity values, got {len(lam)}.")
        object.__setattr__(self, "conductivity", lam)
        _check_static(lam, self.density, self.specific_heat)

    @property
    def dim(self) -> int:
        """Number of axes with a conductivity value."""
        return len(self.conductivity)

    def properties(
        self, temperature: ArrayLike, axis: int = 0,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(λ_axis, ρ, c)`` broadcast to the shape of *temperature*."""
        _check_axis(axis, self.dim)
        return (
            _constant(self.conductivity[axis], temperature),
            _constant(self.density, temperature),
            _constant(self.specific_heat, temperature),
        )

    def diffusivity(self, temperature: ArrayLike, axis: int = 0) -> np.ndarray:
        """Thermal diffusivity along *axis* (m²/s)."""
        return _diffusivity(self, temperature, axis)

    def volumetric_enthalpy(self, temperature: ArrayLike) -> np.ndarray:
        """Stored heat per unit volume relative to 0 K (J/m³)."""
        return self.density * self.specific_heat * np.asarray(temperature, dtype=float)


@dataclass(frozen=True)
class DynamicAnisotropic:
    """Temperature-dependent properties with per-axis conductivity.

    Args:
        conductivity: One coefficient sequence per axis.
        density: Coefficients of ρ(Θ).
        specific_heat: Coefficients of c(Θ).
    """

    conductivity: tuple[tuple[float, ...], ...]
    density: tuple[float, ...]
    specific_heat: tuple[float, ...]

    is_dynamic = True
    is_anisotropic = True

    def __post_init__(self) -> None:
        lam = tuple(
            _coefficients(c, f"conductivity[{axis}]")
            for axis, c in enumerate(self.conductivity)
        )
        if not 1 <= len(lam) <= 3:
            raise ValueError(f"Expected 1 to 3 conductivity polynomials, got {len(lam)}.")
        object.__setattr__(self, "conductivity", lam)
        object.__setattr__(self, "density", _coefficients(self.density, "density"))
        object.__setattr__(self, "specific_heat", _coefficients(self.specific_heat, "specific_heat"))

    @property
    def dim(self) -> int:
        """Number of axes with a conductivity polynomial."""
        return len(self.conductivity)

    def properties(
        self, temperature: ArrayLike, axis: int = 0,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Evaluate ``(λ_axis(Θ), ρ(Θ), c(Θ))`` at *temperature*."""
        _check_axis(axis, self.dim)
        theta = np.asarray(temperature, dtype=float)
        return (
            P.polyval(theta, self.conductivity[axis]),
            P.polyval(theta, self.density),
            P.polyval(theta, self.specific_heat),
        )

    def diffusivity(self, temperature: ArrayLike, axis: int = 0) -> np.ndarray:
        """Thermal diffusivity along *axis* (m²/s)."""
        return _diffusivity(self, temperature, axis)

    def volumetric_enthalpy(self, temperature: ArrayLike) -> np.ndarray:
        """Stored heat per unit volume, ∫₀^Θ ρ(s)c(s) ds (J/m³)."""
        return _polynomial_enthalpy(self.density, self.specific_heat, temperature)


PropertyModel = Union[StaticIsotropic, DynamicIsotropic, StaticAnisotropic, DynamicAnisotropic]


# ======================================================================
# Helpers
# ======================================================================


def _diffusivity(model: PropertyModel, temperature: ArrayLike, axis: int) -> np.ndarray:
    lam, rho, c = model.properties(temperature, axis)
    return lam / (rho * c)


def _polynomial_enthalpy(
    density: Sequence[float],
    specific_heat: Sequence[float],
    temperature: ArrayLike,
) -> np.ndarray:
    capacity = P.polymul(density, specific_heat)
    return P.polyval(np.asarray(temperature, dtype=float), P.polyint(capacity))


def check_properties(model: PropertyModel, temperature: ArrayLike) -> None:
    """Check that *model* is physically admissible at *temperature*.

    Args:
        model: Property model.
        temperature: Temperatures to check, scalar or array (K).

    Raises:
        ValueError: If ρ or c is non-positive, or λ negative, at any of
            the given temperatures.
    """
    theta = np.asarray(temperature, dtype=float)
    n_axes = model.dim if model.is_anisotropic else 1
    for axis in range(n_axes):
        lam, rho, c = model.properties(theta, axis)
        if np.any(lam < 0.0):
            raise ValueError(
                f"Thermal conductivity along axis {axis} is negative "
                f"(min {np.min(lam):g}) at the given temperatures."
            )
    if np.any(rho <= 0.0):
        raise ValueError(f"Density is non-positive (min {np.min(rho):g}) at the given temperatures.")
    if np.any(c <= 0.0):
        raise ValueError(f"Specific heat is non-positive (min {np.min(c):g}) at the given temperatures.")

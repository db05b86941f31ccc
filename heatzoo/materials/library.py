"""Standard property models.

Pre-configured property models for the steel used in the cooling
examples.  Values are typical for low-alloy steel.

Usage::

    from heatzoo.materials import steel
    steel.diffusivity(600.0)  # ~1.2e-5 m²/s
"""

from heatzoo.materials.base import DynamicIsotropic, StaticIsotropic

steel = StaticIsotropic(
    conductivity=45.0,       # W/(m·K)
    density=7800.0,          # kg/m³
    specific_heat=480.0,     # J/(kg·K)
)

# λ(Θ) = 8 + 0.1·Θ,  c(Θ) = 330 + 0.5·Θ
dynamic_steel = DynamicIsotropic(
    conductivity=(8.0, 0.1),
    density=(7800.0,),
    specific_heat=(330.0, 0.5),
)

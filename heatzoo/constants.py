"""Physical and numerical constants."""

# Stefan-Boltzmann constant (W/(m²·K⁴))
STEFAN_BOLTZMANN = 5.670374419e-8

# Ambient temperature used when none is given (K)
DEFAULT_AMBIENT = 300.0

# Forward Euler on the heat equation is stable for dt <= 0.5 / sum(alpha / dx²)
STABILITY_FACTOR = 0.5

# Fraction of the stable limit above which a warning is logged
STABILITY_WARN_RATIO = 0.9

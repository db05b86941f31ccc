# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 01: Cooling of a Steel Rod with Constant Properties
#
# A 0.2 m steel rod at 600 K loses heat through its east end by
# convection and radiation.  All other faces are insulated.
#
# **Governing equation:**
#
# $$\rho c \frac{\partial \Theta}{\partial t} = \frac{\partial}{\partial x}\left(\lambda \frac{\partial \Theta}{\partial x}\right)$$
#
# **Physics**: `heatzoo.physics.HeatConduction`
# **Solvers**: `heatzoo.solvers.EulerIntegrator`, `heatzoo.solvers.ScipyIntegrator`

# %%
import logging

import numpy as np
from heatzoo import geometry, materials, boundaries, physics, solvers, postprocess
from heatzoo import setup_logging

setup_logging(logging.INFO)

# %% [markdown]
# ## 1. Domain and Material

# %%
rod = geometry.HeatRod(L=0.2, Nx=40)
steel = materials.StaticIsotropic(45.0, 7800.0, 480.0)
print(rod)
print(f"Stable explicit step: {physics.stable_time_step(rod, steel):.3f} s")

# %% [markdown]
# ## 2. Boundary Conditions
#
# | Face | Condition                                   |
# |------|---------------------------------------------|
# | West | Insulated                                   |
# | East | $h = 5$ W/m²K, $\epsilon = 0.5$, 300 K      |

# %%
boundary = boundaries.Boundary(rod)
boundary.set_emission(boundaries.Emission(5.0, 0.5, 300.0), "east")

heat = physics.HeatConduction(rod, steel, boundary)

# %% [markdown]
# ## 3. Solve
#
# Forward Euler with $\Delta t = 0.2$ s, and BDF for comparison.

# %%
t_span = (0.0, 2000.0)
euler = solvers.EulerIntegrator(dt=0.2).solve(heat, 600.0, t_span, save_every=10.0)
bdf = solvers.ScipyIntegrator(method="BDF").solve(heat, 600.0, t_span, save_every=10.0)

diff = np.max(np.abs(euler.final - bdf.final))
print(f"Max difference Euler vs BDF at t = {t_span[1]:.0f} s: {diff:.3e} K")

# %% [markdown]
# ## 4. Energy Balance

# %%
e0 = postprocess.total_energy(bdf[0], rod, steel)
e1 = postprocess.total_energy(bdf.final, rod, steel)
print(f"Stored heat released: {e0 - e1:.1f} J/m²")
print(f"Heat rate at the end: {postprocess.boundary_heat_rate(bdf.final, rod, boundary):.1f} W/m²")

# %% [markdown]
# ## 5. Temperature Profiles

# %%
import matplotlib.pyplot as plt

x = rod.axis_centers(0)
fig, ax = plt.subplots(figsize=(7, 4))
for t in [0, 500, 1000, 2000]:
    ax.plot(x, bdf.at(t), label=f"t = {t} s")
ax.plot(x, euler.final, "k--", label="Euler, t = 2000 s")
ax.set_xlabel("x (m)")
ax.set_ylabel("Temperature (K)")
ax.legend()
ax.grid(True, alpha=0.3)
plt.tight_layout()
plt.show()

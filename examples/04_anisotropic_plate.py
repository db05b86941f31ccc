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
# # 04: Hot Square in an Anisotropic Plate
#
# A 0.2 m × 0.2 m plate at 300 K holds a central 600 K square.  Heat
# spreads ten times faster along y than along x, and every face emits
# to a 300 K ambient.
#
# **Physics**: `heatzoo.physics.HeatConduction`
# **Solvers**: `heatzoo.solvers.EulerIntegrator`, `heatzoo.solvers.ScipyIntegrator`

# %%
import numpy as np
from heatzoo import geometry, materials, boundaries, physics, solvers
from heatzoo import NumericalInstability

# %% [markdown]
# ## 1. Setup

# %%
plate = geometry.HeatPlate(L=0.2, W=0.2, Nx=40, Ny=40)
prop = materials.StaticAnisotropic(conductivity=(10.0, 100.0), density=7800.0, specific_heat=480.0)

boundary = boundaries.Boundary(plate)
boundary.set_emission(boundaries.Emission(5.0, 0.5, 300.0), *plate.faces)
heat = physics.HeatConduction(plate, prop, boundary)

theta0 = np.full(plate.shape, 300.0)
theta0[10:30, 10:30] = 600.0

dt_max = physics.stable_time_step(plate, prop)
print(f"Stable explicit step: {dt_max:.3f} s")

# %% [markdown]
# ## 2. Solve
#
# A step above the bound is rejected before integration starts.

# %%
try:
    solvers.EulerIntegrator(dt=1.0).solve(heat, theta0, (0.0, 200.0))
except NumericalInstability as err:
    print(err)

euler = solvers.EulerIntegrator(dt=0.2).solve(heat, theta0, (0.0, 200.0))
bdf = solvers.ScipyIntegrator(rtol=1e-8, atol=1e-8).solve(heat, theta0, (0.0, 200.0))
print(f"Max difference Euler vs BDF: {np.max(np.abs(euler.final - bdf.final)):.3e} K")

# %% [markdown]
# ## 3. Final Temperature Field

# %%
import matplotlib.pyplot as plt

fig, axes = plt.subplots(1, 2, figsize=(10, 4), sharey=True)
for ax, sol, title in zip(axes, [euler, bdf], ["Forward Euler", "BDF"]):
    im = ax.imshow(sol.grid().T, origin="lower", extent=(0.0, 0.2, 0.0, 0.2), cmap="inferno")
    ax.set_title(title)
    ax.set_xlabel("x (m)")
axes[0].set_ylabel("y (m)")
fig.colorbar(im, ax=axes, label="Temperature (K)")
plt.show()

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
# # 05: Cooling Steel Cuboid
#
# A 3-D steel block cools through its top face only.  The stored heat
# released equals the time integral of the boundary heat rate.
#
# **Physics**: `heatzoo.physics.HeatConduction`
# **Solver**: `heatzoo.solvers.ScipyIntegrator`

# %%
import numpy as np
from scipy.integrate import trapezoid
from heatzoo import geometry, materials, boundaries, physics, solvers, postprocess

# %%
cube = geometry.HeatCuboid(L=0.1, W=0.1, H=0.05, Nx=10, Ny=10, Nz=5)
boundary = boundaries.Boundary(cube)
boundary.set_emission(boundaries.Emission(20.0, 0.8, 300.0), "top")
heat = physics.HeatConduction(cube, materials.dynamic_steel, boundary)

solution = solvers.ScipyIntegrator().solve(heat, 800.0, (0.0, 600.0), save_every=10.0)

# %% [markdown]
# ## Energy Balance

# %%
released = postprocess.total_energy(solution[0], cube, materials.dynamic_steel) - \
    postprocess.total_energy(solution.final, cube, materials.dynamic_steel)
rates = [postprocess.boundary_heat_rate(f, cube, boundary) for f in solution.history]
print(f"Released: {released:.1f} J, emitted: {-trapezoid(rates, solution.times):.1f} J")

# %%
import matplotlib.pyplot as plt

fig, ax = plt.subplots(figsize=(7, 4))
z = cube.axis_centers(2)
ax.plot(solution.grid()[5, 5, :], z)
ax.set_xlabel("Temperature (K)")
ax.set_ylabel("z (m)")
ax.grid(True, alpha=0.3)
plt.tight_layout()
plt.show()

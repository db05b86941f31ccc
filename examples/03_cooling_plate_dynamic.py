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
# # 03: Cooling Plate with Temperature-Dependent Properties
#
# A 0.2 m × 0.1 m plate at 600 K emits on its west, east and north
# faces; the south face is insulated.
#
# **Physics**: `heatzoo.physics.HeatConduction`
# **Solver**: `heatzoo.solvers.ScipyIntegrator`

# %%
import numpy as np
from heatzoo import geometry, materials, boundaries, physics, solvers, postprocess

# %% [markdown]
# ## 1. Setup

# %%
plate = geometry.HeatPlate(L=0.2, W=0.1, Nx=40, Ny=20)
prop = materials.DynamicIsotropic((10.0, 0.1), (7800.0,), (330.0, 0.4))

boundary = boundaries.Boundary(plate)
boundary.set_emission(boundaries.Emission(10.0, 0.6, 300.0), "west", "east", "north")
print(boundary)

heat = physics.HeatConduction(plate, prop, boundary)
print(f"Jacobian nonzeros: {heat.jac_sparsity().nnz} of {plate.n_cells ** 2}")

# %% [markdown]
# ## 2. Solve

# %%
solution = solvers.ScipyIntegrator().solve(heat, 600.0, (0.0, 2000.0), save_every=100.0)
for t, field in zip(solution.times[::5], solution.history[::5]):
    print(f"t = {t:6.0f} s  mean = {postprocess.mean_temperature(field, plate):.2f} K")

# %% [markdown]
# ## 3. Final Temperature Field

# %%
import matplotlib.pyplot as plt

fig, ax = plt.subplots(figsize=(8, 4))
im = ax.imshow(
    solution.grid().T,
    origin="lower",
    extent=(0.0, 0.2, 0.0, 0.1),
    cmap="inferno",
)
fig.colorbar(im, ax=ax, label="Temperature (K)")
ax.set_xlabel("x (m)")
ax.set_ylabel("y (m)")
plt.tight_layout()
plt.show()

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
# # 02: Cooling Rod with Temperature-Dependent Properties
#
# Same setup as Example 01, but the conductivity and the specific heat
# grow linearly with temperature:
#
# $$\lambda(\Theta) = 8 + 0.1\,\Theta, \qquad c(\Theta) = 330 + 0.5\,\Theta$$
#
# **Physics**: `heatzoo.physics.HeatConduction`
# **Solver**: `heatzoo.solvers.ScipyIntegrator` (BDF with Jacobian sparsity)

# %%
import numpy as np
from heatzoo import geometry, materials, boundaries, physics, solvers, postprocess

# %% [markdown]
# ## 1. Setup

# %%
rod = geometry.HeatRod(L=0.2, Nx=40)
prop = materials.DynamicIsotropic(
    conductivity=(8.0, 0.1),
    density=(7800.0,),
    specific_heat=(330.0, 0.5),
)
materials.check_properties(prop, np.array([300.0, 600.0]))

boundary = boundaries.Boundary(rod)
boundary.set_emission(boundaries.Emission(5.0, 0.5, 300.0), "east")
heat = physics.HeatConduction(rod, prop, boundary)

# %% [markdown]
# ## 2. Solve

# %%
solution = solvers.ScipyIntegrator().solve(heat, 600.0, (0.0, 2000.0), save_every=20.0)
print(solution)

# %% [markdown]
# ## 3. Probe Histories

# %%
import matplotlib.pyplot as plt

fig, ax = plt.subplots(figsize=(7, 4))
for x in [0.0, 0.1, 0.2]:
    times, temps = postprocess.PointProbe((x,)).history(solution)
    ax.plot(times, temps, label=f"x = {x} m")
ax.set_xlabel("Time (s)")
ax.set_ylabel("Temperature (K)")
ax.legend()
ax.grid(True, alpha=0.3)
plt.tight_layout()
plt.show()

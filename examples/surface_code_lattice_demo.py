"""Demo script for surface code lattice layouts.

Builds a packaged preset, prints its qubit counts, toggles the unused-circuit
layer and writes the layout as flow JSON, a PNG and an interactive HTML page.
Can be run as a script or interactively with Jupyter/VS Code cell execution.
"""

# %%
from __future__ import annotations

import dataclasses
from pathlib import Path

import matplotlib.pyplot as plt

from sclattice.consts import PlaceholderView
from sclattice.exporter import save_to_flow_json
from sclattice.layout import compute_layout
from sclattice.loader import load_layout_config
from sclattice.visualizers import visualize_layout_matplotlib, visualize_layout_plotly

# =============================================================================
# Configuration - Edit these values
# =============================================================================
preset = "surface_code_d5"
show_unused = True

# =============================================================================

OUT_DIR = Path(__file__).parent / "out"
OUT_DIR.mkdir(exist_ok=True)

# %%
config = load_layout_config(preset)
visibility = config.visibility
if show_unused:
    visibility = dataclasses.replace(visibility, view=PlaceholderView.SHOW_ALL)
result = compute_layout(config.params, visibility)

stats = result.stats
print(f"Layout: {preset} ({config.description})")
print(f"  Logical qubits:  {stats.logical_qubits}")
print(f"  Data qubits:     {stats.total_data_qubits}")
print(f"  Stabilizers:     {stats.total_stabilizers} bulk, {stats.total_ancilla_qubits} ancilla")
print(f"  Physical qubits: {stats.total_physical_qubits}")
print(f"  Unused circuits: {stats.placeholders}")
print(f"  Elements:        {len(result)}")

# %%
save_to_flow_json(result, config.name, OUT_DIR / f"{preset}.json")

# %%
fig = visualize_layout_matplotlib(result, title=config.name)
fig.savefig(OUT_DIR / f"{preset}.png", bbox_inches="tight")
plt.show()

# %%
visualize_layout_plotly(result, title=config.name).write_html(str(OUT_DIR / f"{preset}.html"))

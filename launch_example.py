"""Render the example synthase dataset to a standalone HTML file."""

import logging
from pathlib import Path

import synthase_plot as sp

logging.basicConfig(level=logging.INFO)

data_path = Path("data/example_synthases.json")
if not data_path.exists():
    from data.generate_example_data import generate

    generate()

plot = sp.load(data_path, plot_width=800)
print(plot)

plot.remove_sequence(plot.dataset.order[0])
plot.recolor("KS", "#1f77b4")
plot.to_html("synthase_plot.html", title="Example synthases")
print("Wrote synthase_plot.html")

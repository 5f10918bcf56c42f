"""SynthasePlot: the main user-facing API (builder pattern)."""

from __future__ import annotations

import pathlib
from typing import Any, Callable, Mapping

import pandas as pd

from .config import DEFAULT_CONFIG, PlotConfig
from .core.dataset import Dataset
from .layout.composer import LayoutSpec
from .layout.tagging import domains_frame, tag_domains
from .render.detail import DomainDetail, all_details
from .render.reconcile import Reconciler, RenderPass
from .render.svg_surface import SVGSurface
from .state import PlotState


class SynthasePlot:
    """Interactive domain architecture plot builder.

    Usage::

        import synthase_plot as sp

        plot = sp.SynthasePlot(data, plot_width=800)
        plot.recolor("KS", "#1f77b4")
        plot.remove_sequence("seq_3")
        plot.to_html("plot.html")
        plot.show()   # in Jupyter
    """

    def __init__(self, data: Dataset | Mapping[str, Any], **config: Any) -> None:
        if isinstance(data, Dataset):
            dataset = data
        else:
            dataset = Dataset.from_dict(data)
        self._config: PlotConfig = DEFAULT_CONFIG.with_overrides(**config)
        self._surface = SVGSurface()
        self._state = PlotState(dataset, Reconciler(self._surface, self._config))
        self._widget = None

    # --- State ---

    @property
    def config(self) -> PlotConfig:
        return self._config

    @property
    def dataset(self) -> Dataset:
        return self._state.dataset

    @property
    def state(self) -> PlotState:
        return self._state

    @property
    def layout(self) -> LayoutSpec:
        """Geometry of the most recent update pass."""
        return self._state.last_pass.layout

    @property
    def last_pass(self) -> RenderPass:
        return self._state.last_pass

    # --- Interactions ---

    def remove_sequence(self, row_id: str) -> SynthasePlot:
        """Remove a sequence, pruning classifications it leaves empty."""
        self._state.remove_sequence(row_id)
        return self

    def recolor(self, domain_type: str, colour: str) -> SynthasePlot:
        """Change the fill colour of every domain of one type."""
        self._state.recolor(domain_type, colour)
        return self

    def domain_detail(self, row_id: str, index: int) -> DomainDetail:
        return self._state.domain_detail(row_id, index)

    def on_render(self, callback: Callable[[RenderPass], Any]) -> SynthasePlot:
        """Register a callback fired after every re-render: fn(render_pass)."""
        self._state.on_render(callback)
        return self

    def domains_frame(self) -> pd.DataFrame:
        """All domains with their parent sequence, one row per domain."""
        return domains_frame(tag_domains(self.dataset))

    # --- Output ---

    def to_svg(self) -> str:
        """Current plot as a standalone SVG string."""
        return self._surface.to_svg(view_box=self.layout.to_dict()["viewBox"])

    def to_html(self, path: str | pathlib.Path, title: str = "synthase-plot") -> None:
        """Write a standalone interactive HTML file (tooltips, recolouring)."""
        from .export.html_export import HTMLExporter

        HTMLExporter.export(
            path,
            svg=self.to_svg(),
            details=all_details(self.dataset),
            config=self._config,
            title=title,
        )

    def show(self) -> Any:
        """Display the plot as a Jupyter widget (requires the [jupyter] extra)."""
        from .widget.synthase_widget import SynthaseWidget

        if self._widget is None:
            self._widget = SynthaseWidget(
                state=self._state,
                svg=self.to_svg(),
                details=all_details(self.dataset),
                config=self._config,
            )
            self._state.on_render(self._push_to_widget)
        return self._widget

    def _push_to_widget(self, render_pass: RenderPass) -> None:
        self._widget.update_plot(
            svg=self.to_svg(),
            details=all_details(self.dataset),
        )

    def __repr__(self) -> str:
        return (
            f"SynthasePlot(sequences={len(self.dataset)}, "
            f"classifications={len(self.dataset.types)}, "
            f"groups={len(self.dataset.groups)})"
        )

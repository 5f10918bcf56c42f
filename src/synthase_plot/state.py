"""PlotState: reactive holder of the current Dataset and render-only colours."""

from __future__ import annotations

import logging
from typing import Any, Callable

import param

from .core.dataset import Dataset
from .core.validation import validate_colour
from .layout.scales import unique_domain_types
from .render.detail import DomainDetail, domain_detail
from .render.reconcile import Reconciler, RenderPass
from .transform.removal import remove_sequence

logger = logging.getLogger(__name__)

RenderCallback = Callable[[RenderPass], Any]


class PlotState(param.Parameterized):
    """Single owner of the current Dataset.

    Every change to ``dataset`` or ``colour_overrides`` runs one full
    reconciliation pass synchronously; a later change simply supersedes
    an earlier one.
    """

    dataset = param.ClassSelector(class_=Dataset, doc="Dataset currently drawn")
    colour_overrides = param.Dict(default={}, doc="{domain type: hex colour} set by recolouring")
    last_pass = param.Parameter(default=None, allow_None=True, doc="Most recent RenderPass")

    def __init__(self, dataset: Dataset, reconciler: Reconciler, **params) -> None:
        super().__init__(dataset=dataset, **params)
        self._reconciler = reconciler
        self._callbacks: list[RenderCallback] = []
        self._render()

    @param.depends("dataset", "colour_overrides", watch=True)
    def _render(self) -> None:
        """Recompute and reconcile the whole plot from current state."""
        self.last_pass = self._reconciler.apply(self.dataset, self.colour_overrides)
        for cb in self._callbacks:
            cb(self.last_pass)

    def on_render(self, callback: RenderCallback) -> None:
        """Register a callback: fn(render_pass), called after every pass."""
        self._callbacks.append(callback)

    # --- Interactions ---

    def remove_sequence(self, row_id: str) -> Dataset:
        """Drop a row (label click) and re-render. Returns the new Dataset."""
        self.dataset = remove_sequence(row_id, self.dataset)
        logger.info("Removed sequence '%s' (%d remaining)", row_id, len(self.dataset))
        return self.dataset

    def recolor(self, domain_type: str, colour: str) -> str:
        """Override the fill of one domain type. Returns the normalized hex colour.

        Render-only: the Dataset is untouched.
        """
        known = unique_domain_types(self.dataset)
        if domain_type not in known:
            raise ValueError(
                f"Unknown domain type '{domain_type}'. Available: {list(known)}"
            )
        hex_colour = validate_colour(colour)
        self.colour_overrides = {**self.colour_overrides, domain_type: hex_colour}
        logger.info("Recoloured domain type '%s' to %s", domain_type, hex_colour)
        return hex_colour

    def reset_colours(self) -> None:
        self.colour_overrides = {}

    def domain_detail(self, row_id: str, index: int) -> DomainDetail:
        """Detail-panel content for a hovered domain."""
        return domain_detail(self.dataset, row_id, index)

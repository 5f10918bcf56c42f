"""Reconciler: keyed entry/update/exit of plot entities across data updates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import PlotConfig, DEFAULT_CONFIG
from ..core.dataset import Dataset
from ..layout.composer import LayoutComposer, LayoutSpec
from .surface import KINDS, RenderSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyedDiff:
    """Identity keys split into entering, updating and exiting sets."""

    entering: tuple[str, ...] = ()
    updating: tuple[str, ...] = ()
    exiting: tuple[str, ...] = ()

    @classmethod
    def compute(cls, previous: Sequence[str], current: Sequence[str]) -> KeyedDiff:
        """Entering/updating keep the current order; exiting keeps the previous one."""
        before = set(previous)
        after = set(current)
        return cls(
            entering=tuple(k for k in current if k not in before),
            updating=tuple(k for k in current if k in before),
            exiting=tuple(k for k in previous if k not in after),
        )

    def to_dict(self) -> dict:
        return {
            "entering": list(self.entering),
            "updating": list(self.updating),
            "exiting": list(self.exiting),
        }


@dataclass(frozen=True)
class RenderPass:
    """Outcome of one update pass."""

    number: int
    layout: LayoutSpec
    diffs: dict[str, KeyedDiff]


def bracket_key(chain: str, classification: str) -> str:
    """Brackets are keyed by classification within their chain."""
    return f"{chain}/{classification}"


def entity_attrs(layout: LayoutSpec) -> dict[str, dict[str, dict]]:
    """Every drawable entity of a layout as {kind: {identity key: attrs}}."""
    entities: dict[str, dict[str, dict]] = {kind: {} for kind in KINDS}

    chrome = entities["chrome"]
    chrome["title"] = layout.title.to_dict()
    chrome["x_label"] = layout.x_label.to_dict()
    chrome["x_axis"] = layout.x_axis.to_dict()
    chrome["y_axis"] = {"labels": [t.to_dict() for t in layout.y_labels]}
    chrome["legend_group"] = {"x": layout.legend.x, "y": layout.legend.y}

    for row in layout.rows:
        entities["clip"][row.clip_key] = {"id": row.clip_id, "points": row.points}
        entities["row"][row.id] = row.to_dict()

    for i, key in enumerate(layout.chains):
        entities["chain"][key] = {"index": i, "key": key}

    for b in layout.brackets:
        chain = layout.chains[b.chain]
        entities["bracket"][bracket_key(chain, b.classification)] = {
            **b.to_dict(), "chainKey": chain,
        }

    for entry in layout.legend.entries:
        entities["legend"][entry.type] = entry.to_dict()

    return entities


class Reconciler:
    """Drives a RenderSurface from successive Dataset values.

    Each call to :meth:`apply` recomputes the whole layout, diffs the new
    identity keys against the previous pass and issues create / update /
    remove calls. Only the identity keys persist between passes.
    """

    def __init__(
        self,
        surface: RenderSurface,
        config: PlotConfig = DEFAULT_CONFIG,
    ) -> None:
        self._surface = surface
        self._config = config
        self._composer = LayoutComposer(config)
        self._previous: dict[str, tuple[str, ...]] = {kind: () for kind in KINDS}
        self._passes = 0

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def previous(self) -> dict[str, tuple[str, ...]]:
        """Identity keys drawn by the last completed pass."""
        return dict(self._previous)

    def reset(self) -> None:
        """Remove every drawn node; the next pass treats everything as entering."""
        for kind in reversed(KINDS):
            for key in self._previous[kind]:
                self._surface.remove(kind, key)
        self._previous = {kind: () for kind in KINDS}

    def apply(
        self,
        dataset: Dataset,
        colour_overrides: dict[str, str] | None = None,
    ) -> RenderPass:
        layout = self._composer.compute(
            dataset, self._surface.measure_text, colour_overrides,
        )
        entities = entity_attrs(layout)
        duration = self._config.transition_duration

        diffs = {}
        for kind in KINDS:
            attrs = entities[kind]
            diff = KeyedDiff.compute(self._previous[kind], tuple(attrs))
            for key in diff.exiting:
                self._surface.remove(kind, key)
            for key in diff.entering:
                self._surface.create(kind, key, attrs[key])
            for key in diff.updating:
                self._surface.update(kind, key, attrs[key], duration)
            diffs[kind] = diff

        self._previous = {kind: tuple(entities[kind]) for kind in KINDS}
        self._passes += 1
        logger.debug(
            "Pass %d: %s", self._passes,
            ", ".join(
                f"{kind} +{len(d.entering)} ~{len(d.updating)} -{len(d.exiting)}"
                for kind, d in diffs.items()
            ),
        )
        return RenderPass(number=self._passes, layout=layout, diffs=diffs)
